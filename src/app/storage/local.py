import asyncio
from pathlib import Path

from app.storage.base import FileStorage


class LocalFileStorage(FileStorage):
    """Template files kept in a directory on local disk."""

    def __init__(self, base_dir: str) -> None:
        self.base_dir = Path(base_dir).resolve()

    async def save(self, file_content: bytes, filename: str) -> str:
        await asyncio.to_thread(self.base_dir.mkdir, parents=True, exist_ok=True)
        file_path = self.base_dir / filename
        await asyncio.to_thread(file_path.write_bytes, file_content)
        return filename

    async def retrieve(self, file_path: str) -> Path:
        abs_path = self.base_dir / file_path
        if not await asyncio.to_thread(abs_path.is_file):
            raise FileNotFoundError(f"File not found: {file_path}")
        return abs_path

    async def read(self, file_path: str) -> bytes:
        abs_path = await self.retrieve(file_path)
        return await asyncio.to_thread(abs_path.read_bytes)

    async def exists(self, file_path: str) -> bool:
        abs_path = self.base_dir / file_path
        return await asyncio.to_thread(abs_path.is_file)
