from abc import ABC, abstractmethod
from pathlib import Path


class FileStorage(ABC):
    """Byte storage for CV templates, addressed by paths relative to a root."""

    @abstractmethod
    async def save(self, file_content: bytes, filename: str) -> str:
        """Save file and return its path relative to the storage root."""
        ...

    @abstractmethod
    async def retrieve(self, file_path: str) -> Path:
        """Return absolute Path to the stored file."""
        ...

    @abstractmethod
    async def read(self, file_path: str) -> bytes:
        """Return the stored file's content."""
        ...

    @abstractmethod
    async def exists(self, file_path: str) -> bool:
        """Check if a file exists in storage."""
        ...
