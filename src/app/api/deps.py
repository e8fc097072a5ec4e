from fastapi import Depends
from google import genai
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.database import get_db
from app.core.llm import get_gemini_client
from app.services.document_renderer import DocumentRenderer, DocxTemplateRenderer
from app.storage.base import FileStorage
from app.storage.local import LocalFileStorage
from app.storage.skill_store import SkillStore
from app.storage.sql_store import SqlSkillStore

__all__ = [
    "get_db",
    "get_document_renderer",
    "get_llm_client",
    "get_skill_store",
    "get_template_storage",
]


def get_skill_store(db: AsyncSession = Depends(get_db)) -> SkillStore:
    return SqlSkillStore(db)


def get_template_storage() -> FileStorage:
    settings = get_settings()
    return LocalFileStorage(settings.template_dir)


def get_document_renderer() -> DocumentRenderer:
    return DocxTemplateRenderer()


def get_llm_client() -> genai.Client | None:
    return get_gemini_client()
