import logging
import re
import uuid
from datetime import date

from google import genai

from app.core.config import Settings
from app.core.exceptions import TemplateNotFoundError
from app.schemas.cv import CVDocumentData, CVSource
from app.services.cv_builder import build_cv_data
from app.services.cv_fetcher import fetch_cv_source
from app.services.cv_template import build_default_template
from app.services.document_renderer import DocumentRenderer
from app.services.locale import CVLocale, get_locale
from app.services.summary_service import generate_summary_points
from app.storage.base import FileStorage
from app.storage.skill_store import SkillStore

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
BLANK_TEMPLATE_FILENAME = "Generated_CV.docx"


def cv_filename(fullname: str | None) -> str:
    """``cv_<name>.docx`` with whitespace runs turned into underscores."""
    name = re.sub(r"\s+", "_", (fullname or "").strip())
    # Header values are latin-1; quotes would end the filename parameter.
    name = re.sub(r'["\\/]', "", name).encode("latin-1", "ignore").decode("latin-1")
    return f"cv_{name or 'user'}.docx"


async def _assemble(
    store: SkillStore,
    user_id: uuid.UUID,
    settings: Settings,
    llm_client: genai.Client | None,
    locale: CVLocale,
    today: date | None,
) -> tuple[CVSource, CVDocumentData]:
    source = await fetch_cv_source(store, user_id, timeout=settings.upstream_timeout_seconds)

    summary_points = None
    if settings.cv_summary_enabled:
        summary_points = await generate_summary_points(
            llm_client, source.experiences, settings.gemini_model, locale, today=today
        )

    view_model = build_cv_data(
        source,
        locale=locale,
        company_name=settings.company_name,
        main_company=settings.main_company,
        project_location=settings.project_location,
        location=settings.company_address,
        contact_no=settings.contact_no,
        summary_points=summary_points,
        today=today,
    )
    return source, view_model


async def build_cv_view_model(
    store: SkillStore,
    user_id: uuid.UUID,
    settings: Settings,
    llm_client: genai.Client | None = None,
    *,
    locale: CVLocale | None = None,
    today: date | None = None,
) -> CVDocumentData:
    """Fetch one user's CV source and project it into the view model."""
    locale = locale or get_locale(settings.cv_locale)
    _, view_model = await _assemble(store, user_id, settings, llm_client, locale, today)
    return view_model


async def load_template(template_storage: FileStorage, template_name: str) -> bytes:
    try:
        return await template_storage.read(template_name)
    except FileNotFoundError as e:
        logger.error("CV template '%s' not found", template_name)
        raise TemplateNotFoundError(template_name) from e


async def ensure_default_template(template_storage: FileStorage, template_name: str) -> bool:
    """Write the built-in template when none is installed; True if one was written."""
    if await template_storage.exists(template_name):
        return False
    await template_storage.save(build_default_template(), template_name)
    logger.info("Installed default CV template as '%s'", template_name)
    return True


async def generate_cv(
    store: SkillStore,
    renderer: DocumentRenderer,
    template_storage: FileStorage,
    user_id: uuid.UUID,
    settings: Settings,
    llm_client: genai.Client | None = None,
    *,
    today: date | None = None,
) -> tuple[bytes, str]:
    """Full pipeline: fetch -> aggregate -> render. Returns (document, filename)."""
    locale = get_locale(settings.cv_locale)
    source, view_model = await _assemble(store, user_id, settings, llm_client, locale, today)
    template = await load_template(template_storage, settings.cv_template_name)
    document = await renderer.render(template, view_model.model_dump())
    logger.info("Generated CV for user %s (%d bytes)", user_id, len(document))
    return document, cv_filename(source.user.fullname)
