import uuid

from fastapi import APIRouter, Depends, Query, Response
from google import genai

from app.api.deps import (
    get_document_renderer,
    get_llm_client,
    get_skill_store,
    get_template_storage,
)
from app.core.config import get_settings
from app.core.exceptions import InvalidParameterError, MissingParameterError
from app.schemas.cv import CVDocumentData, CVErrorResponse
from app.services import cv_service
from app.services.document_renderer import DocumentRenderer
from app.storage.base import FileStorage
from app.storage.skill_store import SkillStore

router = APIRouter(prefix="/cv", tags=["cv"])

ERROR_RESPONSES = {
    400: {"model": CVErrorResponse},
    500: {"model": CVErrorResponse},
}


def _attachment(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=cv_service.DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _require_user_id(user_id: str | None) -> uuid.UUID:
    if user_id is None or not user_id.strip():
        raise MissingParameterError("userId")
    try:
        return uuid.UUID(user_id.strip())
    except ValueError as e:
        raise InvalidParameterError("userId", user_id) from e


@router.get("/generate", response_class=Response, responses=ERROR_RESPONSES)
async def generate_cv(
    user_id: str | None = Query(None, alias="userId"),
    store: SkillStore = Depends(get_skill_store),
    renderer: DocumentRenderer = Depends(get_document_renderer),
    template_storage: FileStorage = Depends(get_template_storage),
    llm_client: genai.Client | None = Depends(get_llm_client),
) -> Response:
    """Build the user's CV and return it as a DOCX attachment."""
    document, filename = await cv_service.generate_cv(
        store,
        renderer,
        template_storage,
        _require_user_id(user_id),
        get_settings(),
        llm_client,
    )
    return _attachment(document, filename)


@router.get("/preview", response_model=CVDocumentData, responses=ERROR_RESPONSES)
async def preview_cv(
    user_id: str | None = Query(None, alias="userId"),
    store: SkillStore = Depends(get_skill_store),
    llm_client: genai.Client | None = Depends(get_llm_client),
) -> CVDocumentData:
    """Return the data that would fill the CV template, without rendering."""
    return await cv_service.build_cv_view_model(
        store, _require_user_id(user_id), get_settings(), llm_client
    )


@router.get("/template", response_class=Response)
async def download_template(
    template_storage: FileStorage = Depends(get_template_storage),
) -> Response:
    """Download the blank CV template."""
    settings = get_settings()
    template = await cv_service.load_template(template_storage, settings.cv_template_name)
    return _attachment(template, cv_service.BLANK_TEMPLATE_FILENAME)
