from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.api.v1.router import api_v1_router
from app.core.config import get_settings
from app.core.database import engine
from app.core.exceptions import MissingParameterError, TemplateRenderError, UpstreamReadError
from app.core.logging import configure_logging
from app.services.cv_service import ensure_default_template
from app.storage.local import LocalFileStorage


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    settings = get_settings()
    await ensure_default_template(
        LocalFileStorage(settings.template_dir), settings.cv_template_name
    )
    yield
    # Shutdown
    await engine.dispose()


async def missing_parameter_handler(request: Request, exc: MissingParameterError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": exc.detail, "details": None},
    )


async def upstream_read_handler(request: Request, exc: UpstreamReadError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Failed to generate CV.", "details": f"{exc.query}: {exc.message}"},
    )


async def template_render_handler(request: Request, exc: TemplateRenderError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Failed to render CV document.", "details": exc.diagnostics},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.add_exception_handler(MissingParameterError, missing_parameter_handler)
    app.add_exception_handler(UpstreamReadError, upstream_read_handler)
    app.add_exception_handler(TemplateRenderError, template_render_handler)
    app.include_router(api_v1_router, prefix="/api/v1")
    return app
