import asyncio
import logging
import zipfile
from abc import ABC, abstractmethod
from io import BytesIO
from typing import Any

from docxtpl import DocxTemplate
from jinja2 import Environment, StrictUndefined, TemplateError, TemplateSyntaxError

from app.core.exceptions import TemplateRenderError

logger = logging.getLogger(__name__)


class DocumentRenderer(ABC):
    @abstractmethod
    async def render(self, template: bytes, data: dict[str, Any]) -> bytes:
        """Fill ``template`` with ``data``; raise TemplateRenderError on any problem."""
        ...


def _diagnostic(error_id: str, message: str, explanation: str = "") -> dict[str, str]:
    return {"id": error_id, "message": message, "explanation": explanation}


class DocxTemplateRenderer(DocumentRenderer):
    """Renders Jinja2-tagged DOCX templates with docxtpl.

    Placeholders missing from the data are reported one diagnostic each
    instead of being rendered blank.
    """

    def _environment(self) -> Environment:
        return Environment(undefined=StrictUndefined)

    def _missing_placeholders(self, template: bytes, data: dict[str, Any]) -> list[str]:
        doc = DocxTemplate(BytesIO(template))
        referenced = doc.get_undeclared_template_variables(self._environment())
        return sorted(name for name in referenced if name not in data)

    def _render_sync(self, template: bytes, data: dict[str, Any]) -> bytes:
        try:
            missing = self._missing_placeholders(template, data)
        except zipfile.BadZipFile as e:
            raise TemplateRenderError(
                [_diagnostic("invalid_template", f"Template is not a DOCX file: {e}")]
            ) from e
        except TemplateSyntaxError as e:
            raise TemplateRenderError(
                [
                    _diagnostic(
                        "template_syntax_error",
                        e.message or str(e),
                        f"Syntax error near line {e.lineno} of the template XML",
                    )
                ]
            ) from e

        if missing:
            raise TemplateRenderError(
                [
                    _diagnostic(
                        "undefined_placeholder",
                        f"Placeholder '{name}' has no value",
                        f"The template references '{name}' but the CV data does not provide it",
                    )
                    for name in missing
                ]
            )

        doc = DocxTemplate(BytesIO(template))
        try:
            doc.render(data, jinja_env=self._environment(), autoescape=True)
        except TemplateError as e:
            raise TemplateRenderError(
                [_diagnostic("render_error", str(e), type(e).__name__)]
            ) from e

        out = BytesIO()
        doc.save(out)
        return out.getvalue()

    async def render(self, template: bytes, data: dict[str, Any]) -> bytes:
        try:
            return await asyncio.to_thread(self._render_sync, template, data)
        except TemplateRenderError as e:
            logger.error("CV template rendering failed: %s", e.diagnostics)
            raise
