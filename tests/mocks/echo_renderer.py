"""DocumentRenderer stub that echoes the view model back as JSON bytes."""

import json
from typing import Any

from app.core.exceptions import TemplateRenderError
from app.services.document_renderer import DocumentRenderer


class EchoRenderer(DocumentRenderer):
    def __init__(self, diagnostics: list[dict[str, str]] | None = None) -> None:
        self.diagnostics = diagnostics
        self.calls: list[tuple[bytes, dict[str, Any]]] = []

    async def render(self, template: bytes, data: dict[str, Any]) -> bytes:
        self.calls.append((template, data))
        if self.diagnostics:
            raise TemplateRenderError(self.diagnostics)
        return json.dumps(data).encode("utf-8")
