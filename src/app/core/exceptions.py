from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} with id '{resource_id}' not found",
        )


class MissingParameterError(HTTPException):
    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{parameter} is required",
        )


class InvalidParameterError(HTTPException):
    def __init__(self, parameter: str, value: str) -> None:
        self.parameter = parameter
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{parameter} '{value}' is not a valid UUID",
        )


class TemplateNotFoundError(HTTPException):
    def __init__(self, template_name: str) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Template file '{template_name}' not found",
        )


class UpstreamReadError(Exception):
    """Raised when one of the CV source reads fails or times out."""

    def __init__(self, query: str, message: str) -> None:
        self.query = query
        self.message = message
        super().__init__(f"{query}: {message}")


class TemplateRenderError(Exception):
    """Raised when the document renderer rejects the view model.

    ``diagnostics`` holds one ``{id, message, explanation}`` dict per problem.
    """

    def __init__(self, diagnostics: list[dict[str, str]]) -> None:
        self.diagnostics = diagnostics
        super().__init__("; ".join(d.get("message", "") for d in diagnostics))
