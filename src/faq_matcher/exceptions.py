"""Domain exceptions for the FAQ matcher.

These map to consistent HTTP responses when handled by the global exception handler.
The matcher itself never raises; these cover catalog loading and the API surface.
"""


class FaqMatcherError(Exception):
    """Base exception for FAQ matcher domain errors."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 500,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail or message


class CatalogError(FaqMatcherError):
    """Raised when the intent catalog cannot be loaded or is inconsistent."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=500, detail=detail or message)


class IntentValidationError(FaqMatcherError):
    """Raised when request input is invalid."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=400, detail=detail or message)


class ResourceNotFoundError(FaqMatcherError):
    """Raised when a requested resource does not exist."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message, status_code=404, detail=detail or message)
