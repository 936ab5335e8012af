"""
Error kinds shared by the store, the LLM provider and the API layer.

StoreError and ProviderError are raised by the layers that talk to the database
and to the LLM API. Controllers translate them into AppError subclasses, which
are the only errors rendered to clients.
"""
import logging

logger = logging.getLogger(__name__)


# ----- Upstream (internal) errors -----


class StoreError(Exception):
    """Any failure of the persistence layer."""


class ProviderError(Exception):
    """Any failure of the LLM provider call."""


class ProviderTransportError(ProviderError):
    """The request never produced a usable response (connect, timeout, undecodable body)."""


class ProviderConfigurationError(ProviderError):
    """The provider client is not usable as configured (e.g. no generation model)."""


class ProviderRejectedError(ProviderError):
    """The provider answered with a non-success status; body is kept verbatim."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"provider returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


# ----- Client-facing errors -----


class AppError(Exception):
    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


class NotFoundError(AppError):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource


class ValidationError(AppError):
    code = "VALIDATION_ERROR"
    status_code = 400


class DatabaseError(AppError):
    code = "DATABASE_ERROR"
    status_code = 500

    def __init__(self):
        super().__init__("Database operation failed")


class ExternalApiError(AppError):
    code = "EXTERNAL_API_ERROR"
    status_code = 502

    def __init__(self):
        super().__init__("External service unavailable")


def translate_error(exc: Exception) -> AppError:
    """Map an upstream error onto the client-facing taxonomy, logging the internal detail."""
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, StoreError):
        logger.error("Database error: %r (cause: %r)", exc, exc.__cause__)
        return DatabaseError()
    if isinstance(exc, ProviderError):
        logger.error("External API error: %r (cause: %r)", exc, exc.__cause__)
        return ExternalApiError()
    raise TypeError(f"No client-facing mapping for {type(exc).__name__}")
