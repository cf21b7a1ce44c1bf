# core/errors.py
from typing import Any, Optional


class ServiceError(Exception):
    """
    Erro de negócio com código estável e status HTTP.

    As views convertem este erro no envelope
    {"success": false, "error": {"message", "code", "details"?}}.
    """

    def __init__(self, code: str, message: str, status_code: int = 400, details: Optional[Any] = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationFailed(ServiceError):
    def __init__(self, message: str = "Validation failed", details: Optional[Any] = None):
        super().__init__("VALIDATION_ERROR", message, 400, details)


class NotFound(ServiceError):
    def __init__(self, message: str = "Not found"):
        super().__init__("NOT_FOUND", message, 404)
