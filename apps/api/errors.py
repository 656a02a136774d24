from typing import Any, Dict


class ApiError(Exception):
    """Base error rendered as ``{"message": ..., **extra}`` with ``status_code``."""

    status_code = 500

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, **self.extra}


class InvalidRequestError(ApiError):
    status_code = 400


class MissingFieldError(InvalidRequestError):
    def __init__(self, field: str, message: str):
        super().__init__(message, field=field)
        self.field = field


class NotFoundError(ApiError):
    status_code = 404
