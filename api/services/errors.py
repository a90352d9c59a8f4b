"""Errors raised by the collection services and translated by the routers."""
from __future__ import annotations

from api.repositories.json_storage import StorageError  # noqa: F401


class ServiceError(Exception):
    def __init__(self, message: str, code: str = "invalid", status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class ValidationError(ServiceError):
    """Missing required field, malformed URL or wrong number of files."""

    def __init__(self, message: str, code: str = "invalid"):
        super().__init__(message, code, 400)


class NotFoundError(ServiceError):
    """Identifier does not match any record of the collection."""

    def __init__(self, message: str):
        super().__init__(message, "not_found", 404)
