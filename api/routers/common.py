"""Helpers shared by the collection routers."""
from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from api.repositories.upload_storage import UploadStorage
from api.services.errors import ServiceError


def get_state_service(request: Request, name: str):
    svc = getattr(getattr(request.app, "state", None), name, None)
    if not svc:
        raise RuntimeError(f"{name} nao configurado")
    return svc


def get_uploads(request: Request) -> UploadStorage:
    return get_state_service(request, "uploads")


def error_response(err: ServiceError) -> JSONResponse:
    return JSONResponse({"error": err.message}, status_code=err.status_code)
