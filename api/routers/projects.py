from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from api.routers.common import error_response, get_state_service, get_uploads
from api.services.errors import ServiceError
from api.services.project_service import ProjectService

router = APIRouter(prefix="/api/projects", tags=["projects"])


def _get_project_service(request: Request) -> ProjectService:
    return get_state_service(request, "project_service")


@router.get("")
def list_projects(request: Request):
    return _get_project_service(request).list_projects()


@router.post("", status_code=201)
def create_project(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    images: Optional[List[UploadFile]] = File(None),
):
    svc = _get_project_service(request)
    uploads = get_uploads(request)
    saved = uploads.save_all(images)
    try:
        project = svc.create_project(title, description, saved)
    except ServiceError as exc:
        uploads.discard(saved)
        return error_response(exc)
    return JSONResponse(project, status_code=201)


@router.put("/{project_id}")
def update_project(
    project_id: str,
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    images: Optional[List[UploadFile]] = File(None),
):
    svc = _get_project_service(request)
    uploads = get_uploads(request)
    saved = uploads.save_all(images)
    try:
        project = svc.update_project(project_id, title, description, saved)
    except ServiceError as exc:
        uploads.discard(saved)
        return error_response(exc)
    return {"message": "Project updated successfully", "project": project}


@router.delete("/{project_id}")
def delete_project(project_id: str, request: Request):
    _get_project_service(request).delete_project(project_id)
    return {"message": "Project deleted successfully"}
