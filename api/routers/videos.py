from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from api.routers.common import get_state_service
from api.services.video_service import VideoService

router = APIRouter(prefix="/api/videos", tags=["videos"])


def _get_video_service(request: Request) -> VideoService:
    return get_state_service(request, "video_service")


@router.get("")
def list_videos(request: Request):
    return _get_video_service(request).list_videos()


@router.post("", status_code=201)
def add_video(request: Request, payload: Optional[dict] = Body(None)):
    video = _get_video_service(request).create_video(payload or {})
    return JSONResponse(video, status_code=201)


@router.delete("/{video_id}")
def delete_video(video_id: str, request: Request):
    _get_video_service(request).delete_video(video_id)
    return {"message": "Video deleted successfully"}
