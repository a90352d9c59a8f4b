from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse

from api.routers.common import error_response, get_state_service, get_uploads
from api.services.carousel_service import CarouselService
from api.services.errors import ServiceError

router = APIRouter(prefix="/api/carousel-images", tags=["carousel"])


def _get_carousel_service(request: Request) -> CarouselService:
    return get_state_service(request, "carousel_service")


@router.get("")
def list_carousel_images(request: Request):
    return _get_carousel_service(request).list_images()


@router.post("", status_code=201)
def upload_carousel_image(
    request: Request,
    carousel_image: Optional[UploadFile] = File(None, alias="carouselImage"),
):
    svc = _get_carousel_service(request)
    uploads = get_uploads(request)
    saved = uploads.save_all([carousel_image])
    try:
        image = svc.create_image(saved)
    except ServiceError as exc:
        uploads.discard(saved)
        return error_response(exc)
    return JSONResponse(image, status_code=201)


@router.delete("/{image_id}")
def delete_carousel_image(image_id: str, request: Request):
    _get_carousel_service(request).delete_image(image_id)
    return {"message": "Image deleted successfully"}
