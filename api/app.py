import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.core.config import Settings, get_settings
from api.core.logger_setup import configure_logging
from api.repositories.collection_store import CollectionStore
from api.repositories.upload_storage import UploadStorage
from api.routers import carousel as carousel_router
from api.routers import projects as projects_router
from api.routers import videos as videos_router
from api.services.carousel_service import CarouselService
from api.services.errors import ServiceError
from api.services.project_service import ProjectService
from api.services.video_service import VideoService

logger = logging.getLogger(__name__)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def _service_error(request: Request, exc: ServiceError):
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _request_error(request: Request, exc: RequestValidationError):
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse({"error": "Invalid request."}, status_code=400)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal Server Error"}, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API with its three collection stores loaded from disk."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    uploads = UploadStorage(settings.uploads_dir, settings.public_base_url)
    projects = CollectionStore("projects", settings.projects_path)
    carousel = CollectionStore("carousel images", settings.carousel_path, id_field="_id")
    videos = CollectionStore("videos", settings.videos_path)

    app = FastAPI(title="Portfolio API")
    app.state.settings = settings
    app.state.uploads = uploads
    app.state.project_service = ProjectService(projects, uploads, settings.max_project_images)
    app.state.carousel_service = CarouselService(carousel, uploads)
    app.state.video_service = VideoService(videos)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.mount("/uploads", StaticFiles(directory=str(settings.uploads_dir)), name="uploads")

    app.include_router(projects_router.router)
    app.include_router(carousel_router.router)
    app.include_router(videos_router.router)
    _install_error_handlers(app)

    logger.info("Serving uploads from %s at %s/uploads", settings.uploads_dir, settings.public_base_url)
    return app
