"""
Configuration helpers for the portfolio backend.

Routers/services receive a Settings object instead of reading os.environ
directly, so tests can point data and uploads at a temporary directory.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]

PROJECTS_FILE = "projects.json"
CAROUSEL_FILE = "carousel-images.json"
VIDEOS_FILE = "videos.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    port: int
    public_base_url: str
    data_dir: Path
    uploads_dir: Path
    cors_origins: tuple[str, ...]
    max_project_images: int
    log_level: str

    @property
    def projects_path(self) -> Path:
        return self.data_dir / PROJECTS_FILE

    @property
    def carousel_path(self) -> Path:
        return self.data_dir / CAROUSEL_FILE

    @property
    def videos_path(self) -> Path:
        return self.data_dir / VIDEOS_FILE


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _origins(value: str | None) -> tuple[str, ...]:
        items = [item.strip().rstrip("/") for item in (value or "*").split(",")]
        return tuple(item for item in items if item) or ("*",)

    port = _int(os.getenv("PORT"), 10000)
    data_dir = Path(os.getenv("DATA_DIR") or ROOT_DIR)
    uploads_dir = Path(os.getenv("UPLOADS_DIR") or data_dir / "uploads")
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        port=port,
        public_base_url=(os.getenv("PUBLIC_BASE_URL") or f"http://localhost:{port}").rstrip("/"),
        data_dir=data_dir,
        uploads_dir=uploads_dir,
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        max_project_images=max(1, _int(os.getenv("MAX_PROJECT_IMAGES"), 5)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
