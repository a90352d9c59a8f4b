from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core import config as core_config  # noqa: E402
from api.repositories.upload_storage import UploadStorage  # noqa: E402


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    """Aponta dados e uploads para um diretório temporário e reseta o cache de settings."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PORT", "10000")
    for name in ("UPLOADS_DIR", "PUBLIC_BASE_URL", "CORS_ORIGINS", "MAX_PROJECT_IMAGES"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def uploads(settings):
    return UploadStorage(settings.uploads_dir, settings.public_base_url)


@pytest.fixture()
def put_upload(uploads):
    """Simulate the upload collaborator: write a file under a generated name."""
    def _put(original_name: str = "photo.png", data: bytes = b"img") -> str:
        name = uploads.generate_name(original_name)
        uploads.path_for(name).write_bytes(data)
        return name
    return _put
