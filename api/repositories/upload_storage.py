"""Upload directory adapter: saves incoming files and cleans them up."""
from __future__ import annotations

import logging
import os
import shutil
import uuid
from pathlib import Path, PurePosixPath
from typing import Iterable, Optional
from urllib.parse import unquote, urlparse

from fastapi import UploadFile

from api.core.utils import absolute_url

logger = logging.getLogger(__name__)

UPLOADS_PREFIX = "/uploads/"


class UploadStorage:
    def __init__(self, uploads_dir: Path, public_base_url: str) -> None:
        self.uploads_dir = Path(uploads_dir)
        self.public_base_url = (public_base_url or "").rstrip("/")
        self.uploads_dir.mkdir(parents=True, exist_ok=True)

    def generate_name(self, original_name: str | None) -> str:
        """Random token plus the original extension; the original name is dropped."""
        ext = os.path.splitext(os.path.basename(original_name or ""))[1]
        return f"{uuid.uuid4().hex}{ext}"

    def save(self, upload: UploadFile) -> str:
        filename = self.generate_name(upload.filename)
        dest = self.uploads_dir / filename
        with dest.open("wb") as f:
            shutil.copyfileobj(upload.file, f)
        logger.debug("Saved upload %r as %s", upload.filename, filename)
        return filename

    def save_all(self, uploads: Iterable[UploadFile] | None) -> list[str]:
        saved: list[str] = []
        try:
            for upload in uploads or []:
                if upload is None or not upload.filename:
                    continue
                saved.append(self.save(upload))
        except Exception:
            self.discard(saved)
            raise
        return saved

    def url_for(self, filename: str) -> str:
        return absolute_url(f"uploads/{filename}", self.public_base_url)

    def filename_for(self, url: str | None) -> Optional[str]:
        """
        Map an image reference back to a file name in the upload directory.

        Only the last path segment is used, so a stored reference never
        points outside the upload directory.
        """
        value = (url or "").strip()
        if not value:
            return None
        path = urlparse(value).path if "://" in value else value
        path = unquote(path)
        if UPLOADS_PREFIX not in path and not path.startswith("uploads/"):
            return None
        name = PurePosixPath(path).name
        if not name or name in {".", ".."}:
            return None
        return name

    def path_for(self, filename: str) -> Path:
        return self.uploads_dir / Path(filename).name

    def exists(self, url: str) -> bool:
        name = self.filename_for(url)
        return bool(name) and self.path_for(name).is_file()

    def remove_urls(self, urls: Iterable[str]) -> None:
        for url in urls or []:
            name = self.filename_for(url)
            if not name:
                logger.warning("Skipping cleanup of unrecognised image reference %r", url)
                continue
            self._remove(name)

    def discard(self, filenames: Iterable[str]) -> None:
        for name in filenames or []:
            self._remove(name)

    def orphans(self, referenced_urls: Iterable[str]) -> list[str]:
        referenced = {self.filename_for(url) for url in referenced_urls}
        return sorted(
            p.name for p in self.uploads_dir.iterdir()
            if p.is_file() and p.name not in referenced
        )

    def _remove(self, filename: str) -> None:
        path = self.path_for(filename)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Upload %s already absent", filename)
        except OSError as exc:
            # Metadata changes still go through; the file is left behind.
            logger.warning("Could not delete upload %s: %s", filename, exc)
