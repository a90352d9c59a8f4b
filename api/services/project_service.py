"""Portfolio project use cases (create, partial update, delete with image cleanup)."""

from __future__ import annotations

import logging
from typing import Sequence

from api.repositories.collection_store import CollectionStore
from api.repositories.upload_storage import UploadStorage
from api.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ProjectService:
    """Projects own 1..max_images uploaded files referenced by ``imageUrls``."""

    def __init__(self, store: CollectionStore, uploads: UploadStorage, max_images: int = 5) -> None:
        self.store = store
        self.uploads = uploads
        self.max_images = max_images

    def _check_count(self, filenames: Sequence[str]) -> None:
        if len(filenames) > self.max_images:
            raise ValidationError(f"At most {self.max_images} images are allowed.", "too_many_files")

    def list_projects(self) -> list[dict]:
        return self.store.list()

    def create_project(self, title: str | None, description: str | None, filenames: Sequence[str]) -> dict:
        if not filenames:
            raise ValidationError("At least one image is required.", "missing")
        self._check_count(filenames)
        with self.store.lock:
            project = {
                "id": self.store.new_id(),
                "title": title or "",
                "description": description or "",
                "imageUrls": [self.uploads.url_for(name) for name in filenames],
            }
            self.store.append(project)
        logger.info("Created project %s with %d image(s)", project["id"], len(filenames))
        return project

    def update_project(
        self,
        project_id: str,
        title: str | None = None,
        description: str | None = None,
        filenames: Sequence[str] = (),
    ) -> dict:
        self._check_count(filenames)
        with self.store.lock:
            project = self.store.find(project_id)
            if project is None:
                raise NotFoundError("Project not found")
            if title:
                project["title"] = title
            if description:
                project["description"] = description
            if filenames:
                self.uploads.remove_urls(project.get("imageUrls") or [])
                project["imageUrls"] = [self.uploads.url_for(name) for name in filenames]
            self.store.persist()
        logger.info("Updated project %s", project_id)
        return project

    def delete_project(self, project_id: str) -> None:
        with self.store.lock:
            project = self.store.remove(project_id)
            if project is None:
                raise NotFoundError("Project not found")
            self.uploads.remove_urls(project.get("imageUrls") or [])
        logger.info("Deleted project %s", project_id)
