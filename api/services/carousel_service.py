"""Carousel image use cases."""

from __future__ import annotations

import logging
from typing import Sequence

from api.repositories.collection_store import CollectionStore
from api.repositories.upload_storage import UploadStorage
from api.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class CarouselService:
    """Each carousel entry owns exactly one uploaded file; records are keyed by ``_id``."""

    def __init__(self, store: CollectionStore, uploads: UploadStorage) -> None:
        self.store = store
        self.uploads = uploads

    def list_images(self) -> list[dict]:
        return self.store.list()

    def create_image(self, filenames: Sequence[str]) -> dict:
        if not filenames:
            raise ValidationError("No image uploaded", "missing")
        with self.store.lock:
            image = {
                "_id": self.store.new_id(),
                "url": self.uploads.url_for(filenames[0]),
            }
            self.store.append(image)
        logger.info("Created carousel image %s", image["_id"])
        return image

    def delete_image(self, image_id: str) -> None:
        with self.store.lock:
            image = self.store.remove(image_id)
            if image is None:
                raise NotFoundError("Image not found")
            if image.get("url"):
                self.uploads.remove_urls([image["url"]])
        logger.info("Deleted carousel image %s", image_id)
