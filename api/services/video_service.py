"""Video reference use cases (no files involved)."""

from __future__ import annotations

import logging
from typing import Mapping, Any

from api.core.utils import is_absolute_url
from api.repositories.collection_store import CollectionStore
from api.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class VideoService:
    def __init__(self, store: CollectionStore) -> None:
        self.store = store

    def list_videos(self) -> list[dict]:
        return self.store.list()

    def create_video(self, payload: Mapping[str, Any]) -> dict:
        url = payload.get("url")
        title = payload.get("title")
        if not url or not title:
            raise ValidationError("Both url and title are required.", "missing")
        if not isinstance(url, str) or not is_absolute_url(url):
            raise ValidationError("Invalid URL format.")
        with self.store.lock:
            video = {"id": self.store.new_id(), "url": url, "title": title}
            self.store.append(video)
        logger.info("Created video %s", video["id"])
        return video

    def delete_video(self, video_id: str) -> None:
        with self.store.lock:
            if self.store.remove(video_id) is None:
                raise NotFoundError("Video not found")
        logger.info("Deleted video %s", video_id)
