from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from api.repositories.collection_store import CollectionStore
from api.services.carousel_service import CarouselService
from api.services.errors import NotFoundError, ValidationError
from api.services.project_service import ProjectService
from api.services.video_service import VideoService


@pytest.fixture()
def projects(settings, uploads):
    store = CollectionStore("projects", settings.projects_path)
    return ProjectService(store, uploads, settings.max_project_images)


@pytest.fixture()
def carousel(settings, uploads):
    return CarouselService(CollectionStore("carousel images", settings.carousel_path, id_field="_id"), uploads)


@pytest.fixture()
def videos(settings):
    return VideoService(CollectionStore("videos", settings.videos_path))


def test_create_project_bridge_scenario(projects, put_upload):
    files = [put_upload("truss.png"), put_upload("deck.jpeg")]
    project = projects.create_project("Bridge", "Steel truss", files)

    assert project["id"]
    assert project["title"] == "Bridge"
    assert project["description"] == "Steel truss"
    assert len(project["imageUrls"]) == 2
    assert project["imageUrls"][0].endswith(".png")
    assert project["imageUrls"][1].endswith(".jpeg")
    assert projects.list_projects() == [project]


def test_create_project_without_images_fails_before_append(projects, settings):
    with pytest.raises(ValidationError) as exc:
        projects.create_project("Bridge", "Steel truss", [])
    assert exc.value.message == "At least one image is required."
    assert projects.list_projects() == []
    assert not settings.projects_path.exists()


def test_create_project_rejects_more_than_five_images(projects, put_upload):
    files = [put_upload(f"{i}.png") for i in range(6)]
    with pytest.raises(ValidationError):
        projects.create_project("Too many", "", files)
    assert projects.list_projects() == []


def test_partial_update_keeps_other_fields(projects, put_upload):
    created = projects.create_project("Bridge", "Steel truss", [put_upload()])
    urls = list(created["imageUrls"])

    updated = projects.update_project(created["id"], title="Suspension bridge")

    assert updated["title"] == "Suspension bridge"
    assert updated["description"] == "Steel truss"
    assert updated["imageUrls"] == urls


def test_update_replaces_images_and_deletes_old_files(projects, uploads, put_upload, settings):
    created = projects.create_project("Bridge", "Steel truss", [put_upload("a.png"), put_upload("b.png")])
    old_urls = created["imageUrls"]

    new_files = [put_upload("c.gif")]
    updated = projects.update_project(created["id"], filenames=new_files)

    assert all(not uploads.exists(url) for url in old_urls)
    assert updated["imageUrls"] == [uploads.url_for(new_files[0])]
    assert uploads.exists(updated["imageUrls"][0])
    assert json.loads(settings.projects_path.read_text(encoding="utf-8")) == [updated]


def test_update_persists_even_when_old_files_are_missing(projects, uploads, put_upload, settings):
    created = projects.create_project("Bridge", "", [put_upload("a.png")])
    uploads.path_for(uploads.filename_for(created["imageUrls"][0])).unlink()

    new_name = put_upload("b.png")
    projects.update_project(created["id"], filenames=[new_name])

    stored = json.loads(settings.projects_path.read_text(encoding="utf-8"))
    assert stored[0]["imageUrls"] == [uploads.url_for(new_name)]


def test_update_unknown_project_is_not_found(projects):
    with pytest.raises(NotFoundError):
        projects.update_project("nope", title="x")


def test_delete_project_removes_files_and_second_delete_fails(projects, uploads, put_upload):
    created = projects.create_project("Bridge", "", [put_upload("a.png")])
    projects.delete_project(created["id"])

    assert projects.list_projects() == []
    assert not uploads.exists(created["imageUrls"][0])
    with pytest.raises(NotFoundError):
        projects.delete_project(created["id"])


def test_ids_stay_unique_after_deletions(projects, put_upload):
    seen = set()
    for _ in range(5):
        project = projects.create_project("p", "", [put_upload()])
        assert project["id"] not in seen
        seen.add(project["id"])
        projects.delete_project(project["id"])


def test_carousel_create_and_delete(carousel, uploads, put_upload):
    image = carousel.create_image([put_upload("slide.jpg")])
    assert set(image) == {"_id", "url"}
    assert image["url"].endswith(".jpg")
    assert carousel.list_images() == [image]

    carousel.delete_image(image["_id"])
    assert carousel.list_images() == []
    assert not uploads.exists(image["url"])


def test_carousel_requires_an_image(carousel):
    with pytest.raises(ValidationError) as exc:
        carousel.create_image([])
    assert exc.value.message == "No image uploaded"


def test_carousel_delete_unknown_leaves_collection(carousel, put_upload):
    image = carousel.create_image([put_upload()])
    with pytest.raises(NotFoundError) as exc:
        carousel.delete_image("missing")
    assert exc.value.message == "Image not found"
    assert carousel.list_images() == [image]


def test_video_round_trip(videos):
    video = videos.create_video({"url": "https://youtu.be/abc", "title": "Launch"})
    assert video == {"id": video["id"], "url": "https://youtu.be/abc", "title": "Launch"}
    assert videos.list_videos() == [video]


@pytest.mark.parametrize("payload", [{}, {"url": "https://youtu.be/abc"}, {"title": "x"}, {"url": "", "title": "x"}])
def test_video_requires_url_and_title(videos, payload):
    with pytest.raises(ValidationError) as exc:
        videos.create_video(payload)
    assert exc.value.message == "Both url and title are required."


@pytest.mark.parametrize("url", ["not-a-url", "http://", "https:// spaced.com", "/relative/path"])
def test_video_rejects_malformed_url(videos, url):
    with pytest.raises(ValidationError) as exc:
        videos.create_video({"url": url, "title": "x"})
    assert exc.value.message == "Invalid URL format."
    assert videos.list_videos() == []


def test_video_delete(videos):
    video = videos.create_video({"url": "https://vimeo.com/1", "title": "t"})
    videos.delete_video(video["id"])
    with pytest.raises(NotFoundError):
        videos.delete_video(video["id"])


def _make_undeletable(uploads, url):
    # unlink() de um diretorio falha com OSError diferente de FileNotFoundError
    path = uploads.path_for(uploads.filename_for(url))
    path.unlink()
    path.mkdir()
    return path


def test_update_persists_when_old_file_cannot_be_deleted(projects, uploads, put_upload, settings, caplog):
    created = projects.create_project("Bridge", "", [put_upload("a.png")])
    blocked = _make_undeletable(uploads, created["imageUrls"][0])

    new_name = put_upload("b.png")
    with caplog.at_level("WARNING"):
        updated = projects.update_project(created["id"], filenames=[new_name])

    assert updated["imageUrls"] == [uploads.url_for(new_name)]
    stored = json.loads(settings.projects_path.read_text(encoding="utf-8"))
    assert stored == [updated]
    assert blocked.exists()
    assert "Could not delete upload" in caplog.text


def test_delete_persists_when_file_cannot_be_deleted(carousel, uploads, put_upload, settings):
    image = carousel.create_image([put_upload("slide.png")])
    _make_undeletable(uploads, image["url"])

    carousel.delete_image(image["_id"])

    assert carousel.list_images() == []
    assert json.loads(settings.carousel_path.read_text(encoding="utf-8")) == []


def test_concurrent_creates_are_serialized(videos, settings):
    def add(worker):
        for i in range(20):
            videos.create_video({"url": f"https://example.com/{worker}/{i}", "title": f"{worker}-{i}"})

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(add, range(8)))

    created = videos.list_videos()
    assert len(created) == 160
    assert len({v["id"] for v in created}) == 160
    reloaded = CollectionStore("videos", settings.videos_path).list()
    assert reloaded == created


@pytest.mark.parametrize("url", ["https://x.com/a b", "https://youtu.be/abc?t=1", "mailto:team@example.com", "foo:"])
def test_video_accepts_urls_a_browser_accepts(videos, url):
    video = videos.create_video({"url": url, "title": "x"})
    assert video["url"] == url
    assert videos.list_videos() == [video]
