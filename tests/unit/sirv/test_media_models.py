from __future__ import annotations

import uuid

import pytest

from src.openbeta.sirv.models import MediaRecord, media_id_from_filename, strip_meta

pytestmark = pytest.mark.unit


def test_media_id_is_deterministic() -> None:
    first = media_id_from_filename("/u/abc/photo.jpg")

    assert first == media_id_from_filename("/u/abc/photo.jpg")
    assert first == str(uuid.uuid5(uuid.NAMESPACE_URL, "/u/abc/photo.jpg"))


def test_media_id_differs_per_filename() -> None:
    ids = {media_id_from_filename(f"/u/abc/{n}.jpg") for n in range(200)}

    assert len(ids) == 200


def test_strip_meta_keeps_dimensions_only() -> None:
    assert strip_meta({"width": 1, "height": 2, "format": "PNG", "exif": {}}) == {
        "width": 1,
        "height": 2,
        "format": "PNG",
    }
    assert strip_meta(None) == {"width": None, "height": None, "format": None}


def test_record_to_dict_uses_camel_case() -> None:
    record = MediaRecord.from_api(
        {"filename": "/u/a/b.jpg", "contentType": "image/jpeg"}, owner_id="a"
    )

    assert record.to_dict() == {
        "ownerId": "a",
        "filename": "/u/a/b.jpg",
        "mediaId": media_id_from_filename("/u/a/b.jpg"),
        "ctime": None,
        "mtime": None,
        "contentType": "image/jpeg",
        "meta": {},
    }
