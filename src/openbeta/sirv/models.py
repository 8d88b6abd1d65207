"""Media records returned by the Sirv client."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping


def media_id_from_filename(media_url: str) -> str:
    """Return the stable media id of a filename or URL.

    The id is a name-based UUID (v5, URL namespace) so it can be recomputed
    from the path alone and used as a cross-reference key.
    """

    return str(uuid.uuid5(uuid.NAMESPACE_URL, media_url))


def strip_meta(meta: Mapping[str, Any] | None) -> dict[str, Any]:
    meta = meta or {}
    return {
        "width": meta.get("width"),
        "height": meta.get("height"),
        "format": meta.get("format"),
    }


@dataclass(slots=True)
class MediaRecord:
    """Single file known to the media host."""

    owner_id: str
    filename: str
    media_id: str
    ctime: str | None = None
    mtime: str | None = None
    content_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(
        cls,
        payload: Mapping[str, Any],
        *,
        owner_id: str,
        filename: str | None = None,
        meta_filter: bool = False,
    ) -> "MediaRecord":
        name = filename if filename is not None else payload["filename"]
        meta = payload.get("meta") or {}
        return cls(
            owner_id=owner_id,
            filename=name,
            media_id=media_id_from_filename(name),
            ctime=payload.get("ctime"),
            mtime=payload.get("mtime"),
            content_type=payload.get("contentType"),
            meta=strip_meta(meta) if meta_filter else dict(meta),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase shape consumed by the web frontend."""

        return {
            "ownerId": self.owner_id,
            "filename": self.filename,
            "mediaId": self.media_id,
            "ctime": self.ctime,
            "mtime": self.mtime,
            "contentType": self.content_type,
            "meta": self.meta,
        }


@dataclass(slots=True)
class MediaSearchResult:
    media_list: list[MediaRecord] = field(default_factory=list)
    media_id_list: list[str] = field(default_factory=list)


__all__ = [
    "MediaRecord",
    "MediaSearchResult",
    "media_id_from_filename",
    "strip_meta",
]
