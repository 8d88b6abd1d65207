"""Sirv media API client."""

from __future__ import annotations

import logging
import mimetypes
import posixpath
import time
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import httpx

from ..config import Privilege, SirvConfig
from .errors import SirvApiError, SirvError
from .models import MediaRecord, MediaSearchResult
from .token_manager import TokenManager

logger = logging.getLogger(__name__)

USER_ID_FILENAME = "uid.json"
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")
DEFAULT_UPLOAD_CONTENT_TYPE = "image/jpeg"


def user_images_query(uuid: str) -> str:
    """Build the search query listing a user's images, excluding the trash."""
    extensions = " OR ".join(f"extension:{ext}" for ext in IMAGE_EXTENSIONS)
    return (
        f"({extensions}) AND dirname:\\/u\\/{uuid} "
        f"AND -dirname:\\/.Trash AND -filename:{USER_ID_FILENAME}"
    )


def filenames_query(file_list: Iterable[str]) -> str:
    terms = [f"filename:{posixpath.basename(name).strip()}" for name in file_list]
    return f"({' OR '.join(terms)}) AND -dirname:\\/.Trash"


def _is_success(status_code: int) -> bool:
    return 200 <= status_code <= 204


@dataclass(slots=True)
class SirvClient:
    """Thin async wrapper over the Sirv REST API.

    Each method accepts an optional bearer token. When it is omitted a token
    is acquired through :class:`TokenManager`; read operations use the
    read-only tier and mutating ones the admin tier.
    """

    config: SirvConfig
    token_manager: TokenManager | None = None
    log: logging.Logger = field(default_factory=lambda: logger)

    def __post_init__(self) -> None:
        if self.token_manager is None:
            self.token_manager = TokenManager(self.config)

    @classmethod
    def from_config(cls, config: SirvConfig | None = None) -> "SirvClient":
        return cls(config=config or SirvConfig.build_default())

    async def get_user_images(
        self, uuid: str, size: int = 100, token: str | None = None
    ) -> MediaSearchResult:
        """Return a user's images, newest first."""
        bearer = await self._resolve(token, Privilege.READ_ONLY, "get_user_images")
        response = await self._request(
            "POST",
            "/files/search",
            bearer,
            json={
                "query": user_images_query(uuid),
                "sort": {"ctime": "desc"},
                "size": size,
            },
        )
        hits = _search_hits(response, "get_user_images")
        return _search_result(hits, owner_id=uuid, meta_filter=False)

    async def get_images_by_filenames(
        self, file_list: list[str], token: str | None = None
    ) -> MediaSearchResult:
        """Look up images by name regardless of owner.

        Metadata is reduced to width, height and format.
        """
        if not file_list:
            return MediaSearchResult()

        bearer = await self._resolve(
            token, Privilege.READ_ONLY, "get_images_by_filenames"
        )
        response = await self._request(
            "POST",
            "/files/search",
            bearer,
            json={"query": filenames_query(file_list), "size": 50},
        )
        hits = _search_hits(response, "get_images_by_filenames")
        return _search_result(hits, owner_id="", meta_filter=True)

    async def get_file_info(
        self, uuid: str, filename: str, token: str | None = None
    ) -> MediaRecord:
        bearer = await self._resolve(token, Privilege.READ_ONLY, "get_file_info")
        response = await self._request(
            "GET", "/files/stat", bearer, params={"filename": filename}
        )
        if response.status_code != 200:
            raise SirvApiError("get_file_info", response.reason_phrase)
        return MediaRecord.from_api(response.json(), owner_id=uuid, filename=filename)

    async def get_user_files(self, uuid: str, token: str | None = None) -> None:
        """Fetch the raw listing of a user's folder.

        The listing is only logged; callers get ``None``.
        """
        bearer = await self._resolve(token, Privilege.READ_ONLY, "get_user_files")
        response = await self._request(
            "GET", "/files/readdir", bearer, params={"dirname": f"/u/{uuid}"}
        )
        if response.status_code != 200:
            raise SirvApiError("get_user_files", response.reason_phrase)
        self.log.info(
            "sirv.readdir.listing",
            extra={"uuid": uuid, "listing": response.json()},
        )
        return None

    async def create_user_dir(self, uuid: str) -> bool:
        """Create ``/u/<uuid>``; returns ``False`` instead of raising.

        The folder usually exists already, so failures are only logged.
        """
        bearer = await self._resolve(None, Privilege.ADMIN, "create_user_dir")
        try:
            response = await self._request(
                "POST",
                "/files/mkdir",
                bearer,
                params={"dirname": f"/u/{uuid}"},
                json={},
            )
        except httpx.HTTPError as exc:
            self.log.warning(
                "sirv.mkdir.failed", extra={"uuid": uuid}, exc_info=exc
            )
            return False
        if response.status_code != 200:
            self.log.warning(
                "sirv.mkdir.failed",
                extra={"uuid": uuid, "status_code": response.status_code},
            )
        return response.status_code == 200

    async def upload(
        self,
        filename: str,
        data: bytes,
        token: str | None = None,
        content_type: str | None = None,
    ) -> str:
        """Upload ``data`` under ``filename`` and return the stored path."""
        bearer = await self._resolve(token, Privilege.ADMIN, "upload")
        mime = content_type or _guess_mime(filename)
        response = await self._request(
            "POST",
            "/files/upload",
            bearer,
            params={"filename": filename},
            content=data,
            content_type=mime,
        )
        if not _is_success(response.status_code):
            raise SirvApiError("upload", f"status {response.status_code}")
        self.log.info(
            "sirv.upload.completed",
            extra={"path": filename, "size_bytes": len(data), "content_type": mime},
        )
        return filename

    async def remove(self, filename: str, token: str | None = None) -> str:
        """Delete ``filename`` and return it."""
        bearer = await self._resolve(token, Privilege.ADMIN, "remove")
        response = await self._request(
            "POST", "/files/delete", bearer, params={"filename": filename}
        )
        if not _is_success(response.status_code):
            raise SirvApiError("remove", f"status {response.status_code}")
        self.log.info("sirv.delete.completed", extra={"path": filename})
        return filename

    async def add_user_id_file(
        self, filename: str, uid: str | None, token: str | None = None
    ) -> bool:
        """Store the username next to a user's media (``/u/<uuid>/uid.json``).

        Lets an image URL be mapped back to a username without asking the
        identity provider. Best effort: errors are logged and ``False`` is
        returned.
        """
        if not uid:
            return False
        marker = {"uid": uid.lower(), "ts": int(time.time() * 1000)}
        try:
            bearer = await self._resolve(token, Privilege.ADMIN, "add_user_id_file")
            response = await self._request(
                "POST",
                "/files/upload",
                bearer,
                params={"filename": filename},
                json=marker,
            )
        except (SirvError, httpx.HTTPError) as exc:
            self.log.warning(
                "sirv.uid_file.failed", extra={"path": filename}, exc_info=exc
            )
            return False
        return _is_success(response.status_code)

    def user_home_url(self, uuid: str) -> str:
        return self.config.user_home_url(uuid)

    async def _resolve(
        self, token: str | None, privilege: Privilege, operation: str
    ) -> str:
        assert self.token_manager is not None
        return await self.token_manager.resolve_token(
            token, privilege=privilege, operation=operation
        )

    async def _request(
        self,
        method: str,
        path: str,
        token: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        content: bytes | None = None,
        content_type: str = "application/json",
    ) -> httpx.Response:
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": content_type,
        }
        async with httpx.AsyncClient(
            base_url=self.config.api_url, timeout=self.config.timeout_seconds
        ) as client:
            return await client.request(
                method,
                path,
                headers=headers,
                params=params,
                json=json,
                content=content,
            )


def _search_hits(response: httpx.Response, operation: str) -> list[dict[str, Any]]:
    if response.status_code != 200:
        raise SirvApiError(operation, response.reason_phrase)
    hits = response.json().get("hits")
    if not isinstance(hits, list):
        raise SirvApiError(operation, "malformed search response")
    return hits


def _search_result(
    hits: list[dict[str, Any]], *, owner_id: str, meta_filter: bool
) -> MediaSearchResult:
    result = MediaSearchResult()
    for entry in hits:
        record = MediaRecord.from_api(
            entry["_source"], owner_id=owner_id, meta_filter=meta_filter
        )
        result.media_list.append(record)
        result.media_id_list.append(record.media_id)
    return result


def _guess_mime(filename: str) -> str:
    mime, _ = mimetypes.guess_type(filename)
    return mime or DEFAULT_UPLOAD_CONTENT_TYPE


__all__ = [
    "SirvClient",
    "USER_ID_FILENAME",
    "filenames_query",
    "user_images_query",
]
