"""Sirv configuration for the OpenBeta media helpers.

Credentials come from the process environment exactly once, when
:meth:`SirvConfig.build_default` is called at startup. The resulting object
is frozen and passed to :class:`~openbeta.sirv.token_manager.TokenManager`
and :class:`~openbeta.sirv.client.SirvClient`; nothing below reads
``os.environ`` on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Privilege(str, Enum):
    """Credential tier required by an operation."""

    READ_ONLY = "read_only"
    ADMIN = "admin"


@dataclass(frozen=True, slots=True)
class SirvCredentials:
    """Client id/secret pair for one privilege tier."""

    client_id: str | None
    client_secret: str | None

    @property
    def is_complete(self) -> bool:
        return bool(self.client_id) and bool(self.client_secret)

    @property
    def is_partial(self) -> bool:
        return bool(self.client_id) != bool(self.client_secret)


class SirvConfig(BaseSettings):
    """Pydantic settings container for the Sirv API client."""

    model_config = SettingsConfigDict(
        env_prefix="SIRV_",
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    client_id_ro: str | None = Field(
        default=None,
        description="Client id for read-only tokens.",
    )
    client_secret_ro: str | None = Field(
        default=None,
        description="Client secret for read-only tokens.",
    )
    client_id_rw: str | None = Field(
        default=None,
        description="Client id for admin (read/write) tokens.",
    )
    client_secret_rw: str | None = Field(
        default=None,
        description="Client secret for admin (read/write) tokens.",
    )
    base_url: str = Field(
        validation_alias=AliasChoices(
            "SIRV_BASE_URL", "NEXT_PUBLIC_SIRV_BASE_URL"
        ),
        min_length=1,
        description="Public CDN base URL used to build user home links.",
    )
    api_url: str = Field(
        default="https://api.sirv.com/v2",
        description="Sirv REST API endpoint.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout applied to every Sirv request in seconds.",
    )

    @classmethod
    def build_default(cls) -> "SirvConfig":
        """Read configuration from the environment."""

        return cls()

    def credentials(self, privilege: Privilege) -> SirvCredentials:
        if privilege is Privilege.ADMIN:
            return SirvCredentials(self.client_id_rw, self.client_secret_rw)
        return SirvCredentials(self.client_id_ro, self.client_secret_ro)

    def user_home_url(self, uuid: str) -> str:
        """Return the public media folder of a user."""

        return f"{self.base_url.rstrip('/')}/u/{uuid}"


__all__ = ["Privilege", "SirvConfig", "SirvCredentials"]
