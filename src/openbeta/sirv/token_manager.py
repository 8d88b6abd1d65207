"""Bearer token acquisition for the Sirv API."""

from __future__ import annotations

from dataclasses import dataclass

import httpx
import structlog

from ..config import Privilege, SirvConfig
from .errors import SirvApiError, SirvTokenUnavailableError

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class TokenManager:
    """Exchange configured client credentials for short-lived tokens.

    Tokens are not cached; every call without a caller-supplied token asks
    the API for a fresh one.
    """

    config: SirvConfig

    async def acquire_token(
        self, privilege: Privilege = Privilege.READ_ONLY
    ) -> str | None:
        credentials = self.config.credentials(privilege)
        if not credentials.is_complete:
            logger.warning(
                "sirv.token.missing_credentials",
                privilege=privilege.value,
                reason="partial" if credentials.is_partial else "unset",
            )
            return None

        payload = {
            "clientId": credentials.client_id,
            "clientSecret": credentials.client_secret,
        }
        async with httpx.AsyncClient(
            base_url=self.config.api_url, timeout=self.config.timeout_seconds
        ) as client:
            response = await client.post("/token", json=payload)
        if response.status_code != 200:
            raise SirvApiError("get_token", response.reason_phrase)

        token = response.json().get("token")
        if not token:
            raise SirvApiError("get_token", "token missing from response")
        logger.info("sirv.token.issued", privilege=privilege.value)
        return token

    async def get_admin_token(self) -> str | None:
        return await self.acquire_token(Privilege.ADMIN)

    async def resolve_token(
        self,
        token: str | None,
        *,
        privilege: Privilege,
        operation: str,
    ) -> str:
        """Return ``token`` if given, otherwise acquire one for ``privilege``."""
        if token is not None:
            return token
        acquired = await self.acquire_token(privilege)
        if acquired is None:
            raise SirvTokenUnavailableError(operation)
        return acquired


__all__ = ["TokenManager"]
