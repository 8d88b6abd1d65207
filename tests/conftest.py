from __future__ import annotations

import os

import pytest

from src.openbeta.config import SirvConfig

os.environ.setdefault("NEXT_PUBLIC_SIRV_BASE_URL", "https://openbeta.sirv.test")


@pytest.fixture
def sirv_config() -> SirvConfig:
    return SirvConfig(
        client_id_ro="ro-id",
        client_secret_ro="ro-secret",
        client_id_rw="rw-id",
        client_secret_rw="rw-secret",
        base_url="https://openbeta.sirv.test",
    )
