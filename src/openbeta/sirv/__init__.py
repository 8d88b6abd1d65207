"""Async client for the Sirv media hosting API."""

from .client import SirvClient
from .errors import SirvApiError, SirvError, SirvTokenUnavailableError
from .models import MediaRecord, MediaSearchResult, media_id_from_filename
from .token_manager import TokenManager

__all__ = [
    "MediaRecord",
    "MediaSearchResult",
    "SirvApiError",
    "SirvClient",
    "SirvError",
    "SirvTokenUnavailableError",
    "TokenManager",
    "media_id_from_filename",
]
