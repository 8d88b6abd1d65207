"""OpenBeta web helpers.

Two independent pieces live here: an async client for the Sirv media API
(``openbeta.sirv``) and small presentation helpers used by the climbing
route pages (``openbeta.utils``).
"""

from .config import Privilege, SirvConfig, SirvCredentials

__all__ = ["Privilege", "SirvConfig", "SirvCredentials"]
