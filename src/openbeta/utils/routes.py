"""Map activity targets to site routes."""

from __future__ import annotations

ROUTE_PREFIXES: dict[int, str] = {
    0: "/climbs/",
    1: "/areas/",
    3: "/u/",
}


def url_resolver(type_: int, dest: str) -> str | None:
    """Return the page URL for a climb (0), area (1) or user (3)."""
    prefix = ROUTE_PREFIXES.get(type_)
    if prefix is None:
        return None
    return f"{prefix}{dest}"


__all__ = ["ROUTE_PREFIXES", "url_resolver"]
