"""Content records consumed by the presentation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Climb:
    """Climb as rendered on area pages; ``type`` maps discipline to flag."""

    id: str
    name: str
    type: dict[str, bool] = field(default_factory=dict)
    parent: str | None = None


__all__ = ["Climb"]
