"""Climb and area presentation helpers."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from ..constants import CLIMB_TYPE_TO_COLOR
from ..models import Climb

GITHUB_CONTENT_BASE_URL = (
    "https://github.com/OpenBeta/opentacos-content/blob/develop/content/"
)

# Leading "(6) ", "12-", "3:" or "Mt." style prefixes.
_NAME_PREFIX = re.compile(r"^(?:\(.{1,3}\) *|(?:\d?[1-9]|[1-9]0)[-:]|[a-zA-Z]{1,2}\.)")


@dataclass(slots=True)
class PercentAndColor:
    percents: list[float] = field(default_factory=list)
    colors: list[str | None] = field(default_factory=list)


def compute_climbing_percents_and_colors(climbs: Iterable[Climb]) -> PercentAndColor:
    """Share of each discipline among all flagged disciplines, with colours.

    Every true flag on every climb counts once, so a climb tagged both
    ``sport`` and ``tr`` contributes to both categories.
    """
    counts: Counter[str] = Counter()
    for climb in climbs:
        counts.update(key for key, flagged in climb.type.items() if flagged)

    total = sum(counts.values())
    return PercentAndColor(
        percents=[count / total * 100 for count in counts.values()],
        colors=[CLIMB_TYPE_TO_COLOR.get(key) for key in counts],
    )


def sanitize_name(s: str) -> str:
    """Remove a leading ``(6)`` / ``1-`` / ``a.`` decoration from a name."""
    return _NAME_PREFIX.sub("", s, count=1)


def simplify_climb_type_json(type_: Mapping[str, bool] | None = None) -> dict[str, bool]:
    """Keep only the true-valued disciplines.

    ``{"sport": True, "boulder": False}`` becomes ``{"sport": True}``. The
    input mapping is left untouched.
    """
    if type_ is None:
        return {}
    return {key: value for key, value in type_.items() if value is not False}


def discipline_array_to_obj(types: Iterable[str]) -> dict[str, bool]:
    return {discipline: True for discipline in types}


def get_slug(area_id: str, is_leaf: bool) -> str:
    kind = "crag" if is_leaf else "areas"
    return f"/{kind}/{area_id}"


def path_or_parent_id_to_github_link(path_or_parent_id: str, file_name: str) -> str:
    """Link to the markdown source of an area or climb page."""
    return f"{GITHUB_CONTENT_BASE_URL}{path_or_parent_id}/{file_name}.md"


__all__ = [
    "PercentAndColor",
    "compute_climbing_percents_and_colors",
    "discipline_array_to_obj",
    "get_slug",
    "path_or_parent_id_to_github_link",
    "sanitize_name",
    "simplify_climb_type_json",
]
