"""Presentation helpers for climb, area and profile pages."""

from .climbs import (
    PercentAndColor,
    compute_climbing_percents_and_colors,
    discipline_array_to_obj,
    get_slug,
    path_or_parent_id_to_github_link,
    sanitize_name,
    simplify_climb_type_json,
)
from .dates import get_upload_date_summary
from .debounce import Debouncer, debounced
from .routes import url_resolver
from .validators import check_username, check_website_url

__all__ = [
    "Debouncer",
    "PercentAndColor",
    "check_username",
    "check_website_url",
    "compute_climbing_percents_and_colors",
    "debounced",
    "discipline_array_to_obj",
    "get_slug",
    "get_upload_date_summary",
    "path_or_parent_id_to_github_link",
    "sanitize_name",
    "simplify_climb_type_json",
    "url_resolver",
]
