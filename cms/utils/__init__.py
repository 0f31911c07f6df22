"""Utility helper functions."""

from cms.utils.helpers import epoch_ms, get_summary, host, parse_uuid, time_taken, utcnow
from cms.utils.slugs import resolve_slug, slugify_text

__all__ = [
    "epoch_ms",
    "get_summary",
    "host",
    "parse_uuid",
    "time_taken",
    "utcnow",
    "resolve_slug",
    "slugify_text",
]
