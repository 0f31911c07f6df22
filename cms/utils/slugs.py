"""
URL slug generation and collision handling.

Examples
--------
>>> slugify_text("Hello, World!")
'hello-world'
>>> slugify_text("Café Déjà Vu")
'cafe-deja-vu'
"""

from collections.abc import Awaitable, Callable
from hashlib import sha1

from slugify import slugify

from cms.configs.settings import SLUG_BASE_MAX_LENGTH
from cms.utils.helpers import epoch_ms

FALLBACK_DIGEST_LENGTH = 8


def slugify_text(text: str) -> str:
    """
    Turn free text into a lower-case, hyphen-separated slug.

    Non-ASCII characters are transliterated; anything outside ``[a-z0-9]`` is
    collapsed into single hyphens. Text that transliterates to nothing (only
    punctuation, for example) gets a short digest of the input instead, so
    the result is never empty.

    Args:
        text: Source text, usually a name or title.

    Returns:
        The slug.
    """
    slug = slugify(text, max_length=SLUG_BASE_MAX_LENGTH)
    if slug:
        return slug
    return sha1(text.encode("utf-8"), usedforsecurity=False).hexdigest()[:FALLBACK_DIGEST_LENGTH]


async def resolve_slug(candidate: str, exists: Callable[[str], Awaitable[bool]]) -> str:
    """
    Return ``candidate`` if it is free, otherwise append ``-<epoch ms>``.

    The suffixed value is not checked again; the unique index on the slug
    column rejects the rare second collision.
    """
    if not await exists(candidate):
        return candidate
    return f"{candidate}-{epoch_ms()}"
