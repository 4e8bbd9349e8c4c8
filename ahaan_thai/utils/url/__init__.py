"""URL utilities package."""

from .url_utils import (
    build_translate_url,
    ensure_trailing_slash,
    is_absolute_url,
    join_image_url,
    join_site_url,
    strip_translation_marker,
    transform_link,
)

__all__ = [
    "build_translate_url",
    "ensure_trailing_slash",
    "is_absolute_url",
    "join_image_url",
    "join_site_url",
    "strip_translation_marker",
    "transform_link",
]
