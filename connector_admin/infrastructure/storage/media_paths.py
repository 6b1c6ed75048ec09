"""Helpers for connector media references (drawings, 3-D models, images).

A stored reference is either an absolute URL, kept verbatim, or a path
relative to the backend's ``/media/`` mount, kept with one leading slash
and no ``media/`` prefix: ``/images/YZ-100.jpg``.
"""

import re

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)
_MEDIA_PREFIX = re.compile(r"^/?media/", re.IGNORECASE)


def is_absolute_url(value: str) -> bool:
    return bool(_ABSOLUTE_URL.match(value))


def normalize_media_path(value: str | None) -> str | None:
    """Turn an upload result path into the form stored on a record."""
    if not value:
        return None
    text = str(value).strip()
    if not text:
        return None
    if is_absolute_url(text):
        return text
    text = _MEDIA_PREFIX.sub("", text)
    return "/" + re.sub(r"/+", "/", text).lstrip("/")


def media_url(backend_url: str, path: str | None) -> str | None:
    """URL a browser can load for a stored media reference."""
    if not path:
        return None
    if is_absolute_url(path):
        return path
    relative = normalize_media_path(path)
    return f"{backend_url.rstrip('/')}/media{relative}"
