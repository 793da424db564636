from __future__ import annotations

from urllib.parse import urlsplit

YOUTUBE_HOSTS = frozenset({
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "music.youtube.com",
    "youtu.be",
})


def is_youtube_link(url: str) -> bool:
    """
    Return True when *url* points at a video on a YouTube host.

    Never raises: anything that is not a string or does not parse as an
    http(s) URL is simply invalid. A bare domain (``https://youtube.com``)
    is rejected because it names no video.
    """
    if not isinstance(url, str):
        return False

    candidate = url.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return False

    try:
        parts = urlsplit(candidate)
        host = (parts.hostname or "").lower()
    except ValueError:
        return False

    if parts.scheme.lower() not in ("http", "https"):
        return False
    if host not in YOUTUBE_HOSTS:
        return False

    return parts.path.strip("/") != "" or parts.query != ""
