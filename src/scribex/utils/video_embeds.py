#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/scribex/utils/video_embeds.py
"""Video embed URL parsing.

Turns a user-pasted video link into a provider-specific embed URL. Known
providers are YouTube, Vimeo and Loom; any other http(s) URL is treated as a
generic embed so that any iframe-compatible link still works.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlparse

from scribex.constants import VideoProvider

logger = logging.getLogger(__name__)

_YOUTUBE_HOSTS = frozenset({"youtube.com", "m.youtube.com"})
_YOUTUBE_PATH_RE = re.compile(r"^/(embed|shorts|live|v)/([a-zA-Z0-9_-]+)")
_VIMEO_HOSTS = frozenset({"vimeo.com", "player.vimeo.com"})
_VIMEO_PATH_RE = re.compile(r"/(?:video/|channels/[^/]+/)?(\d+)")
_LOOM_PATH_RE = re.compile(r"/(?:share|embed)/([a-zA-Z0-9]+)")


@dataclass(frozen=True)
class VideoEmbedInfo:
    """Embed information for a video URL.

    Parameters
    ----------
    provider : {"youtube", "vimeo", "loom", "generic"}
        Detected provider
    embed_url : str
        URL suitable for an embedded player
    thumbnail_url : str or None, default = None
        Thumbnail URL when the provider exposes one

    """

    provider: VideoProvider
    embed_url: str
    thumbnail_url: Optional[str] = None


def _youtube(video_id: str) -> VideoEmbedInfo:
    return VideoEmbedInfo(
        provider="youtube",
        embed_url=f"https://www.youtube.com/embed/{video_id}",
        thumbnail_url=f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg",
    )


def parse_video_embed(url: str) -> VideoEmbedInfo | None:
    """Parse a URL and return embed info for it.

    Parameters
    ----------
    url : str
        User-supplied URL

    Returns
    -------
    VideoEmbedInfo or None
        Embed info, or None when ``url`` is not an http(s) URL

    Examples
    --------
        >>> parse_video_embed("https://youtu.be/abc123").embed_url
        'https://www.youtube.com/embed/abc123'
        >>> parse_video_embed("not a url") is None
        True

    """
    trimmed = url.strip() if url else ""
    if not trimmed:
        return None

    try:
        parsed = urlparse(trimmed)
    except ValueError:
        return None

    if parsed.scheme.lower() not in ("http", "https") or not parsed.hostname:
        return None

    hostname = parsed.hostname.removeprefix("www.")
    path = parsed.path

    if hostname in _YOUTUBE_HOSTS:
        video_id = None
        if path == "/watch":
            video_id = parse_qs(parsed.query).get("v", [None])[0]
        if not video_id:
            match = _YOUTUBE_PATH_RE.match(path)
            if match:
                video_id = match.group(2)
        if video_id:
            return _youtube(video_id)

    if hostname == "youtu.be":
        video_id = path[1:].split("/")[0]
        if video_id:
            return _youtube(video_id)

    if hostname in _VIMEO_HOSTS:
        match = _VIMEO_PATH_RE.search(path)
        if match:
            return VideoEmbedInfo(provider="vimeo", embed_url=f"https://player.vimeo.com/video/{match.group(1)}")

    if hostname == "loom.com":
        match = _LOOM_PATH_RE.search(path)
        if match:
            return VideoEmbedInfo(provider="loom", embed_url=f"https://www.loom.com/embed/{match.group(1)}")

    logger.debug(f"No known video provider for host '{hostname}', using generic embed")
    return VideoEmbedInfo(provider="generic", embed_url=trimmed)


__all__ = ["VideoEmbedInfo", "parse_video_embed"]
