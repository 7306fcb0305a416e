#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for video URL parsing."""

import pytest

from scribex.utils.video_embeds import VideoEmbedInfo, parse_video_embed


@pytest.mark.unit
class TestYouTube:
    """Tests for YouTube URLs."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42",
            "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://www.youtube.com/shorts/dQw4w9WgXcQ",
            "https://www.youtube.com/live/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "  https://youtu.be/dQw4w9WgXcQ  ",
        ],
    )
    def test_forms(self, url):
        """Every YouTube URL form resolves to the same embed."""
        assert parse_video_embed(url) == VideoEmbedInfo(
            provider="youtube",
            embed_url="https://www.youtube.com/embed/dQw4w9WgXcQ",
            thumbnail_url="https://img.youtube.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
        )

    def test_watch_without_id_is_generic(self):
        """A watch page with no id is not a YouTube embed."""
        assert parse_video_embed("https://www.youtube.com/watch").provider == "generic"


@pytest.mark.unit
class TestOtherProviders:
    """Tests for Vimeo, Loom and generic URLs."""

    def test_vimeo(self):
        """Vimeo ids map to the player URL without a thumbnail."""
        info = parse_video_embed("https://vimeo.com/76979871")
        assert info.provider == "vimeo"
        assert info.embed_url == "https://player.vimeo.com/video/76979871"
        assert info.thumbnail_url is None

    def test_vimeo_player(self):
        """Player URLs are recognized too."""
        assert parse_video_embed("https://player.vimeo.com/video/123").embed_url == "https://player.vimeo.com/video/123"

    def test_loom(self):
        """Loom share links map to the embed URL."""
        info = parse_video_embed("https://www.loom.com/share/abc123def")
        assert info.provider == "loom"
        assert info.embed_url == "https://www.loom.com/embed/abc123def"

    def test_generic(self):
        """Unknown hosts embed the trimmed URL as is."""
        info = parse_video_embed(" https://example.com/clip.mp4 ")
        assert info == VideoEmbedInfo(provider="generic", embed_url="https://example.com/clip.mp4")

    @pytest.mark.parametrize("url", ["", "   ", "not a url", "ftp://example.com/a.mp4", "javascript:alert(1)", "https://"])
    def test_rejected(self, url):
        """Non-http(s) input gives None."""
        assert parse_video_embed(url) is None
