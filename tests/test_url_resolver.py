"""
Tests for video ID extraction.
"""

import pytest

from app.core.url_resolver import build_watch_url, extract_video_id


@pytest.mark.parametrize("url", [
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?si=-InVol0JhtWji-6R",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://m.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/v/dQw4w9WgXcQ?version=3",
    "https://www.youtube.com/e/dQw4w9WgXcQ",
    "youtube.com/watch?v=dQw4w9WgXcQ",
    "check this out: https://youtu.be/dQw4w9WgXcQ it's great",
])
def test_extracts_id_from_supported_shapes(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", [
    "not a url",
    "",
    None,
    "https://vimeo.com/123456789",
    "https://www.youtube.com/watch?v=short",
    "https://youtu.be/",
    "https://www.youtube.com/",
])
def test_returns_none_without_id(url):
    assert extract_video_id(url) is None


def test_id_is_case_sensitive():
    assert extract_video_id("https://youtu.be/AbCdEfGhIjK") == "AbCdEfGhIjK"


def test_id_keeps_dash_and_underscore():
    assert extract_video_id("https://youtu.be/a-b_c-d_e-f") == "a-b_c-d_e-f"


def test_id_stops_at_quote():
    assert extract_video_id('<a href="https://youtu.be/dQw4w9WgXcQ">') == "dQw4w9WgXcQ"


def test_first_match_wins():
    text = "https://youtu.be/AAAAAAAAAAA and https://youtu.be/BBBBBBBBBBB"
    assert extract_video_id(text) == "AAAAAAAAAAA"


def test_extraction_is_idempotent():
    url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert extract_video_id(url) == extract_video_id(url)
    assert extract_video_id(build_watch_url(extract_video_id(url))) == "dQw4w9WgXcQ"


def test_build_watch_url():
    assert build_watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
