"""
Extraction of video identifiers from user-supplied URLs.
"""

import re
from typing import Optional

# youtube.com watch/v/e/embed/nested-path forms and youtu.be short links.
# The identifier stops at quotes, query separators, slashes and whitespace.
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})"
)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL.

    Args:
        url: Arbitrary text that may contain a YouTube URL

    Returns:
        The 11 character video ID, or None if no supported URL shape matched
    """
    if not url:
        return None

    match = VIDEO_ID_PATTERN.search(url)
    if match:
        return match.group(1)

    return None


def build_watch_url(video_id: str) -> str:
    """Build the canonical watch URL for a video ID."""
    return WATCH_URL.format(video_id=video_id)
