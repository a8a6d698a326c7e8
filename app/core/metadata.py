"""
Module for looking up video titles and channel names.
"""

from typing import Optional

import requests

from app.config import config
from app.core.url_resolver import build_watch_url
from app.models.schemas import VideoMetadata
from app.utils.logger import logging


class MetadataFetcher:
    """Fetches video metadata from an oEmbed endpoint."""

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        self.endpoint = endpoint or config.OEMBED_URL
        self.timeout = timeout or config.REQUEST_TIMEOUT

    def fetch(self, video_id: str) -> Optional[VideoMetadata]:
        """
        Look up the title and author of a video.

        Metadata is advisory, so every failure is logged and reported as None.

        Args:
            video_id: YouTube video ID

        Returns:
            VideoMetadata, or None if the lookup failed or returned nothing usable
        """
        try:
            response = requests.get(
                self.endpoint,
                params={"url": build_watch_url(video_id)},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logging.warning(f"Metadata lookup failed for {video_id}: {str(e)}")
            return None

        if not isinstance(data, dict):
            logging.warning(f"Unexpected metadata payload for {video_id}")
            return None

        title = data.get("title")
        author = data.get("author_name")
        # Non-string fields are treated as absent
        title = title if isinstance(title, str) else None
        author = author if isinstance(author, str) else None
        if not title and not author:
            logging.warning(f"No metadata returned for {video_id}")
            return None

        return VideoMetadata(title=title or None, author=author or None)
