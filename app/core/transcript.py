"""
Module for fetching caption tracks from the YouTube Data API.
"""

from typing import Any, Dict, List, Optional

import requests

from app.config import config
from app.utils.logger import logging

# Anything shorter than this (after trimming) is treated as no transcript
MIN_TRANSCRIPT_LENGTH = 10
PREFERRED_LANGUAGE = "en"


class TranscriptFetcher:
    """Class to handle caption track lookup and download."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the fetcher with API key.

        Args:
            api_key: YouTube Data API key (if None, taken from config).
                Without a key every fetch returns None.
            base_url: YouTube Data API base URL
            timeout: Seconds to wait on each request
        """
        self.api_key = api_key or config.YOUTUBE_API_KEY
        self.base_url = (base_url or config.YOUTUBE_API_URL).rstrip("/")
        self.timeout = timeout or config.REQUEST_TIMEOUT

    def list_tracks(self, video_id: str) -> List[Dict[str, Any]]:
        """List the caption tracks available for a video."""
        response = requests.get(
            f"{self.base_url}/captions",
            params={"part": "snippet", "videoId": video_id, "key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        data = response.json()
        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return [item for item in items if isinstance(item, dict)]

    @staticmethod
    def select_track(tracks: List[Dict[str, Any]]) -> Optional[str]:
        """Pick the English track if there is one, else the first track."""
        for track in tracks:
            snippet = track.get("snippet")
            if isinstance(snippet, dict) and snippet.get("language") == PREFERRED_LANGUAGE and track.get("id"):
                return track.get("id")
        return tracks[0].get("id") if tracks else None

    def download_track(self, track_id: str) -> str:
        """Download a caption track as SRT text."""
        response = requests.get(
            f"{self.base_url}/captions/{track_id}",
            params={"tfmt": "srt", "key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.text

    def fetch(self, video_id: str) -> Optional[str]:
        """
        Fetch the transcript text for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            Raw caption text, or None when no usable transcript is available
        """
        if not self.api_key:
            logging.warning("YouTube API key not found - skipping transcript fetch")
            return None

        try:
            tracks = self.list_tracks(video_id)
            if not tracks:
                logging.info(f"No captions available for {video_id}")
                return None

            track_id = self.select_track(tracks)
            if not track_id:
                return None

            transcript = self.download_track(track_id)
        except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
            logging.warning(f"Transcript fetch failed for {video_id}: {str(e)}")
            return None

        if not transcript or len(transcript.strip()) < MIN_TRANSCRIPT_LENGTH:
            logging.info(f"Empty or invalid transcript for {video_id}")
            return None

        logging.info(f"Transcript fetched for {video_id}, length: {len(transcript)}")
        return transcript
