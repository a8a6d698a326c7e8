"""
API client for communicating with the video summary backend.
"""

import requests
from typing import Dict, Any, Optional
from urllib.parse import urljoin

from app.config import config
from app.core.url_resolver import extract_video_id
from app.models.schemas import DetailLevel


class ApiClient:
    """Client for interacting with the video summary API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, timeout: float = config.REQUEST_TIMEOUT):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            timeout: Seconds to wait for quick calls. Summaries chain three
                upstream calls, so summarize waits three times as long.
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def summarize_video(self, url: str, detail_level: DetailLevel = DetailLevel.MEDIUM) -> Dict[str, Any]:
        """
        Request a video summary.

        Args:
            url: YouTube video URL
            detail_level: brief, medium or detailed

        Returns:
            Summary response, or {"error": ...} when the server rejected the request
        """
        response = requests.post(
            self._url("summarize"),
            json={"url": url, "detail_level": DetailLevel(detail_level).value},
            timeout=self.timeout * 3,
        )

        if response.status_code in (400, 409, 502):
            return {"error": response.json().get("detail", response.reason)}

        response.raise_for_status()
        return response.json()

    def get_status(self) -> Dict[str, Any]:
        """Get the current request phase and progress label."""
        response = requests.get(self._url("status"), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_history(self) -> Dict[str, Any]:
        """Get the session history, newest first."""
        response = requests.get(self._url("history"), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def toggle_favorite(self, index: int) -> Dict[str, Any]:
        """Flip the favorite flag on a history entry."""
        response = requests.post(self._url(f"history/{index}/favorite"), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def delete_history_item(self, index: int) -> Dict[str, Any]:
        """Remove one history entry."""
        response = requests.delete(self._url(f"history/{index}"), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def clear_history(self, confirm: bool = False) -> Dict[str, Any]:
        """
        Clear the history.

        Args:
            confirm: Must be True; the caller is responsible for asking the user

        Returns:
            Empty history listing
        """
        response = requests.delete(
            self._url("history"),
            params={"confirm": "true" if confirm else "false"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def extract_video_id(self, url: str) -> Optional[str]:
        """
        Extract YouTube video ID from a URL.

        Args:
            url: YouTube URL

        Returns:
            Video ID or None if extraction fails
        """
        return extract_video_id(url)
