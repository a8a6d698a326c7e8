"""
Configuration for pytest tests.
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from app.config import config
from app.models.schemas import VideoMetadata


@pytest.fixture(autouse=True)
def no_api_keys():
    """Run every test without credentials unless a test passes its own."""
    with patch.object(config, "YOUTUBE_API_KEY", None), patch.object(config, "GEMINI_API_KEY", None):
        yield


def _make_response(status_code=200, json_data=None, text="", reason="OK"):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = reason
    response.text = text
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def make_response():
    """Return a factory for mocked requests responses."""
    return _make_response


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/dQw4w9WgXcQ"


@pytest.fixture
def metadata():
    """Return metadata for a test video."""
    return VideoMetadata(title="Intro to X", author="Acme")
