"""
Tests for the oEmbed metadata fetcher.
"""

import pytest
import requests
from unittest.mock import patch

from app.core.metadata import MetadataFetcher
from app.models.schemas import VideoMetadata


@pytest.fixture
def mock_get():
    """Fixture to mock requests.get in the metadata module."""
    with patch("app.core.metadata.requests.get") as mock:
        yield mock


def test_fetch_metadata(mock_get, make_response):
    """Test reading title and author from the oEmbed payload."""
    mock_get.return_value = make_response(json_data={
        "title": "Never Gonna Give You Up",
        "author_name": "Rick Astley",
        "provider_name": "YouTube",
    })

    fetcher = MetadataFetcher(endpoint="https://noembed.test/embed", timeout=5)
    metadata = fetcher.fetch("dQw4w9WgXcQ")

    assert metadata == VideoMetadata(title="Never Gonna Give You Up", author="Rick Astley")
    mock_get.assert_called_once_with(
        "https://noembed.test/embed",
        params={"url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"},
        timeout=5,
    )


def test_fetch_metadata_partial(mock_get, make_response):
    mock_get.return_value = make_response(json_data={"title": "Only a title"})

    metadata = MetadataFetcher().fetch("dQw4w9WgXcQ")

    assert metadata.title == "Only a title"
    assert metadata.author is None


def test_fetch_metadata_without_fields(mock_get, make_response):
    """noembed answers unknown videos with 200 and an error field."""
    mock_get.return_value = make_response(json_data={"error": "404 Not Found"})

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") is None


def test_fetch_metadata_http_error(mock_get, make_response):
    mock_get.return_value = make_response(status_code=500, reason="Server Error")

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") is None


def test_fetch_metadata_network_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("connection refused")

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") is None


def test_fetch_metadata_timeout(mock_get):
    mock_get.side_effect = requests.Timeout("timed out")

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") is None


def test_fetch_metadata_malformed_json(mock_get, make_response):
    mock_get.return_value = make_response(json_data=ValueError("not json"))

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") is None


def test_fetch_metadata_non_object_payload(mock_get, make_response):
    mock_get.return_value = make_response(json_data=["not", "an", "object"])

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") is None


def test_fetch_metadata_non_string_fields(mock_get, make_response):
    mock_get.return_value = make_response(json_data={"title": 123, "author_name": ["x"]})

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") is None


def test_fetch_metadata_ignores_non_string_author(mock_get, make_response):
    mock_get.return_value = make_response(json_data={"title": "A title", "author_name": {"name": "x"}})

    assert MetadataFetcher().fetch("dQw4w9WgXcQ") == VideoMetadata(title="A title", author=None)
