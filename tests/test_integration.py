"""
Integration tests for the HTTP API and command line entry point.
"""

import json
import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from app.api.app import app
from app.api.routes import get_orchestrator
from app.core.history import HistoryStore
from app.core.metadata import MetadataFetcher
from app.core.orchestrator import SummarizationOrchestrator
from app.core.summarizer import SummaryGenerator
from app.core.transcript import TranscriptFetcher
from app.main import main, summarize_youtube_video
from app.models.schemas import DetailLevel
from app.utils.error_handling import PipelineBusyError


@pytest.fixture
def orchestrator(metadata):
    """Orchestrator with mocked upstream fetchers and the fallback generator."""
    metadata_fetcher = MagicMock(spec=MetadataFetcher)
    metadata_fetcher.fetch.return_value = metadata
    transcript_fetcher = MagicMock(spec=TranscriptFetcher)
    transcript_fetcher.fetch.return_value = None

    return SummarizationOrchestrator(
        metadata_fetcher=metadata_fetcher,
        transcript_fetcher=transcript_fetcher,
        generator=SummaryGenerator(),
        history=HistoryStore(),
        concurrent_fetch=False,
    )


@pytest.fixture
def client(orchestrator):
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Video Summary Pipeline"


def test_summarize_endpoint(client, test_video_url):
    """Test the end-to-end summarize request over HTTP."""
    response = client.post("/api/v1/summarize", json={"url": test_video_url, "detail_level": "brief"})

    assert response.status_code == 200
    body = response.json()
    assert body["video_id"] == "dQw4w9WgXcQ"
    assert body["title"] == "Intro to X"
    assert body["author"] == "Acme"
    assert body["detail_level"] == "brief"
    assert body["summary"].startswith('"Intro to X" by Acme')
    assert body["used_fallback"] is True
    assert body["transcript_available"] is False
    assert body["reading_time_minutes"] == 1
    assert "X-Process-Time" in response.headers


def test_summarize_default_level(client, test_video_url):
    response = client.post("/api/v1/summarize", json={"url": test_video_url})
    assert response.json()["detail_level"] == "medium"


def test_summarize_rejects_unknown_level(client, test_video_url):
    response = client.post("/api/v1/summarize", json={"url": test_video_url, "detail_level": "epic"})
    assert response.status_code == 422


def test_summarize_invalid_url(client, orchestrator):
    response = client.post("/api/v1/summarize", json={"url": "not a url"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid YouTube URL"
    orchestrator.metadata_fetcher.fetch.assert_not_called()

    status = client.get("/api/v1/status").json()
    assert status["phase"] == "failed"
    assert status["error_kind"] == "invalid_url"


def test_summarize_generation_failure(client, orchestrator, test_video_url, make_response):
    orchestrator.generator = SummaryGenerator(api_key="gemini-key")

    with patch("app.core.summarizer.requests.post") as mock_post:
        mock_post.return_value = make_response(
            status_code=500, reason="Internal Server Error", json_data={"error": {"message": "Backend error"}}
        )
        response = client.post("/api/v1/summarize", json={"url": test_video_url})

    assert response.status_code == 502
    assert response.json()["detail"] == "Gemini API failed: Backend error"
    assert client.get("/api/v1/history").json()["count"] == 0


def test_summarize_busy(test_video_url):
    busy = MagicMock(spec=SummarizationOrchestrator)
    busy.summarize.side_effect = PipelineBusyError()
    app.dependency_overrides[get_orchestrator] = lambda: busy
    try:
        with TestClient(app) as test_client:
            response = test_client.post("/api/v1/summarize", json={"url": test_video_url})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 409


def test_status_after_success(client, test_video_url):
    assert client.get("/api/v1/status").json()["phase"] == "idle"

    client.post("/api/v1/summarize", json={"url": test_video_url})
    status = client.get("/api/v1/status").json()

    assert status["phase"] == "succeeded"
    assert status["progress"] is None
    assert status["video_id"] == "dQw4w9WgXcQ"
    assert status["busy"] is False


def test_history_endpoints(client):
    for video_id in ("AAAAAAAAAAA", "BBBBBBBBBBB", "CCCCCCCCCCC"):
        client.post("/api/v1/summarize", json={"url": f"https://youtu.be/{video_id}"})

    history = client.get("/api/v1/history").json()
    assert history["count"] == 3
    assert [item["video_id"] for item in history["items"]] == ["CCCCCCCCCCC", "BBBBBBBBBBB", "AAAAAAAAAAA"]
    assert [item["index"] for item in history["items"]] == [0, 1, 2]

    favorited = client.post("/api/v1/history/1/favorite").json()
    assert favorited["items"][1]["is_favorite"] is True

    remaining = client.delete("/api/v1/history/0").json()
    assert [item["video_id"] for item in remaining["items"]] == ["BBBBBBBBBBB", "AAAAAAAAAAA"]
    assert remaining["items"][0]["is_favorite"] is True


def test_clear_history_requires_confirmation(client, test_video_url):
    client.post("/api/v1/summarize", json={"url": test_video_url})

    response = client.delete("/api/v1/history")
    assert response.status_code == 400
    assert client.get("/api/v1/history").json()["count"] == 1

    response = client.delete("/api/v1/history", params={"confirm": "true"})
    assert response.status_code == 200
    assert response.json() == {"items": [], "count": 0}


def test_summarize_youtube_video_saves_output(orchestrator, test_video_url, tmp_path):
    output_file = tmp_path / "summary.json"

    summary = summarize_youtube_video(
        test_video_url, DetailLevel.DETAILED, str(output_file), orchestrator=orchestrator
    )

    saved = json.loads(output_file.read_text(encoding="utf-8"))
    assert saved["video_id"] == "dQw4w9WgXcQ"
    assert saved["detail_level"] == "detailed"
    assert saved["summary"] == summary.summary


def test_cli_main(orchestrator, test_video_url, capsys):
    with patch("app.main.SummarizationOrchestrator", return_value=orchestrator):
        exit_code = main([test_video_url, "--level", "brief"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Summary of 'Intro to X' by Acme" in out
    assert "Level: brief" in out


def test_cli_main_invalid_url(orchestrator, capsys):
    with patch("app.main.SummarizationOrchestrator", return_value=orchestrator):
        exit_code = main(["not a url"])

    assert exit_code == 1
    assert "Invalid YouTube URL" in capsys.readouterr().err
