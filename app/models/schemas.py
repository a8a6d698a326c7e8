"""
Data models for the video summary pipeline.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class DetailLevel(str, Enum):
    """How long and deep the generated summary should be."""
    BRIEF = "brief"
    MEDIUM = "medium"
    DETAILED = "detailed"


class RequestPhase(str, Enum):
    """Phases a summarize request moves through."""
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING_METADATA = "fetching_metadata"
    FETCHING_TRANSCRIPT = "fetching_transcript"
    GENERATING = "generating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ErrorKind(str, Enum):
    """Errors that can be reported to the user."""
    INVALID_URL = "invalid_url"
    GENERATION_FAILED = "generation_failed"
    BUSY = "busy"
    INTERNAL = "internal_error"


class VideoMetadata(BaseModel):
    """Title and channel name from the oEmbed lookup."""
    title: Optional[str] = None
    author: Optional[str] = None

    model_config = {"frozen": True}


class RequestError(BaseModel):
    kind: ErrorKind
    message: str

    model_config = {"frozen": True}


class RequestState(BaseModel):
    """Working state of one in-flight request.

    Instances are frozen; the orchestrator replaces its state on every
    transition instead of mutating it.
    """
    phase: RequestPhase = RequestPhase.IDLE
    progress: Optional[str] = None
    error: Optional[RequestError] = None
    video_id: Optional[str] = None
    metadata: Optional[VideoMetadata] = None
    transcript: Optional[str] = None
    summary: Optional[str] = None

    model_config = {"frozen": True}


class GenerationConfig(BaseModel):
    """Sampling parameters sent with every generation request."""
    temperature: float = 0.8
    top_p: float = 0.95
    max_output_tokens: int = 2048

    def to_request(self) -> dict:
        return {
            "temperature": self.temperature,
            "maxOutputTokens": self.max_output_tokens,
            "topP": self.top_p,
        }


class HistoryEntry(BaseModel):
    """Record of one successfully completed request."""
    video_id: str
    url: str
    timestamp: str = Field(default_factory=utc_timestamp)
    detail_level: DetailLevel
    title: str = "Unknown Video"
    is_favorite: bool = False


class VideoSummary(BaseModel):
    """Result of a successful summarize request."""
    video_id: str
    url: str
    detail_level: DetailLevel
    metadata: Optional[VideoMetadata] = None
    summary: str
    transcript_available: bool = False
    used_fallback: bool = False
    reading_time_minutes: int = 0
    created_at: str = Field(default_factory=utc_timestamp)
