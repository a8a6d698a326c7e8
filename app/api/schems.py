from pydantic import BaseModel
from typing import Optional, List

from app.models.schemas import DetailLevel, HistoryEntry, RequestPhase


class SummarizeRequest(BaseModel):
    """Model for requesting video summarization."""
    url: str
    detail_level: DetailLevel = DetailLevel.MEDIUM


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    video_id: str
    url: str
    title: Optional[str] = None
    author: Optional[str] = None
    detail_level: DetailLevel
    summary: str
    transcript_available: bool
    used_fallback: bool
    reading_time_minutes: int
    created_at: str


class StatusResponse(BaseModel):
    """Model for the current request state."""
    phase: RequestPhase
    progress: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    video_id: Optional[str] = None
    busy: bool = False


class HistoryItem(HistoryEntry):
    """History entry with its position in the list."""
    index: int


class HistoryResponse(BaseModel):
    """Model for history listings."""
    items: List[HistoryItem] = []
    count: int = 0
