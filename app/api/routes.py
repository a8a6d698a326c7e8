"""
API routes for the video summary pipeline.
"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query, Path

from app.api.schems import (
    SummarizeRequest,
    SummaryResponse,
    StatusResponse,
    HistoryItem,
    HistoryResponse,
)
from app.core.history import HistoryStore
from app.core.orchestrator import SummarizationOrchestrator
from app.utils.error_handling import SummarizerError, error_to_status
from app.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["summaries"])

_orchestrator: Optional[SummarizationOrchestrator] = None


def get_orchestrator() -> SummarizationOrchestrator:
    """
    Get the process-wide orchestrator.

    This is a dependency that will be used in FastAPI route functions.
    """
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = SummarizationOrchestrator()
    return _orchestrator


def _history_response(history: HistoryStore) -> HistoryResponse:
    items = [
        HistoryItem(index=index, **entry.model_dump())
        for index, entry in enumerate(history.entries())
    ]
    return HistoryResponse(items=items, count=len(items))


@router.post("/summarize", response_model=SummaryResponse)
def summarize_video(
    request: SummarizeRequest,
    orchestrator: SummarizationOrchestrator = Depends(get_orchestrator),
):
    """
    Summarize a YouTube video by URL.

    - Missing metadata or captions never fail the request
    - Without a Gemini key a templated summary is returned
    - Only one request runs at a time; concurrent calls get 409
    """
    try:
        result = orchestrator.summarize(request.url, request.detail_level)
    except SummarizerError as e:
        logging.error(f"Summarize request failed ({e.kind.value}): {e.message}")
        raise HTTPException(status_code=error_to_status(e), detail=e.message)

    return SummaryResponse(
        video_id=result.video_id,
        url=result.url,
        title=result.metadata.title if result.metadata else None,
        author=result.metadata.author if result.metadata else None,
        detail_level=result.detail_level,
        summary=result.summary,
        transcript_available=result.transcript_available,
        used_fallback=result.used_fallback,
        reading_time_minutes=result.reading_time_minutes,
        created_at=result.created_at,
    )


@router.get("/status", response_model=StatusResponse)
def get_status(orchestrator: SummarizationOrchestrator = Depends(get_orchestrator)):
    """Get the phase and progress of the current or last request."""
    state = orchestrator.state
    return StatusResponse(
        phase=state.phase,
        progress=state.progress,
        error=state.error.message if state.error else None,
        error_kind=state.error.kind.value if state.error else None,
        video_id=state.video_id,
        busy=orchestrator.is_busy,
    )


@router.get("/history", response_model=HistoryResponse)
def list_history(orchestrator: SummarizationOrchestrator = Depends(get_orchestrator)):
    """List completed requests, newest first."""
    return _history_response(orchestrator.history)


@router.post("/history/{index}/favorite", response_model=HistoryResponse)
def toggle_favorite(
    index: int = Path(..., description="Position in the history list"),
    orchestrator: SummarizationOrchestrator = Depends(get_orchestrator),
):
    """Flip the favorite flag of a history entry."""
    orchestrator.history.toggle_favorite(index)
    return _history_response(orchestrator.history)


@router.delete("/history/{index}", response_model=HistoryResponse)
def delete_history_item(
    index: int = Path(..., description="Position in the history list"),
    orchestrator: SummarizationOrchestrator = Depends(get_orchestrator),
):
    """Remove a single history entry."""
    orchestrator.history.remove(index)
    return _history_response(orchestrator.history)


@router.delete("/history", response_model=HistoryResponse)
def clear_history(
    confirm: bool = Query(False, description="Must be true to clear the history"),
    orchestrator: SummarizationOrchestrator = Depends(get_orchestrator),
):
    """Clear the whole history. Requires confirm=true."""
    if not confirm:
        raise HTTPException(status_code=400, detail="Pass confirm=true to clear the history")

    orchestrator.history.clear()
    logging.info("History cleared")
    return _history_response(orchestrator.history)
