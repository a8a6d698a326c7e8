"""
End-to-end summarize pipeline: validate, fetch, generate, record.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Tuple

from app.config import config
from app.core.history import HistoryStore
from app.core.metadata import MetadataFetcher
from app.core.summarizer import SummaryGenerator
from app.core.transcript import TranscriptFetcher
from app.core.url_resolver import extract_video_id
from app.models.schemas import (
    DetailLevel,
    ErrorKind,
    HistoryEntry,
    RequestError,
    RequestPhase,
    RequestState,
    VideoMetadata,
    VideoSummary,
)
from app.utils.error_handling import (
    GenerationFailedError,
    InvalidUrlError,
    PipelineBusyError,
    SummarizerError,
    log_diagnostic_info,
)
from app.utils.helpers import estimate_reading_time, truncate_text
from app.utils.logger import logging

PROGRESS_LABELS = {
    RequestPhase.FETCHING_METADATA: "Fetching video information...",
    RequestPhase.FETCHING_TRANSCRIPT: "Fetching transcript...",
    RequestPhase.GENERATING: "Generating AI summary...",
}

ProgressCallback = Callable[[RequestState], None]


class SummarizationOrchestrator:
    """Runs one summarize request at a time and owns its RequestState.

    Every transition replaces the state with a new frozen RequestState, so a
    state handed to a caller never changes underneath it.
    """

    def __init__(
        self,
        metadata_fetcher: Optional[MetadataFetcher] = None,
        transcript_fetcher: Optional[TranscriptFetcher] = None,
        generator: Optional[SummaryGenerator] = None,
        history: Optional[HistoryStore] = None,
        concurrent_fetch: Optional[bool] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            metadata_fetcher: oEmbed lookup
            transcript_fetcher: caption track lookup
            generator: summary generator
            history: store that receives an entry per successful request
            concurrent_fetch: fetch metadata and transcript in parallel
                (defaults to config.CONCURRENT_FETCH)
            on_progress: called with every new RequestState
        """
        self.metadata_fetcher = metadata_fetcher or MetadataFetcher()
        self.transcript_fetcher = transcript_fetcher or TranscriptFetcher()
        self.generator = generator or SummaryGenerator()
        self.history = history if history is not None else HistoryStore()
        self.concurrent_fetch = config.CONCURRENT_FETCH if concurrent_fetch is None else concurrent_fetch
        self.on_progress = on_progress

        self._state = RequestState()
        self._busy = threading.Lock()

    @property
    def state(self) -> RequestState:
        """Current phase, progress label and request data."""
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._busy.locked()

    def _transition(self, **changes) -> RequestState:
        self._state = self._state.model_copy(update=changes)
        logging.info(f"Request phase: {self._state.phase.value}")
        if self.on_progress:
            self.on_progress(self._state)
        return self._state

    def _fail(self, error: SummarizerError) -> None:
        self._transition(
            phase=RequestPhase.FAILED,
            progress=None,
            error=RequestError(kind=error.kind, message=error.message),
        )

    def _fetch_sequentially(self, video_id: str) -> Tuple[Optional[VideoMetadata], Optional[str]]:
        metadata = self.metadata_fetcher.fetch(video_id)
        self._transition(
            phase=RequestPhase.FETCHING_TRANSCRIPT,
            progress=PROGRESS_LABELS[RequestPhase.FETCHING_TRANSCRIPT],
            metadata=metadata,
        )
        transcript = self.transcript_fetcher.fetch(video_id)
        return metadata, transcript

    def _fetch_concurrently(self, video_id: str) -> Tuple[Optional[VideoMetadata], Optional[str]]:
        with ThreadPoolExecutor(max_workers=2) as pool:
            metadata_future = pool.submit(self.metadata_fetcher.fetch, video_id)
            transcript_future = pool.submit(self.transcript_fetcher.fetch, video_id)
            self._transition(
                phase=RequestPhase.FETCHING_TRANSCRIPT,
                progress=PROGRESS_LABELS[RequestPhase.FETCHING_TRANSCRIPT],
            )
            metadata = metadata_future.result()
            transcript = transcript_future.result()
        return metadata, transcript

    def summarize(self, url: str, detail_level: DetailLevel = DetailLevel.MEDIUM) -> VideoSummary:
        """
        Summarize the video behind a URL.

        Args:
            url: User-supplied video URL
            detail_level: Requested summary depth

        Returns:
            VideoSummary for the request

        Raises:
            InvalidUrlError: No video ID could be extracted from the URL
            GenerationFailedError: The configured Gemini call failed
            PipelineBusyError: Another request is still running
        """
        if not self._busy.acquire(blocking=False):
            raise PipelineBusyError()
        try:
            return self._run(url, DetailLevel(detail_level))
        finally:
            self._busy.release()

    def _run(self, url: str, detail_level: DetailLevel) -> VideoSummary:
        self._state = RequestState()
        self._transition(phase=RequestPhase.VALIDATING)

        video_id = extract_video_id(url)
        if not video_id:
            error = InvalidUrlError()
            logging.warning(f"Rejected URL: {truncate_text(str(url))}")
            self._fail(error)
            raise error

        logging.info(f"Starting summarization for video: {video_id}")
        try:
            return self._run_pipeline(url, video_id, detail_level)
        except GenerationFailedError as e:
            logging.error(f"Summary generation failed for {video_id}: {e.message}")
            self._fail(e)
            raise
        except Exception as e:
            # Any other failure still settles the request
            logging.error(f"Unexpected error summarizing {video_id}: {str(e)}")
            self._transition(
                phase=RequestPhase.FAILED,
                progress=None,
                error=RequestError(kind=ErrorKind.INTERNAL, message=str(e) or type(e).__name__),
            )
            raise

    def _run_pipeline(self, url: str, video_id: str, detail_level: DetailLevel) -> VideoSummary:
        self._transition(
            phase=RequestPhase.FETCHING_METADATA,
            progress=PROGRESS_LABELS[RequestPhase.FETCHING_METADATA],
            video_id=video_id,
        )

        if self.concurrent_fetch:
            metadata, transcript = self._fetch_concurrently(video_id)
        else:
            metadata, transcript = self._fetch_sequentially(video_id)

        self._transition(
            phase=RequestPhase.GENERATING,
            progress=PROGRESS_LABELS[RequestPhase.GENERATING],
            metadata=metadata,
            transcript=transcript,
        )

        summary = self.generator.generate(video_id, detail_level, metadata, transcript)

        title = metadata.title if metadata and metadata.title else "Unknown Video"
        entry = HistoryEntry(video_id=video_id, url=url, detail_level=detail_level, title=title)
        result = VideoSummary(
            video_id=video_id,
            url=url,
            detail_level=detail_level,
            metadata=metadata,
            summary=summary,
            transcript_available=transcript is not None,
            used_fallback=bool(self.generator.uses_fallback),
            reading_time_minutes=estimate_reading_time(summary),
        )

        self.history.append(entry)
        self._transition(phase=RequestPhase.SUCCEEDED, progress=None, summary=summary)

        log_diagnostic_info({
            "video_id": video_id,
            "detail_level": detail_level.value,
            "metadata": bool(metadata),
            "transcript_length": len(transcript or ""),
            "summary_length": len(summary),
        })

        return result
