"""
Centralized error handling for the application.
"""

import json
from typing import Dict, Any

from app.config import config
from app.models.schemas import ErrorKind
from app.utils.logger import logging


class SummarizerError(Exception):
    """Base class for errors that reach the user."""

    kind: ErrorKind = ErrorKind.GENERATION_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUrlError(SummarizerError):
    """No video identifier could be found in the submitted URL."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, message: str = "Invalid YouTube URL"):
        super().__init__(message)


class GenerationFailedError(SummarizerError):
    """The configured generative-text service failed or returned no text."""

    kind = ErrorKind.GENERATION_FAILED


class PipelineBusyError(SummarizerError):
    """A summarize request is already in flight."""

    kind = ErrorKind.BUSY

    def __init__(self, message: str = "A summary is already being generated"):
        super().__init__(message)


_STATUS_CODES = {
    ErrorKind.INVALID_URL: 400,
    ErrorKind.BUSY: 409,
    ErrorKind.GENERATION_FAILED: 502,
}


def error_to_status(error: SummarizerError) -> int:
    """
    Map a pipeline error to the HTTP status code reported to clients.

    Args:
        error: The error raised by the orchestrator

    Returns:
        HTTP status code
    """
    return _STATUS_CODES.get(error.kind, 500)


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not config.DEBUG:
        return

    try:
        logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
    except (TypeError, ValueError) as e:
        logging.error(f"Error logging diagnostic info: {str(e)}")
