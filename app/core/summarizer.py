"""
Module for generating video summaries with the Gemini API.
"""

from typing import Optional

import requests

from app.config import config
from app.core.prompts import (
    TRANSCRIPT_EXCERPT_LIMIT,
    UNKNOWN_CHANNEL,
    UNKNOWN_TITLE,
    fallback_templates,
    level_directives,
    summary_template,
)
from app.models.schemas import DetailLevel, GenerationConfig, VideoMetadata
from app.utils.error_handling import GenerationFailedError
from app.utils.logger import logging


def _title_and_channel(metadata: Optional[VideoMetadata]):
    title = (metadata.title if metadata else None) or UNKNOWN_TITLE
    channel = (metadata.author if metadata else None) or UNKNOWN_CHANNEL
    return title, channel


def build_prompt(
    detail_level: DetailLevel,
    metadata: Optional[VideoMetadata],
    transcript: Optional[str],
) -> str:
    """
    Build the instruction sent to the generative-text API.

    Args:
        detail_level: Requested summary depth
        metadata: Video title and channel, if known
        transcript: Raw transcript text, if any. Only the first
            TRANSCRIPT_EXCERPT_LIMIT characters are used.

    Returns:
        Prompt text
    """
    title, channel = _title_and_channel(metadata)
    transcript_section = ""
    if transcript:
        transcript_section = f"TRANSCRIPT EXCERPT: {transcript[:TRANSCRIPT_EXCERPT_LIMIT]}"

    return summary_template.format(
        title=title,
        channel=channel,
        transcript_section=transcript_section,
        directive=level_directives[DetailLevel(detail_level)],
    )


def build_fallback_summary(detail_level: DetailLevel, metadata: Optional[VideoMetadata]) -> str:
    """Render the fixed template used when no Gemini key is configured."""
    title, channel = _title_and_channel(metadata)
    return fallback_templates[DetailLevel(detail_level)].format(title=title, channel=channel)


class SummaryGenerator:
    """Class to handle summary generation."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        generation_config: Optional[GenerationConfig] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the generator with API key.

        Args:
            api_key: Gemini API key (if None, taken from config). Without a key
                the generator only produces fallback summaries.
            model: Gemini model name
            base_url: Generative Language API base URL
            generation_config: Sampling parameters
            timeout: Seconds to wait on the generation request
        """
        self.api_key = api_key or config.GEMINI_API_KEY
        self.model = model or config.GEMINI_MODEL
        self.base_url = (base_url or config.GEMINI_API_URL).rstrip("/")
        self.generation_config = generation_config or GenerationConfig()
        self.timeout = timeout or config.REQUEST_TIMEOUT

    @property
    def uses_fallback(self) -> bool:
        return not self.api_key

    def _endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _call_gemini(self, prompt: str) -> str:
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": self.generation_config.to_request(),
        }

        try:
            response = requests.post(
                self._endpoint(),
                params={"key": self.api_key},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logging.error(f"Gemini request failed: {str(e)}")
            raise GenerationFailedError(f"Gemini API failed: {str(e)}") from e

        logging.info(f"Gemini response status: {response.status_code}")

        if not response.ok:
            message = response.reason or f"HTTP {response.status_code}"
            try:
                error = response.json().get("error") or {}
                message = error.get("message") or message
            except (ValueError, AttributeError):
                logging.error(f"Gemini error body: {response.text}")
            raise GenerationFailedError(f"Gemini API failed: {message}")

        try:
            text = response.json()["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError):
            raise GenerationFailedError("Gemini API returned no summary text")

        if not isinstance(text, str) or not text.strip():
            raise GenerationFailedError("Gemini API returned no summary text")

        return text.strip()

    def generate(
        self,
        video_id: str,
        detail_level: DetailLevel,
        metadata: Optional[VideoMetadata] = None,
        transcript: Optional[str] = None,
    ) -> str:
        """
        Generate a summary for a video.

        Args:
            video_id: YouTube video ID
            detail_level: Requested summary depth
            metadata: Video title and channel, if known
            transcript: Raw transcript text, if any

        Returns:
            Summary text

        Raises:
            GenerationFailedError: A key is configured but the API call failed
        """
        if self.uses_fallback:
            logging.warning(f"No Gemini API key - using fallback summary for {video_id}")
            return build_fallback_summary(detail_level, metadata)

        prompt = build_prompt(detail_level, metadata, transcript)
        logging.info(f"Calling Gemini ({self.model}) for {video_id}, prompt length: {len(prompt)}")
        summary = self._call_gemini(prompt)
        logging.info(f"Summary received for {video_id}, length: {len(summary)}")
        return summary
