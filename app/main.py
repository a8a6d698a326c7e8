"""
Command line entry point for the video summary pipeline.
"""

import sys
import argparse
from typing import Optional

from app.core.orchestrator import SummarizationOrchestrator
from app.models.schemas import DetailLevel, VideoSummary
from app.utils.error_handling import SummarizerError
from app.utils.helpers import save_json
from app.utils.logger import logging


def save_summary(summary: VideoSummary, output_file: str):
    """Save the summary to a JSON file."""
    save_json(summary.model_dump(mode="json"), output_file)
    logging.info(f"Summary saved to: {output_file}")
    return output_file


def summarize_youtube_video(
    url: str,
    detail_level: DetailLevel = DetailLevel.MEDIUM,
    output_file: Optional[str] = None,
    orchestrator: Optional[SummarizationOrchestrator] = None,
) -> VideoSummary:
    """
    Summarize a YouTube video and optionally save the result.

    Args:
        url: YouTube video URL
        detail_level: brief, medium or detailed
        output_file: Optional file path to save the summary
        orchestrator: Pipeline to use (a new one by default)

    Returns:
        VideoSummary object
    """
    orchestrator = orchestrator or SummarizationOrchestrator()
    summary = orchestrator.summarize(url, detail_level)

    if output_file:
        save_summary(summary, output_file)

    return summary


def main(argv=None):
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--level", default=DetailLevel.MEDIUM.value,
                        choices=[level.value for level in DetailLevel],
                        help="Summary detail level")
    parser.add_argument("--output", help="Output file path for the summary")

    args = parser.parse_args(argv)

    try:
        summary = summarize_youtube_video(args.url, DetailLevel(args.level), args.output)
    except SummarizerError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    title = summary.metadata.title if summary.metadata and summary.metadata.title else "Unknown Title"
    author = summary.metadata.author if summary.metadata and summary.metadata.author else "Unknown Channel"

    print("\n" + "=" * 80)
    print(f"Summary of '{title}' by {author}")
    print(f"Level: {summary.detail_level.value} | ~{summary.reading_time_minutes} min read")
    print("=" * 80)
    print(summary.summary)
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
