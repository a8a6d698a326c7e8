"""
Helper utility functions for the video summary pipeline.
"""

import json
import math
from typing import Dict, Any

WORDS_PER_MINUTE = 200


def estimate_reading_time(text: str, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """
    Estimate how long a text takes to read.

    Args:
        text: Text to measure
        words_per_minute: Assumed reading speed

    Returns:
        Reading time in whole minutes, rounded up
    """
    if not text or not text.strip():
        return 0
    return math.ceil(len(text.split()) / words_per_minute)


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
