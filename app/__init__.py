"""
Video Summary Pipeline.

This application takes a YouTube URL, looks up the video's metadata and
captions, and generates a summary at the requested level of detail.
"""

from app.config import config

__version__ = config.APP_VERSION
