"""
Configuration settings for the video summary pipeline.
"""

import os
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Video Summary Pipeline"
    APP_VERSION = "0.2.0"

    # API keys. Either may be absent; the matching feature is then disabled.
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # Upstream endpoints
    OEMBED_URL = os.getenv("OEMBED_URL", "https://noembed.com/embed")
    YOUTUBE_API_URL = os.getenv("YOUTUBE_API_URL", "https://www.googleapis.com/youtube/v3")
    GEMINI_API_URL = os.getenv("GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Seconds; applied to every outbound call
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

    HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "20"))
    CONCURRENT_FETCH = _env_flag("CONCURRENT_FETCH")

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        from app.utils.logger import logging

        if not cls.YOUTUBE_API_KEY:
            logging.warning("YOUTUBE_API_KEY not set; transcripts will be skipped.")
        if not cls.GEMINI_API_KEY:
            logging.warning("GEMINI_API_KEY not set; fallback summaries will be used.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
