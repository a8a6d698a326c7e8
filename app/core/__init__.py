"""
Core functionality for the video summary pipeline.

This package contains modules for resolving video URLs, fetching metadata
and captions, generating summaries, and keeping the session history.
"""
