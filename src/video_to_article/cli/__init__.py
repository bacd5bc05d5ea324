"""Command-line interface.

Usage:
    video-to-article convert <video-file> [output-directory]
    video-to-article doctor
    python -m video_to_article --help
"""

from .app import app, main

__all__ = ["app", "main"]
