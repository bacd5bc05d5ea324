"""Video and thumbnail constants.

Frame extraction settings for the blog thumbnail. The thumbnail is the
social/preview image of the article, so it uses a landscape 16:9 frame
rather than the source video's native size.
"""

from typing import Final

# =============================================================================
# THUMBNAIL FRAME
# =============================================================================

THUMBNAIL_TIMESTAMP: Final[str] = "00:00:01"
"""Position of the extracted frame (one second into the video)."""

THUMBNAIL_WIDTH: Final[int] = 1280
"""Thumbnail width in pixels."""

THUMBNAIL_HEIGHT: Final[int] = 720
"""Thumbnail height in pixels."""

THUMBNAIL_SIZE: Final[str] = f"{THUMBNAIL_WIDTH}x{THUMBNAIL_HEIGHT}"
"""Thumbnail size as WIDTHxHEIGHT, the form ffmpeg and log lines use."""

THUMBNAIL_EXTENSION: Final[str] = "jpg"

THUMBNAIL_JPEG_QUALITY: Final[int] = 2
"""ffmpeg -q:v value for the JPEG encoder (2 = near lossless, 31 = worst)."""

# =============================================================================
# FFMPEG
# =============================================================================

FFMPEG_BINARY: Final[str] = "ffmpeg"
"""Default executable name, resolved through PATH."""

FFMPEG_STDERR_TAIL: Final[int] = 1000
"""Characters of ffmpeg stderr kept in error messages."""
