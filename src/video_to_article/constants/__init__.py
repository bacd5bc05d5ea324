"""Constants for the video-to-article pipeline.

- video.py  : thumbnail frame and ffmpeg settings
- paths.py  : output layout and file names
- limits.py : reading speed, prompt limits, model defaults
"""

from .limits import (
    AI_LOG_PREVIEW_CHARS,
    DEFAULT_AUTHOR,
    DEFAULT_GENERATION_MODEL,
    DEFAULT_TRANSCRIPTION_MODEL,
    MAX_REFERENCE_LINKS,
    MIN_READ_TIME_MINUTES,
    REQUEST_TIMEOUT_SECONDS,
    WORDS_PER_MINUTE,
)
from .paths import (
    ARTICLE_FILENAME,
    DEFAULT_IMAGE_URL_PREFIX,
    DEFAULT_OUTPUT_DIR,
    LOG_DIR,
    METADATA_EXPORT_NAME,
    METADATA_FILENAME,
    TRANSCRIPT_FILENAME,
    thumbnail_filename,
)
from .video import (
    FFMPEG_BINARY,
    FFMPEG_STDERR_TAIL,
    THUMBNAIL_EXTENSION,
    THUMBNAIL_HEIGHT,
    THUMBNAIL_JPEG_QUALITY,
    THUMBNAIL_SIZE,
    THUMBNAIL_TIMESTAMP,
    THUMBNAIL_WIDTH,
)

__all__ = [
    # limits
    "AI_LOG_PREVIEW_CHARS",
    "DEFAULT_AUTHOR",
    "DEFAULT_GENERATION_MODEL",
    "DEFAULT_TRANSCRIPTION_MODEL",
    "MAX_REFERENCE_LINKS",
    "MIN_READ_TIME_MINUTES",
    "REQUEST_TIMEOUT_SECONDS",
    "WORDS_PER_MINUTE",
    # paths
    "ARTICLE_FILENAME",
    "DEFAULT_IMAGE_URL_PREFIX",
    "DEFAULT_OUTPUT_DIR",
    "LOG_DIR",
    "METADATA_EXPORT_NAME",
    "METADATA_FILENAME",
    "TRANSCRIPT_FILENAME",
    "thumbnail_filename",
    # video
    "FFMPEG_BINARY",
    "FFMPEG_STDERR_TAIL",
    "THUMBNAIL_EXTENSION",
    "THUMBNAIL_HEIGHT",
    "THUMBNAIL_JPEG_QUALITY",
    "THUMBNAIL_SIZE",
    "THUMBNAIL_TIMESTAMP",
    "THUMBNAIL_WIDTH",
]
