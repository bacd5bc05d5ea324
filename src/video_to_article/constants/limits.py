"""Content limits and defaults for generated articles."""

from typing import Final

WORDS_PER_MINUTE: Final[int] = 200
"""Reading speed used for the readTime estimate."""

MIN_READ_TIME_MINUTES: Final[int] = 1

MAX_REFERENCE_LINKS: Final[int] = 5
"""Upper bound on external links the article prompt asks for."""

DEFAULT_AUTHOR: Final[str] = "Kevin Kane"

DEFAULT_TRANSCRIPTION_MODEL: Final[str] = "gpt-4o-transcribe"
DEFAULT_GENERATION_MODEL: Final[str] = "gpt-5-mini-2025-08-07"

REQUEST_TIMEOUT_SECONDS: Final[float] = 600.0
"""Timeout for a single AI request. Long videos take minutes to transcribe."""

AI_LOG_PREVIEW_CHARS: Final[int] = 500
"""Characters of prompts/responses echoed to the console in verbose mode."""
