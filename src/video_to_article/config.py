"""Pipeline configuration loading.

Settings come from the environment (and a .env file when present). The
resulting PipelineConfig is immutable and is passed explicitly into the
pipeline entry point; stages never read the environment themselves.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_AUTHOR,
    DEFAULT_GENERATION_MODEL,
    DEFAULT_IMAGE_URL_PREFIX,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_TRANSCRIPTION_MODEL,
    FFMPEG_BINARY,
    REQUEST_TIMEOUT_SECONDS,
)


class PipelineConfig(BaseSettings):
    """Immutable configuration for one or more pipeline runs.

    Environment variables (case-insensitive):
        OPENAI_API_KEY       credential for transcription and generation (required)
        OPENAI_BASE_URL      alternative OpenAI-compatible endpoint
        BLOG_AUTHOR          author written to article metadata
        OUTPUT_DIR           root folder for article bundles
        TRANSCRIPTION_MODEL  speech-to-text model id
        GENERATION_MODEL     chat model id used for the article
        REQUEST_TIMEOUT      seconds before an AI request is abandoned
        FFMPEG_BINARY        ffmpeg executable name or path
        IMAGE_URL_PREFIX     public folder the thumbnail is served from
        VIDEO_EMBED_ID       YouTube id placed in the article's embed
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    openai_api_key: str | None = None
    openai_base_url: str | None = None
    blog_author: str = DEFAULT_AUTHOR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    transcription_model: str = DEFAULT_TRANSCRIPTION_MODEL
    generation_model: str = DEFAULT_GENERATION_MODEL
    request_timeout: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0)
    ffmpeg_binary: str = FFMPEG_BINARY
    image_url_prefix: str = DEFAULT_IMAGE_URL_PREFIX
    video_embed_id: str = "YOUR_VIDEO_ID"

    @property
    def has_credentials(self) -> bool:
        """True when an API key is configured (blank strings don't count)."""
        return bool(self.openai_api_key and self.openai_api_key.strip())

    def with_overrides(
        self,
        output_dir: Path | str | None = None,
        author: str | None = None,
    ) -> "PipelineConfig":
        """Return a copy with CLI-level overrides applied.

        Args:
            output_dir: Replacement output root, if given.
            author: Replacement author name, if given.

        Returns:
            New PipelineConfig; self is left unchanged.
        """
        update: dict = {}
        if output_dir is not None:
            update["output_dir"] = Path(output_dir)
        if author:
            update["blog_author"] = author
        if not update:
            return self
        return self.model_copy(update=update)


def load_config(env_file: Path | str | None = ".env") -> PipelineConfig:
    """Load configuration from the environment and an optional .env file.

    Args:
        env_file: dotenv file to read, or None to use the environment only.

    Returns:
        Loaded PipelineConfig.
    """
    return PipelineConfig(_env_file=env_file)
