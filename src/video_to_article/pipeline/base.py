"""Base classes and interfaces for article pipeline components.

Each stage has one input type and one output type. Stages depend on a
collaborator handed to them at construction (an AI client or an executable
path), never on process-wide state, so tests can pass doubles directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import PipelineConfig


# =============================================================================
# Data Models
# =============================================================================


class GeneratedContent(BaseModel):
    """Structured article content returned by the text-generation service.

    The service answers with a `content` key; it is exposed as `body`.
    Title and description are separate fields and are never part of body.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    title: str
    description: str
    body: str = Field(alias="content")


class ArticleMeta(BaseModel):
    """Metadata record persisted next to the article (blogPost.ts)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    slug: str
    title: str
    description: str
    author: str
    date: str  # ISO calendar date, YYYY-MM-DD
    read_time: str = Field(alias="readTime")
    image: str

    def to_record(self) -> dict:
        """Serialize with the field names the website expects."""
        return self.model_dump(by_alias=True)


class ArtifactPaths(BaseModel):
    """Absolute paths of the four files written by a successful run."""

    model_config = ConfigDict(frozen=True)

    transcript_path: Path
    article_path: Path
    metadata_path: Path
    thumbnail_path: Path

    @property
    def bundle_dir(self) -> Path:
        """Folder holding all four artifacts."""
        return self.transcript_path.parent


class PipelineState(str, Enum):
    """Linear run states. FAILED is reachable from any other state."""

    INIT = "init"
    VALIDATED = "validated"
    TRANSCRIBED = "transcribed"
    CONTENT_GENERATED = "content_generated"
    DIRECTORY_READY = "directory_ready"
    THUMBNAIL_EXTRACTED = "thumbnail_extracted"
    PERSISTED = "persisted"
    FAILED = "failed"


class PipelineContext(BaseModel):
    """Context passed through pipeline steps."""

    model_config = {"arbitrary_types_allowed": True}

    video_path: Path
    config: PipelineConfig
    state: PipelineState = PipelineState.INIT

    # Populated by pipeline steps
    transcript: Optional[str] = None
    content: Optional[GeneratedContent] = None
    slug: Optional[str] = None
    bundle_dir: Optional[Path] = None
    thumbnail_path: Optional[Path] = None
    artifacts: Optional[ArtifactPaths] = None

    @property
    def video_name(self) -> str:
        """Video file name without extension, used as generation context."""
        return self.video_path.stem


# =============================================================================
# Abstract Base Classes (Interfaces)
# =============================================================================


class PipelineStep(ABC):
    """Abstract base class for all pipeline steps."""

    def __init__(self, name: str):
        self.name = name
        self._display = None  # Set by orchestrator

    def set_display(self, display) -> None:
        """Set the CLI display instance for this step."""
        self._display = display

    def log_progress(self, message: str) -> None:
        """Log important progress (shown on console)."""
        if self._display:
            self._display.info(message, self.name)

    def log_detail(self, message: str) -> None:
        """Log detailed progress (file only, unless verbose)."""
        if self._display:
            self._display.detail(message, self.name)

    def log_success(self, message: str) -> None:
        """Log step success (shown on console)."""
        if self._display:
            self._display.success(message, self.name)

    def log_warning(self, message: str) -> None:
        """Log step warning (shown on console)."""
        if self._display:
            self._display.warning(message, self.name)

    @abstractmethod
    async def execute(self, context: PipelineContext) -> PipelineContext:
        """Execute the pipeline step.

        Args:
            context: Pipeline context with current state.

        Returns:
            Updated pipeline context.
        """
        pass


class ITranscriber(PipelineStep):
    """Interface for speech-to-text."""

    def __init__(self):
        super().__init__("Transcriber")

    @abstractmethod
    async def transcribe(self, video_path: Path) -> str:
        """Transcribe the whole video into plain text."""
        pass


class IContentGenerator(PipelineStep):
    """Interface for article content generation."""

    def __init__(self):
        super().__init__("ContentGenerator")

    @abstractmethod
    async def generate(self, transcript: str, context: str) -> GeneratedContent:
        """Turn a transcript into title, description and body."""
        pass


class IThumbnailExtractor(PipelineStep):
    """Interface for still-frame extraction."""

    def __init__(self):
        super().__init__("ThumbnailExtractor")

    @abstractmethod
    async def extract(self, video_path: Path, target_dir: Path, filename: str) -> Path:
        """Write one frame of the video to target_dir/filename."""
        pass


# =============================================================================
# Exceptions
# =============================================================================


class PipelineError(Exception):
    """Base exception for pipeline errors.

    Attributes:
        stage: Name of the stage that failed.
    """

    default_stage: str = "pipeline"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage or self.default_stage

    def __str__(self) -> str:
        return f"[{self.stage}] {super().__str__()}"


class InputError(PipelineError):
    """Missing video file or missing credentials."""

    default_stage = "validate"


class TranscriptionError(PipelineError):
    """Error during transcription."""

    default_stage = "transcribe"


class GenerationError(PipelineError):
    """Error during content generation or response parsing."""

    default_stage = "generate"


class SlugError(PipelineError):
    """Generated title produced no usable slug."""

    default_stage = "slug"


class ThumbnailError(PipelineError):
    """Error during thumbnail extraction."""

    default_stage = "thumbnail"


class PersistenceError(PipelineError):
    """Error writing the output directory or an artifact."""

    default_stage = "persist"
