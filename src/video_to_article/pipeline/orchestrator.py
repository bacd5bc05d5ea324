"""Article pipeline orchestrator.

Coordinates all pipeline steps to turn one video into an article bundle:
1. Validate input (video exists, credentials configured)
2. Transcribe the video
3. Generate title, description and body
4. Derive the slug and prepare output/<slug>/
5. Extract the thumbnail
6. Write transcript, article and metadata (in that order)

Steps run strictly one after another. A failure stops the run and is
re-raised as a PipelineError naming the stage; files already written by
earlier steps stay on disk.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from ..config import PipelineConfig, load_config
from .base import (
    ArtifactPaths,
    InputError,
    IContentGenerator,
    IThumbnailExtractor,
    ITranscriber,
    PipelineContext,
    PipelineError,
    PipelineState,
    PipelineStep,
)
from .cli_display import PipelineDisplay
from .content_generator import ContentGenerator
from .metadata import compose_metadata
from .output import OutputService
from .slug import generate_slug
from .thumbnail_extractor import ThumbnailExtractor
from .transcriber import Transcriber

if TYPE_CHECKING:
    from openai import AsyncOpenAI

# Step descriptions for clean logging
STEP_DESCRIPTIONS = {
    "Transcriber": "Transcribing video audio to text",
    "ContentGenerator": "Writing article title, description and body with AI",
    "Output": "Deriving slug and preparing output folder",
    "ThumbnailExtractor": "Extracting thumbnail frame with FFmpeg",
    "Persist": "Writing transcript, article and metadata",
}


def validate_inputs(video_path: Path, config: PipelineConfig) -> None:
    """Check run preconditions before any external call.

    Only existence of the file and presence of a credential are checked;
    codec, duration and size are left to the collaborators.

    Raises:
        InputError: If the video is missing or no API key is configured.
    """
    video_path = Path(video_path)
    if not video_path.exists():
        raise InputError(f"Video file not found: {video_path}")
    if not video_path.is_file():
        raise InputError(f"Video path is not a file: {video_path}")
    if not config.has_credentials:
        raise InputError("OPENAI_API_KEY environment variable is required")


class ArticlePipeline:
    """Orchestrates the video-to-article pipeline."""

    def __init__(
        self,
        transcriber: ITranscriber,
        content_generator: IContentGenerator,
        thumbnail_extractor: IThumbnailExtractor,
        output_service: Optional[OutputService] = None,
        display: Optional[PipelineDisplay] = None,
    ):
        """Initialize article pipeline.

        Args:
            transcriber: Speech-to-text stage.
            content_generator: Article content stage.
            thumbnail_extractor: Frame extraction stage.
            output_service: File writer; built from config.output_dir per run when omitted.
            display: Optional CLI display for progress output.
        """
        self.logger = logging.getLogger("article.pipeline")
        self.transcriber = transcriber
        self.content_generator = content_generator
        self.thumbnail_extractor = thumbnail_extractor
        self.output_service = output_service
        self.display = display

        self.steps: list[PipelineStep] = [transcriber, content_generator, thumbnail_extractor]
        for step in self.steps:
            step.set_display(display)

    @classmethod
    def from_config(
        cls,
        config: PipelineConfig,
        client: Optional["AsyncOpenAI"] = None,
        display: Optional[PipelineDisplay] = None,
    ) -> "ArticlePipeline":
        """Build a pipeline with the default stages.

        Args:
            config: Pipeline configuration.
            client: AI client; created from config when not provided.
            display: Optional CLI display.

        Returns:
            Configured ArticlePipeline.

        Raises:
            InputError: If a client must be created and no API key is set.
        """
        if client is None:
            from ..providers.openai_client import create_ai_client

            client = create_ai_client(config)

        return cls(
            transcriber=Transcriber(client, model=config.transcription_model),
            content_generator=ContentGenerator(client, model=config.generation_model),
            thumbnail_extractor=ThumbnailExtractor(ffmpeg_binary=config.ffmpeg_binary),
            display=display,
        )

    def _info(self, message: str) -> None:
        self.logger.info(message)
        if self.display:
            self.display.info(message)

    def _warning(self, message: str) -> None:
        self.logger.warning(message)
        if self.display:
            self.display.warning(message)

    def _start_step(self, step_name: str) -> None:
        description = STEP_DESCRIPTIONS.get(step_name, f"Executing {step_name}")
        self.logger.info(f"{step_name}: {description}")
        if self.display:
            self.display.start_step(step_name, description)

    def _report_state(self, state: PipelineState) -> None:
        self.logger.debug(f"State -> {state.value}")
        if self.display:
            self.display.state_changed(state)

    def _set_state(self, context: PipelineContext, state: PipelineState) -> None:
        context.state = state
        self._report_state(state)

    @contextmanager
    def _stage(self, stage: str) -> Iterator[None]:
        """Announce a stage and wrap stray exceptions with its name."""
        self._start_step(stage)
        try:
            yield
        except PipelineError:
            raise
        except Exception as e:
            raise PipelineError(f"{stage} failed: {e}", stage=stage) from e

    async def _run_step(self, step: PipelineStep, context: PipelineContext) -> PipelineContext:
        with self._stage(step.name):
            context = await step.execute(context)
        self._report_state(context.state)
        return context

    def _prepare_output(self, context: PipelineContext, output: OutputService) -> None:
        """Derive the slug and create the bundle folder."""
        with self._stage("Output"):
            context.slug = generate_slug(context.content.title)
            if output.bundle_dir(context.slug).is_dir():
                # Same slug as an earlier run: last write wins
                self._warning(f"Output directory exists, artifacts will be overwritten: {context.slug}")
            context.bundle_dir = output.prepare_bundle_dir(context.slug)
        self._set_state(context, PipelineState.DIRECTORY_READY)
        self._info(f"Output directory: {context.bundle_dir}")

    def _persist(self, context: PipelineContext, output: OutputService) -> ArtifactPaths:
        """Write transcript, article and metadata, in that order."""
        config = context.config
        bundle = context.bundle_dir

        with self._stage("Persist"):
            transcript_path = output.write_transcript(bundle, context.transcript)
            article_path = output.write_article(bundle, context.content, config.video_embed_id)
            meta = compose_metadata(
                context.content,
                context.slug,
                context.thumbnail_path.name,
                author=config.blog_author,
                published=date.today(),
                image_prefix=config.image_url_prefix,
            )
            metadata_path = output.write_metadata(bundle, meta)
            artifacts = ArtifactPaths(
                transcript_path=transcript_path.resolve(),
                article_path=article_path.resolve(),
                metadata_path=metadata_path.resolve(),
                thumbnail_path=context.thumbnail_path.resolve(),
            )

        self._set_state(context, PipelineState.PERSISTED)
        return artifacts

    async def run(self, video_path: Path | str, config: PipelineConfig) -> ArtifactPaths:
        """Convert a video into an article bundle.

        Args:
            video_path: Source video file.
            config: Pipeline configuration (output root, author, ...).

        Returns:
            Absolute paths of the four artifacts.

        Raises:
            PipelineError: Subclass naming the first stage that failed.
        """
        context = PipelineContext(video_path=Path(video_path), config=config)
        output = self.output_service or OutputService(config.output_dir)

        if self.display:
            self.display.start_pipeline(context.video_path.name, total_steps=len(STEP_DESCRIPTIONS))

        try:
            validate_inputs(context.video_path, config)
            self._set_state(context, PipelineState.VALIDATED)

            context = await self._run_step(self.transcriber, context)
            context = await self._run_step(self.content_generator, context)
            self._prepare_output(context, output)
            context = await self._run_step(self.thumbnail_extractor, context)
            context.artifacts = self._persist(context, output)

        except PipelineError as e:
            failed_after = context.state
            self._set_state(context, PipelineState.FAILED)
            self.logger.error(f"Pipeline failed at {e.stage} (last state: {failed_after.value}): {e}")
            if self.display:
                self.display.pipeline_failed(e, failed_after)
            raise

        self.logger.info(f"Article bundle complete: {context.bundle_dir}")
        if self.display:
            self.display.pipeline_completed(context.artifacts)
        return context.artifacts


async def process_video(
    video_path: Path | str,
    config: Optional[PipelineConfig] = None,
    client: Optional["AsyncOpenAI"] = None,
    display: Optional[PipelineDisplay] = None,
) -> ArtifactPaths:
    """Convert one video into an article bundle with the default stages.

    Args:
        video_path: Source video file.
        config: Configuration; loaded from the environment when omitted.
        client: AI client; created from config when omitted.
        display: Optional CLI display.

    Returns:
        Absolute paths of the four artifacts.
    """
    config = config or load_config()
    validate_inputs(Path(video_path), config)
    pipeline = ArticlePipeline.from_config(config, client=client, display=display)
    return await pipeline.run(video_path, config)


def process_video_sync(
    video_path: Path | str,
    config: Optional[PipelineConfig] = None,
    display: Optional[PipelineDisplay] = None,
) -> ArtifactPaths:
    """Synchronous wrapper around process_video."""
    return asyncio.run(process_video(video_path, config, display=display))
