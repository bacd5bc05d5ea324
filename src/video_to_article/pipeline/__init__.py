"""Video-to-article pipeline module.

Pipeline Steps:
1. Transcriber - Speech-to-text for the whole video
2. ContentGenerator - Title, description and body from the transcript
3. (slug + output folder)
4. ThumbnailExtractor - 1280x720 frame at 00:00:01 via FFmpeg
5. (transcript.txt, blog-post.mdx, blogPost.ts)

Example usage:
    from video_to_article.config import load_config
    from video_to_article.pipeline import process_video

    artifacts = await process_video("talk.mp4", load_config())
    print(artifacts.article_path)

Or synchronously:
    artifacts = process_video_sync("talk.mp4")
"""

from .article import render_article
from .base import (
    # Data models
    ArticleMeta,
    ArtifactPaths,
    GeneratedContent,
    PipelineContext,
    PipelineState,
    # Exceptions
    GenerationError,
    InputError,
    PersistenceError,
    PipelineError,
    SlugError,
    ThumbnailError,
    TranscriptionError,
    # Interfaces
    IContentGenerator,
    IThumbnailExtractor,
    ITranscriber,
    PipelineStep,
)
from .cli_display import PipelineDisplay
from .content_generator import ContentGenerator
from .metadata import (
    compose_metadata,
    estimate_read_time,
    parse_metadata_module,
    render_metadata_module,
)
from .orchestrator import ArticlePipeline, process_video, process_video_sync, validate_inputs
from .output import OutputService
from .slug import generate_slug
from .thumbnail_extractor import ThumbnailExtractor
from .transcriber import Transcriber

__all__ = [
    # Main class
    "ArticlePipeline",
    "process_video",
    "process_video_sync",
    "validate_inputs",
    # Pipeline steps
    "Transcriber",
    "ContentGenerator",
    "ThumbnailExtractor",
    "OutputService",
    "PipelineDisplay",
    # Pure helpers
    "generate_slug",
    "render_article",
    "compose_metadata",
    "estimate_read_time",
    "render_metadata_module",
    "parse_metadata_module",
    # Data models
    "ArticleMeta",
    "ArtifactPaths",
    "GeneratedContent",
    "PipelineContext",
    "PipelineState",
    # Interfaces
    "PipelineStep",
    "ITranscriber",
    "IContentGenerator",
    "IThumbnailExtractor",
    # Exceptions
    "PipelineError",
    "InputError",
    "TranscriptionError",
    "GenerationError",
    "SlugError",
    "ThumbnailError",
    "PersistenceError",
]
