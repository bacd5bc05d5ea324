"""Thumbnail extraction stage.

Grabs one frame one second into the video with ffmpeg, scaled to 1280x720.
The ffmpeg process is awaited to completion and the written file is checked
with Pillow before its path is returned, so nothing downstream can reference
an image that is missing or half-written.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ..constants import (
    FFMPEG_BINARY,
    FFMPEG_STDERR_TAIL,
    THUMBNAIL_HEIGHT,
    THUMBNAIL_JPEG_QUALITY,
    THUMBNAIL_SIZE,
    THUMBNAIL_TIMESTAMP,
    THUMBNAIL_WIDTH,
    thumbnail_filename,
)
from .base import IThumbnailExtractor, PipelineContext, PipelineState, ThumbnailError

logger = logging.getLogger("article.pipeline")


class ThumbnailExtractor(IThumbnailExtractor):
    """Extracts a still frame from a video with ffmpeg."""

    def __init__(
        self,
        ffmpeg_binary: str = FFMPEG_BINARY,
        timestamp: str = THUMBNAIL_TIMESTAMP,
        width: int = THUMBNAIL_WIDTH,
        height: int = THUMBNAIL_HEIGHT,
    ):
        """Initialize thumbnail extractor.

        Args:
            ffmpeg_binary: ffmpeg executable name or path.
            timestamp: Frame position as HH:MM:SS.
            width: Output width in pixels.
            height: Output height in pixels.
        """
        super().__init__()
        self.ffmpeg_binary = ffmpeg_binary
        self.timestamp = timestamp
        self.width = width
        self.height = height

    async def execute(self, context: PipelineContext) -> PipelineContext:
        """Extract the thumbnail into the context's bundle directory."""
        if context.bundle_dir is None or not context.slug:
            raise ThumbnailError("Output directory not prepared")

        self.log_progress(f"Extracting frame at {self.timestamp} ({THUMBNAIL_SIZE})")
        context.thumbnail_path = await self.extract(
            context.video_path,
            context.bundle_dir,
            thumbnail_filename(context.slug),
        )
        context.state = PipelineState.THUMBNAIL_EXTRACTED
        self.log_success(f"Extracted thumbnail: {context.thumbnail_path}")
        return context

    def build_command(self, video_path: Path, output_path: Path) -> list[str]:
        """Build the ffmpeg command line.

        Seeking before -i keeps extraction fast on long videos.
        """
        return [
            self.ffmpeg_binary,
            "-y",
            "-ss", self.timestamp,
            "-i", str(video_path),
            "-frames:v", "1",
            "-vf", f"scale={self.width}:{self.height}",
            "-q:v", str(THUMBNAIL_JPEG_QUALITY),
            str(output_path),
        ]

    async def extract(self, video_path: Path, target_dir: Path, filename: str) -> Path:
        """Extract one frame to target_dir/filename.

        Args:
            video_path: Source video.
            target_dir: Existing output directory.
            filename: Image file name.

        Returns:
            Path of the written image.

        Raises:
            ThumbnailError: If ffmpeg is missing, fails, writes nothing
                (video shorter than the timestamp) or writes an unreadable file.
        """
        output_path = Path(target_dir) / filename
        cmd = self.build_command(Path(video_path), output_path)
        logger.info(f"FFMPEG_CMD | {' '.join(cmd)}")

        # A frame left by an earlier run would hide a seek past the end
        try:
            output_path.unlink(missing_ok=True)
        except OSError as e:
            raise ThumbnailError(f"Could not remove previous thumbnail {output_path}: {e}") from e

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ThumbnailError(
                f"ffmpeg not found ({self.ffmpeg_binary}). Install FFmpeg or set FFMPEG_BINARY."
            ) from e
        except OSError as e:
            raise ThumbnailError(f"Could not start ffmpeg: {e}") from e

        _, stderr = await process.communicate()

        if process.returncode != 0:
            error_msg = stderr.decode("utf-8", errors="replace") if stderr else ""
            error_tail = error_msg[-FFMPEG_STDERR_TAIL:].strip() or "(stderr was empty)"
            logger.error(f"FFmpeg thumbnail failed: {error_tail}")
            raise ThumbnailError(f"FFmpeg error (returncode={process.returncode}): {error_tail}")

        # ffmpeg exits 0 without output when the seek lands past the end
        if not output_path.exists() or output_path.stat().st_size == 0:
            raise ThumbnailError(
                f"No frame extracted at {self.timestamp}; video may be shorter than that"
            )

        self._verify_image(output_path)
        return output_path

    def _verify_image(self, image_path: Path) -> None:
        """Check that the written file decodes as an image."""
        try:
            with Image.open(image_path) as img:
                img.verify()
                size = img.size
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise ThumbnailError(f"Extracted thumbnail is not a valid image: {e}") from e

        if size != (self.width, self.height):
            logger.warning(
                f"Thumbnail size {size[0]}x{size[1]} differs from requested {self.width}x{self.height}"
            )
