"""Output service for article bundles.

Handles all file I/O for a run: preparing the bundle folder and writing the
transcript, article and metadata files. Every write replaces the whole file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..constants import ARTICLE_FILENAME, METADATA_FILENAME, TRANSCRIPT_FILENAME
from .article import render_article
from .base import ArticleMeta, GeneratedContent, PersistenceError, SlugError
from .metadata import render_metadata_module

logger = logging.getLogger("article.pipeline")


class OutputService:
    """Writes article artifacts under an output root.

    Usage:
        service = OutputService(Path("output"))
        bundle = service.prepare_bundle_dir("my-post")
        service.write_transcript(bundle, transcript)
    """

    def __init__(self, output_root: Path):
        """Initialize the output service.

        Args:
            output_root: Folder that holds one sub-folder per article.
        """
        self.output_root = Path(output_root)

    def bundle_dir(self, slug: str) -> Path:
        """Absolute bundle folder for a slug."""
        if not slug:
            raise SlugError(
                "Generated title produced an empty slug; refusing to write into the output root"
            )
        return (self.output_root / slug).resolve()

    def prepare_bundle_dir(self, slug: str) -> Path:
        """Create the bundle folder. An existing folder is reused as is.

        Returns:
            Absolute path of the folder.

        Raises:
            SlugError: If slug is empty.
            PersistenceError: If the folder can't be created.
        """
        path = self.bundle_dir(slug)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"Could not create output directory {path}: {e}") from e
        return path

    def write_transcript(self, bundle_dir: Path, transcript: str) -> Path:
        """Write transcript.txt."""
        return self._write(bundle_dir / TRANSCRIPT_FILENAME, transcript)

    def write_article(
        self,
        bundle_dir: Path,
        content: GeneratedContent,
        video_id: str = "YOUR_VIDEO_ID",
    ) -> Path:
        """Render and write the MDX article."""
        return self._write(bundle_dir / ARTICLE_FILENAME, render_article(content, video_id))

    def write_metadata(self, bundle_dir: Path, meta: ArticleMeta) -> Path:
        """Render and write the metadata module."""
        return self._write(bundle_dir / METADATA_FILENAME, render_metadata_module(meta))

    def _write(self, path: Path, text: str) -> Path:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Could not write {path.name}: {e}") from e
        logger.info(f"Wrote {path}")
        return path
