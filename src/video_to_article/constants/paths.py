"""Path and naming constants.

Layout of one article bundle:

  <output_root>/<slug>/
      transcript.txt
      blog-post.mdx
      blogPost.ts
      <slug>.jpg
"""

from pathlib import Path
from typing import Final

from .video import THUMBNAIL_EXTENSION

DEFAULT_OUTPUT_DIR: Final[Path] = Path("output")
"""Output root used when neither OUTPUT_DIR nor a CLI argument is given."""

LOG_DIR: Final[Path] = Path("logs")
"""Directory for pipeline and AI call log files (relative to cwd)."""

TRANSCRIPT_FILENAME: Final[str] = "transcript.txt"
ARTICLE_FILENAME: Final[str] = "blog-post.mdx"
METADATA_FILENAME: Final[str] = "blogPost.ts"

DEFAULT_IMAGE_URL_PREFIX: Final[str] = "/blog-images"
"""Public URL folder the site serves thumbnails from."""

METADATA_EXPORT_NAME: Final[str] = "blogPost"
"""Name of the exported constant in the metadata module."""


def thumbnail_filename(slug: str) -> str:
    """Thumbnail file name for a slug (e.g. 'my-post.jpg')."""
    return f"{slug}.{THUMBNAIL_EXTENSION}"
