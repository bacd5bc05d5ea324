"""Article metadata composition.

Builds the ArticleMeta record and renders it as the TypeScript module the
blog imports (`export const blogPost = {...};`).
"""

from __future__ import annotations

import json
import math
from datetime import date
from typing import Optional

from ..constants import (
    DEFAULT_AUTHOR,
    DEFAULT_IMAGE_URL_PREFIX,
    METADATA_EXPORT_NAME,
    MIN_READ_TIME_MINUTES,
    WORDS_PER_MINUTE,
)
from .base import ArticleMeta, GeneratedContent


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def estimate_read_time(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    """Estimate reading time, rounded up to whole minutes (at least one).

    Args:
        body: Article body text.
        words_per_minute: Reading speed.

    Returns:
        Label such as '3 min read'.
    """
    minutes = math.ceil(count_words(body) / words_per_minute)
    return f"{max(MIN_READ_TIME_MINUTES, minutes)} min read"


def image_url(filename: str, prefix: str = DEFAULT_IMAGE_URL_PREFIX) -> str:
    """Public URL of a thumbnail file."""
    return f"{prefix.rstrip('/')}/{filename}"


def compose_metadata(
    content: GeneratedContent,
    slug: str,
    image_filename: str,
    author: Optional[str] = None,
    published: Optional[date] = None,
    image_prefix: str = DEFAULT_IMAGE_URL_PREFIX,
) -> ArticleMeta:
    """Build the metadata record for an article.

    Args:
        content: Generated title, description and body.
        slug: Article slug.
        image_filename: Thumbnail file name inside the bundle.
        author: Author name; falls back to the default author when empty.
        published: Publication date; defaults to today.
        image_prefix: Public folder the thumbnail is served from.

    Returns:
        ArticleMeta ready to be rendered.
    """
    published = published or date.today()
    return ArticleMeta(
        slug=slug,
        title=content.title,
        description=content.description,
        author=author or DEFAULT_AUTHOR,
        date=published.isoformat(),
        read_time=estimate_read_time(content.body),
        image=image_url(image_filename, image_prefix),
    )


def render_metadata_module(meta: ArticleMeta) -> str:
    """Render metadata as a TypeScript module exporting one constant."""
    payload = json.dumps(meta.to_record(), indent=2, ensure_ascii=False)
    return f"\nexport const {METADATA_EXPORT_NAME} = {payload};\n"


def parse_metadata_module(text: str) -> ArticleMeta:
    """Read back a module produced by render_metadata_module.

    Raises:
        ValueError: If the text is not a rendered metadata module.
    """
    prefix = f"export const {METADATA_EXPORT_NAME} = "
    stripped = text.strip()
    if not stripped.startswith(prefix) or not stripped.endswith(";"):
        raise ValueError("Not a metadata module")
    payload = stripped[len(prefix):-1]
    return ArticleMeta.model_validate(json.loads(payload))
