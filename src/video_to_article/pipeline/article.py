"""MDX article rendering.

The article opens with a responsive YouTube embed (the video id is filled in
by the editor or through VIDEO_EMBED_ID) followed by the generated body.
Title and description live in the metadata module, not in the document.
"""

from __future__ import annotations

from html import escape

from .base import GeneratedContent

EMBED_TEMPLATE = """
<div className="video-container mb-8">
  <div className="aspect-video w-full max-w-4xl mx-auto">
    <iframe
      className="w-full h-full rounded-lg shadow-lg"
      src="https://www.youtube.com/embed/{video_id}"
      title="{title}"
      allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
      allowFullScreen
    ></iframe>
  </div>
</div>
"""


def render_article(content: GeneratedContent, video_id: str = "YOUR_VIDEO_ID") -> str:
    """Render the MDX document for an article.

    Args:
        content: Generated article content.
        video_id: YouTube id for the embed placeholder.

    Returns:
        MDX text: embed block, blank line, body, trailing blank line.
    """
    embed = EMBED_TEMPLATE.format(
        video_id=escape(video_id, quote=True),
        title=escape(content.title, quote=True),
    )
    return f"{embed}\n{content.body}\n\n"
