"""Article content generation stage.

Turns a transcript into a structured {title, description, content} record
with a single JSON-mode chat completion. The formatting rules in the prompt
(headings, citation links, typographic quotes) are left to the model; this
stage only checks that the response has the expected shape.
"""

from __future__ import annotations

import json
import logging

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from ..constants import AI_LOG_PREVIEW_CHARS, DEFAULT_GENERATION_MODEL, MAX_REFERENCE_LINKS
from .base import (
    GeneratedContent,
    GenerationError,
    IContentGenerator,
    PipelineContext,
    PipelineState,
)

_logger = logging.getLogger("ai_calls")

SYSTEM_PROMPT = (
    "You are a professional content writer. Convert video transcripts into "
    "engaging blog posts. Respond with valid JSON only."
)

ARTICLE_PROMPT = """Transform this video transcript into a professional blog post. Create an engaging title, compelling description, and well-structured content with proper headings and formatting. In order to increase credibility, add links **throughout** the content to high domain authority websites where you see fit, using the markdown format [text](url) for anchor tags. Do not add more than {max_links} links, and be sure to include any of these in a "References" section at the end of the blog post as well. Any instances of double quotes that appear in the content, excluding <pre> and <code> sections, should be replaced with &ldquo; and &rdquo; appropriately for HTML compatibility.

Video name: {video_name}
Transcript: {transcript}

Respond with JSON in this format:
{{
  "title": "The blog post title",
  "description": "A compelling description of the blog post",
  "content": "The full blog post content in markdown format. Do not include the title or description here, just the content."
}}"""


def build_prompt(transcript: str, video_name: str) -> str:
    """Fill the article prompt template."""
    return ARTICLE_PROMPT.format(
        max_links=MAX_REFERENCE_LINKS,
        video_name=video_name,
        transcript=transcript,
    )


def parse_content(raw: str | None) -> GeneratedContent:
    """Parse the model's JSON answer into GeneratedContent.

    Raises:
        GenerationError: If the answer is empty, not a JSON object, or lacks
            string title/description/content fields.
    """
    if not raw or not raw.strip():
        raise GenerationError("Empty response from text generation")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise GenerationError(f"Expected a JSON object, got {type(data).__name__}")

    missing = [key for key in ("title", "description", "content") if key not in data]
    if missing:
        raise GenerationError(f"Response missing required fields: {', '.join(missing)}")

    try:
        return GeneratedContent.model_validate(data)
    except ValidationError as e:
        raise GenerationError(f"Response fields have the wrong type: {e}") from e


class ContentGenerator(IContentGenerator):
    """Generates article content from a transcript with a chat model."""

    def __init__(self, client: AsyncOpenAI, model: str = DEFAULT_GENERATION_MODEL):
        """Initialize content generator.

        Args:
            client: AI client handle.
            model: Chat model id.
        """
        super().__init__()
        self._client = client
        self.model = model

    async def execute(self, context: PipelineContext) -> PipelineContext:
        """Generate content for the context's transcript."""
        if context.transcript is None:
            raise GenerationError("No transcript available")

        self.log_progress(f"Writing article with {self.model}")
        context.content = await self.generate(context.transcript, context.video_name)
        context.state = PipelineState.CONTENT_GENERATED
        self.log_success(f"Title: {context.content.title}")
        self.log_detail(f"Description: {context.content.description}")
        self.log_detail(f"Body preview: {context.content.body[:AI_LOG_PREVIEW_CHARS]}")
        return context

    async def generate(self, transcript: str, context: str) -> GeneratedContent:
        """Generate title, description and body for a transcript.

        Args:
            transcript: Full transcript text.
            context: Video name (file name without extension).

        Returns:
            GeneratedContent.

        Raises:
            GenerationError: On request failure or malformed response.
        """
        prompt = build_prompt(transcript, context)
        _logger.info(f"GENERATE | model={self.model} | video={context} | prompt_chars={len(prompt)}")
        _logger.debug(f"PROMPT | {prompt}")

        try:
            completion = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
            )
        except OpenAIError as e:
            _logger.error(f"GENERATE FAILED | {type(e).__name__}: {e}")
            raise GenerationError(f"Blog post generation failed: {e}") from e

        if not completion.choices:
            raise GenerationError("Text generation returned no choices")

        raw = completion.choices[0].message.content
        _logger.debug(f"RESPONSE | {raw}")
        return parse_content(raw)
