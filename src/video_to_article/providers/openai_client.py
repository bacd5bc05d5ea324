"""OpenAI client construction.

One AsyncOpenAI handle is built from PipelineConfig and shared by the
transcription and generation stages.
"""

from __future__ import annotations

import logging

import httpx
from openai import AsyncOpenAI

from ..config import PipelineConfig
from ..pipeline.base import InputError

_logger = logging.getLogger("ai_calls")


def create_ai_client(config: PipelineConfig) -> AsyncOpenAI:
    """Create the AI client used by the pipeline stages.

    Args:
        config: Pipeline configuration holding the credential and endpoint.

    Returns:
        Configured AsyncOpenAI client. Retries are disabled: every stage
        makes exactly one attempt.

    Raises:
        InputError: If no API key is configured.
    """
    if not config.has_credentials:
        raise InputError("OPENAI_API_KEY environment variable is required")

    timeout = httpx.Timeout(config.request_timeout, connect=10.0)
    _logger.debug(
        f"Creating AI client (base_url={config.openai_base_url or 'default'}, "
        f"timeout={config.request_timeout}s)"
    )
    return AsyncOpenAI(
        api_key=config.openai_api_key,
        base_url=config.openai_base_url,
        timeout=timeout,
        max_retries=0,
    )
