"""AI providers - OpenAI client for transcription and text generation."""

from .openai_client import create_ai_client

__all__ = ["create_ai_client"]
