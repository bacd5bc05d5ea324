"""Speech-to-text stage.

Sends the whole video file to the transcription endpoint in one request
and returns the plain-text transcript. The file is streamed from an open
handle; it is never read into memory here.
"""

from __future__ import annotations

import logging
from pathlib import Path

from openai import AsyncOpenAI, OpenAIError

from ..constants import AI_LOG_PREVIEW_CHARS, DEFAULT_TRANSCRIPTION_MODEL
from .base import ITranscriber, PipelineContext, PipelineState, TranscriptionError

_logger = logging.getLogger("ai_calls")


class Transcriber(ITranscriber):
    """Transcribes a video through an OpenAI-compatible audio endpoint."""

    def __init__(self, client: AsyncOpenAI, model: str = DEFAULT_TRANSCRIPTION_MODEL):
        """Initialize transcriber.

        Args:
            client: AI client handle.
            model: Transcription model id.
        """
        super().__init__()
        self._client = client
        self.model = model

    async def execute(self, context: PipelineContext) -> PipelineContext:
        """Transcribe the context's video."""
        self.log_progress(f"Transcribing {context.video_path.name} ({self.model})")
        context.transcript = await self.transcribe(context.video_path)
        context.state = PipelineState.TRANSCRIBED
        self.log_success(f"Transcription completed ({len(context.transcript)} characters)")
        self.log_detail(f"Transcript preview: {context.transcript[:AI_LOG_PREVIEW_CHARS]}")
        return context

    async def transcribe(self, video_path: Path) -> str:
        """Transcribe a video file.

        Args:
            video_path: Video to transcribe.

        Returns:
            Transcript text.

        Raises:
            TranscriptionError: If the file can't be opened or the request fails.
        """
        _logger.info(f"TRANSCRIBE | model={self.model} | file={video_path}")
        try:
            with open(video_path, "rb") as video_file:
                transcription = await self._client.audio.transcriptions.create(
                    file=video_file,
                    model=self.model,
                    response_format="text",
                )
        except OpenAIError as e:
            _logger.error(f"TRANSCRIBE FAILED | {type(e).__name__}: {e}")
            raise TranscriptionError(f"Transcription failed: {e}") from e
        except OSError as e:
            raise TranscriptionError(f"Could not read video file {video_path}: {e}") from e

        # response_format="text" yields a str; some compatible servers wrap it
        text = transcription if isinstance(transcription, str) else getattr(transcription, "text", None)
        if text is None:
            raise TranscriptionError(
                f"Unexpected transcription response type: {type(transcription).__name__}"
            )

        _logger.debug(f"TRANSCRIPT | {len(text)} chars | {text[:200]!r}")
        return text
