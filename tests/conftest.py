"""Shared test fixtures.

The AI client and ffmpeg are replaced with doubles so the whole pipeline
runs offline: the fake ffmpeg writes a real JPEG with Pillow, which keeps
the image verification path exercised.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from video_to_article.config import PipelineConfig
from video_to_article.pipeline import thumbnail_extractor

ENV_VARS = [
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "BLOG_AUTHOR",
    "OUTPUT_DIR",
    "TRANSCRIPTION_MODEL",
    "GENERATION_MODEL",
    "REQUEST_TIMEOUT",
    "FFMPEG_BINARY",
    "IMAGE_URL_PREFIX",
    "VIDEO_EMBED_ID",
]

SAMPLE_CONTENT = {
    "title": "Test Post",
    "description": "A short test article",
    "content": "## Intro\n\nbody text",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output root for article bundles (not created)."""
    return tmp_path / "output"


@pytest.fixture
def config(output_root: Path) -> PipelineConfig:
    """Configuration with a fake credential and a temporary output root."""
    return PipelineConfig(_env_file=None, openai_api_key="test-key", output_dir=output_root)


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    """A stand-in video file. Its bytes are never decoded."""
    path = tmp_path / "my-talk.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42fake-video")
    return path


def make_completion(payload) -> MagicMock:
    """Build a chat completion double whose first choice holds payload."""
    content = payload if isinstance(payload, str) else json.dumps(payload)
    completion = MagicMock()
    completion.choices = [MagicMock(message=MagicMock(content=content))]
    return completion


@pytest.fixture
def mock_client() -> MagicMock:
    """AsyncOpenAI double answering transcription and chat requests."""
    client = MagicMock()
    client.audio.transcriptions.create = AsyncMock(return_value="hello world")
    client.chat.completions.create = AsyncMock(return_value=make_completion(SAMPLE_CONTENT))
    return client


def make_process(returncode: int = 0, stderr: bytes = b"") -> MagicMock:
    """Subprocess double for asyncio.create_subprocess_exec."""
    process = MagicMock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(b"", stderr))
    return process


@pytest.fixture
def fake_ffmpeg(monkeypatch) -> AsyncMock:
    """Replace ffmpeg with a double that writes a 1280x720 JPEG to the last argument."""

    async def run(*cmd, **kwargs):
        Image.new("RGB", (1280, 720), "navy").save(cmd[-1], "JPEG")
        return make_process()

    mock_exec = AsyncMock(side_effect=run)
    monkeypatch.setattr(thumbnail_extractor.asyncio, "create_subprocess_exec", mock_exec)
    return mock_exec


@pytest.fixture
def completion_factory():
    """Factory for chat completion doubles."""
    return make_completion


@pytest.fixture
def process_factory():
    """Factory for ffmpeg process doubles."""
    return make_process
