"""Tests for the thumbnail extraction stage."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from PIL import Image

from video_to_article.pipeline import (
    PipelineContext,
    PipelineState,
    ThumbnailError,
    ThumbnailExtractor,
    thumbnail_extractor,
)


class TestBuildCommand:
    """Tests for the ffmpeg command line."""

    def test_defaults(self):
        cmd = ThumbnailExtractor().build_command(Path("in.mp4"), Path("out/post.jpg"))

        assert cmd == [
            "ffmpeg", "-y",
            "-ss", "00:00:01",
            "-i", "in.mp4",
            "-frames:v", "1",
            "-vf", "scale=1280:720",
            "-q:v", "2",
            str(Path("out/post.jpg")),
        ]

    def test_custom_binary_and_size(self):
        extractor = ThumbnailExtractor(ffmpeg_binary="/opt/ffmpeg", width=640, height=360)
        cmd = extractor.build_command(Path("in.mp4"), Path("out.jpg"))

        assert cmd[0] == "/opt/ffmpeg"
        assert "scale=640:360" in cmd


class TestExtract:
    """Tests for ThumbnailExtractor.extract."""

    @pytest.mark.asyncio
    async def test_writes_verified_image(self, fake_ffmpeg, video_file, tmp_path):
        path = await ThumbnailExtractor().extract(video_file, tmp_path, "test-post.jpg")

        assert path == tmp_path / "test-post.jpg"
        with Image.open(path) as img:
            assert img.size == (1280, 720)
        fake_ffmpeg.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_ffmpeg_missing(self, monkeypatch, video_file, tmp_path):
        monkeypatch.setattr(
            thumbnail_extractor.asyncio,
            "create_subprocess_exec",
            AsyncMock(side_effect=FileNotFoundError("ffmpeg")),
        )

        with pytest.raises(ThumbnailError, match="ffmpeg not found") as exc_info:
            await ThumbnailExtractor().extract(video_file, tmp_path, "x.jpg")

        assert exc_info.value.stage == "thumbnail"

    @pytest.mark.asyncio
    async def test_nonzero_exit(self, monkeypatch, process_factory, video_file, tmp_path):
        process = process_factory(returncode=1, stderr=b"Invalid data found when processing input")
        monkeypatch.setattr(
            thumbnail_extractor.asyncio, "create_subprocess_exec", AsyncMock(return_value=process)
        )

        with pytest.raises(ThumbnailError) as exc_info:
            await ThumbnailExtractor().extract(video_file, tmp_path, "x.jpg")

        assert "returncode=1" in str(exc_info.value)
        assert "Invalid data found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_stderr_is_truncated(self, monkeypatch, process_factory, video_file, tmp_path):
        stderr = b"x" * 5000 + b"tail-marker"
        monkeypatch.setattr(
            thumbnail_extractor.asyncio,
            "create_subprocess_exec",
            AsyncMock(return_value=process_factory(returncode=1, stderr=stderr)),
        )

        with pytest.raises(ThumbnailError) as exc_info:
            await ThumbnailExtractor().extract(video_file, tmp_path, "x.jpg")

        message = str(exc_info.value)
        assert "tail-marker" in message
        assert len(message) < 1200

    @pytest.mark.asyncio
    async def test_no_frame_written(self, monkeypatch, process_factory, video_file, tmp_path):
        monkeypatch.setattr(
            thumbnail_extractor.asyncio,
            "create_subprocess_exec",
            AsyncMock(return_value=process_factory()),
        )

        with pytest.raises(ThumbnailError, match="No frame extracted"):
            await ThumbnailExtractor().extract(video_file, tmp_path, "x.jpg")

    @pytest.mark.asyncio
    async def test_stale_frame_from_earlier_run(self, monkeypatch, process_factory, video_file, tmp_path):
        stale = tmp_path / "x.jpg"
        Image.new("RGB", (1280, 720), "red").save(stale, "JPEG")
        monkeypatch.setattr(
            thumbnail_extractor.asyncio,
            "create_subprocess_exec",
            AsyncMock(return_value=process_factory()),
        )

        with pytest.raises(ThumbnailError, match="No frame extracted"):
            await ThumbnailExtractor().extract(video_file, tmp_path, "x.jpg")

        assert not stale.exists()

    @pytest.mark.asyncio
    async def test_previous_thumbnail_not_removable(self, fake_ffmpeg, video_file, tmp_path):
        (tmp_path / "x.jpg").mkdir()

        with pytest.raises(ThumbnailError, match="Could not remove previous thumbnail"):
            await ThumbnailExtractor().extract(video_file, tmp_path, "x.jpg")

        fake_ffmpeg.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unreadable_image(self, monkeypatch, process_factory, video_file, tmp_path):
        async def write_garbage(*cmd, **kwargs):
            Path(cmd[-1]).write_bytes(b"not a jpeg")
            return process_factory()

        monkeypatch.setattr(
            thumbnail_extractor.asyncio,
            "create_subprocess_exec",
            AsyncMock(side_effect=write_garbage),
        )

        with pytest.raises(ThumbnailError, match="not a valid image"):
            await ThumbnailExtractor().extract(video_file, tmp_path, "x.jpg")


class TestExecute:
    """Tests for ThumbnailExtractor.execute."""

    @pytest.mark.asyncio
    async def test_names_file_after_slug(self, fake_ffmpeg, video_file, config, tmp_path):
        context = PipelineContext(
            video_path=video_file, config=config, slug="test-post", bundle_dir=tmp_path
        )

        context = await ThumbnailExtractor().execute(context)

        assert context.thumbnail_path == tmp_path / "test-post.jpg"
        assert context.state == PipelineState.THUMBNAIL_EXTRACTED

    @pytest.mark.asyncio
    async def test_requires_output_directory(self, fake_ffmpeg, video_file, config):
        context = PipelineContext(video_path=video_file, config=config, slug="test-post")

        with pytest.raises(ThumbnailError, match="not prepared"):
            await ThumbnailExtractor().execute(context)

        fake_ffmpeg.assert_not_awaited()
