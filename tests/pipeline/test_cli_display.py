"""Tests for PipelineDisplay."""

import io
import logging

from rich.console import Console

from video_to_article.pipeline import (
    ArtifactPaths,
    PipelineDisplay,
    PipelineState,
    ThumbnailError,
)


def make_display(tmp_path, verbose=False):
    buffer = io.StringIO()
    display = PipelineDisplay(
        console=Console(file=buffer, width=200),
        verbose=verbose,
        log_dir=tmp_path / "logs",
    )
    return display, buffer


def read_log(display, tmp_path):
    for handler in display.log.handlers:
        handler.flush()
    return (tmp_path / "logs" / "article_pipeline.log").read_text(encoding="utf-8")


class TestPipelineDisplay:
    """Tests for console and file output."""

    def test_brackets_are_printed_verbatim(self, tmp_path):
        display, buffer = make_display(tmp_path)

        display.error("[thumbnail] FFmpeg error [x264 @ 0x1]")

        assert "[thumbnail] FFmpeg error [x264 @ 0x1]" in buffer.getvalue()

    def test_detail_hidden_unless_verbose(self, tmp_path):
        quiet, quiet_buffer = make_display(tmp_path)
        quiet.detail("request sent", "Transcriber")
        assert "request sent" not in quiet_buffer.getvalue()
        assert "Transcriber: request sent" in read_log(quiet, tmp_path)

        loud, loud_buffer = make_display(tmp_path, verbose=True)
        loud.detail("request sent", "Transcriber")
        assert "Transcriber: request sent" in loud_buffer.getvalue()

    def test_state_changes(self, tmp_path):
        display, buffer = make_display(tmp_path, verbose=True)

        display.state_changed(PipelineState.TRANSCRIBED)

        assert "State -> transcribed" in buffer.getvalue()

    def test_steps_are_numbered(self, tmp_path):
        display, buffer = make_display(tmp_path)

        display.start_pipeline("talk.mp4", total_steps=5)
        display.start_step("Transcriber", "Transcribing video audio to text")
        display.start_step("ContentGenerator", "Writing article")

        output = buffer.getvalue()
        assert "Step 1/5: Transcriber" in output
        assert "Step 2/5: ContentGenerator" in output


class TestOutcome:
    """Tests for the closing panels."""

    def test_completed_lists_artifacts(self, tmp_path):
        display, buffer = make_display(tmp_path)
        bundle = tmp_path / "output" / "test-post"
        artifacts = ArtifactPaths(
            transcript_path=bundle / "transcript.txt",
            article_path=bundle / "blog-post.mdx",
            metadata_path=bundle / "blogPost.ts",
            thumbnail_path=bundle / "test-post.jpg",
        )

        display.start_pipeline("talk.mp4", total_steps=5)
        display.pipeline_completed(artifacts)

        output = buffer.getvalue()
        assert "Article Generated Successfully" in output
        for name in ("transcript.txt", "blog-post.mdx", "blogPost.ts", "test-post.jpg"):
            assert name in output
        log = read_log(display, tmp_path)
        assert "=== START: talk.mp4 ===" in log
        assert "=== COMPLETE" in log

    def test_failed_names_stage(self, tmp_path):
        display, buffer = make_display(tmp_path)

        display.start_pipeline("talk.mp4", total_steps=5)
        display.pipeline_failed(ThumbnailError("No frame extracted"), PipelineState.DIRECTORY_READY)

        output = buffer.getvalue()
        assert "[thumbnail] No frame extracted" in output
        assert "Pipeline Failed" in output
        assert "Stage: thumbnail" in output
        assert "Last state: directory_ready" in output
        assert "=== FAILED at thumbnail after directory_ready" in read_log(display, tmp_path)

    def test_no_log_file(self, tmp_path):
        display = PipelineDisplay(console=Console(file=io.StringIO()), log_dir=None)

        display.warning("disk almost full")

        assert all(isinstance(h, logging.NullHandler) for h in display.log.handlers)
