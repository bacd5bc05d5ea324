"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ..constants import LOG_DIR

app = typer.Typer(
    name="video-to-article",
    help="Turn a video into a blog article: transcript, MDX post, metadata and thumbnail",
    add_completion=False,
)


def register_commands() -> None:
    """Register all commands."""
    from .commands import convert, doctor

    app.command(name="convert")(convert)
    app.command(name="doctor")(doctor)


def setup_logging(log_dir: Path = LOG_DIR) -> None:
    """Configure logging for CLI.

    - Suppresses console output from HTTP and SDK libraries
    - Sends full AI request/response logs to logs/ai_calls.log
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    for logger_name in ["httpx", "httpcore", "openai", "asyncio"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    ai_calls_logger = logging.getLogger("ai_calls")
    ai_calls_logger.setLevel(logging.DEBUG)
    ai_calls_logger.propagate = False
    ai_calls_logger.handlers = []
    ai_file_handler = logging.FileHandler(log_dir / "ai_calls.log", encoding="utf-8")
    ai_file_handler.setLevel(logging.DEBUG)
    ai_file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    )
    ai_calls_logger.addHandler(ai_file_handler)

    # Orchestration messages reach the console through PipelineDisplay
    pipeline_logger = logging.getLogger("article.pipeline")
    pipeline_logger.setLevel(logging.DEBUG)
    pipeline_logger.propagate = False
    pipeline_logger.handlers = []
    pipeline_handler = logging.FileHandler(log_dir / "pipeline_debug.log", encoding="utf-8")
    pipeline_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )
    pipeline_logger.addHandler(pipeline_handler)


register_commands()


def main() -> None:
    """CLI entry point."""
    setup_logging()
    app()
