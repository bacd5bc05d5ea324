"""CLI commands - thin wrappers around the pipeline."""

from __future__ import annotations

import asyncio
import shutil
import tempfile
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..config import load_config
from ..pipeline import ArtifactPaths, PipelineDisplay, PipelineError, process_video
from .console import console, print_error, print_success


def convert(
    video_path: Path = typer.Argument(..., help="Video file to convert"),
    output_dir: Optional[Path] = typer.Argument(
        None, help="Output root (default: OUTPUT_DIR or ./output)"
    ),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Article author"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """Convert a video into an article bundle.

    Writes <output>/<slug>/ with transcript.txt, blog-post.mdx, blogPost.ts
    and <slug>.jpg.

    Examples:
        video-to-article convert ./videos/my-video.mp4
        video-to-article convert ./videos/my-video.mp4 ./custom-output
    """
    config = load_config().with_overrides(output_dir=output_dir, author=author)
    display = PipelineDisplay(console=console, verbose=verbose)

    try:
        artifacts = asyncio.run(process_video(video_path, config, display=display))
    except PipelineError as e:
        print_error(f"Processing failed: {e}", {"stage": e.stage})
        raise typer.Exit(code=1)

    show_artifacts(artifacts)


def show_artifacts(artifacts: ArtifactPaths) -> None:
    """Print the generated file paths."""
    table = Table(title="Generated files", show_header=False, border_style="dim")
    table.add_row("Transcript", str(artifacts.transcript_path))
    table.add_row("Article", str(artifacts.article_path))
    table.add_row("Metadata", str(artifacts.metadata_path))
    table.add_row("Thumbnail", str(artifacts.thumbnail_path))
    console.print(table)


def doctor() -> None:
    """Check that the environment is ready to convert videos."""
    config = load_config()
    checks: list[tuple[str, bool, bool, str]] = []  # (name, passed, required, detail)

    checks.append((
        ".env file",
        Path(".env").exists(),
        False,
        "found" if Path(".env").exists() else "not found (environment variables only)",
    ))
    checks.append((
        "OPENAI_API_KEY",
        config.has_credentials,
        True,
        "set" if config.has_credentials else "missing",
    ))

    ffmpeg_path = shutil.which(config.ffmpeg_binary)
    checks.append((
        "FFmpeg",
        ffmpeg_path is not None,
        True,
        ffmpeg_path or f"'{config.ffmpeg_binary}' not found on PATH",
    ))

    writable, detail = _check_writable(config.output_dir)
    checks.append(("Output directory", writable, True, detail))

    table = Table(title="Setup check", border_style="dim")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details", style="dim")
    for name, passed, required, info in checks:
        if passed:
            status = "[green]OK[/green]"
        elif required:
            status = "[red]FAIL[/red]"
        else:
            status = "[yellow]WARN[/yellow]"
        table.add_row(name, status, info)
    console.print(table)

    failed = [name for name, passed, required, _ in checks if required and not passed]
    if failed:
        print_error("Setup incomplete", {"failed": ", ".join(failed)})
        raise typer.Exit(code=1)
    print_success("All checks passed. Your setup is ready.")


def _check_writable(directory: Path) -> tuple[bool, str]:
    """Check that files can be created under directory."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=directory):
            pass
    except OSError as e:
        return False, f"{directory}: {e}"
    return True, str(directory.resolve())
