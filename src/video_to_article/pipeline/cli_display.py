"""Console and log-file reporting for one article pipeline run.

The console gets one line per milestone plus a closing panel that names the
written files or the failed stage. Everything, including verbose-only detail
lines, also goes to logs/article_pipeline.log.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from ..constants import LOG_DIR

if TYPE_CHECKING:
    from .base import ArtifactPaths, PipelineError, PipelineState

LOG_FILENAME = "article_pipeline.log"

# kind -> (marker, style, file log level)
_KINDS = {
    "detail": ("[.]", "dim", logging.DEBUG),
    "info": ("", "white", logging.INFO),
    "success": ("[OK]", "green", logging.INFO),
    "warning": ("[!]", "yellow", logging.WARNING),
    "error": ("[X]", "red", logging.ERROR),
}


def _run_log(log_dir: Optional[Path]) -> logging.Logger:
    """Logger writing to log_dir/article_pipeline.log (discarding when None)."""
    run_logger = logging.getLogger("article.pipeline.file")
    run_logger.setLevel(logging.DEBUG)
    run_logger.propagate = False
    for handler in list(run_logger.handlers):
        run_logger.removeHandler(handler)
        handler.close()

    if log_dir is None:
        run_logger.addHandler(logging.NullHandler())
    else:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(Path(log_dir) / LOG_FILENAME, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(message)s", "%H:%M:%S"))
        run_logger.addHandler(handler)
    return run_logger


class PipelineDisplay:
    """Reports the progress of one video-to-article run.

    Stages call info/detail/success/warning with their step name; the
    orchestrator reports steps, state changes and the outcome.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbose: bool = False,
        log_dir: Optional[Path] = LOG_DIR,
    ):
        """Initialize the display.

        Args:
            console: Rich console; a new one when omitted.
            verbose: Also print detail lines and state changes to the console.
            log_dir: Folder for article_pipeline.log; None disables the file.
        """
        self.console = console or Console()
        self.verbose = verbose
        self.log = _run_log(log_dir)
        self._started: Optional[datetime] = None
        self._step = 0
        self._total_steps = 0

    def _emit(self, kind: str, message: str, step_name: Optional[str] = None) -> None:
        marker, style, level = _KINDS[kind]
        prefix = f"{step_name}: " if step_name else ""
        self.log.log(level, prefix + message)

        if kind == "detail" and not self.verbose:
            return
        line = Text(datetime.now().strftime("%H:%M:%S") + " ", style="dim")
        if marker:
            line.append(marker + " ", style=style)
        if prefix:
            line.append(prefix, style="bold cyan")
        # Plain text: titles, paths and errors may contain brackets
        line.append(message, style=style)
        self.console.print(line)

    def info(self, message: str, step_name: Optional[str] = None) -> None:
        self._emit("info", message, step_name)

    def detail(self, message: str, step_name: Optional[str] = None) -> None:
        """Verbose-only on the console; always in the log file."""
        self._emit("detail", message, step_name)

    def success(self, message: str, step_name: Optional[str] = None) -> None:
        self._emit("success", message, step_name)

    def warning(self, message: str, step_name: Optional[str] = None) -> None:
        self._emit("warning", message, step_name)

    def error(self, message: str, step_name: Optional[str] = None) -> None:
        self._emit("error", message, step_name)

    def start_pipeline(self, video_name: str, total_steps: int) -> None:
        self._started = datetime.now()
        self._step = 0
        self._total_steps = total_steps
        self.console.print()
        self.console.print(Panel(
            f"[bold cyan]Video to Article[/bold cyan]\n"
            f"Video: [yellow]{escape(video_name)}[/yellow]",
            border_style="cyan",
        ))
        self.log.info(f"=== START: {video_name} ===")

    def start_step(self, step_name: str, description: str) -> None:
        self._step += 1
        self.console.print()
        self.console.print(
            f"[bold]Step {self._step}/{self._total_steps}:[/bold] "
            f"[bold cyan]{escape(step_name)}[/bold cyan] [dim]- {escape(description)}[/dim]"
        )
        self.log.info(f"--- Step {self._step}/{self._total_steps}: {step_name} ---")

    def state_changed(self, state: "PipelineState") -> None:
        """Record a run state transition."""
        self.detail(f"State -> {state.value}")

    def _elapsed(self) -> str:
        if self._started is None:
            return "unknown"
        return str(datetime.now() - self._started).split(".")[0]

    def pipeline_completed(self, artifacts: "ArtifactPaths") -> None:
        """Closing panel listing the bundle folder and its four files."""
        files = [
            artifacts.transcript_path,
            artifacts.article_path,
            artifacts.metadata_path,
            artifacts.thumbnail_path,
        ]
        listing = "\n".join(f"  {escape(path.name)}" for path in files)
        self.console.print()
        self.console.print(Panel(
            f"[bold green]Article Generated Successfully![/bold green]\n\n"
            f"Output: [cyan]{escape(str(artifacts.bundle_dir))}[/cyan]\n{listing}\n\n"
            f"Duration: {self._elapsed()}",
            border_style="green",
            title="[green]Complete[/green]",
        ))
        self.log.info(f"=== COMPLETE in {self._elapsed()}: {artifacts.bundle_dir} ===")

    def pipeline_failed(self, error: "PipelineError", last_state: "PipelineState") -> None:
        """Closing panel naming the failed stage and the last state reached."""
        self.error(str(error))
        self.console.print()
        self.console.print(Panel(
            f"[bold red]Pipeline Failed[/bold red]\n\n"
            f"Stage: [yellow]{escape(error.stage)}[/yellow]\n"
            f"Last state: {last_state.value}\n"
            f"Duration: {self._elapsed()}\n"
            f"[dim]Details in logs/{LOG_FILENAME}[/dim]",
            border_style="red",
            title="[red]Error[/red]",
        ))
        self.log.error(f"=== FAILED at {error.stage} after {last_state.value} ({self._elapsed()}) ===")
