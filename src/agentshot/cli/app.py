"""Typer CLI application."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from agentshot.config import Settings

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    SVG = "svg"
    TEXT = "text"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _pick_format(output: str | None, requested: OutputFormat | None) -> OutputFormat:
    if requested is not None:
        return requested
    if output and output != "-" and Path(output).suffix.lower() == ".txt":
        return OutputFormat.TEXT
    return OutputFormat.SVG


def create_app(settings: Settings | None = None) -> typer.Typer:
    """Create and configure the CLI application."""
    settings = settings or Settings.from_env()

    app = typer.Typer(
        name="agentshot",
        help="Capture terminal output as SVG screenshots.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log capture details to stderr")] = False,
    ) -> None:
        """Capture terminal output as SVG screenshots."""
        _configure_logging(verbose)

    @app.command()
    def tui(
        ctx: typer.Context,
        command: Annotated[Optional[str], typer.Argument(help="Shell command to run in a pty (reads stdin if omitted)")] = None,
        output: Annotated[Optional[str], typer.Option("--output", "-o", help="Output file, '-' for stdout (default: new file in the screenshot directory)")] = None,
        cols: Annotated[int, typer.Option("--cols", min=1, help="Terminal columns")] = settings.cols,
        rows: Annotated[int, typer.Option("--rows", min=1, help="Terminal rows")] = settings.rows,
        delay: Annotated[float, typer.Option("--delay", min=0.0, help="Seconds to keep reading after the command exits")] = settings.delay,
        timeout: Annotated[float, typer.Option("--timeout", min=0.0, help="Seconds before a running command is killed")] = settings.timeout,
        font_size: Annotated[int, typer.Option("--font-size", min=1, help="Font size in pixels")] = settings.font_size,
        font: Annotated[str, typer.Option("--font", help="Font family")] = settings.font_family,
        format: Annotated[Optional[OutputFormat], typer.Option("--format", "-f", help="Output format (default: from the output extension)")] = None,
    ) -> None:
        """Capture a command's terminal output (or piped input) as SVG.

        Examples:

            agentshot tui "ls -la --color=always"

            agentshot tui -o - "git status"

            echo "Hello" | agentshot tui -o hello.svg
        """
        from agentshot.core.screen import Screen
        from agentshot.io.capture import CaptureError, read_stream, run_in_pty
        from agentshot.io.writer import default_output_path, write_output

        if command:
            try:
                data = run_in_pty(command, cols=cols, rows=rows, delay=delay, timeout=timeout)
            except CaptureError as exc:
                console.print(f"[red]Failed to run command: {escape(str(exc))}[/]")
                raise typer.Exit(1)
        elif not sys.stdin.isatty():
            try:
                data = read_stream(sys.stdin.buffer)
            except CaptureError as exc:
                console.print(f"[red]Failed to read stdin: {escape(str(exc))}[/]")
                raise typer.Exit(1)
        else:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(1)

        screen = Screen(cols, rows)
        screen.feed(data)

        fmt = _pick_format(output, format)
        if fmt == OutputFormat.TEXT:
            content = screen.to_text() + "\n"
        else:
            content = screen.to_svg(font_size=font_size, font_family=font)

        if output == "-":
            typer.echo(content, nl=False)
            return

        suffix = ".txt" if fmt == OutputFormat.TEXT else ".svg"
        try:
            path = Path(output) if output else default_output_path(settings.screenshot_dir, suffix)
            write_output(content, path)
        except OSError as exc:
            console.print(f"[red]Failed to save screenshot: {escape(str(exc))}[/]")
            raise typer.Exit(1)

        logger.debug("Wrote %s", path)
        typer.echo(str(path))

    return app
