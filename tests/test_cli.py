"""Tests for the command-line interface and output capture."""

import logging
import time
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.logging import RichHandler
from typer.testing import CliRunner

from agentshot.cli.app import create_app
from agentshot.config import Settings
from agentshot.io.capture import CaptureError, run_in_pty
from agentshot.io.writer import default_output_path, write_output

runner = CliRunner()


@pytest.fixture
def app(tmp_path: Path):
    return create_app(Settings(screenshot_dir=tmp_path / "shots"))


class TestPipedInput:

    def test_svg_to_stdout(self, app) -> None:
        result = runner.invoke(app, ["tui", "-o", "-"], input="piped content here")
        assert result.exit_code == 0
        assert result.stdout.startswith("<svg")
        assert "piped content here" in result.stdout

    def test_default_output_path(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["tui"], input="hello")
        assert result.exit_code == 0
        path = Path(result.stdout.strip())
        assert path.parent == tmp_path / "shots"
        assert path.suffix == ".svg"
        assert "hello" in path.read_text(encoding="utf-8")

    def test_explicit_output_file(self, app, tmp_path: Path) -> None:
        out = tmp_path / "out.svg"
        result = runner.invoke(app, ["tui", "-o", str(out)], input="\x1b[31mred\x1b[0m")
        assert result.exit_code == 0
        assert result.stdout.strip() == str(out)
        assert 'fill="#e06c75"' in out.read_text(encoding="utf-8")

    def test_text_format_from_extension(self, app, tmp_path: Path) -> None:
        out = tmp_path / "out.txt"
        result = runner.invoke(app, ["tui", "-o", str(out)], input="\x1b[31mred\x1b[0m\n")
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8") == "red\n"

    def test_text_format_option(self, app) -> None:
        result = runner.invoke(app, ["tui", "-o", "-", "--format", "text"], input="a\tb")
        assert result.exit_code == 0
        assert result.stdout == "a       b\n"

    def test_dimensions_and_font(self, app) -> None:
        result = runner.invoke(
            app,
            ["tui", "-o", "-", "--cols", "10", "--rows", "2", "--font-size", "14", "--font", 'Mono"><x'],
            input="x",
        )
        assert result.exit_code == 0
        assert 'width="124" height="73"' in result.stdout
        assert 'font-family="Monox"' in result.stdout

    def test_rejects_zero_columns(self, app) -> None:
        result = runner.invoke(app, ["tui", "-o", "-", "--cols", "0"], input="x")
        assert result.exit_code != 0

    def test_unwritable_output(self, app, tmp_path: Path) -> None:
        out = tmp_path / "missing" / "out.svg"
        result = runner.invoke(app, ["tui", "-o", str(out)], input="x")
        assert result.exit_code == 1
        assert not out.exists()

    def test_no_input_shows_usage(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        tty = SimpleNamespace(isatty=lambda: True)
        monkeypatch.setattr("agentshot.cli.app.sys", SimpleNamespace(stdin=tty))
        result = runner.invoke(app, ["tui"])
        assert result.exit_code == 1


class TestLogging:

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_verbose_replaces_existing_handlers(self, app) -> None:
        root = logging.getLogger()
        root.addHandler(logging.NullHandler())

        result = runner.invoke(app, ["-v", "tui", "-o", "-"], input="hi")
        assert result.exit_code == 0
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

    def test_quiet_after_verbose(self, app) -> None:
        runner.invoke(app, ["-v", "tui", "-o", "-"], input="hi")
        result = runner.invoke(app, ["tui", "-o", "-"], input="hi")
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.WARNING


class TestWriter:

    def test_default_output_path_creates_directory(self, tmp_path: Path) -> None:
        first = default_output_path(tmp_path / "a" / "b")
        second = default_output_path(tmp_path / "a" / "b")
        assert first.parent.is_dir()
        assert first != second
        assert first.suffix == ".svg"

    def test_write_output(self, tmp_path: Path) -> None:
        path = write_output("<svg/>\n", tmp_path / "x.svg")
        assert path.read_text(encoding="utf-8") == "<svg/>\n"


@pytest.mark.pty
class TestCommandCapture:

    def test_command_to_stdout(self, app) -> None:
        result = runner.invoke(app, ["tui", "-o", "-", "--delay", "0", "echo stdout_test"])
        assert result.exit_code == 0
        assert "<svg" in result.stdout
        assert "stdout_test" in result.stdout

    def test_color_output(self, app) -> None:
        result = runner.invoke(
            app, ["tui", "-o", "-", "--delay", "0", "printf '\\033[31mred\\033[0m \\033[32mgreen\\033[0m'"]
        )
        assert result.exit_code == 0
        assert 'fill="#e06c75"' in result.stdout
        assert 'fill="#98c379"' in result.stdout

    def test_terminal_size(self) -> None:
        data = run_in_pty("stty size; echo $TERM", cols=33, rows=7, delay=0)
        assert b"7 33" in data
        assert b"xterm-256color" in data

    def test_long_running_command_is_killed(self) -> None:
        started = time.monotonic()
        data = run_in_pty("echo started; sleep 30", delay=0, timeout=0.5)
        assert b"started" in data
        assert time.monotonic() - started < 10

    def test_start_failure(self, app, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(*args, **kwargs):
            raise OSError("no bash")

        monkeypatch.setattr("agentshot.io.capture.subprocess.Popen", fail)
        with pytest.raises(CaptureError):
            run_in_pty("true", delay=0)
        result = runner.invoke(app, ["tui", "-o", "-", "true"])
        assert result.exit_code == 1
