"""Getting output in and screenshots out."""

from agentshot.io.capture import CaptureError, read_stream, run_in_pty
from agentshot.io.writer import default_output_path, write_output

__all__ = ["CaptureError", "read_stream", "run_in_pty", "default_output_path", "write_output"]
