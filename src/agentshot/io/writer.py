"""Save rendered screenshots."""

import uuid
from pathlib import Path


def default_output_path(directory: str | Path, suffix: str = ".svg") -> Path:
    """
    Return a fresh ``<directory>/<uuid4><suffix>`` path.

    The directory is created if needed.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"{uuid.uuid4()}{suffix}"


def write_output(content: str, path: str | Path) -> Path:
    """Write rendered content to disk as UTF-8 and return the path."""
    path = Path(path)
    path.write_text(content, encoding="utf-8")
    return path
