"""Default settings, overridable from the environment."""

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "AGENTSHOT_"


@dataclass(frozen=True)
class Settings:
    """Capture and render defaults used by the CLI."""
    cols: int = 120
    rows: int = 40
    delay: float = 0.5      # seconds to wait after the command for TUI apps
    timeout: float = 10.0   # seconds before a running command is killed
    font_size: int = 14
    font_family: str = "monospace"
    screenshot_dir: Path = field(default_factory=lambda: Path("/tmp/screenshots"))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """
        Build settings from ``AGENTSHOT_*`` environment variables.

        Recognized: ``AGENTSHOT_SCREENSHOT_DIR``, ``AGENTSHOT_COLS``,
        ``AGENTSHOT_ROWS``, ``AGENTSHOT_FONT_SIZE`` and ``AGENTSHOT_FONT``.
        Values that are not positive integers are ignored.
        """
        env = os.environ if environ is None else environ
        settings = cls()
        overrides: dict[str, object] = {}

        if directory := env.get(f"{ENV_PREFIX}SCREENSHOT_DIR"):
            overrides["screenshot_dir"] = Path(directory).expanduser()
        if font := env.get(f"{ENV_PREFIX}FONT"):
            overrides["font_family"] = font

        for name in ("cols", "rows", "font_size"):
            key = f"{ENV_PREFIX}{name.upper()}"
            raw = env.get(key)
            if raw is None:
                continue
            value = _positive_int(raw)
            if value is None:
                logger.warning("Ignoring %s=%r: expected a positive integer", key, raw)
                continue
            overrides[name] = value

        return replace(settings, **overrides)


def _positive_int(raw: str) -> int | None:
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None
