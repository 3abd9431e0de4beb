"""
Logging configuration.

The TUI owns the terminal, so while it runs logs only go to a file.
Headless commands also get a console handler on stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_DIR = Path(".local/focus")
LOG_FILE_NAME = "focus.log"


def setup_logging(
    *,
    log_dir: str | Path | None = None,
    console: bool = True,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure the root logger with:
    - File handler: full logs for debugging
    - Console handler (optional): warnings and errors on stderr

    Call this once, before the first log call. Returns the log file path.
    """
    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        root.addHandler(ch)

    logging.captureWarnings(True)
    return log_file
