# src/seybio_task_manager/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .config import Settings, get_settings

LOG_FILE_NAME = "seybio-tasks.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console readable:
    - allow all seybio_task_manager logs
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "seybio_task_manager" or name.startswith("seybio_task_manager."):
            return True

        # Python warnings captured into logging.
        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    settings: Settings | None = None,
    log_dir: str | Path | None = None,
    console_level: int | None = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: filtered, level from settings.log_level
    - File handler: full logs, only when a log dir is known

    Explicit arguments win over settings. Call once, early; calling again
    replaces the handlers rather than stacking them.
    """
    if settings is None:
        settings = get_settings()

    if console_level is None:
        console_level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    if log_dir is None:
        log_dir = settings.log_dir

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

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        fh = logging.FileHandler(str(log_dir / LOG_FILE_NAME), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    logging.getLogger(__name__).debug(
        "Logging ready app=%s console_level=%s log_dir=%s",
        settings.app_name,
        logging.getLevelName(console_level),
        log_dir,
    )
