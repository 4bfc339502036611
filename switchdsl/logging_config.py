import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def resolve_level(level: object) -> int:
    """Map a level name such as 'info' or 'DEBUG' to its numeric value.

    Raises RuntimeError for anything that is not a known level name.
    """
    if not isinstance(level, str) or not level.strip():
        raise RuntimeError(f"Invalid log level {level!r} (expected e.g. DEBUG, INFO, WARNING).")
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise RuntimeError(f"Invalid log level {level!r} (expected e.g. DEBUG, INFO, WARNING).")
    return value


def _reset_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def _file_handler(log_dir: Path, formatter: logging.Formatter) -> Optional[logging.Handler]:
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d__%H_%M_%S")
        handler = logging.FileHandler(log_dir / f"switchdsl-log_{timestamp}.log", mode="w", encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).error("File logging disabled, cannot write under %s: %s", log_dir, exc)
        return None
    handler.setFormatter(formatter)
    return handler


def configure_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    """Send switchdsl logs to stdout and, when log_dir is given, to a timestamped file there.

    Handlers installed by an earlier call are closed and replaced.
    """
    numeric_level = resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    root = logging.getLogger()
    _reset_handlers(root)
    root.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if log_dir:
        file_handler = _file_handler(log_dir, formatter)
        if file_handler is not None:
            root.addHandler(file_handler)
            root.info("Logging to file: %s", file_handler.baseFilename)
