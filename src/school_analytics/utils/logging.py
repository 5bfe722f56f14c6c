"""Loguru setup for demo runs.

Every record carries the run id, so console lines, the run's log file and
the exported report directory can be matched up.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[run_id]}</magenta> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[run_id]} | {name}:{function}:{line} - {message}"


def log_file_path(log_dir: Path, run_id: Optional[str] = None) -> Path:
    """Log file used for a run (shared file when no run id is given)."""
    name = f"run_{run_id}" if run_id else "school_analytics"
    return Path(log_dir) / f"{name}.log"


def setup_logger(
    log_level: str = "INFO",
    log_to_file: bool = True,
    log_dir: Path = Path("logs"),
    run_id: Optional[str] = None,
    serialize: bool = False,
) -> Optional[Path]:
    """Replace loguru's sinks with a console sink and an optional run log file.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_to_file: Whether to write logs to file.
        log_dir: Directory for log files.
        run_id: Run identifier, bound to every record and used in the file name.
        serialize: Write the file sink as JSON lines.

    Returns:
        Path of the log file, or None when file logging is off.
    """
    logger.remove()
    logger.configure(extra={"run_id": run_id or "-"})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=log_level, colorize=True)

    if not log_to_file:
        return None

    log_path = log_file_path(log_dir, run_id)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path,
        format=FILE_FORMAT,
        level=log_level,
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        serialize=serialize,
    )
    return log_path
