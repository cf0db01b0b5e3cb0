from __future__ import annotations

import logging
from pathlib import Path

DEFAULT_LOG_PATH = "/var/log/oci8-installer.log"

_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _ConsoleFormatter(logging.Formatter):
    """Bare messages for the operator; level prefix only when something is wrong."""

    def format(self, record: logging.LogRecord) -> str:
        msg = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {msg}"
        return msg


def _open_log_file(log_path: str) -> tuple[logging.Handler, str]:
    try:
        Path(log_path).parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path), log_path
    except OSError:
        fallback = str(Path.cwd() / "oci8-installer.log")
        return logging.FileHandler(fallback), fallback


def configure_logging(log_path: str = DEFAULT_LOG_PATH, level: int = logging.INFO) -> str:
    """Configure logging.

    Every command and decision goes to the log file (falling back to
    ./oci8-installer.log when ``log_path`` is not writable). The console
    shows the same records without timestamps. Subprocess output is logged at
    DEBUG and therefore only reaches the file when ``level`` is DEBUG.

    Returns the actual file path being used.
    """

    root = logging.getLogger()
    root.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(root, "_oci8_installer_log_path", None):
        return getattr(root, "_oci8_installer_log_path")

    file_handler, chosen_path = _open_log_file(log_path)
    file_handler.setFormatter(logging.Formatter(fmt=_FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    root.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setFormatter(_ConsoleFormatter())
    root.addHandler(console)

    setattr(root, "_oci8_installer_log_path", chosen_path)

    logging.getLogger(__name__).debug("Logging initialized (requested=%s, actual=%s)", log_path, chosen_path)
    return chosen_path
