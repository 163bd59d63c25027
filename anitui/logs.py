"""Logging setup.

The terminal belongs to the UI while the app runs, so log records never go
to stdout/stderr. They are dropped unless debug logging is enabled, in which
case they are appended to a file in the per-user log directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "anitui"
LOG_FILENAME = "anitui.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

package_logger = logging.getLogger(APP_NAME)
package_logger.addHandler(logging.NullHandler())


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(enabled: bool, log_path: Path | None = None) -> Path | None:
    """Attach a debug file handler to the package logger when ``enabled``.

    Returns the log file path in use, or ``None`` when logging stays off or
    the log directory cannot be created.
    """
    if not enabled:
        return None
    path = log_path if log_path is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return path
