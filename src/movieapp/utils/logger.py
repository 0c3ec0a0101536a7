# -*- coding: utf-8 -*-
"""Logger factory and per-session root logging setup."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_session_logging(
    base_dir: str | Path,
    app_name: str,
    level: str = "DEBUG",
    session_file: bool = True,
) -> Path | None:
    """Configure root logging once per process.

    Adds a console handler and, when ``session_file`` is set, a timestamped
    log file under ``<base_dir>/logs``. Repeated calls return the first path.
    """
    root = logging.getLogger()
    if getattr(root, "_movieapp_logging_configured", False):
        return getattr(root, "_movieapp_session_log", None)

    numeric_level = getattr(logging, level.upper(), logging.DEBUG)
    root.setLevel(numeric_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(numeric_level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    session_log_path: Path | None = None
    if session_file:
        logs_dir = Path(base_dir) / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        safe_app_name = app_name.lower().replace(" ", "-")
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        session_log_path = logs_dir / f"{safe_app_name}-{timestamp}.log"
        try:
            file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        except OSError as e:
            root.error("Failed to establish session log file: %s", e)
            session_log_path = None
        else:
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    root.info("=== Application starting (level=%s) ===", logging.getLevelName(numeric_level))
    if session_log_path is not None:
        root.info("Session log file established: %s", session_log_path)
    root.info("System info: OS=%s", os.name)

    root._movieapp_logging_configured = True  # type: ignore[attr-defined]
    root._movieapp_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
