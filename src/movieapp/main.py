# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from movieapp.config import ConfigError, load_config
from movieapp.constants import APP_NAME
from movieapp.gui.controller import AppController
from movieapp.gui.main_window import MainWindow
from movieapp.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log fatal errors and keep a copy of the last crash on disk."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    crash_path.parent.mkdir(parents=True, exist_ok=True)
    crash_path.write_text(error_msg, encoding="utf-8")

    if QApplication.instance():
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def split_settings_arg(argv: list[str]) -> tuple[Path | None, list[str]]:
    """Pull `--settings PATH` (or `--settings=PATH`) out of argv.

    Everything else, Qt flags such as `-platform offscreen` included, is left
    for QApplication.
    """
    settings_path: Path | None = None
    remaining: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--settings":
            value = next(args, None)
            if value is None:
                raise ConfigError("--settings requires a path")
            settings_path = Path(value)
        elif arg.startswith("--settings="):
            settings_path = Path(arg.split("=", 1)[1])
        else:
            remaining.append(arg)
    return settings_path, remaining


def main(argv: list[str] | None = None) -> int:
    """Start the GUI application."""
    settings_path, qt_argv = split_settings_arg(list(sys.argv if argv is None else argv))
    settings = load_config(settings_path)

    logging_cfg = settings.get("logging", {})
    session_log_path = setup_session_logging(
        Path.cwd(),
        APP_NAME,
        level=str(logging_cfg.get("level", "DEBUG")),
        session_file=bool(logging_cfg.get("session_file", True)),
    )
    sys.excepthook = global_exception_handler
    logger = logging.getLogger(__name__)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    app = QApplication(qt_argv)
    window = MainWindow(settings=settings, controller=AppController())
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
