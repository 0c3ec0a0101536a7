# -*- coding: utf-8 -*-
"""CLI module entry point for `python -m movieapp.gui`."""

from __future__ import annotations

from movieapp.main import main


if __name__ == "__main__":
    raise SystemExit(main())
