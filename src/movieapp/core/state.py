# -*- coding: utf-8 -*-
"""Application state container."""

from __future__ import annotations

from dataclasses import dataclass

from movieapp.constants import TABS


@dataclass
class AppState:
    """View-level state handed to the GUI instead of module globals."""

    tabs: tuple[str, ...] = TABS
    current_tab: int = 0

    def select_tab(self, index: int) -> int:
        if index < 0 or index >= len(self.tabs):
            raise IndexError(f"Invalid tab index: {index}")
        self.current_tab = index
        return self.current_tab

    def current_tab_name(self) -> str:
        return self.tabs[self.current_tab]
