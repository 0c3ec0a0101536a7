# -*- coding: utf-8 -*-
"""Application controller bridging core state to Qt views."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from movieapp.core.catalog import get_movies
from movieapp.core.favorites import FavoritesStore
from movieapp.core.state import AppState
from movieapp.models.movie import Movie

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Central controller for application logic.
    Owns the catalog, the favorites store and the selected tab.
    """
    favorites_changed = pyqtSignal(list)
    tab_changed = pyqtSignal(int)

    def __init__(
        self,
        movies: list[Movie] | None = None,
        state: AppState | None = None,
        favorites: FavoritesStore | None = None,
    ) -> None:
        super().__init__()
        self.movies = list(movies) if movies is not None else get_movies()
        self.state = state if state is not None else AppState()
        self.favorites = favorites if favorites is not None else FavoritesStore()
        self._unsubscribe = self.favorites.subscribe(self.favorites_changed.emit)
        logger.info("Catalog loaded. Total movies: %d", len(self.movies))

    def toggle_favorite(self, movie: Movie) -> bool:
        return self.favorites.toggle_favorite(movie)

    def is_favorite(self, movie: Movie) -> bool:
        return self.favorites.is_favorite(movie)

    def favorite_movies(self) -> list[Movie]:
        return self.favorites.favorites()

    def select_tab(self, index: int) -> None:
        if index == self.state.current_tab:
            return
        self.state.select_tab(index)
        logger.debug("Tab selected: %s", self.state.current_tab_name())
        self.tab_changed.emit(index)

    def shutdown(self) -> None:
        self._unsubscribe()
