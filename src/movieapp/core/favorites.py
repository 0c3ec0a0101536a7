# -*- coding: utf-8 -*-
"""In-memory favorites state holder."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from movieapp.models.movie import Movie

logger = logging.getLogger(__name__)


FavoritesListener = Callable[[list[Movie]], None]


class FavoritesStore:
    """Ordered set of favorited movies with subscribe/notify.

    Lives for the process lifetime and starts empty on every launch.
    """

    def __init__(self) -> None:
        self._movies: list[Movie] = []
        self._listeners: list[FavoritesListener] = []

    def toggle_favorite(self, movie: Movie) -> bool:
        """Add ``movie`` if absent, remove it if present. Returns new membership."""
        if movie in self._movies:
            self._movies.remove(movie)
            added = False
        else:
            self._movies.append(movie)
            added = True
        logger.debug("Favorite %s: %s (total %d)", "added" if added else "removed", movie.title, len(self._movies))
        self._notify()
        return added

    def is_favorite(self, movie: Movie) -> bool:
        return movie in self._movies

    def favorites(self) -> list[Movie]:
        """Return a snapshot in insertion order."""
        return list(self._movies)

    def clear(self) -> None:
        if not self._movies:
            return
        self._movies.clear()
        logger.debug("Favorites cleared")
        self._notify()

    def subscribe(self, listener: FavoritesListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        snapshot = self.favorites()
        for listener in list(self._listeners):
            listener(snapshot)

    def __len__(self) -> int:
        return len(self._movies)

    def __contains__(self, movie: object) -> bool:
        return movie in self._movies

    def __iter__(self) -> Iterator[Movie]:
        return iter(self.favorites())
