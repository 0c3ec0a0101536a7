# -*- coding: utf-8 -*-
"""Scrollable movie lists for the Home and Favorites tabs."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from movieapp.gui.movie_row import MovieRow
from movieapp.models.movie import Movie


class _MovieListBase(QWidget):
    """Vertical scroll list of MovieRow cards."""

    favorite_toggled = pyqtSignal(object)

    show_details = True

    def __init__(self, show_posters: bool = True, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._show_posters = show_posters
        self._rows: list[MovieRow] = []

        self.list_host = QWidget()
        self.list_layout = QVBoxLayout(self.list_host)
        self.list_layout.setContentsMargins(5, 5, 5, 5)
        self.list_layout.setSpacing(8)
        self.list_layout.addStretch(1)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setWidget(self.list_host)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        layout.addWidget(self.scroll, 1)

    def rows(self) -> list[MovieRow]:
        return list(self._rows)

    def displayed_movies(self) -> list[Movie]:
        return [row.movie for row in self._rows]

    def _rebuild(self, movies: list[Movie], favorites: list[Movie]) -> None:
        for row in self._rows:
            self.list_layout.removeWidget(row)
            row.deleteLater()
        self._rows.clear()

        for movie in movies:
            row = MovieRow(
                movie,
                is_favorite=movie in favorites,
                show_details=self.show_details,
                show_poster=self._show_posters,
            )
            row.favorite_toggled.connect(self.favorite_toggled.emit)
            self._rows.append(row)
            # Keep the trailing stretch last.
            self.list_layout.insertWidget(self.list_layout.count() - 1, row)


class MovieListWidget(_MovieListBase):
    """Every catalog movie, in catalog order."""

    def set_movies(self, movies: list[Movie], favorites: list[Movie]) -> None:
        self._rebuild(movies, favorites)

    def refresh_favorites(self, favorites: list[Movie]) -> None:
        """Update icons in place so expanded details stay open."""
        for row in self._rows:
            row.set_favorite(row.movie in favorites)


class FavoritesWidget(_MovieListBase):
    """Current favorites in the order they were added."""

    show_details = False

    def __init__(self, show_posters: bool = True, parent: QWidget | None = None) -> None:
        super().__init__(show_posters=show_posters, parent=parent)
        self.empty_label = QLabel("No favorites yet. Tap the heart on a movie to add it.")
        self.empty_label.setObjectName("mutedText")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setWordWrap(True)
        self.list_layout.insertWidget(0, self.empty_label)

    def set_favorites(self, favorites: list[Movie]) -> None:
        self._rebuild(favorites, favorites)
        self.empty_label.setHidden(bool(favorites))
