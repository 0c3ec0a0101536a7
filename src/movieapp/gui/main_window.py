# -*- coding: utf-8 -*-
"""Main window with Home and Favorites tabs."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QStatusBar,
    QTabBar,
    QVBoxLayout,
    QWidget,
)

from movieapp.constants import APP_NAME, APP_VERSION
from movieapp.gui.controller import AppController
from movieapp.gui.movie_list_widget import FavoritesWidget, MovieListWidget
from movieapp.models.movie import Movie

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Catalog browser: Home lists every movie, Favorites the marked ones."""

    def __init__(
        self,
        settings: dict[str, Any],
        controller: AppController | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings
        self.controller = controller if controller is not None else AppController()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        window = self.settings.get("window", {})
        self.resize(int(window.get("width", 480)), int(window.get("height", 800)))

        self._build_actions()
        self._build_ui()
        self._connect_signals()
        self._apply_styles()
        self._refresh_ui()

        start_tab = int(self.settings.get("ui", {}).get("start_tab", 0))
        self.controller.select_tab(start_tab)
        self._on_tab_changed(self.controller.state.current_tab)

    def _build_actions(self) -> None:
        self.clear_favorites_action = QAction("Clear Favorites", self)
        self.clear_favorites_action.triggered.connect(self.controller.favorites.clear)

    def _build_ui(self) -> None:
        toolbar = self.addToolBar("Main")
        toolbar.setMovable(False)
        toolbar.addAction(self.clear_favorites_action)

        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(0, 0, 0, 0)
        header_layout.setSpacing(12)
        self.title_label = QLabel("Movies")
        self.title_label.setObjectName("appTitle")
        self.favorites_count_label = QLabel()
        self.favorites_count_label.setObjectName("statusBadge")
        header_layout.addWidget(self.title_label)
        header_layout.addStretch(1)
        header_layout.addWidget(self.favorites_count_label)

        self.tab_bar = QTabBar()
        self.tab_bar.setObjectName("mainTabs")
        self.tab_bar.setExpanding(True)
        for title in self.controller.state.tabs:
            self.tab_bar.addTab(title)

        show_posters = bool(self.settings.get("ui", {}).get("show_posters", True))
        self.movie_list_widget = MovieListWidget(show_posters=show_posters)
        self.favorites_widget = FavoritesWidget(show_posters=show_posters)
        self.stack = QStackedWidget()
        self.stack.addWidget(self.movie_list_widget)
        self.stack.addWidget(self.favorites_widget)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)
        layout.addWidget(header)
        layout.addWidget(self.tab_bar)
        layout.addWidget(self.stack, 1)
        self.setCentralWidget(central)

        self.setStatusBar(QStatusBar())

    def _connect_signals(self) -> None:
        self.tab_bar.currentChanged.connect(self.controller.select_tab)
        self.controller.tab_changed.connect(self._on_tab_changed)
        self.controller.favorites_changed.connect(self._on_favorites_changed)
        self.movie_list_widget.favorite_toggled.connect(self.controller.toggle_favorite)
        self.favorites_widget.favorite_toggled.connect(self.controller.toggle_favorite)

    def _refresh_ui(self) -> None:
        favorites = self.controller.favorite_movies()
        self.movie_list_widget.set_movies(self.controller.movies, favorites)
        self.favorites_widget.set_favorites(favorites)
        self._update_count(favorites)

    def _on_tab_changed(self, index: int) -> None:
        if self.tab_bar.currentIndex() != index:
            self.tab_bar.setCurrentIndex(index)
        self.stack.setCurrentIndex(index)

    def _on_favorites_changed(self, favorites: list[Movie]) -> None:
        self.movie_list_widget.refresh_favorites(favorites)
        self.favorites_widget.set_favorites(favorites)
        self._update_count(favorites)

    def _update_count(self, favorites: list[Movie]) -> None:
        count = len(favorites)
        self.favorites_count_label.setText(f"{count} favorite{'' if count == 1 else 's'}")
        self.clear_favorites_action.setEnabled(count > 0)
        self.statusBar().showMessage(f"{len(self.controller.movies)} movies in catalog")

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing main window")
        self.controller.shutdown()
        super().closeEvent(event)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                background: #f3f5f8;
                color: #1f2937;
                font-family: "Segoe UI", "Noto Sans", sans-serif;
                font-size: 12px;
            }
            QLabel#appTitle {
                font-size: 20px;
                font-weight: 700;
                color: #0f172a;
            }
            QLabel#mutedText {
                color: #6b7280;
                padding: 24px;
            }
            QLabel#statusBadge {
                background: #e0ecff;
                color: #1d4ed8;
                border: 1px solid #bfdbfe;
                border-radius: 8px;
                padding: 4px 10px;
                font-weight: 600;
            }
            QTabBar#mainTabs::tab {
                background: #0f766e;
                color: #e6fffb;
                padding: 8px 16px;
                font-weight: 600;
            }
            QTabBar#mainTabs::tab:selected {
                background: #115e59;
                color: white;
                border-bottom: 3px solid #5eead4;
            }
            QFrame#movieCard {
                background: white;
                border: 1px solid #d1d9e6;
                border-radius: 15px;
            }
            QFrame#movieCard QWidget {
                background: transparent;
            }
            QLabel#movieTitle {
                font-size: 16px;
                font-weight: 600;
            }
            QLabel#movieDetails {
                color: #374151;
            }
            QPushButton#favoriteButton {
                color: #db2777;
                font-size: 22px;
                border: none;
                padding: 6px 10px;
            }
            QPushButton#detailsButton {
                font-size: 16px;
                border: none;
            }
            """
        )
