# -*- coding: utf-8 -*-
"""Tests for the main window, list views and movie rows."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6")

from movieapp.constants import FAVORITE_ICON, NOT_FAVORITE_ICON
from movieapp.gui.controller import AppController
from movieapp.gui.main_window import MainWindow
from movieapp.gui.movie_list_widget import FavoritesWidget, MovieListWidget
from movieapp.gui.movie_row import MovieRow
from movieapp.models.movie import Movie


@pytest.fixture
def window(qt_app, default_config, catalog: list[Movie]):
    win = MainWindow(settings=default_config, controller=AppController(movies=catalog))
    yield win
    win.close()


def test_home_tab_lists_whole_catalog(window: MainWindow, catalog: list[Movie]) -> None:
    assert window.movie_list_widget.displayed_movies() == catalog
    assert window.favorites_widget.displayed_movies() == []
    assert window.favorites_count_label.text() == "0 favorites"
    assert window.clear_favorites_action.isEnabled() is False


def test_tabs_follow_app_state(window: MainWindow) -> None:
    assert [window.tab_bar.tabText(i) for i in range(window.tab_bar.count())] == ["Home", "Favorites"]
    window.tab_bar.setCurrentIndex(1)
    assert window.controller.state.current_tab == 1
    assert window.stack.currentWidget() is window.favorites_widget

    window.controller.select_tab(0)
    assert window.tab_bar.currentIndex() == 0
    assert window.stack.currentWidget() is window.movie_list_widget


def test_start_tab_from_settings(qt_app, default_config, catalog: list[Movie]) -> None:
    default_config["ui"]["start_tab"] = 1
    win = MainWindow(settings=default_config, controller=AppController(movies=catalog))
    assert win.controller.state.current_tab == 1
    assert win.stack.currentIndex() == 1
    win.close()


def test_clicking_heart_updates_both_views(window: MainWindow, catalog: list[Movie]) -> None:
    a, b, _ = catalog
    home_rows = window.movie_list_widget.rows()

    home_rows[1].favorite_button.click()
    assert window.favorites_widget.displayed_movies() == [b]
    assert home_rows[1].is_marked_favorite() is True
    assert home_rows[1].favorite_button.text() == FAVORITE_ICON
    assert window.favorites_count_label.text() == "1 favorite"

    home_rows[0].favorite_button.click()
    assert window.favorites_widget.displayed_movies() == [b, a]
    assert window.favorites_count_label.text() == "2 favorites"

    home_rows[1].favorite_button.click()
    assert window.favorites_widget.displayed_movies() == [a]
    assert home_rows[1].favorite_button.text() == NOT_FAVORITE_ICON


def test_unfavorite_from_favorites_tab(window: MainWindow, catalog: list[Movie]) -> None:
    window.controller.toggle_favorite(catalog[2])
    favorite_rows = window.favorites_widget.rows()
    assert len(favorite_rows) == 1
    assert favorite_rows[0].is_marked_favorite() is True

    favorite_rows[0].favorite_button.click()

    assert window.favorites_widget.displayed_movies() == []
    assert window.favorites_widget.empty_label.isHidden() is False
    assert window.movie_list_widget.rows()[2].is_marked_favorite() is False


def test_favorites_view_matches_store(window: MainWindow, catalog: list[Movie]) -> None:
    for movie in (catalog[2], catalog[0], catalog[2], catalog[1]):
        window.controller.toggle_favorite(movie)
    expected = [movie for movie in window.controller.favorite_movies() if window.controller.is_favorite(movie)]
    assert window.favorites_widget.displayed_movies() == expected == [catalog[0], catalog[1]]


def test_clear_favorites_action(window: MainWindow, catalog: list[Movie]) -> None:
    window.controller.toggle_favorite(catalog[0])
    assert window.clear_favorites_action.isEnabled() is True
    window.clear_favorites_action.trigger()
    assert window.favorites_widget.displayed_movies() == []
    assert window.favorites_count_label.text() == "0 favorites"


def test_movie_row_details_expand(qt_app, catalog: list[Movie]) -> None:
    row = MovieRow(catalog[0], is_favorite=False)
    assert row.details_expanded() is False
    row.details_button.click()
    assert row.details_expanded() is True
    assert "Genre: Drama" in row.details_label.text()
    row.set_details_expanded(False)
    assert row.details_button.isChecked() is False
    row.close()


def test_favorites_rows_have_no_details_affordance(qt_app, catalog: list[Movie]) -> None:
    widget = FavoritesWidget()
    widget.set_favorites([catalog[1]])
    row = widget.rows()[0]
    assert row.details_button is None
    assert row.details_expanded() is False
    widget.close()


def test_row_emits_movie_on_toggle(qt_app, catalog: list[Movie]) -> None:
    row = MovieRow(catalog[1], is_favorite=True, show_details=False)
    emitted: list[Movie] = []
    row.favorite_toggled.connect(emitted.append)
    row.favorite_button.click()
    assert emitted == [catalog[1]]
    row.close()


def test_rows_without_posters(qt_app, catalog: list[Movie]) -> None:
    widget = MovieListWidget(show_posters=False)
    widget.set_movies(catalog, favorites=[])
    assert all(row.poster_label is None for row in widget.rows())
    widget.close()


def test_duplicate_records_share_favorite_icon(qt_app) -> None:
    twin = Movie(id="t", title="Twin")
    controller = AppController(movies=[twin, Movie(id="t", title="Twin")])
    win = MainWindow(settings={"ui": {"start_tab": 0}}, controller=controller)
    win.movie_list_widget.rows()[0].favorite_button.click()
    assert [row.is_marked_favorite() for row in win.movie_list_widget.rows()] == [True, True]
    win.close()


def test_window_syncs_injected_tab_state(qt_app, default_config, catalog: list[Movie]) -> None:
    from movieapp.core.state import AppState

    controller = AppController(movies=catalog, state=AppState(current_tab=1))
    win = MainWindow(settings=default_config, controller=controller)
    assert controller.state.current_tab == 0
    assert win.tab_bar.currentIndex() == 0
    assert win.stack.currentWidget() is win.movie_list_widget

    win.tab_bar.setCurrentIndex(1)
    assert controller.state.current_tab == 1
    assert win.stack.currentWidget() is win.favorites_widget
    win.close()


def test_start_tab_matching_injected_state_shows_that_tab(qt_app, default_config, catalog: list[Movie]) -> None:
    from movieapp.core.state import AppState

    default_config["ui"]["start_tab"] = 1
    controller = AppController(movies=catalog, state=AppState(current_tab=1))
    win = MainWindow(settings=default_config, controller=controller)
    assert win.tab_bar.currentIndex() == 1
    assert win.stack.currentWidget() is win.favorites_widget
    win.close()


def test_window_builds_default_controller(qt_app, default_config) -> None:
    from movieapp.core.catalog import get_movies

    win = MainWindow(settings=default_config)
    assert isinstance(win.controller, AppController)
    assert win.movie_list_widget.displayed_movies() == get_movies()
    win.close()
