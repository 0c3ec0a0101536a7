# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "movie-app"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"

TABS = ("Home", "Favorites")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

FAVORITE_ICON = "♥"
NOT_FAVORITE_ICON = "♡"
DETAILS_COLLAPSED_ICON = "▴"
DETAILS_EXPANDED_ICON = "▾"

POSTER_DESCRIPTION = "Movie Poster"
FAVORITE_DESCRIPTION = "Add to favorites"
DETAILS_DESCRIPTION = "Show details"
