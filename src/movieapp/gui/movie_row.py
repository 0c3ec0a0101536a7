# -*- coding: utf-8 -*-
"""Single movie row used by both list views."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QPainter, QPixmap
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from movieapp.constants import (
    DETAILS_COLLAPSED_ICON,
    DETAILS_DESCRIPTION,
    DETAILS_EXPANDED_ICON,
    FAVORITE_DESCRIPTION,
    FAVORITE_ICON,
    NOT_FAVORITE_ICON,
    POSTER_DESCRIPTION,
)
from movieapp.models.movie import Movie


def placeholder_poster(width: int, height: int) -> QPixmap:
    """Draw the shared placeholder poster used by every row."""
    pixmap = QPixmap(width, height)
    pixmap.fill(QColor("#cbd5e1"))
    painter = QPainter(pixmap)
    painter.setPen(QColor("#475569"))
    font = QFont()
    font.setPointSize(9)
    painter.setFont(font)
    painter.drawText(pixmap.rect(), Qt.AlignmentFlag.AlignCenter, "No Poster")
    painter.end()
    return pixmap


class MovieRow(QFrame):
    """Card with poster, title and a favorite toggle.

    With ``show_details`` the card is laid out vertically (large poster) and
    carries an expand button revealing the descriptive fields. Without it the
    card is a compact horizontal strip, as used on the Favorites tab.
    """

    favorite_toggled = pyqtSignal(object)

    def __init__(
        self,
        movie: Movie,
        is_favorite: bool,
        show_details: bool = True,
        show_poster: bool = True,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("movieCard")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        self.favorite_button = QPushButton()
        self.favorite_button.setObjectName("favoriteButton")
        self.favorite_button.setFlat(True)
        self.favorite_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.favorite_button.setToolTip(FAVORITE_DESCRIPTION)
        self.favorite_button.setAccessibleName(FAVORITE_DESCRIPTION)
        self.favorite_button.clicked.connect(lambda: self.favorite_toggled.emit(self.movie))

        self.title_label = QLabel(movie.title)
        self.title_label.setObjectName("movieTitle")
        self.title_label.setWordWrap(True)

        self.poster_label: QLabel | None = None
        self.details_button: QPushButton | None = None
        self.details_label: QLabel | None = None

        if show_details:
            self._build_card(show_poster)
        else:
            self._build_strip(show_poster)
        self.set_favorite(is_favorite)

    def _poster(self, width: int, height: int) -> QLabel:
        label = QLabel()
        label.setObjectName("moviePoster")
        label.setPixmap(placeholder_poster(width, height))
        label.setScaledContents(True)
        label.setFixedHeight(height)
        label.setAccessibleName(POSTER_DESCRIPTION)
        return label

    def _build_card(self, show_poster: bool) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        # Poster with the favorite toggle pinned to its top-right corner.
        header = QWidget()
        header_layout = QGridLayout(header)
        header_layout.setContentsMargins(0, 0, 0, 0)
        if show_poster:
            self.poster_label = self._poster(360, 150)
            header_layout.addWidget(self.poster_label, 0, 0)
        header_layout.addWidget(
            self.favorite_button, 0, 0, Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignRight
        )
        root.addWidget(header)

        title_row = QHBoxLayout()
        title_row.setContentsMargins(8, 5, 8, 5)
        title_row.addWidget(self.title_label, 1)
        self.details_button = QPushButton(DETAILS_COLLAPSED_ICON)
        self.details_button.setObjectName("detailsButton")
        self.details_button.setFlat(True)
        self.details_button.setCheckable(True)
        self.details_button.setToolTip(DETAILS_DESCRIPTION)
        self.details_button.setAccessibleName(DETAILS_DESCRIPTION)
        self.details_button.toggled.connect(self.set_details_expanded)
        title_row.addWidget(self.details_button)
        root.addLayout(title_row)

        self.details_label = QLabel(
            "\n".join(f"{label}: {value}" for label, value in self.movie.detail_lines())
        )
        self.details_label.setObjectName("movieDetails")
        self.details_label.setWordWrap(True)
        self.details_label.setContentsMargins(8, 0, 8, 8)
        self.details_label.setHidden(True)
        root.addWidget(self.details_label)

    def _build_strip(self, show_poster: bool) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)
        if show_poster:
            self.poster_label = self._poster(80, 80)
            self.poster_label.setFixedWidth(80)
            root.addWidget(self.poster_label)
        root.addWidget(self.title_label, 1)
        root.addWidget(self.favorite_button)

    def set_favorite(self, is_favorite: bool) -> None:
        self.favorite_button.setText(FAVORITE_ICON if is_favorite else NOT_FAVORITE_ICON)
        self.favorite_button.setProperty("favorite", is_favorite)

    def is_marked_favorite(self) -> bool:
        return bool(self.favorite_button.property("favorite"))

    def set_details_expanded(self, expanded: bool) -> None:
        if self.details_label is None or self.details_button is None:
            return
        self.details_label.setHidden(not expanded)
        self.details_button.setText(DETAILS_EXPANDED_ICON if expanded else DETAILS_COLLAPSED_ICON)
        if self.details_button.isChecked() != expanded:
            self.details_button.setChecked(expanded)

    def details_expanded(self) -> bool:
        return self.details_label is not None and not self.details_label.isHidden()
