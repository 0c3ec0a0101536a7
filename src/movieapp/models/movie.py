# -*- coding: utf-8 -*-
"""Movie data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Movie:
    """A single catalog entry.

    Equality and hashing are value based: two records with identical fields
    are the same movie for favorites purposes.
    """

    id: str
    title: str
    year: str = ""
    genre: str = ""
    director: str = ""
    actors: str = ""
    plot: str = ""
    rating: float = 0.0

    def detail_lines(self) -> list[tuple[str, str]]:
        """Return (label, value) pairs shown in the expanded row."""
        return [
            ("Year", self.year or "-"),
            ("Genre", self.genre or "-"),
            ("Director", self.director or "-"),
            ("Actors", self.actors or "-"),
            ("Rating", f"{self.rating:.1f}" if self.rating else "-"),
            ("Plot", self.plot or "-"),
        ]
