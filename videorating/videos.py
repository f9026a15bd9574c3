"""Video records: movies and series episodes with averaged ratings."""

from __future__ import annotations

from dataclasses import dataclass, field


def _format_number(value: float) -> str:
    """Format a number the way a default stream output shows it."""
    return f"{value:g}"


@dataclass
class Video:
    """A catalog entry with an identifier, name, duration, genre and rating."""

    video_id: str
    name: str
    duration: int = 0
    genre: str = ""
    rating: float = field(default=0.0, init=False)
    _total: int = field(default=0, init=False, repr=False, compare=False)
    _count: int = field(default=0, init=False, repr=False, compare=False)

    def rate(self, score: float) -> float:
        """Add a score and return the new rating.

        Scores are accumulated as whole numbers and the rating is the
        whole-number quotient of their sum by their count.
        """
        self._count += 1
        self._total = int(self._total + score)
        self.rating = float(int(self._total / self._count))
        return self.rating

    def describe(self) -> str:
        """Return a one-line description of the video."""
        return (
            f"Video: ID: {self.video_id}"
            f"Nombre: {self.name}"
            f"Duracion: {self.duration}"
            f"Genero: {self.genre}"
        )


@dataclass
class Movie(Video):
    """A feature film."""

    def describe(self) -> str:
        return (
            f"Pelicula: ID: {self.video_id}"
            f" Nombre: {self.name}"
            f" Duracion: {self.duration}"
            f" Genero: {self.genre}"
            f" Calificacion: {_format_number(self.rating)}"
        )


@dataclass
class Episode(Video):
    """An episode of a series; ``name`` holds the series name."""

    title: str = ""
    season: int = 0

    def describe(self) -> str:
        return (
            f"Episodio: ID: {self.video_id}"
            f" Nombre: {self.name}"
            f" Duracion: {self.duration}"
            f" Genero: {self.genre}"
            f" Titulo: {self.title}"
            f" Temporada: {self.season}"
            f" Calificacion: {_format_number(self.rating)}"
        )