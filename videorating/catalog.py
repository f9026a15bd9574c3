"""Loading and querying a catalog of movies and episodes from CSV files."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from os import PathLike
from typing import Union

from .videos import Episode, Movie, Video

MOVIES_CSV = "movies.csv"
SERIES_CSV = "series.csv"
MOVIE_FIELDS = 4
EPISODE_FIELDS = 6

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

PathType = Union[str, "PathLike[str]"]


class CatalogError(Exception):
    """Raised when a data file cannot be read or holds a malformed line."""


def count_records(path: PathType) -> int:
    """Return the number of lines after the header of a CSV file."""
    try:
        with open(path, encoding="utf-8") as handle:
            if not handle.readline():
                raise CatalogError("El archivo no tiene header")
            return sum(1 for _ in handle)
    except OSError as exc:
        raise CatalogError(f"Error al abrir el archivo: {path}") from exc


def _cells(line: str) -> list[str]:
    if line.endswith("\n"):
        line = line[:-1]
    cells = line.split(",")
    # A trailing delimiter does not start a new cell.
    if cells[-1] == "":
        cells.pop()
    return cells


def _to_int(cell: str, line: str) -> int:
    match = _LEADING_INT.match(cell)
    if match is None:
        raise CatalogError(f"Valor numerico invalido en la linea: {line}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise CatalogError(f"Valor numerico fuera de rango en la linea: {line}")
    return value


def _checked_cells(line: str, expected: int) -> list[str]:
    cells = _cells(line)
    if len(cells) != expected or not all(cells):
        raise CatalogError(f"Error en la linea: {line.rstrip(chr(10))}")
    return cells


def parse_movie(line: str) -> Movie:
    """Parse ``id,name,duration,genre`` into a movie."""
    video_id, name, duration, genre = _checked_cells(line, MOVIE_FIELDS)
    return Movie(video_id, name, _to_int(duration, line), genre)


def parse_episode(line: str) -> Episode:
    """Parse ``id,series,duration,genre,title,season`` into an episode."""
    video_id, name, duration, genre, title, season = _checked_cells(
        line, EPISODE_FIELDS
    )
    return Episode(
        video_id,
        name,
        _to_int(duration, line),
        genre,
        title=title,
        season=_to_int(season, line),
    )


def _read(path: PathType, parser: Callable[[str], Video], capacity: int) -> list[Video]:
    try:
        with open(path, encoding="utf-8") as handle:
            if not handle.readline():
                raise CatalogError("El archivo no tiene header")
            records = [parser(line) for line in handle]
    except OSError as exc:
        raise CatalogError(f"No se pudo abrir el archivo: {path}") from exc
    if len(records) > capacity:
        raise CatalogError("Error, el arreglo es muy pequeño")
    return records


class Catalog:
    """Movies followed by episodes, searchable by genre, rating and series."""

    def __init__(self, videos: list[Video] | None = None) -> None:
        self._videos: list[Video] | None = list(videos) if videos is not None else None

    @property
    def loaded(self) -> bool:
        """Whether data has been loaded."""
        return self._videos is not None

    def load(
        self, movies_path: PathType = MOVIES_CSV, series_path: PathType = SERIES_CSV
    ) -> tuple[int, int]:
        """Load both files and return the number of movies and episodes.

        If a file cannot be counted the catalog is left as it was; if a
        line is malformed the catalog is left unloaded.
        """
        movie_count = count_records(movies_path)
        episode_count = count_records(series_path)
        try:
            movies = _read(movies_path, parse_movie, movie_count)
            episodes = _read(series_path, parse_episode, episode_count)
        except CatalogError:
            self._videos = None
            raise
        self._videos = movies + episodes
        return movie_count, episode_count

    def __iter__(self) -> Iterator[Video]:
        return iter(self._videos or ())

    def __len__(self) -> int:
        return len(self._videos or ())

    def by_genre(self, genre: str) -> list[Video]:
        """Videos whose genre equals ``genre``."""
        return [video for video in self if video.genre == genre]

    def by_rating(self, rating: float) -> list[Video]:
        """Videos whose rating equals ``rating``."""
        return [video for video in self if video.rating == rating]

    def episodes(self, series: str, rating: float) -> list[Episode]:
        """Episodes of ``series`` whose rating equals ``rating``."""
        return [
            video
            for video in self
            if isinstance(video, Episode)
            and video.name == series
            and video.rating == rating
        ]

    def movies(self, rating: float) -> list[Movie]:
        """Movies whose rating equals ``rating``."""
        return [
            video
            for video in self
            if isinstance(video, Movie) and video.rating == rating
        ]

    def rate(self, video_id: str, score: float) -> Video:
        """Rate the first video with ``video_id`` and return it.

        Raises KeyError if no video has that identifier.
        """
        for video in self:
            if video.video_id == video_id:
                video.rate(score)
                return video
        raise KeyError(video_id)