"""Interactive text menu over a video catalog."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from .catalog import MOVIES_CSV, SERIES_CSV, Catalog, CatalogError, PathType
from .videos import Video

_LEADING_INT = re.compile(r"[+-]?\d+")
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_MENU_TEXT = (
    "\nMenu:\n1. Cargar archivo de datos\n2. Mostrar todos los datos\n"
    "3. Mostrar los videos en general con una cierta calificacion o un cierto genero\n"
    "4. Mostrar los episodios de una determinada serie con una calificacion determinada\n"
    "5. Mostrar las peliculas con cierta calificacion\n"
    "6. Calificar un video\n"
    "0. Salir\n"
)

_NOT_LOADED = "No se ha cargado ningun archivo"
_OUT_OF_RANGE = "La calificacion debe estar entre 1 y 5"
_ASK_RATING = "Por favor ingrese la calificacion a buscar del 1-5"


def _fmt(value: float) -> str:
    return f"{value:g}"


class _Tokens:
    """Whitespace-separated reader that stays failed after a bad read."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []
        self.failed = False

    def _next(self) -> str | None:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def word(self) -> str:
        if self.failed:
            return ""
        token = self._next()
        if token is None:
            self.failed = True
            return ""
        return token

    def _number(self, pattern: re.Pattern[str], convert) -> float | int:
        if self.failed:
            return 0
        token = self._next()
        match = pattern.match(token) if token is not None else None
        if match is None:
            self.failed = True
            return 0
        return convert(match.group(0))

    def integer(self) -> int:
        return int(self._number(_LEADING_INT, int))

    def real(self) -> float:
        return float(self._number(_LEADING_FLOAT, float))


class Menu:
    """Numbered menu that loads, lists, searches and rates videos."""

    def __init__(
        self,
        catalog: Catalog | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        movies_path: PathType = MOVIES_CSV,
        series_path: PathType = SERIES_CSV,
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens = _Tokens(stdin if stdin is not None else sys.stdin)
        self.movies_path = movies_path
        self.series_path = series_path

    def _say(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)

    def _show(self, videos: Iterable[Video]) -> int:
        shown = 0
        for video in videos:
            self._say(video.describe())
            shown += 1
        return shown

    def render(self) -> str:
        """Return the menu text."""
        return _MENU_TEXT

    def _ask_rating(self, prompt: str = _ASK_RATING) -> float | None:
        self._say(prompt)
        rating = self._tokens.real()
        if rating < 1 or rating > 5:
            self._say(_OUT_OF_RANGE)
            return None
        return rating

    def _load(self) -> bool:
        try:
            movies, episodes = self.catalog.load(self.movies_path, self.series_path)
        except CatalogError as exc:
            self._say(str(exc))
            self._say("Ocurrio un error al cargar los datos\nCerrando el programa...")
            return False
        self._say(f'El archivo "{self.movies_path}" tiene: {movies} peliculas')
        self._say(f'El archivo "{self.series_path}" tiene: {episodes} episodio')
        self._say("Se cargaron los archivos correctamente")
        return True

    def _search_general(self) -> None:
        self._say(
            "Eliga que desea buscar en el catalogo\n1. Genero\n2. Calificacion\nOpcion: ",
            end="",
        )
        choice = self._tokens.integer()
        if choice == 1:
            self._show(self.catalog)
            self._say("Por favor ingrese el genero a buscar")
            genre = self._tokens.word()
            if not self._show(self.catalog.by_genre(genre)):
                self._say(f"No hubo videos con genero {genre}")
        elif choice == 2:
            self._show(self.catalog)
            rating = self._ask_rating()
            if rating is not None and not self._show(self.catalog.by_rating(rating)):
                self._say(f"No hubo videos con calificacion {_fmt(rating)}")
        else:
            self._say("Opcion invalida")

    def _search_episodes(self) -> None:
        self._show(self.catalog)
        self._say("\nIngrese el Nombre de la serie a buscar: ")
        series = self._tokens.word()
        rating = self._ask_rating()
        if rating is not None and not self._show(self.catalog.episodes(series, rating)):
            self._say(
                f"No hubo episodios de la serie {series} con calificacion {_fmt(rating)}"
            )

    def _search_movies(self) -> None:
        self._show(self.catalog)
        rating = self._ask_rating()
        if rating is not None and not self._show(self.catalog.movies(rating)):
            self._say(f"No hubo peliculas con calificacion{_fmt(rating)}")

    def _rate(self) -> None:
        self._show(self.catalog)
        self._say("\nIngrese el ID del video a calificar: ")
        video_id = self._tokens.word()
        self._say("Por favor ingrese su calificacion del 1-5")
        score = self._tokens.integer()
        if score < 1 or score > 5:
            self._say(_OUT_OF_RANGE)
            return
        try:
            self.catalog.rate(video_id, score)
        except KeyError:
            self._say("No se pudo asignar la calificacion")
        else:
            self._say("Se asigno la calificacion")

    def handle(self, option: int) -> bool:
        """Carry out one menu option; return whether the menu keeps running."""
        if option == 0:
            self._say("Saliendo del programa...")
            return False
        if option == 1:
            return self._load()
        actions = {
            2: lambda: self._show(self.catalog),
            3: self._search_general,
            4: self._search_episodes,
            5: self._search_movies,
            6: self._rate,
        }
        action = actions.get(option)
        if action is None:
            self._say("Opcion invalida. Intente de nuevo.")
            return True
        if not self.catalog.loaded:
            self._say(_NOT_LOADED)
            return True
        action()
        return True

    def run(self) -> None:
        """Show the menu and handle options until the user leaves."""
        while True:
            self._say(self.render(), end="")
            self._say("Elige una opcion: ", end="")
            if not self.handle(self._tokens.integer()):
                return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu."""
    parser = argparse.ArgumentParser(description="Catalogo de peliculas y series.")
    parser.add_argument("--movies", default=MOVIES_CSV, help="CSV de peliculas")
    parser.add_argument("--series", default=SERIES_CSV, help="CSV de episodios")
    args = parser.parse_args(argv)
    Menu(movies_path=args.movies, series_path=args.series).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())