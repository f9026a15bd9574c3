import pytest

from videorating.videos import Episode, Movie, Video


def test_new_video_has_zero_rating():
    movie = Movie("m1", "Up", 96, "Drama")
    assert movie.rating == 0.0


def test_single_rating_sets_rating():
    movie = Movie("m1", "Up", 96, "Drama")
    assert movie.rate(4) == 4.0
    assert movie.rating == 4.0


@pytest.mark.parametrize("scores", [[1, 5], [2, 3, 5], [5, 5, 4], [1, 1, 2]])
def test_rating_stays_within_scores(scores):
    video = Video("v", "n")
    for score in scores:
        video.rate(score)
    assert min(scores) <= video.rating <= max(scores)
    assert video.rating == int(video.rating)


def test_average_is_truncated_to_whole_number():
    episode = Episode("e1", "Show", 30, "Comedy", title="Pilot", season=1)
    episode.rate(4)
    episode.rate(5)
    assert episode.rating == 4.0


def test_equal_scores_keep_rating():
    video = Video("v", "n")
    for _ in range(3):
        video.rate(2)
    assert video.rating == 2.0


def test_movie_description():
    movie = Movie("m1", "Up", 96, "Drama")
    movie.rate(3)
    assert movie.describe() == (
        "Pelicula: ID: m1 Nombre: Up Duracion: 96 Genero: Drama Calificacion: 3"
    )


def test_episode_description():
    episode = Episode("e1", "Show", 30, "Comedy", title="Pilot", season=2)
    assert episode.describe() == (
        "Episodio: ID: e1 Nombre: Show Duracion: 30 Genero: Comedy "
        "Titulo: Pilot Temporada: 2 Calificacion: 0"
    )


def test_base_video_description():
    video = Video("v1", "Clip", 5, "Doc")
    assert video.describe() == "Video: ID: v1Nombre: ClipDuracion: 5Genero: Doc"


def test_episode_defaults():
    episode = Episode("e1", "Show")
    assert (episode.duration, episode.genre, episode.title, episode.season) == (
        0,
        "",
        "",
        0,
    )