"""Random movie selection."""

import random
from collections.abc import Sequence

from src.models.schemas import MovieResponse
from src.services.jellyfin.client import JellyfinClient
from src.services.jellyfin.schemas import Movie


class NoMoviesError(Exception):
    """Library has no movie to pick from."""

    pass


def pick_random(movies: Sequence[Movie], rng: random.Random | None = None) -> Movie:
    """Pick one movie with a uniform draw.

    Args:
        movies: Candidate movies
        rng: Random source (module-level generator by default)

    Returns:
        The picked movie

    Raises:
        NoMoviesError: If `movies` is empty
    """
    if not movies:
        raise NoMoviesError("No movies found")

    index = (rng or random).randrange(len(movies))
    return movies[index]


def build_movie_response(movie: Movie, client: JellyfinClient) -> MovieResponse:
    """Project a movie into the client-facing payload."""
    return MovieResponse(
        id=movie.id,
        name=movie.name,
        year=movie.production_year,
        duration=movie.duration_minutes,
        rating=movie.community_rating,
        overview=movie.overview,
        image_url=client.image_url(movie.id),
        jellyfin_url=client.details_url(movie.id),
    )
