import textwrap
from typing import Iterable

from schemas.recommendation import MovieRecommendation

WIDTH = 78


def _wrap(text: str, indent: str = "  ") -> str:
    return textwrap.fill(text, width=WIDTH, initial_indent=indent, subsequent_indent=indent)


def render_card(movie: MovieRecommendation) -> str:
    """Compact summary shown in the result list."""
    lines = [
        movie.movie_name,
        f"  [{movie.genre}] [{movie.language}]",
        f"  IMDb {movie.ratings.imdb} | {movie.duration} | {movie.platform}",
        _wrap(movie.synopsis),
        f"  Director: {movie.crew.director}",
    ]
    return "\n".join(lines)


def render_details(movie: MovieRecommendation) -> str:
    lines = [
        movie.movie_name,
        "=" * min(len(movie.movie_name), WIDTH),
        f"Genre: {movie.genre}    Mood: {movie.mood}    Language: {movie.language}",
        f"Duration: {movie.duration}    Platform: {movie.platform}",
        "",
        textwrap.fill(movie.synopsis, width=WIDTH),
        "",
        "Ratings",
        f"  IMDb: {movie.ratings.imdb}",
        f"  Rotten Tomatoes: {movie.ratings.rotten_tomatoes}",
        "Crew",
        f"  Director: {movie.crew.director}",
        f"  Writers: {', '.join(movie.crew.writers)}",
        "Cast",
        _wrap(", ".join(movie.cast)),
        "",
        f"Watch Trailer: {movie.trailer_link}",
    ]
    return "\n".join(lines)


def render_batch(movies: Iterable[MovieRecommendation], details: bool = False) -> str:
    render = render_details if details else render_card
    return "\n\n".join(render(movie) for movie in movies)
