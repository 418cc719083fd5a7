from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest
from injector import Injector
from structlog.stdlib import BoundLogger

from core.di import create_injector
from domain.interfaces import ChatTransport, PromptComposer
from managers.recommendation_manager import RecommendationManager
from schemas.preferences import ContentType, Language, Mood, Platform, UserPreferences
from services.prompt_service import ChatPromptComposer
from services.validation_service import ChatResponseValidator


def make_movie(name: str = "A", **overrides) -> dict:
    """A movie dict the way a compliant model returns it."""
    movie = {
        "movie_name": name,
        "genre": "Comedy",
        "mood": "Happy",
        "language": "English",
        "duration": "100 mins",
        "platform": "Netflix",
        "cast": ["X"],
        "crew": {"director": "D", "writers": ["W"]},
        "ratings": {"imdb": "7.0", "rottenTomatoes": "80%"},
        "synopsis": "S",
        "trailer_link": "https://www.youtube.com/watch?v=abc",
    }
    movie.update(overrides)
    return movie


def make_envelope(content: Optional[str]) -> bytes:
    """Wrap model output in a chat completion response body."""
    return orjson.dumps(
        {
            "id": "chatcmpl-123",
            "object": "chat.completion",
            "model": "gpt-4o-2024-08-06",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }
    )


def movies_content(*movies: dict) -> str:
    return orjson.dumps({"movies": list(movies)}).decode()


@pytest.fixture
def injector() -> Injector:
    return create_injector()


@pytest.fixture
def mock_logger() -> BoundLogger:
    """Create a mock logger for testing."""
    logger = MagicMock(spec=BoundLogger)
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def sample_preferences() -> UserPreferences:
    return UserPreferences(
        mood=Mood.HAPPY,
        languages=(Language.ENGLISH,),
        platforms=(Platform.NETFLIX,),
        content_types=(ContentType.MOVIE,),
    )


@pytest.fixture
def sample_movies() -> list:
    return [make_movie("A"), make_movie("B", genre="Drama"), make_movie("C", platform="Netflix", duration="2 seasons")]


@pytest.fixture
def sample_response_body(sample_movies) -> bytes:
    return make_envelope(movies_content(*sample_movies))


@pytest.fixture
def validator() -> ChatResponseValidator:
    return ChatResponseValidator()


@pytest.fixture
def mock_transport(sample_response_body) -> ChatTransport:
    transport = MagicMock(spec=ChatTransport)
    transport.send = AsyncMock(return_value=sample_response_body)
    return transport


@pytest.fixture
def composer(mock_logger) -> PromptComposer:
    return ChatPromptComposer(logger=mock_logger)


@pytest.fixture
def recommendation_manager(composer, mock_transport, validator, mock_logger) -> RecommendationManager:
    return RecommendationManager(
        composer=composer,
        transport=mock_transport,
        validator=validator,
        logger=mock_logger,
    )
