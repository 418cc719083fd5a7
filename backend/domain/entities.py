from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

from domain.errors import RecommendationError
from schemas.recommendation import MovieRecommendation

JSON_OBJECT_FORMAT = "json_object"


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str


@dataclass(frozen=True)
class RecommendationRequest:
    model: str
    messages: Tuple[ChatMessage, ...]
    response_format_type: str = JSON_OBJECT_FORMAT

    @property
    def response_format(self) -> Dict[str, str]:
        return {"type": self.response_format_type}

    @property
    def system_message(self) -> ChatMessage:
        return next(m for m in self.messages if m.role == "system")

    @property
    def user_message(self) -> ChatMessage:
        return next(m for m in self.messages if m.role == "user")

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": m.role, "content": m.content} for m in self.messages],
            "response_format": self.response_format,
        }


@dataclass(frozen=True)
class ValidationSuccess:
    movies: Tuple[MovieRecommendation, ...]
    excluded_count: int = 0

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    error: RecommendationError

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[ValidationSuccess, ValidationFailure]
