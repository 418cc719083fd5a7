import re
from typing import Any, Optional, Tuple, Union

import orjson
from pydantic import ValidationError

from domain.entities import ValidationFailure, ValidationResult, ValidationSuccess
from domain.errors import EmptyResultError, MalformedResponseError
from domain.interfaces import ResponseValidator
from schemas.preferences import UserPreferences
from schemas.recommendation import MovieRecommendation

_LEADING_FENCE = re.compile(r"^\s*```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?[ \t]*```\s*$")

_SHAPE_BY_ERROR_TYPE = {
    "list_type": "must be an array",
    "model_type": "must be an object",
    "model_attributes_type": "must be an object",
    "dict_type": "must be an object",
    "string_type": "must be a string",
    "string_too_short": "must not be empty",
}


def strip_code_fences(content: str) -> str:
    """Remove a Markdown code fence (optionally tagged, e.g. ```json) wrapped around the reply."""
    content = _LEADING_FENCE.sub("", content, count=1)
    content = _TRAILING_FENCE.sub("", content, count=1)
    return content.strip()


def normalize_title(title: str) -> str:
    return title.strip().casefold()


def describe_validation_error(error: ValidationError) -> str:
    """Turn the first pydantic error into a message naming the offending field."""
    details = error.errors()[0]
    field_path = ".".join(str(part) for part in details["loc"])
    if not field_path:
        return "Invalid movie recommendation format"
    if details["type"] == "missing":
        return f"Missing required field: {field_path}"
    shape = _SHAPE_BY_ERROR_TYPE.get(details["type"], details["msg"])
    return f"Invalid format for field: {field_path} - {shape}"


class ChatResponseValidator(ResponseValidator):
    """Turns a raw chat completion body into a recommendation batch.

    The whole batch is rejected as soon as one movie fails validation, and the
    exclusion list is applied only to movies that passed. ``validate`` never
    raises: every failure comes back as a ``ValidationFailure``.
    """

    def validate(self, raw_body: Union[str, bytes], preferences: UserPreferences) -> ValidationResult:
        content = self._extract_content(raw_body)
        if content is None:
            return ValidationFailure(MalformedResponseError("Invalid response format from provider: missing message content"))

        try:
            data = orjson.loads(strip_code_fences(content))
        except orjson.JSONDecodeError as e:
            return ValidationFailure(MalformedResponseError(f"Response is not valid JSON: {e}"))

        movies = data.get("movies") if isinstance(data, dict) else None
        if not isinstance(movies, list):
            return ValidationFailure(MalformedResponseError("Response must contain a movies array"))
        if not movies:
            return ValidationFailure(MalformedResponseError("Response movies array is empty"))

        validated = []
        for index, item in enumerate(movies):
            movie, reason = self._validate_movie(item)
            if movie is None:
                return ValidationFailure(MalformedResponseError(f"Invalid movie at index {index}: {reason}"))
            validated.append(movie)

        excluded = {normalize_title(t) for t in preferences.exclude_titles or () if t.strip()}
        kept = tuple(m for m in validated if normalize_title(m.movie_name) not in excluded)
        if not kept:
            return ValidationFailure(EmptyResultError())

        return ValidationSuccess(movies=kept, excluded_count=len(validated) - len(kept))

    @staticmethod
    def _extract_content(raw_body: Union[str, bytes]) -> Optional[str]:
        try:
            envelope = orjson.loads(raw_body)
        except (orjson.JSONDecodeError, TypeError):
            return None
        try:
            content = envelope["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None
        return content if isinstance(content, str) and content.strip() else None

    @staticmethod
    def _validate_movie(item: Any) -> Tuple[Optional[MovieRecommendation], Optional[str]]:
        if not isinstance(item, dict):
            return None, "Invalid movie recommendation format"
        try:
            return MovieRecommendation.model_validate(item), None
        except ValidationError as e:
            return None, describe_validation_error(e)
