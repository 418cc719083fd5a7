from unittest.mock import patch

import orjson
import pytest

from domain.entities import RecommendationRequest
from schemas.preferences import ContentType, Language, Mood, Platform, UserPreferences
from services.prompt_service import SYSTEM_INSTRUCTION, ChatPromptComposer


class TestPromptComposer:
    """Test suite for ChatPromptComposer."""

    def test_compose_builds_two_message_exchange(self, composer, sample_preferences):
        # Act
        request = composer.compose(sample_preferences)

        # Assert
        assert isinstance(request, RecommendationRequest)
        assert [m.role for m in request.messages] == ["system", "user"]
        assert request.system_message.content == SYSTEM_INSTRUCTION
        assert request.response_format == {"type": "json_object"}

    def test_compose_uses_default_model(self, composer, sample_preferences):
        # Act
        request = composer.compose(sample_preferences)

        # Assert
        assert request.model == "gpt-4o-2024-08-06"

    def test_compose_uses_configured_model(self, mock_logger, sample_preferences):
        # Arrange
        with patch("services.prompt_service.settings") as mock_settings:
            mock_settings.openai_model = "gpt-4o-mini"
            composer = ChatPromptComposer(logger=mock_logger)

        # Act
        request = composer.compose(sample_preferences)

        # Assert
        assert request.model == "gpt-4o-mini"

    def test_user_content_is_camel_case_json(self, composer, sample_preferences):
        # Act
        content = orjson.loads(composer.compose(sample_preferences).user_message.content)

        # Assert
        assert content == {
            "mood": "Happy",
            "languages": ["English"],
            "platforms": ["Netflix"],
            "contentTypes": ["Movie"],
        }

    @pytest.mark.parametrize(
        "preferences",
        [
            UserPreferences(
                mood=Mood.CURIOUS,
                languages=(Language.TAMIL, Language.ENGLISH),
                platforms=(Platform.SONY_LIV, Platform.ZEE5, Platform.OTHERS),
                content_types=(ContentType.BOTH,),
            ),
            UserPreferences(
                mood=Mood.CALM,
                languages=(Language.MALAYALAM,),
                platforms=(Platform.AMAZON_PRIME,),
                content_types=(ContentType.MOVIE, ContentType.SERIES),
                exclude_titles=("Drishyam", "Premam"),
            ),
        ],
    )
    def test_user_content_round_trips(self, composer, preferences):
        # Act
        content = composer.compose(preferences).user_message.content

        # Assert
        assert UserPreferences.model_validate_json(content) == preferences

    def test_payload_matches_chat_completion_body(self, composer, sample_preferences):
        # Act
        payload = composer.compose(sample_preferences).to_payload()

        # Assert
        assert set(payload) == {"model", "messages", "response_format"}
        assert payload["messages"][0] == {"role": "system", "content": SYSTEM_INSTRUCTION}
        assert payload["messages"][1]["role"] == "user"
        assert payload["response_format"] == {"type": "json_object"}

    def test_compose_is_deterministic(self, composer, sample_preferences):
        assert composer.compose(sample_preferences) == composer.compose(sample_preferences)

    def test_request_is_hashable(self, composer, sample_preferences):
        # Act
        first = composer.compose(sample_preferences)
        second = composer.compose(sample_preferences)

        # Assert
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_system_instruction_covers_schema_and_rules(self):
        for field in (
            "movie_name",
            "genre",
            "mood",
            "language",
            "duration",
            "platform",
            "cast",
            "crew",
            "director",
            "writers",
            "ratings",
            "imdb",
            "rottenTomatoes",
            "synopsis",
            "trailer_link",
        ):
            assert field in SYSTEM_INSTRUCTION
        for mood in Mood:
            assert f"- {mood.value}:" in SYSTEM_INSTRUCTION
        assert "excludeTitles" in SYSTEM_INSTRUCTION
        assert "https://www.youtube.com/watch?v=" in SYSTEM_INSTRUCTION
        assert '"120 mins"' in SYSTEM_INSTRUCTION
        assert "exactly 3" in SYSTEM_INSTRUCTION


class TestUserPreferences:
    def test_multi_selects_must_not_be_empty(self):
        with pytest.raises(ValueError):
            UserPreferences(mood=Mood.SAD, languages=(), platforms=(Platform.NETFLIX,), content_types=(ContentType.MOVIE,))

    def test_rejects_unknown_values(self):
        with pytest.raises(ValueError):
            UserPreferences(mood="Angry", languages=("English",), platforms=("Netflix",), content_types=("Movie",))

    def test_is_immutable(self, sample_preferences):
        with pytest.raises(ValueError):
            sample_preferences.mood = Mood.SAD
