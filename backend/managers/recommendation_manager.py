import re
from typing import List

from structlog.stdlib import BoundLogger

from domain.errors import MissingCredentialError, RecommendationError
from domain.interfaces import ChatTransport, PromptComposer, ResponseValidator
from schemas.preferences import UserPreferences
from schemas.recommendation import MovieRecommendation

YOUTUBE_WATCH_URL = re.compile(r"^https://(www\.)?youtube\.com/watch\?v=[\w-]+")


class RecommendationManager:
    def __init__(
        self,
        composer: PromptComposer,
        transport: ChatTransport,
        validator: ResponseValidator,
        logger: BoundLogger,
    ):
        self.composer = composer
        self.transport = transport
        self.validator = validator
        self.logger = logger

    async def get_recommendations(self, preferences: UserPreferences, credential: str) -> List[MovieRecommendation]:
        """Main entry point: one round trip to the model for one form submission.

        Raises a ``RecommendationError`` subclass on any failure; never returns a
        partial batch.
        """
        if not credential or not credential.strip():
            self.logger.error("No credential supplied")
            raise MissingCredentialError()

        self.logger.info(
            "Starting recommendation process",
            mood=preferences.mood.value,
            languages=[language.value for language in preferences.languages],
            platforms=[platform.value for platform in preferences.platforms],
            content_types=[content_type.value for content_type in preferences.content_types],
            excluded_titles=len(preferences.exclude_titles or ()),
        )

        request = self.composer.compose(preferences)
        raw_body = await self.transport.send(request, credential.strip())

        result = self.validator.validate(raw_body, preferences)
        if not result.ok:
            self._log_failure(result.error)
            raise result.error

        self._warn_on_unofficial_trailers(result.movies)
        self.logger.info(
            "Recommendation process completed successfully",
            final_recommendations=len(result.movies),
            excluded_after_validation=result.excluded_count,
        )
        return list(result.movies)

    def _log_failure(self, error: RecommendationError):
        self.logger.error("Response validation failed", kind=error.kind, reason=error.message)

    def _warn_on_unofficial_trailers(self, movies):
        for movie in movies:
            if not YOUTUBE_WATCH_URL.match(movie.trailer_link):
                self.logger.warning("Trailer link is not a YouTube watch URL", movie_name=movie.movie_name, trailer_link=movie.trailer_link)
