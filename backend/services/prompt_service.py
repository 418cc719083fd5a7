from injector import inject
from structlog.stdlib import BoundLogger

from core.settings import settings
from domain.entities import ChatMessage, RecommendationRequest
from domain.interfaces import PromptComposer
from schemas.preferences import UserPreferences

RECOMMENDATION_COUNT = 3

SYSTEM_INSTRUCTION = f"""
You are a movie and TV series recommendation assistant. The user message is a JSON object with:
- mood: how the user feels right now
- languages: languages the user is willing to watch in
- platforms: streaming platforms the user has access to
- contentTypes: "Movie", "Series" or "Both"
- excludeTitles (optional): titles the user has already been shown

Recommend exactly {RECOMMENDATION_COUNT} titles, and never fewer than 1.

Match the tone of every title to the mood:
- Happy: uplifting comedies and feel-good stories
- Sad: emotional, cathartic dramas that still leave room for hope
- Excited: high-energy action, thrillers and adventure
- Calm: gentle, slow-paced and comforting stories
- Curious: mysteries, documentaries and thought-provoking science fiction

Filtering rules:
- Only recommend titles that are currently available on at least one of the listed platforms. \
"Others" means any regional or smaller streaming service.
- Only recommend titles in one of the listed languages.
- If contentTypes contains only "Movie", recommend films only. If it contains only "Series", recommend \
series only. If it contains "Both" or both values, mix films and series.
- Never recommend a title whose name matches an entry of excludeTitles, ignoring case.

Respond with a single JSON object of the form {{"movies": [...]}}. Each element of "movies" must be an \
object with exactly these fields:
- movie_name (string): the official title
- genre (string)
- mood (string): the mood this title suits
- language (string): one of the requested languages
- duration (string): for films use "<minutes> mins", e.g. "120 mins"; for series use \
"<n> seasons, <n> episodes, ~<minutes> mins each"
- platform (string): one of the requested platforms where the title streams
- cast (array of strings): main cast members
- crew (object): {{"director": string, "writers": array of strings}}
- ratings (object): {{"imdb": string such as "7.8/10", "rottenTomatoes": string such as "91%"}}
- synopsis (string): two or three spoiler-free sentences
- trailer_link (string): the official trailer as "https://www.youtube.com/watch?v=<video id>"

Do not wrap the JSON in Markdown and do not add any text outside the JSON object.
""".strip()


class ChatPromptComposer(PromptComposer):
    @inject
    def __init__(self, logger: BoundLogger):
        self.model = settings.openai_model
        self.logger = logger

    def compose(self, preferences: UserPreferences) -> RecommendationRequest:
        user_content = preferences.to_json()
        self.logger.debug(
            "Recommendation request composed",
            model=self.model,
            mood=preferences.mood.value,
            excluded_titles=len(preferences.exclude_titles or ()),
        )
        return RecommendationRequest(
            model=self.model,
            messages=(
                ChatMessage(role="system", content=SYSTEM_INSTRUCTION),
                ChatMessage(role="user", content=user_content),
            ),
        )
