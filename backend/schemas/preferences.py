from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Mood(str, Enum):
    HAPPY = "Happy"
    SAD = "Sad"
    EXCITED = "Excited"
    CALM = "Calm"
    CURIOUS = "Curious"


class Language(str, Enum):
    ENGLISH = "English"
    HINDI = "Hindi"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    MALAYALAM = "Malayalam"


class Platform(str, Enum):
    NETFLIX = "Netflix"
    AMAZON_PRIME = "Amazon Prime"
    HOTSTAR = "Hotstar"
    SONY_LIV = "Sony LIV"
    ZEE5 = "Zee5"
    OTHERS = "Others"


class ContentType(str, Enum):
    MOVIE = "Movie"
    SERIES = "Series"
    BOTH = "Both"


class UserPreferences(BaseModel):
    """What the user wants to watch right now.

    Serialized with camelCase keys (``contentTypes``, ``excludeTitles``) since
    that is the shape the model is told to expect in the user message.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    mood: Mood
    languages: Tuple[Language, ...] = Field(min_length=1)
    platforms: Tuple[Platform, ...] = Field(min_length=1)
    content_types: Tuple[ContentType, ...] = Field(min_length=1)
    # Titles the user has already been shown, matched against movie_name.
    exclude_titles: Optional[Tuple[str, ...]] = None

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
