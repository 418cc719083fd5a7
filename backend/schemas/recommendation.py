from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Crew(_Frozen):
    director: StrictStr = Field(min_length=1)
    writers: List[StrictStr]


class Ratings(_Frozen):
    imdb: StrictStr = Field(min_length=1)
    rotten_tomatoes: StrictStr = Field(min_length=1, alias="rottenTomatoes")


class MovieRecommendation(_Frozen):
    movie_name: StrictStr = Field(min_length=1)
    genre: StrictStr
    mood: StrictStr
    language: StrictStr
    # Human readable, e.g. "120 mins" or "2 seasons, 16 episodes, ~40 mins each".
    duration: StrictStr
    platform: StrictStr
    cast: List[StrictStr]
    crew: Crew
    ratings: Ratings
    synopsis: StrictStr
    trailer_link: StrictStr


class RecommendationBatch(BaseModel):
    movies: List[MovieRecommendation]
