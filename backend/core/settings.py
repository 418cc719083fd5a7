from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_MODEL = "gpt-4o-2024-08-06"
OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


class Settings(BaseSettings):
    openai_api_key: Optional[str] = Field(default=None, validation_alias="OPENAI_API_KEY")
    openai_model: str = Field(default=DEFAULT_MODEL, validation_alias="OPENAI_MODEL")
    openai_api_url: str = Field(default=OPENAI_CHAT_COMPLETIONS_URL, validation_alias="OPENAI_API_URL")
    credential_path: Path = Field(
        default=Path.home() / ".config" / "mood-movies" / "credentials.json",
        validation_alias="MOOD_MOVIES_CREDENTIAL_PATH",
    )
    log_json: bool = Field(default=False, validation_alias="MOOD_MOVIES_LOG_JSON")

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
