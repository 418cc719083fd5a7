from abc import ABC, abstractmethod
from typing import Optional, Union

from schemas.preferences import UserPreferences

from .entities import RecommendationRequest, ValidationResult


class PromptComposer(ABC):
    @abstractmethod
    def compose(self, preferences: UserPreferences) -> RecommendationRequest:
        pass


class ChatTransport(ABC):
    @abstractmethod
    async def send(self, request: RecommendationRequest, credential: str) -> str:
        """Return the raw response body or raise a classified RecommendationError."""
        pass


class ResponseValidator(ABC):
    @abstractmethod
    def validate(self, raw_body: Union[str, bytes], preferences: UserPreferences) -> ValidationResult:
        pass


class CredentialStore(ABC):
    @abstractmethod
    def get(self) -> Optional[str]:
        pass

    @abstractmethod
    def save(self, credential: str):
        pass

    @abstractmethod
    def clear(self):
        pass
