from typing import Optional


class RecommendationError(Exception):
    """Base for every failure surfaced to the caller of a recommendation request."""

    kind = "recommendation_error"
    default_message = "Failed to get movie recommendations"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __eq__(self, other):
        return type(self) is type(other) and self.message == other.message

    def __hash__(self):
        return hash((type(self), self.message))


class MissingCredentialError(RecommendationError):
    kind = "missing_credential"
    default_message = "API key is required"


class AuthenticationFailureError(RecommendationError):
    """The provider rejected the credential; callers should discard any stored copy."""

    kind = "authentication_failure"
    default_message = "Invalid API key. Please check your OpenAI API key and try again."


class ProviderError(RecommendationError):
    kind = "provider_error"

    def __init__(self, provider_message: str):
        self.provider_message = provider_message
        super().__init__(f"OpenAI API Error: {provider_message}")


class TransportFailureError(RecommendationError):
    kind = "transport_failure"


class MalformedResponseError(RecommendationError):
    kind = "malformed_response"
    default_message = "Invalid response format from provider"


class EmptyResultError(RecommendationError):
    kind = "empty_result"
    default_message = "No new recommendations left after excluding already seen titles"
