from typing import Callable, Optional

import httpx
import orjson
from injector import NoInject, inject
from structlog.stdlib import BoundLogger

from core.settings import settings
from domain.entities import RecommendationRequest
from domain.errors import AuthenticationFailureError, ProviderError, TransportFailureError
from domain.interfaces import ChatTransport

ClientFactory = Callable[[], httpx.AsyncClient]


def default_client_factory() -> httpx.AsyncClient:
    # A slow completion is waited for indefinitely.
    return httpx.AsyncClient(timeout=httpx.Timeout(None))


class OpenAIChatTransport(ChatTransport):
    @inject
    def __init__(self, logger: BoundLogger, client_factory: NoInject[Optional[ClientFactory]] = None):
        self.url = settings.openai_api_url
        self.client_factory = client_factory or default_client_factory
        self.logger = logger

    async def send(self, request: RecommendationRequest, credential: str) -> str:
        headers = {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        }
        self.logger.info("Sending chat completion request", url=self.url, model=request.model)
        try:
            async with self.client_factory() as client:
                response = await client.post(self.url, content=orjson.dumps(request.to_payload()), headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._classify_status_error(e.response) from e
        except httpx.HTTPError as e:
            self.logger.error("Chat completion request failed", error=str(e), error_type=type(e).__name__)
            raise TransportFailureError() from e

        self.logger.info("Chat completion response received", status_code=response.status_code, size=len(response.content))
        return response.text

    def _classify_status_error(self, response: httpx.Response):
        status_code = response.status_code
        if status_code == 401:
            self.logger.warning("Provider rejected the credential", status_code=status_code)
            return AuthenticationFailureError()

        provider_message = self._extract_provider_message(response)
        if provider_message:
            self.logger.error("Provider returned an error", status_code=status_code, provider_message=provider_message)
            return ProviderError(provider_message)

        self.logger.error("Provider returned an unexpected status", status_code=status_code)
        return TransportFailureError()

    @staticmethod
    def _extract_provider_message(response: httpx.Response) -> Optional[str]:
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            return None
        if not isinstance(body, dict):
            return None
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str) and error["message"]:
            return error["message"]
        return None
