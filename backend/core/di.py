import structlog
from injector import Injector, singleton
from structlog.stdlib import BoundLogger

from domain.interfaces import ChatTransport, CredentialStore, PromptComposer, ResponseValidator
from repositories.credentials import FileCredentialStore
from services.prompt_service import ChatPromptComposer
from services.transport_service import OpenAIChatTransport
from services.validation_service import ChatResponseValidator


def create_injector() -> Injector:
    injector = Injector()
    injector.binder.bind(PromptComposer, to=ChatPromptComposer, scope=singleton)
    injector.binder.bind(ChatTransport, to=OpenAIChatTransport, scope=singleton)
    injector.binder.bind(ResponseValidator, to=ChatResponseValidator, scope=singleton)
    injector.binder.bind(CredentialStore, to=FileCredentialStore, scope=singleton)
    injector.binder.bind(
        BoundLogger, to=structlog.get_logger("mood_movies"), scope=singleton
    )
    return injector
