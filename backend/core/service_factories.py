from injector import Injector
from structlog.stdlib import BoundLogger

from domain.interfaces import ChatTransport, PromptComposer, ResponseValidator
from managers.recommendation_manager import RecommendationManager


def get_recommendation_manager(injector: Injector) -> RecommendationManager:
    return RecommendationManager(
        composer=injector.get(PromptComposer),
        transport=injector.get(ChatTransport),
        validator=injector.get(ResponseValidator),
        logger=injector.get(BoundLogger),
    )
