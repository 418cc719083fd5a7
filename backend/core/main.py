import argparse
import asyncio
import getpass
import logging
import sys
from typing import List, Optional

import orjson
from dotenv import load_dotenv
from injector import Injector
from pydantic import ValidationError

from core.di import create_injector
from core.log_config import setup_logging
from core.service_factories import get_recommendation_manager
from core.settings import settings
from domain.errors import AuthenticationFailureError, MissingCredentialError, RecommendationError
from domain.interfaces import CredentialStore
from schemas.preferences import ContentType, Language, Mood, Platform, UserPreferences
from schemas.recommendation import MovieRecommendation, RecommendationBatch
from services.render_service import render_batch


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mood-movies",
        description="Get movie and series recommendations that fit your mood.",
    )
    parser.add_argument("--mood", required=True, choices=[m.value for m in Mood], help="How are you feeling?")
    parser.add_argument(
        "--language", dest="languages", action="append", required=True, choices=[lang.value for lang in Language]
    )
    parser.add_argument(
        "--platform", dest="platforms", action="append", required=True, choices=[p.value for p in Platform]
    )
    parser.add_argument(
        "--content-type",
        dest="content_types",
        action="append",
        required=True,
        choices=[c.value for c in ContentType],
    )
    parser.add_argument(
        "--exclude", dest="exclude_titles", action="append", metavar="TITLE", help="Title you have already seen"
    )
    parser.add_argument("--api-key", help="OpenAI API key (defaults to OPENAI_API_KEY or the saved key)")
    parser.add_argument("--details", action="store_true", help="Show cast, crew, ratings and trailer")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print the recommendations as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def preferences_from_args(args: argparse.Namespace) -> UserPreferences:
    return UserPreferences(
        mood=args.mood,
        languages=tuple(dict.fromkeys(args.languages)),
        platforms=tuple(dict.fromkeys(args.platforms)),
        content_types=tuple(dict.fromkeys(args.content_types)),
        exclude_titles=tuple(args.exclude_titles) if args.exclude_titles else None,
    )


def resolve_credential(store: CredentialStore, explicit: Optional[str] = None, prompt=None) -> str:
    if explicit:
        return explicit
    credential = store.get()
    if credential:
        return credential
    prompt = prompt or getpass.getpass
    try:
        credential = prompt("Please enter your OpenAI API key: ").strip()
    except EOFError:
        raise MissingCredentialError()
    if not credential:
        raise MissingCredentialError()
    store.save(credential)
    return credential


def format_output(movies: List[MovieRecommendation], details: bool = False, as_json: bool = False) -> str:
    if as_json:
        batch = RecommendationBatch(movies=movies)
        return orjson.dumps(batch.model_dump(by_alias=True), option=orjson.OPT_INDENT_2).decode()
    return render_batch(movies, details=details)


async def run(preferences: UserPreferences, credential: str, injector: Injector) -> List[MovieRecommendation]:
    manager = get_recommendation_manager(injector)
    return await manager.get_recommendations(preferences, credential)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(dev_mode=not settings.log_json, level=logging.INFO if args.verbose else logging.WARNING)

    try:
        preferences = preferences_from_args(args)
    except ValidationError as e:
        parser.error(str(e))

    injector = create_injector()
    store = injector.get(CredentialStore)
    try:
        credential = resolve_credential(store, explicit=args.api_key)
        movies = asyncio.run(run(preferences, credential, injector))
    except AuthenticationFailureError as e:
        store.clear()
        print(e.message, file=sys.stderr)
        return 1
    except RecommendationError as e:
        print(e.message, file=sys.stderr)
        return 1

    print(format_output(movies, details=args.details, as_json=args.as_json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
