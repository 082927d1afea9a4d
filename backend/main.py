"""
main.py
--------
Smart Tour terminal chat.

Walks the same four-question flow as POST /chat, prints the recommendation
text, and writes the recommended places to an HTML file after each cycle.

Run:
  python main.py
  python main.py --map-out trip.html
  python main.py --list-view          # static list instead of the Leaflet map

Type "exit" or "quit" (or press Ctrl-C) to leave at any point.
Requires GEMINI_API_KEY; OPENCAGE_API_KEY is optional (gazetteer fallback).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import config
from modules.conversation import ConversationController, ConversationState
from modules.errors import ConfigurationError
from modules.mapping import render_places
from modules.recommendation.service import RecommendationResult, build_recommendation_service
from schemas.recommendation import Place, UserPreferences

_EXIT_WORDS = frozenset({"exit", "quit"})


def _banner(title: str) -> None:
    width = 70
    print("\n" + "═" * width)
    print(f"  {title}")
    print("═" * width)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Smart Tour travel recommendations in the terminal")
    parser.add_argument(
        "--map-out",
        default="recommendations_map.html",
        help="where to write the rendered places (default: %(default)s)",
    )
    parser.add_argument(
        "--list-view",
        action="store_true",
        help="write a static list instead of an interactive map",
    )
    return parser.parse_args(argv)


def write_map(places: list[Place], path: Path, *, interactive: bool) -> Path:
    rendered = render_places(places, interactive=interactive)
    path.write_text(rendered.html, encoding="utf-8")
    return path


def run(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        service = build_recommendation_service()
    except ConfigurationError as exc:
        print(f"  ✗  {exc} ({exc.cause})")
        return 1

    async def recommend(prefs: UserPreferences) -> RecommendationResult:
        return await service.recommend(prefs)

    controller = ConversationController(recommend)
    map_path = Path(args.map_out)

    _banner("Smart Tour")
    print(controller.greeting())

    while controller.state is not ConversationState.END:
        try:
            text = input("\n> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if text.strip().lower() in _EXIT_WORDS:
            break

        turn = asyncio.run(controller.handle(text))
        for message in turn.messages:
            print(message)

        if turn.recommendations is not None:
            written = write_map(turn.places, map_path, interactive=not args.list_view)
            print(f"\n  ·  {len(turn.places)} places written to {written.resolve()}")

    return 0


if __name__ == "__main__":
    sys.exit(run())
