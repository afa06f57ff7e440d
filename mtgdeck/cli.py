"""
Command-line entry point.

Reads a deck from a URL, a decklist file, or stdin and prints it in
canonical decklist format:

    mtgdeck https://www.moxfield.com/decks/Agzx8zsi5UezWBUX5hMJPQ
    mtgdeck my_deck.txt --sort
    pbpaste | mtgdeck -
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mtgdeck.config import settings
from mtgdeck.models.card import Card
from mtgdeck.parsers.decklist import format_card
from mtgdeck.parsers.registry import parse_deck
from mtgdeck.scrapers.urls import get_scryfall_url

logger = logging.getLogger(__name__)


def read_source(source: str) -> str:
    """
    Resolve the SOURCE argument to the string handed to the registry.

    "-" reads stdin, an existing path reads the file, anything else
    (typically a URL) is passed through unchanged.
    """
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    if path.is_file():
        return path.read_text(encoding="utf-8")

    return source


def render(cards: list[Card], *, sort: bool = False, links: bool = False) -> str:
    if sort:
        cards = sorted(cards)

    lines = []
    for card in cards:
        line = format_card(card)
        if links:
            line += f"  <{get_scryfall_url(card.name, card.extension, card.number)}>"
        lines.append(line)

    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Parse a Magic: The Gathering deck from a URL or decklist",
    )
    parser.add_argument(
        "source",
        help="Deck URL, path to a decklist file, or - for stdin",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort cards by name, quantity, set and number",
    )
    parser.add_argument(
        "--links",
        action="store_true",
        help="Append the Scryfall API URL of each card",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        source = read_source(args.source)
    except OSError as e:
        logger.error("Could not read %s: %s", args.source, e)
        return 1

    cards = asyncio.run(parse_deck(source))
    if not cards:
        logger.error("No deck could be parsed from %s", args.source)
        return 1

    print(render(cards, sort=args.sort, links=args.links))
    return 0


if __name__ == "__main__":
    sys.exit(main())
