"""
Deckstats deck scraper.

Deck URL: https://deckstats.net/decks/<user_id>/<deck_id>-<slug>
Deckstats has no public API; the deck page embeds its data as a JavaScript
call: init_deck_data({...}, ...);
"""

import json
import re
from typing import Any

import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import DeckDownloadError, RemoteDeckSource, fetch_text
from mtgdeck.scrapers.urls import absolute_url, build_pattern

START_TOKEN = "init_deck_data("
END_TOKEN = ");"


def extract_deck_data(html: str) -> dict[str, Any]:
    """
    Extract the deck JSON object passed to init_deck_data.

    Raises:
        DeckDownloadError: If the page does not call init_deck_data
        ValueError: If the embedded object is not valid JSON
    """
    line = next((line for line in html.split("\n") if START_TOKEN in line), None)
    if line is None:
        raise DeckDownloadError("Could not find init_deck_data in page")

    arguments = line[line.index(START_TOKEN) + len(START_TOKEN) :].lstrip()
    if END_TOKEN in arguments:
        arguments = arguments[: arguments.index(END_TOKEN)]

    # First argument only: stop at the brace closing the opening one
    depth = 0
    end = 0
    for index, char in enumerate(arguments):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        if depth <= 0:
            end = index
            break

    data = json.loads(arguments[: end + 1])
    if not isinstance(data, dict):
        raise ValueError("init_deck_data argument is not an object")
    return data


def _get_tags(card: dict[str, Any]) -> list[str]:
    tags = []
    if card.get("isCommander") is True:
        tags.append("commander")
    if card.get("isCompanion") is True:
        tags.append("companion")
    return tags


def parse_deckstats_deck(deck: dict[str, Any]) -> list[Card]:
    """Convert Deckstats deck data to cards, section by section."""
    cards: list[Card] = []

    for section in deck.get("sections") or []:
        for card in section.get("cards") or []:
            cards.append(Card(card["name"], card["amount"], tags=_get_tags(card)))

    return cards


class DeckstatsSource(RemoteDeckSource):
    name = "deckstats"

    PATTERN = build_pattern(
        "deckstats.net", r"/decks/(?P<user_id>\d+)/(?P<deck_id>\d+-.*)/?"
    )

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> dict[str, Any]:
        html = await fetch_text(client, absolute_url(source))
        return extract_deck_data(html)

    def _parse(self, payload: dict[str, Any]) -> list[Card]:
        return parse_deckstats_deck(payload)
