"""
Moxfield deck scraper.

Deck URL: https://www.moxfield.com/decks/<deck_id>
Deck data comes from Moxfield's public v2 API as JSON, with boards keyed by
card name.
"""

import re
from typing import Any

import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import RemoteDeckSource, fetch_json
from mtgdeck.scrapers.urls import absolute_url, build_pattern

MOXFIELD_API = "https://api.moxfield.com/v2/decks/all"


def _extract_information(entry: dict[str, Any]) -> tuple[int, str | None, str | None]:
    """Pull (quantity, set code, collector number) from a board entry."""
    card = entry.get("card") or {}
    return entry.get("quantity") or 1, card.get("set"), card.get("cn")


def parse_moxfield_deck(deck: dict[str, Any]) -> list[Card]:
    """
    Convert a Moxfield deck payload to cards.

    Commanders and companions come first, tagged as such, then the mainboard.
    """
    cards: list[Card] = []

    boards = (
        ("commanders", ["commander"]),
        ("companions", ["companion"]),
        ("mainboard", []),
    )

    for board, tags in boards:
        for name, entry in (deck.get(board) or {}).items():
            quantity, extension, number = _extract_information(entry)
            cards.append(Card(name, quantity, extension, number, tags))

    return cards


class MoxfieldSource(RemoteDeckSource):
    name = "moxfield"

    PATTERN = build_pattern("moxfield.com", r"/decks/(?P<deck_id>[a-zA-Z0-9_-]+)/?")

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> dict[str, Any]:
        # Moxfield's API rejects clients that never touched the deck page
        await client.head(absolute_url(source))
        return await fetch_json(client, f"{MOXFIELD_API}/{match['deck_id']}")

    def _parse(self, payload: dict[str, Any]) -> list[Card]:
        return parse_moxfield_deck(payload)
