"""
MTGJSON deck file loader.

Deck URL: https://mtgjson.com/api/v5/decks/<file>.json
Precon deck files are plain JSON documents with commander and mainBoard lists.
"""

import re
from typing import Any

import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import RemoteDeckSource, fetch_json
from mtgdeck.scrapers.urls import absolute_url, build_pattern


def parse_mtgjson_deck(deck: dict[str, Any]) -> list[Card]:
    """Convert an MTGJSON deck file to cards, commanders first."""
    data = deck.get("data") or {}
    cards: list[Card] = []

    for entry in data.get("commander") or []:
        cards.append(Card(entry["name"], entry["count"], entry.get("setCode"), tags=["commander"]))

    for entry in data.get("mainBoard") or []:
        cards.append(Card(entry["name"], entry["count"], entry.get("setCode")))

    return cards


class MtgjsonSource(RemoteDeckSource):
    name = "mtgjson"

    PATTERN = build_pattern("mtgjson.com", r"/api/v5/decks/(?P<deck_id>.+\.json)")

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> dict[str, Any]:
        return await fetch_json(client, absolute_url(source))

    def _parse(self, payload: dict[str, Any]) -> list[Card]:
        return parse_mtgjson_deck(payload)
