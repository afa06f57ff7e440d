"""
Archidekt deck scraper.

Deck URL: https://archidekt.com/decks/<deck_id>/<slug>
Archidekt exposes decks as JSON. Cards are grouped in user-defined
categories; categories flagged includedInDeck=False (Maybeboard,
Sideboard...) are left out.
"""

import re
from typing import Any

import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import RemoteDeckSource, fetch_json
from mtgdeck.scrapers.urls import build_pattern

ARCHIDEKT_API = "https://archidekt.com/api/decks"


def parse_archidekt_deck(deck: dict[str, Any]) -> list[Card]:
    """
    Convert an Archidekt deck payload to cards.

    A card is kept when it has no category or at least one of its categories
    is included in the deck. Its categories become its tags.
    """
    included = {
        category["name"]
        for category in deck.get("categories") or []
        if category.get("includedInDeck") is True and category.get("name") is not None
    }

    cards: list[Card] = []

    for entry in deck.get("cards") or []:
        categories = entry.get("categories") or []
        if categories and included.isdisjoint(categories):
            continue

        card = entry["card"]
        cards.append(
            Card(
                name=card["oracleCard"]["name"],
                quantity=entry["quantity"],
                extension=card["edition"]["editioncode"],
                number=card.get("collectorNumber"),
                tags=categories,
            )
        )

    return cards


class ArchidektSource(RemoteDeckSource):
    name = "archidekt"

    PATTERN = build_pattern("archidekt.com", r"/decks/(?P<deck_id>\d+)/?")

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> dict[str, Any]:
        return await fetch_json(client, f"{ARCHIDEKT_API}/{match['deck_id']}/")

    def _parse(self, payload: dict[str, Any]) -> list[Card]:
        return parse_archidekt_deck(payload)
