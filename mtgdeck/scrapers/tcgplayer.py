"""
TCGplayer deck scraper.

Deck URL: https://www.tcgplayer.com/content/magic-the-gathering/deck/<name>/<deck_id>
Deck data comes from TCGplayer's infinite API. Sub-decks reference cards by
numeric ID; names and sets live in a separate `cards` lookup table.
"""

import re
from typing import Any

import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import RemoteDeckSource, fetch_json
from mtgdeck.scrapers.urls import build_pattern

TCGPLAYER_API = "https://infinite-api.tcgplayer.com/deck/magic"

# Sub-deck name -> tag, in output order
SUBDECKS = (
    ("commandzone", "commander"),
    ("sideboard", "companion"),
    ("maindeck", None),
)


def parse_tcgplayer_deck(deck: dict[str, Any]) -> list[Card]:
    """Convert a TCGplayer deck payload to cards, command zone first."""
    result = deck.get("result") or {}
    subdecks = (result.get("deck") or {}).get("subDecks") or {}
    details = result.get("cards") or {}

    cards: list[Card] = []

    for subdeck, tag in SUBDECKS:
        for entry in subdecks.get(subdeck) or []:
            card_id = entry.get("cardID")
            if card_id is None:
                continue

            detail = details.get(str(card_id)) or {}
            if not detail.get("name"):
                continue

            cards.append(
                Card(
                    name=detail["name"],
                    quantity=entry["quantity"],
                    extension=detail.get("set"),
                    tags=[tag] if tag else None,
                )
            )

    return cards


class TcgplayerSource(RemoteDeckSource):
    name = "tcgplayer"

    PATTERN = build_pattern(
        "tcgplayer.com",
        r"/(content/)?magic-the-gathering/deck/(?P<deck_name>.+)/(?P<deck_id>\d+)/?",
    )

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> dict[str, Any]:
        return await fetch_json(
            client,
            f"{TCGPLAYER_API}/{match['deck_id']}/",
            params={"subDecks": "true", "cards": "true"},
        )

    def _parse(self, payload: dict[str, Any]) -> list[Card]:
        return parse_tcgplayer_deck(payload)
