"""
Aetherhub deck scraper.

Deck URL: https://aetherhub.com/Deck/<slug>
The deck page only carries a numeric deck ID (in a data-deckid attribute);
the cards are then fetched as MTGA-style JSON.
"""

import re
from typing import Any

import bs4
import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import DeckDownloadError, RemoteDeckSource, fetch_json, fetch_text
from mtgdeck.scrapers.urls import absolute_url, build_pattern

AETHERHUB_DECK_JSON = "https://aetherhub.com/Deck/FetchMtgaDeckJson"

# Attribute values are sometimes rendered with literal (or escaped) quotes
_QUOTES = re.compile(r"^\\?[\"']|\\?[\"']$")


def extract_deck_id(html: str) -> str | None:
    """Return the first numeric data-deckid on the page."""
    soup = bs4.BeautifulSoup(html, "html.parser")

    for element in soup.select("[data-deckid]"):
        deck_id = _QUOTES.sub("", str(element["data-deckid"]))
        if deck_id.isdigit():
            return deck_id

    return None


def parse_aetherhub_deck(deck: dict[str, Any]) -> list[Card]:
    """
    Convert Aetherhub's converted deck JSON to cards.

    Entries without a quantity are category headers ("Commander",
    "Creatures"...): their lowercased name tags the cards that follow.
    """
    cards: list[Card] = []
    last_category: str | None = None

    for entry in deck.get("convertedDeck") or []:
        quantity = entry.get("quantity")
        name = entry.get("name")

        if not quantity:
            last_category = name
        elif name:
            tags = [last_category.lower()] if last_category else None
            cards.append(Card(name, quantity, entry.get("set"), entry.get("number"), tags))

    return cards


class AetherhubSource(RemoteDeckSource):
    name = "aetherhub"

    PATTERN = build_pattern("aetherhub.com", r"/Deck/(?P<deck_id>.+)/?")

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> dict[str, Any]:
        html = await fetch_text(client, absolute_url(source))

        deck_id = extract_deck_id(html)
        if deck_id is None:
            raise DeckDownloadError("Could not find numeric deck ID in page")

        return await fetch_json(
            client,
            AETHERHUB_DECK_JSON,
            params={"deckId": deck_id, "langId": "0", "simple": "false"},
        )

    def _parse(self, payload: dict[str, Any]) -> list[Card]:
        return parse_aetherhub_deck(payload)
