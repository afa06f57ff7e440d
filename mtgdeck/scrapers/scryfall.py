"""
Scryfall deck scraper.

Deck URL: https://scryfall.com/@<user>/decks/<uuid>
Scryfall publishes decks as CSV exports with one row per card and a
`section` column (mainboard, commanders, outside...).
"""

import csv
import re
from io import StringIO

import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import RemoteDeckSource, fetch_text
from mtgdeck.scrapers.urls import SCRYFALL_API, build_pattern

SECTION_TAGS = {
    "commanders": "commander",
    "outside": "companion",
}


def parse_scryfall_csv(text: str) -> list[Card]:
    """
    Convert a Scryfall deck CSV export to cards.

    Malformed rows (wrong column count, non-numeric count, no name) are
    skipped.
    """
    cards: list[Card] = []
    reader = csv.DictReader(StringIO(text.strip()))

    for row in reader:
        # DictReader files surplus fields under None and fills missing ones with None
        if None in row or None in row.values():
            continue

        name = row.get("name")
        if not name:
            continue

        try:
            count = int(row.get("count") or 1)
        except ValueError:
            continue

        tag = SECTION_TAGS.get((row.get("section") or "").lower())
        cards.append(
            Card(
                name=name,
                quantity=count,
                extension=row.get("set_code"),
                number=row.get("collector_number"),
                tags=[tag] if tag else None,
            )
        )

    return cards


class ScryfallSource(RemoteDeckSource):
    name = "scryfall"

    PATTERN = build_pattern(
        "scryfall.com",
        r"/(?P<user_id>@.+)/decks/(?P<deck_id>\w{8}-\w{4}-\w{4}-\w{4}-\w{12})/?",
    )

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> str:
        return await fetch_text(client, f"{SCRYFALL_API}/decks/{match['deck_id']}/export/csv")

    def _parse(self, payload: str) -> list[Card]:
        return parse_scryfall_csv(payload)
