"""
MTGGoldfish deck scraper.

Deck URL: https://www.mtggoldfish.com/deck/<deck_id>

The deck table is served by a component endpoint that requires the CSRF
token from the deck page. Its response is a JavaScript snippet wrapping
escaped HTML, which is unescaped before parsing.
"""

import html
import re

import bs4
import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import RemoteDeckSource, fetch_text
from mtgdeck.scrapers.urls import absolute_url, build_pattern

MTGGOLDFISH_BASE = "https://www.mtggoldfish.com"

# Category headers that map to a tag; other headers (Creatures, Lands...) don't
CATEGORY_TAGS = ("commander", "companion")

# "Sol Ring [CMR]" style data-card-id
_CARD_ID_SET = re.compile(r"\[(.*?)\]")

_JS_ESCAPES = (
    ("\\'", "'"),
    ('\\"', '"'),
    ("\\/", "/"),
    ("\\n", ""),
)


def extract_csrf_token(page: str) -> str | None:
    soup = bs4.BeautifulSoup(page, "html.parser")
    meta = soup.find("meta", attrs={"name": "csrf-token"})
    if meta is None:
        return None
    return meta.get("content")


def _clean_component(text: str) -> str:
    cleaned = text.split("\n")[0]
    for escaped, plain in _JS_ESCAPES:
        cleaned = cleaned.replace(escaped, plain)
    return html.unescape(cleaned)


def parse_mtggoldfish_deck(component: str) -> list[Card]:
    """
    Convert the deck component response to cards.

    Rows follow category header rows; a "Commander" or "Companion" header
    tags every card row up to the next header.
    """
    soup = bs4.BeautifulSoup(_clean_component(component), "html.parser")
    cards: list[Card] = []
    current_tag: str | None = None

    for row in soup.select(".deck-view-deck-table tr"):
        if "deck-category-header" in (row.get("class") or []):
            category = row.get_text().lower()
            current_tag = next((tag for tag in CATEGORY_TAGS if tag in category), None)
            continue

        link = row.find("a")
        quantity_cell = row.find("td")
        if link is None or quantity_cell is None:
            continue

        quantity = quantity_cell.get_text(strip=True)
        if not quantity.isdigit():
            continue

        extension = None
        card_id = link.get("data-card-id")
        if card_id:
            match = _CARD_ID_SET.search(card_id)
            if match and match.group(1):
                extension = match.group(1).lower()

        cards.append(
            Card(
                name=link.get_text(strip=True),
                quantity=int(quantity),
                extension=extension,
                tags=[current_tag] if current_tag else None,
            )
        )

    return cards


class MtggoldfishSource(RemoteDeckSource):
    name = "mtggoldfish"

    PATTERN = build_pattern("mtggoldfish.com", r"/deck/(?P<deck_id>\d+)/?")

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> str:
        page = await fetch_text(client, absolute_url(source), headers={"Accept": "text/html"})

        headers = {"X-Requested-With": "XMLHttpRequest"}
        csrf_token = extract_csrf_token(page)
        if csrf_token:
            headers["X-CSRF-Token"] = csrf_token

        return await fetch_text(
            client,
            f"{MTGGOLDFISH_BASE}/deck/component",
            params={"id": match["deck_id"]},
            headers=headers,
        )

    def _parse(self, payload: str) -> list[Card]:
        return parse_mtggoldfish_deck(payload)
