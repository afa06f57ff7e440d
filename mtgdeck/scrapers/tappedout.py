"""
TappedOut deck scraper.

Deck URL: https://tappedout.net/mtg-decks/<slug>/
The deck page is scraped directly (with the custom category view) since
TappedOut has no public API. Quantities come from the board's qty links,
commander/companion status from the h3 section headers.
"""

import re

import bs4
import httpx

from mtgdeck.models.card import Card
from mtgdeck.scrapers.base import RemoteDeckSource, fetch_text
from mtgdeck.scrapers.urls import absolute_url, build_pattern

# "Commander (1)" -> "Commander"
_HEADER_COUNT = re.compile(r"^(.*?)(?:\s+\(\d+\))?$")
_NON_WORD = re.compile(r"[^\w\s]")

HEADER_TAGS = {
    "commander": "commander",
    "commanders": "commander",
    "companion": "companion",
    "companions": "companion",
}


def format_tag(header: str) -> str:
    """Normalize a section header: "Commanders (2)" -> "commanders"."""
    match = _HEADER_COUNT.match(header.strip())
    if match:
        header = match.group(1)
    header = _NON_WORD.sub("", header)
    return "_".join(header.lower().split())


def _is_card_link(element: bs4.Tag) -> bool:
    return (
        element.name == "a"
        and "card-hover" in (element.get("class") or [])
        and element.has_attr("data-name")
        and element.has_attr("data-url")
    )


def _section_card_names(header: bs4.Tag) -> list[str]:
    """Names of the card links between a header and the next h3."""
    names: list[str] = []

    for sibling in header.find_next_siblings():
        if sibling.name == "h3":
            break
        if _is_card_link(sibling):
            names.append(str(sibling["data-name"]))
        names.extend(
            str(link["data-name"]) for link in sibling.find_all("a") if _is_card_link(link)
        )

    return names


def parse_tappedout_deck(page: str) -> list[Card]:
    """
    Convert a TappedOut deck page to cards, sorted by name.

    Cards listed under a Commander(s)/Companion(s) header get that tag.
    """
    soup = bs4.BeautifulSoup(page, "html.parser")
    board = soup.select_one(".board-container")
    if board is None:
        return []

    quantities: dict[str, int] = {}
    for link in board.select("a.qty.board[data-name][data-qty]"):
        quantities[str(link["data-name"])] = int(str(link["data-qty"]))

    tags: dict[str, set[str]] = {}
    for header in board.find_all("h3"):
        tag = HEADER_TAGS.get(format_tag(header.get_text()))
        for name in _section_card_names(header):
            card_tags = tags.setdefault(name, set())
            if tag:
                card_tags.add(tag)

    return [
        Card(name, quantities.get(name, 1), tags=tags.get(name))
        for name in sorted(quantities.keys() | tags.keys())
    ]


class TappedoutSource(RemoteDeckSource):
    name = "tappedout"

    PATTERN = build_pattern("tappedout.net", r"/mtg-decks/(?P<deck_id>.+)/?")

    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> str:
        return await fetch_text(client, absolute_url(source), params={"cat": "custom"})

    def _parse(self, payload: str) -> list[Card]:
        return parse_tappedout_deck(payload)
