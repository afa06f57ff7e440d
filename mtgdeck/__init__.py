"""
mtgdeck: read Magic: The Gathering decks from text decklists and deck sites.

    from mtgdeck import parse_deck, format_deck

    cards = await parse_deck("https://www.moxfield.com/decks/Agzx8zsi5UezWBUX5hMJPQ")
    print(format_deck(cards))
"""

from mtgdeck.models.card import Card
from mtgdeck.parsers import (
    DeckSource,
    SourceRegistry,
    can_handle,
    format_deck,
    parse_deck,
    parse_deck_sync,
)

__all__ = [
    "Card",
    "DeckSource",
    "SourceRegistry",
    "can_handle",
    "format_deck",
    "parse_deck",
    "parse_deck_sync",
]
