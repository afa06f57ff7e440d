from mtgdeck.parsers.base import DeckSource
from mtgdeck.parsers.decklist import DecklistSource, format_card, format_deck
from mtgdeck.parsers.grammar import ParsedLine, parse_line
from mtgdeck.parsers.registry import (
    SourceRegistry,
    can_handle,
    default_sources,
    parse_deck,
    parse_deck_sync,
)

__all__ = [
    "DeckSource",
    "DecklistSource",
    "ParsedLine",
    "SourceRegistry",
    "can_handle",
    "default_sources",
    "format_card",
    "format_deck",
    "parse_deck",
    "parse_deck_sync",
    "parse_line",
]
