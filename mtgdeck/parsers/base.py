"""
Deck source contract.

Every source - the text decklist grammar or a vendor-specific extractor -
answers two questions about an input string:

    can_handle(source)  -> does this input look like mine?
    parse_deck(source)  -> the cards, or None if extraction failed

parse_deck may be a plain method or a coroutine; the registry normalizes
both. Sources never raise for bad input, failures surface as None.
"""

import abc
from collections.abc import Awaitable

from mtgdeck.models.card import Card

DeckResult = list[Card] | None


class DeckSource(abc.ABC):
    """Abstract base for anything that can turn an input string into cards."""

    name: str = ""

    @abc.abstractmethod
    def can_handle(self, source: str) -> bool:
        """
        Check whether this source recognizes the input.

        Must be cheap and must not perform network I/O.
        """

    @abc.abstractmethod
    def parse_deck(self, source: str) -> DeckResult | Awaitable[DeckResult]:
        """
        Extract the cards described by the input.

        Returns:
            List of cards, or None if the input could not be handled
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
