"""
Source registry.

Dispatches an input (deck URL or decklist text) to the first source that
claims it. Sources are tried in a fixed order: the site scrapers first,
each matching one narrow URL shape, and the text decklist last as the
catch-all.

Dispatch is first-match-only. If the claiming source fails, the registry
returns None instead of trying the next capable source; ambiguous inputs
are resolved by ordering, not by trial.
"""

import inspect
import logging
from collections.abc import Iterable

import httpx

from mtgdeck.models.card import Card
from mtgdeck.parsers.base import DeckSource
from mtgdeck.parsers.decklist import DecklistSource
from mtgdeck.scrapers import (
    AetherhubSource,
    ArchidektSource,
    DeckstatsSource,
    MoxfieldSource,
    MtggoldfishSource,
    MtgjsonSource,
    ScryfallSource,
    TappedoutSource,
    TcgplayerSource,
)

logger = logging.getLogger(__name__)


def default_sources(client: httpx.AsyncClient | None = None) -> tuple[DeckSource, ...]:
    """
    All supported sources in dispatch order.

    Args:
        client: Optional httpx client shared by the site scrapers
    """
    return (
        AetherhubSource(client),
        ArchidektSource(client),
        DeckstatsSource(client),
        MoxfieldSource(client),
        MtggoldfishSource(client),
        MtgjsonSource(client),
        ScryfallSource(client),
        TappedoutSource(client),
        TcgplayerSource(client),
        DecklistSource(),
    )


class SourceRegistry:
    """Ordered collection of deck sources behind one can_handle/parse_deck pair."""

    def __init__(self, sources: Iterable[DeckSource]) -> None:
        self.sources: tuple[DeckSource, ...] = tuple(sources)

    def find_source(self, source: str) -> DeckSource | None:
        """
        First source, in order, that claims the input.

        A source whose can_handle raises is logged and treated as not
        claiming the input.
        """
        for candidate in self.sources:
            try:
                if candidate.can_handle(source):
                    return candidate
            except Exception as e:
                logger.warning("%r failed to check input: %s", candidate, e)
        return None

    def can_handle(self, source: str) -> bool:
        """
        True if any source claims the input.

        Does not guarantee that parse_deck will succeed.
        """
        return self.find_source(source) is not None

    async def parse_deck(self, source: str) -> list[Card] | None:
        """
        Parse a deck with the first source that claims the input.

        Returns:
            The chosen source's cards, or None if no source claims the input
            or the chosen source fails. Never raises.
        """
        chosen = self.find_source(source)
        if chosen is None:
            logger.debug("No source can handle input: %.80r", source)
            return None

        logger.debug("Dispatching to %r", chosen)

        try:
            result = chosen.parse_deck(source)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.warning("%r failed to parse deck: %s", chosen, e)
            return None

        if result is None:
            logger.info("%r could not parse deck", chosen)
        return result

    def parse_deck_sync(self, source: str) -> list[Card] | None:
        """
        Synchronous parse for text sources.

        Returns None when the claiming source needs network access, whether
        its parse_deck is a coroutine function or merely returns an awaitable.
        """
        chosen = self.find_source(source)
        if chosen is None or inspect.iscoroutinefunction(chosen.parse_deck):
            return None

        try:
            result = chosen.parse_deck(source)
        except Exception as e:
            logger.warning("%r failed to parse deck: %s", chosen, e)
            return None

        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            logger.info("%r cannot parse synchronously", chosen)
            return None

        return result


_default_registry = SourceRegistry(default_sources())


def can_handle(source: str) -> bool:
    """True if any supported source claims the input."""
    return _default_registry.can_handle(source)


async def parse_deck(source: str) -> list[Card] | None:
    """Parse a deck URL or decklist text with the default sources."""
    return await _default_registry.parse_deck(source)


def parse_deck_sync(source: str) -> list[Card] | None:
    """Parse decklist text without network access."""
    return _default_registry.parse_deck_sync(source)
