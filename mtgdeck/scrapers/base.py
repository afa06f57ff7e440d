"""
Base class for deck site scrapers.

A remote source claims inputs by URL shape only (no network access in
can_handle), then downloads and parses the deck in parse_deck.

Note: Web scraping is inherently fragile. Page structure and private APIs
may change without notice, so every failure is logged and reported as None
instead of propagating.
"""

import abc
import logging
import re
from typing import Any

import httpx

from mtgdeck.config import settings
from mtgdeck.models.card import Card
from mtgdeck.parsers.base import DeckSource
from mtgdeck.scrapers.urls import match_pattern

logger = logging.getLogger(__name__)


class DeckDownloadError(Exception):
    """Raised when a deck page lacks the data needed to locate the deck."""

    pass


def create_client() -> httpx.AsyncClient:
    """HTTP client configured from settings."""
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        timeout=settings.http_timeout,
    )


class RemoteDeckSource(DeckSource):
    """
    A deck site reachable over HTTP.

    Subclasses set PATTERN and implement _download (fetch the raw payload)
    and _parse (turn the payload into cards).

    Usage:
        source = MoxfieldSource()
        if source.can_handle(url):
            cards = await source.parse_deck(url)
    """

    PATTERN: re.Pattern[str]

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        """
        Args:
            client: Optional httpx client for connection reuse. When omitted a
                    client is created for each parse_deck call.
        """
        self._client = client

    def can_handle(self, source: str) -> bool:
        return match_pattern(source, self.PATTERN) is not None

    async def parse_deck(self, source: str) -> list[Card] | None:
        match = match_pattern(source, self.PATTERN)
        if match is None:
            return None

        try:
            if self._client is not None:
                payload = await self._download(self._client, source, match)
            else:
                async with create_client() as client:
                    payload = await self._download(client, source, match)

            cards = self._parse(payload)

        except httpx.HTTPStatusError as e:
            logger.warning(
                "%s: HTTP %d fetching %s", self.name, e.response.status_code, e.request.url
            )
            return None
        except httpx.HTTPError as e:
            logger.warning("%s: request failed for %s: %s", self.name, source, e)
            return None
        except DeckDownloadError as e:
            logger.warning("%s: %s (%s)", self.name, e, source)
            return None
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("%s: unexpected payload from %s: %r", self.name, source, e)
            return None

        logger.debug("%s: parsed %d cards from %s", self.name, len(cards), source)
        return cards

    @abc.abstractmethod
    async def _download(
        self, client: httpx.AsyncClient, source: str, match: re.Match[str]
    ) -> Any:
        """
        Fetch the raw deck payload.

        Raises:
            httpx.HTTPError: If a request fails
            DeckDownloadError: If the page does not reference a deck
        """

    @abc.abstractmethod
    def _parse(self, payload: Any) -> list[Card]:
        """Convert the downloaded payload to cards."""


async def fetch_json(client: httpx.AsyncClient, url: str, **kwargs: Any) -> Any:
    """GET a URL and decode its JSON body."""
    response = await client.get(url, **kwargs)
    response.raise_for_status()
    return response.json()


async def fetch_text(client: httpx.AsyncClient, url: str, **kwargs: Any) -> str:
    """GET a URL and return its body as text."""
    response = await client.get(url, **kwargs)
    response.raise_for_status()
    return response.text
