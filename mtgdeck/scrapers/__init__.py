"""
Deck site scrapers.

One RemoteDeckSource per supported site. Each claims URLs of one shape and
downloads the deck through the site's API or page markup.
"""

from mtgdeck.scrapers.aetherhub import AetherhubSource
from mtgdeck.scrapers.archidekt import ArchidektSource
from mtgdeck.scrapers.base import DeckDownloadError, RemoteDeckSource, create_client
from mtgdeck.scrapers.deckstats import DeckstatsSource
from mtgdeck.scrapers.moxfield import MoxfieldSource
from mtgdeck.scrapers.mtggoldfish import MtggoldfishSource
from mtgdeck.scrapers.mtgjson import MtgjsonSource
from mtgdeck.scrapers.scryfall import ScryfallSource
from mtgdeck.scrapers.tappedout import TappedoutSource
from mtgdeck.scrapers.tcgplayer import TcgplayerSource
from mtgdeck.scrapers.urls import build_pattern, get_scryfall_url, match_pattern

__all__ = [
    "AetherhubSource",
    "ArchidektSource",
    "DeckDownloadError",
    "DeckstatsSource",
    "MoxfieldSource",
    "MtggoldfishSource",
    "MtgjsonSource",
    "RemoteDeckSource",
    "ScryfallSource",
    "TappedoutSource",
    "TcgplayerSource",
    "build_pattern",
    "create_client",
    "get_scryfall_url",
    "match_pattern",
]
