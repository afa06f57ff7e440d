"""URL helpers shared by the deck site scrapers."""

import re
from urllib.parse import quote

SCRYFALL_API = "https://api.scryfall.com"


def build_pattern(domain: str, path: str = "") -> re.Pattern[str]:
    """
    Build the URL pattern a deck site scraper claims.

    The scheme is optional and any subdomain is accepted, so
    "moxfield.com/decks/x", "https://www.moxfield.com/decks/x" and
    "http://api.moxfield.com/decks/x" all match build_pattern("moxfield.com", ...).

    Args:
        domain: Site domain, matched literally
        path: Regex for the path, may contain named groups (e.g. deck_id)

    Returns:
        Compiled pattern anchored at the start of the URL
    """
    scheme = r"^(?:https?://)?"
    subdomain = r"(?:[a-zA-Z0-9-]+\.)*"
    separator = "" if path.startswith("/") else "/"

    return re.compile(scheme + subdomain + re.escape(domain.rstrip("/")) + separator + path)


def match_pattern(url: object, pattern: re.Pattern[str]) -> re.Match[str] | None:
    """Match a URL against a scraper pattern; non-string input never matches."""
    if not isinstance(url, str):
        return None
    return pattern.match(url)


def _format_name(card_name: str) -> str:
    return quote(" ".join(card_name.split()), safe="")


def get_scryfall_url(
    name: str | None = None,
    extension: str | None = None,
    number: str | None = None,
) -> str:
    """
    Build the Scryfall API URL that identifies a card.

    Most specific lookup wins:
        set + collector number -> /cards/<set>/<number>
        name + set             -> /cards/named?set=<set>&exact=<name>
        name                   -> /cards/named?exact=<name>
    """
    url = f"{SCRYFALL_API}/cards"

    if extension and number:
        url += f"/{extension.strip().lower()}/{quote(number.strip(), safe='')}"
    elif name and extension:
        url += f"/named?set={extension.strip().lower()}&exact={_format_name(name)}"
    elif name:
        url += f"/named?exact={_format_name(name)}"

    return url


def absolute_url(url: str) -> str:
    """Add the https scheme to URLs pasted without one."""
    url = url.strip()
    if url.startswith(("http://", "https://")):
        return url
    return f"https://{url}"
