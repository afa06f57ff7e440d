"""
Text decklist assembler.

Turns a whole decklist document into cards and back.

Example input:
    // Commander
    1 Atraxa, Praetors' Voice
    // Ramp
    1 Jeweled Lotus (CMR) 319
    1 Cultivate #Land Search

Comment lines act as section headers: their text becomes a lowercased tag on
every following card until the next comment. The example yields Atraxa tagged
"commander", Jeweled Lotus tagged "ramp" and Cultivate tagged "land search"
and "ramp".
"""

import dataclasses
import logging
from collections.abc import Iterable

from mtgdeck.models.card import Card
from mtgdeck.parsers.base import DeckSource
from mtgdeck.parsers.grammar import NON_WORD_CHAR, ParsedLine, parse_line

logger = logging.getLogger(__name__)


def _parse_lines(text: str) -> list[ParsedLine]:
    """Recognize every non-blank line, silently dropping unparsable ones."""
    parsed: list[ParsedLine] = []

    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue

        result = parse_line(line)
        if result is None:
            logger.debug("Skipping unparsable line: %r", line)
            continue

        parsed.append(result)

    return parsed


def _collapse_comments(lines: Iterable[ParsedLine]) -> list[ParsedLine]:
    """
    Fold comment lines into the tags of the entries that follow them.

    The last seen comment applies to every entry until a new comment
    replaces it. Input lines are not modified.
    """
    entries: list[ParsedLine] = []
    last_comment: str | None = None

    for line in lines:
        if line.is_comment:
            last_comment = line.comment
            continue

        if last_comment:
            tags = (*(line.tags or ()), last_comment.lower())
            line = dataclasses.replace(line, tags=tags)

        entries.append(line)

    return entries


def _to_card(line: ParsedLine) -> Card:
    return Card(
        name=line.card_name or "",
        quantity=line.quantity or 1,
        extension=line.extension,
        number=line.collector_number,
        tags=line.tags,
    )


def _assemble(text: str) -> list[ParsedLine]:
    return _collapse_comments(_parse_lines(text))


def can_handle(source: object) -> bool:
    """True if the text contains at least one card entry."""
    if not isinstance(source, str):
        return False
    return len(_assemble(source)) > 0


def parse_deck(source: object) -> list[Card] | None:
    """
    Parse decklist text into cards.

    Args:
        source: Raw decklist text (clipboard paste, file contents)

    Returns:
        Cards in document order, or None if the text holds no card entry.
    """
    if not isinstance(source, str) or not can_handle(source):
        return None

    try:
        cards = [_to_card(line) for line in _assemble(source)]
    except ValueError as e:
        logger.warning("Failed to assemble decklist: %s", e)
        return None

    return cards or None


def _title_case(tag: str) -> str:
    """
    Capitalize each word of a tag for display.

    Characters the grammar cannot read back are dropped, so "İstanbul"
    (lowercased to "i" plus a combining dot) renders as "Istanbul".
    """
    words = (NON_WORD_CHAR.sub("", word[:1].upper() + word[1:].lower()) for word in tag.split())
    return " ".join(word for word in words if word)


def format_card(card: Card) -> str:
    """
    Render one card as a decklist line.

    Format: "<qty> <name> (<SET>) <number> #<Tag> #<Tag>"
    The set clause is only written when both set and number are known.
    Tags with no readable characters left are omitted.
    """
    line = f"{card.quantity} {card.name}"

    if card.extension and card.number:
        line += f" ({card.extension.upper()}) {card.number}"

    tags = [_title_case(tag) for tag in card.sorted_tags()]
    line += "".join(f" #{tag}" for tag in tags if tag)

    return line


def format_deck(cards: Iterable[Card]) -> str:
    """Render cards as decklist text, one card per line."""
    return "\n".join(format_card(card) for card in cards)


class DecklistSource(DeckSource):
    """
    Catch-all source for plain text decklists.

    Must be registered last: URL-based sources match narrow shapes while
    almost any text with a leading number parses as a decklist.
    """

    name = "decklist"

    def can_handle(self, source: str) -> bool:
        return can_handle(source)

    def parse_deck(self, source: str) -> list[Card] | None:
        return parse_deck(source)
