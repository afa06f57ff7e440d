"""
Line grammar for text decklists.

Recognized line shapes, tried in this order:

    // Section name            comment (also "//!" and "#" prefixes)
    1 Lightning Bolt (M10) 146 set-qualified entry (MTGA style)
    1 Lightning Bolt           bare entry (MTGO style)

Both entry shapes accept trailing tags: "3 Brainstorm #Card Advantage #Draw".
Quantities may carry an "x" suffix ("4x Lightning Bolt").

This module HANDLES SYNTAX ONLY. Turning lines into cards (comment
carry-forward, defaults) is done by the decklist assembler.
"""

import re
from dataclasses import dataclass

# Word characters: ASCII letters/digits/underscore, the Latin-1 / Latin Extended
# letters (Lim-Dûl, Æther), plus the punctuation found in card names.
_WORD_CHARS = r"0-9A-Za-z_\u00C0-\u024F\u1E00-\u1EFF,/'\"-"
_WORD = rf"[{_WORD_CHARS}]+"
_WORDS = rf"{_WORD}(?:\s+{_WORD})*"

# Any character a word cannot contain
NON_WORD_CHAR = re.compile(rf"[^{_WORD_CHARS}]")

# Atomic so "12" is never split into quantity "1" and a name starting with "2"
_QUANTITY = r"(?P<quantity>(?>\d+x?))"
_NAME = rf"(?P<card_name>{_WORDS})"
_CODE = r"[A-Za-z0-9]+"
_TAGS = rf"(?P<tags>(?:\s*#!?{_WORDS})*)"

# Pattern: "// Ramp", "//!Commander", "# Burn Spells"
COMMENT_PATTERN = re.compile(rf"(?://!|//|#)\s*(?P<comment>{_WORDS})")

# Pattern: "1 Jeweled Lotus (CMR) 319 #Ramp"
# Groups: (quantity, card_name, extension, collector_number, tags)
SET_QUALIFIED_PATTERN = re.compile(
    rf"{_QUANTITY}\s*{_NAME}"
    rf"\s*\((?P<extension>{_CODE})\)"
    rf"\s*(?P<collector_number>{_CODE})"
    rf"{_TAGS}"
)

# Pattern: "3 Brainstorm #Draw"
# Groups: (quantity, card_name, tags)
BARE_PATTERN = re.compile(rf"{_QUANTITY}\s*{_NAME}{_TAGS}")

# Splits a matched tag run into individual tags, dropping "#" and "#!"
TAG_PATTERN = re.compile(rf"#!?({_WORDS})")

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """
    One recognized line. NOT YET A CARD.

    Either `comment` is set (a section header) or the entry fields are.
    Tags are kept as written; normalization happens on Card construction.
    """

    quantity: int | None = None
    card_name: str | None = None
    extension: str | None = None
    collector_number: str | None = None
    tags: tuple[str, ...] | None = None
    comment: str | None = None

    @property
    def is_comment(self) -> bool:
        return self.comment is not None


def _join_words(text: str) -> str:
    """Collapse internal whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text.strip())


def _parse_quantity(raw: str) -> int:
    return int(raw.removesuffix("x"))


def _parse_tags(raw: str) -> tuple[str, ...] | None:
    tags = tuple(_join_words(tag) for tag in TAG_PATTERN.findall(raw))
    return tags or None


def parse_line(line: str) -> ParsedLine | None:
    """
    Parse a single decklist line.

    Args:
        line: Raw line, surrounding whitespace is ignored

    Returns:
        ParsedLine for a comment or card entry, None if the line matches
        no known shape. Never raises.
    """
    line = line.strip()
    if not line:
        return None

    # Comment prefixes are only checked at the start of the line, so a
    # "//" inside a card name (Fire // Ice) stays part of the name.
    match = COMMENT_PATTERN.fullmatch(line)
    if match:
        return ParsedLine(comment=_join_words(match["comment"]))

    match = SET_QUALIFIED_PATTERN.fullmatch(line)
    if match:
        return ParsedLine(
            quantity=_parse_quantity(match["quantity"]),
            card_name=_join_words(match["card_name"]),
            extension=match["extension"],
            collector_number=match["collector_number"],
            tags=_parse_tags(match["tags"]),
        )

    match = BARE_PATTERN.fullmatch(line)
    if match:
        return ParsedLine(
            quantity=_parse_quantity(match["quantity"]),
            card_name=_join_words(match["card_name"]),
            tags=_parse_tags(match["tags"]),
        )

    # Line didn't match any pattern - caller decides whether that matters
    return None
