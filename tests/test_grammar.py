"""Tests for the single-line decklist grammar."""

import pytest

from mtgdeck.parsers.grammar import ParsedLine, parse_line


class TestBareEntries:
    def test_simple_line(self) -> None:
        result = parse_line("1 Lightning Bolt")

        assert result == ParsedLine(quantity=1, card_name="Lightning Bolt")
        assert result.extension is None
        assert result.collector_number is None
        assert result.tags is None

    def test_quantity_with_x_suffix(self) -> None:
        result = parse_line("4x Lightning Bolt")

        assert result is not None
        assert result.quantity == 4
        assert result.card_name == "Lightning Bolt"

    def test_line_with_tags(self) -> None:
        result = parse_line("3 Brainstorm #Card Advantage #Draw")

        assert result == ParsedLine(
            quantity=3,
            card_name="Brainstorm",
            tags=("Card Advantage", "Draw"),
        )

    def test_tag_exclamation_is_ignored(self) -> None:
        result = parse_line("1 Sol Ring #!Ramp")

        assert result is not None
        assert result.tags == ("Ramp",)

    def test_apostrophe_and_comma(self) -> None:
        result = parse_line("1 Atraxa, Praetors' Voice")

        assert result is not None
        assert result.card_name == "Atraxa, Praetors' Voice"

    def test_accented_characters(self) -> None:
        result = parse_line("1 Lim-Dûl's Vault")

        assert result is not None
        assert result.card_name == "Lim-Dûl's Vault"

    def test_double_faced_name(self) -> None:
        """A // inside a card name is not a comment marker."""
        result = parse_line("1 Barkchannel Pathway // Tidechannel Pathway")

        assert result is not None
        assert result.comment is None
        assert result.card_name == "Barkchannel Pathway // Tidechannel Pathway"

    def test_internal_whitespace_is_collapsed(self) -> None:
        result = parse_line("2   Llanowar    Elves")

        assert result is not None
        assert result.card_name == "Llanowar Elves"


class TestSetQualifiedEntries:
    def test_extension_and_collector_number(self) -> None:
        result = parse_line("1 Lightning Bolt (M10) 146")

        assert result == ParsedLine(
            quantity=1,
            card_name="Lightning Bolt",
            extension="M10",
            collector_number="146",
        )

    def test_with_tags(self) -> None:
        result = parse_line("1 Jeweled Lotus (CMR) 319 #Ramp #Artifact")

        assert result is not None
        assert result.extension == "CMR"
        assert result.collector_number == "319"
        assert result.tags == ("Ramp", "Artifact")

    def test_high_quantity(self) -> None:
        result = parse_line("46 Mountain (4ED) 373")

        assert result is not None
        assert result.quantity == 46
        assert result.card_name == "Mountain"
        assert result.extension == "4ED"
        assert result.collector_number == "373"

    def test_alphanumeric_collector_number(self) -> None:
        result = parse_line("4 Mountain (NEO) 290a")

        assert result is not None
        assert result.collector_number == "290a"

    def test_split_card(self) -> None:
        result = parse_line("4 Fire // Ice (MH2) 290")

        assert result is not None
        assert result.card_name == "Fire // Ice"
        assert result.extension == "MH2"

    def test_whitespace_is_insignificant(self) -> None:
        result = parse_line("  1   Lightning Bolt   (M10)   146   #Instant  ")

        assert result == ParsedLine(
            quantity=1,
            card_name="Lightning Bolt",
            extension="M10",
            collector_number="146",
            tags=("Instant",),
        )


class TestComments:
    @pytest.mark.parametrize(
        ("line", "comment"),
        [
            ("// Card Advantage", "Card Advantage"),
            ("//! Commander", "Commander"),
            ("//!Commander", "Commander"),
            ("# Burn Spells", "Burn Spells"),
            ("#Ramp", "Ramp"),
        ],
    )
    def test_comment_prefixes(self, line: str, comment: str) -> None:
        result = parse_line(line)

        assert result is not None
        assert result.is_comment
        assert result.comment == comment
        assert result.quantity is None
        assert result.card_name is None

    def test_comment_wins_over_entry(self) -> None:
        """A commented-out card line is a comment, not an entry."""
        result = parse_line("// 1 Sol Ring")

        assert result == ParsedLine(comment="1 Sol Ring")


class TestUnparsable:
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "invalid line",
            "not a card",
            "12",
            "1x",
            "//",
            "1 Lightning Bolt (M10)",
            "https://www.moxfield.com/decks/7CBqQtCVKES6e49vKXfIBQ",
        ],
    )
    def test_returns_none(self, line: str) -> None:
        assert parse_line(line) is None
