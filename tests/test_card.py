"""Tests for the Card value type."""

import dataclasses
import itertools

import pytest

from mtgdeck.models.card import Card


class TestCardCreation:
    def test_card_defaults(self) -> None:
        card = Card("Sol Ring")

        assert card.name == "Sol Ring"
        assert card.quantity == 1
        assert card.extension is None
        assert card.number is None
        assert card.tags == frozenset()

    def test_quantity_from_string(self) -> None:
        card = Card("Barkchannel Pathway // Tidechannel Pathway", "3")

        assert card.quantity == 3

    def test_falsy_quantity_defaults_to_one(self) -> None:
        assert Card("Sol Ring", 0).quantity == 1
        assert Card("Sol Ring", None).quantity == 1  # type: ignore[arg-type]
        assert Card("Sol Ring", "").quantity == 1  # type: ignore[arg-type]

    def test_non_numeric_quantity_raises(self) -> None:
        with pytest.raises(ValueError):
            Card("Sol Ring", "many")  # type: ignore[arg-type]

    def test_codes_are_trimmed_and_keep_case(self) -> None:
        card = Card("Gilded Drake", 1, "  usg ", " 76a ")

        assert card.extension == "usg"
        assert card.number == "76a"

    def test_numeric_collector_number_becomes_string(self) -> None:
        assert Card("Sol Ring", 1, number=24).number == "24"  # type: ignore[arg-type]

    def test_empty_codes_become_none(self) -> None:
        card = Card("Sol Ring", 1, "", "")

        assert card.extension is None
        assert card.number is None

    def test_tags_are_normalized(self) -> None:
        """Falsy tags dropped, others stringified, trimmed and lowercased."""
        card = Card("Brainstorm", "1", tags=["Instant", None, " Card Advantage ", 42, "  ", ""])

        assert card.tags == {"instant", "card advantage", "42"}

    def test_card_immutable(self) -> None:
        card = Card("Lightning Bolt", 4)

        with pytest.raises(AttributeError):
            card.quantity = 3  # type: ignore[misc]

    def test_replace_renormalizes(self) -> None:
        card = Card("Lightning Bolt", 4, tags=["Burn"])
        updated = dataclasses.replace(card, quantity="2", tags=["Burn", "REMOVAL"])

        assert updated == Card("Lightning Bolt", 2, tags=["burn", "removal"])
        assert card.quantity == 4

    def test_cards_are_hashable(self) -> None:
        cards = {Card("Sol Ring", tags=["Ramp"]), Card("Sol Ring", "1", tags=["ramp"])}

        assert len(cards) == 1


class TestCardString:
    def test_full_card(self) -> None:
        card = Card("Sol Ring", 1, "C21", "10", ["ramp", "artifact"])

        assert str(card) == "1 Sol Ring (C21) 10 [artifact, ramp]"

    def test_absent_parts_are_omitted(self) -> None:
        assert str(Card("Sol Ring", 2)) == "2 Sol Ring"
        assert str(Card("Sol Ring", 1, "C21")) == "1 Sol Ring (C21)"
        assert str(Card("Sol Ring", 1, number="10")) == "1 Sol Ring 10"


class TestCardEquality:
    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (Card("Sol Ring"), Card("Sol Ring")),
            (Card("Sol Ring", 1, "mps"), Card("Sol Ring", 1, "mps")),
            (Card("Sol Ring", 1, None, "24"), Card("Sol Ring", 1, None, "24")),
            (Card("Sol Ring", 1, tags=["Artifact", "Ramp"]), Card("Sol Ring", 1, tags=["Artifact", "Ramp"])),
        ],
    )
    def test_strictly_equal(self, left: Card, right: Card) -> None:
        assert left == right
        assert left <= right
        assert left >= right
        assert not left < right

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (Card("Sol Ring"), Card("Sol Ring", 1)),
            (Card("Sol Ring", 1), Card("Sol Ring", "1")),
            (Card("Sol Ring", 1, None, 24), Card("Sol Ring", 1, None, "24")),  # type: ignore[arg-type]
            (Card("Sol Ring", tags=["RAMP"]), Card("Sol Ring", tags=["ramp"])),
            (Card("Sol Ring", tags=["Ramp", "ARTIFACT"]), Card("Sol Ring", tags=["artifact", "ramp"])),
            (Card("Sol Ring", tags=["ARTIFACT", "Ramp"]), Card("Sol Ring", tags=["RAMP", "Artifact"])),
        ],
    )
    def test_equal_after_normalization(self, left: Card, right: Card) -> None:
        assert left == right
        assert left <= right
        assert left >= right

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (Card("sol ring"), Card("SOL RING")),
            (Card("Sol Ring", 1), Card("Sol Ring", 2)),
            (Card("Sol Ring", 1, "lea"), Card("Sol Ring", 1, "mps")),
            (Card("Sol Ring", 1, "MPS"), Card("Sol Ring", 1, "mps")),
            (Card("Sol Ring", 1, None, "24a"), Card("Sol Ring", 1, None, "24A")),
            (Card("Sol Ring", tags=["Ramp"]), Card("Sol Ring", tags=["Artifact"])),
            (Card("Sol Ring", tags=["Ramp"]), Card("Sol Ring", tags=["Artifact", "Ramp"])),
            (Card("Sol Ring", 1, "C21"), Card("Sol Ring", 1)),
        ],
    )
    def test_not_equal(self, left: Card, right: Card) -> None:
        assert left != right
        assert right != left

    def test_not_equal_to_other_types(self) -> None:
        assert Card("Sol Ring") != "1 Sol Ring"


class TestCardOrdering:
    @pytest.mark.parametrize(
        ("smaller", "larger"),
        [
            (Card("Brainstorm"), Card("Sol Ring")),
            (Card("Sol Ring", 1), Card("Sol Ring", 2)),
            (Card("Sol Ring", 2), Card("Sol Ring", 10)),
            (Card("Sol Ring", 1, "C17"), Card("Sol Ring", 1, "C18")),
            (Card("Sol Ring", 1, "MPS"), Card("Sol Ring", 1, "mps")),
            (Card("Sol Ring", 1), Card("Sol Ring", 1, "C17")),
            (Card("Sol Ring", 1, None, "10"), Card("Sol Ring", 1, None, "20")),
            (Card("Sol Ring", 1, None, "24A"), Card("Sol Ring", 1, None, "24a")),
            (Card("Sol Ring", 1, "C17"), Card("Sol Ring", 1, "C17", "1")),
            (Card("Sol Ring"), Card("Sol Ring", tags=["ramp"])),
            (Card("Sol Ring", tags=["artifact"]), Card("Sol Ring", tags=["ramp"])),
            (Card("Sol Ring", tags=["artifact"]), Card("Sol Ring", tags=["artifact", "ramp"])),
        ],
    )
    def test_strictly_less_than(self, smaller: Card, larger: Card) -> None:
        assert smaller < larger
        assert smaller <= larger
        assert smaller != larger
        assert not smaller > larger
        assert not smaller >= larger
        assert larger > smaller
        assert larger >= smaller

    def test_sorting(self) -> None:
        cards = [
            Card("Sol Ring", 1, "C21", "10"),
            Card("Brainstorm", 3),
            Card("Sol Ring", 1),
            Card("Arcane Signet", 1, tags=["ramp"]),
        ]

        assert sorted(cards) == [
            Card("Arcane Signet", 1, tags=["ramp"]),
            Card("Brainstorm", 3),
            Card("Sol Ring", 1),
            Card("Sol Ring", 1, "C21", "10"),
        ]

    def test_order_is_total_and_consistent(self) -> None:
        """Exactly one of a < b, a == b, b < a holds, and < is transitive."""
        cards = [
            Card("Sol Ring"),
            Card("Sol Ring", 2),
            Card("Sol Ring", 1, "C21"),
            Card("Sol Ring", 1, "C21", "10"),
            Card("Sol Ring", 1, None, "10"),
            Card("Sol Ring", tags=["ramp"]),
            Card("Sol Ring", tags=["artifact", "ramp"]),
            Card("Sol Ring", tags=["RAMP"]),
            Card("Brainstorm", 3),
        ]

        for a, b in itertools.product(cards, repeat=2):
            assert a == a
            assert (a == b) == (b == a)
            assert [a < b, a == b, b < a].count(True) == 1

        for a, b, c in itertools.product(cards, repeat=3):
            if a < b and b < c:
                assert a < c
