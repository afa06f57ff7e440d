from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any


def _format_code(value: Any) -> str | None:
    """Normalize a set code or collector number; falsy values become None."""
    if not value:
        return None
    return str(value).strip()


def _format_tags(tags: Iterable[Any] | None) -> frozenset[str]:
    if not tags:
        return frozenset()

    normalized = (str(tag).strip() for tag in tags if tag)
    return frozenset(tag.lower() for tag in normalized if tag)


def _format_quantity(quantity: Any) -> int:
    if not quantity:
        return 1
    if isinstance(quantity, str):
        return int(quantity.strip())
    return int(quantity)


@total_ordering
@dataclass(frozen=True, eq=True, slots=True)
class Card:
    """
    One line item of a deck.

    Attributes:
        name: Card name as it appears in the source (case-sensitive)
        quantity: Number of copies, coerced from int or numeric string
        extension: Set code (e.g., "M10"), trimmed, case preserved
        number: Collector number within the set, trimmed, case preserved
        tags: Lowercased free-form labels (e.g., "commander", "ramp")

    Normalization runs on construction, so Card("Sol Ring", "1", tags=["RAMP"])
    equals Card("Sol Ring", 1, tags=["ramp"]). Cards are immutable; use
    dataclasses.replace() to derive a modified copy.
    """

    name: str
    quantity: int = 1
    extension: str | None = None
    number: str | None = None
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "quantity", _format_quantity(self.quantity))
        object.__setattr__(self, "extension", _format_code(self.extension))
        object.__setattr__(self, "number", _format_code(self.number))
        object.__setattr__(self, "tags", _format_tags(self.tags))

    def sorted_tags(self) -> list[str]:
        """Tags in lexicographic order."""
        return sorted(self.tags)

    def sort_key(self) -> tuple[Any, ...]:
        """
        Key implementing the total order over cards.

        name -> quantity -> extension -> number -> sorted tags.
        A missing extension or number sorts before any present value, and a
        tag list that is a prefix of another sorts first.
        """
        return (
            self.name,
            self.quantity,
            self.extension is not None,
            self.extension or "",
            self.number is not None,
            self.number or "",
            self.sorted_tags(),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        parts: list[str] = []

        if self.quantity:
            parts.append(str(self.quantity))
        if self.name:
            parts.append(self.name)
        if self.extension:
            parts.append(f"({self.extension})")
        if self.number:
            parts.append(self.number)
        if self.tags:
            parts.append(f"[{', '.join(self.sorted_tags())}]")

        return " ".join(parts)
