from mtgdeck.models.card import Card

__all__ = [
    "Card",
]
