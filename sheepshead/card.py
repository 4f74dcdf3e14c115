"""
Card module for Sheepshead card game.
Defines Card, Suit, and Rank classes with Sheepshead ordering.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class Suit(Enum):
    """Card suits in canonical deck order (also Jack/Queen precedence, clubs highest)."""
    CLUBS = "♣"
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"

    def __str__(self):
        return self.value


class Rank(Enum):
    """Card ranks. Value order is fail-suit strength: 7 < 8 < 9 < K < 10 < A < J < Q."""
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    KING = 10
    TEN = 11
    ACE = 12
    JACK = 13
    QUEEN = 14

    def __str__(self):
        return {7: "7", 8: "8", 9: "9", 10: "K", 11: "10",
                12: "A", 13: "J", 14: "Q"}[self.value]

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value > other.value


# Card point values (120 per deck)
CARD_POINTS = {
    Rank.SEVEN: 0,
    Rank.EIGHT: 0,
    Rank.NINE: 0,
    Rank.KING: 4,
    Rank.TEN: 10,
    Rank.ACE: 11,
    Rank.JACK: 2,
    Rank.QUEEN: 3,
}


@dataclass(frozen=True)
class Card:
    """Represents an immutable playing card with suit and rank."""

    suit: Suit
    rank: Rank

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.rank.name})"

    def __lt__(self, other):
        """Compare cards by rank only (trump ordering handled by rules)."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def point_value(self) -> int:
        """Points this card is worth when captured."""
        return CARD_POINTS[self.rank]

    def is_trump(self) -> bool:
        """True for any diamond and for every Jack and Queen."""
        return self.suit == Suit.DIAMONDS or self.rank.value >= Rank.JACK.value


def create_deck() -> List[Card]:
    """Create the 32-card Sheepshead deck, suit-major with ranks ascending."""
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(suit, rank))
    return deck
