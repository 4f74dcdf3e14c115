"""
Deck module for Sheepshead card game.
Handles deck creation, Fisher-Yates shuffling, and dealing cards.
"""

from typing import List, Dict, Optional
import numpy as np
from sheepshead.card import Card, Suit, create_deck
from sheepshead.rules import card_strength


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build the random generator used for shuffling (seedable for tests)."""
    return np.random.default_rng(seed)


def fisher_yates_shuffle(cards: List[Card], rng: np.random.Generator) -> List[Card]:
    """
    Shuffle a list of cards in place.

    Walks from the last index down to 1, swapping each position with a
    uniformly chosen index in [0, i].

    Args:
        cards: Cards to shuffle (mutated)
        rng: Source of uniform random integers

    Returns:
        The same list, shuffled
    """
    for i in range(len(cards) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        cards[i], cards[j] = cards[j], cards[i]
    return cards


class Deck:
    """Manages a 32-card deck with shuffling and dealing capabilities."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else make_rng(seed)
        self.cards = create_deck()
        self.shuffle()

    def shuffle(self):
        """Shuffle the remaining cards."""
        fisher_yates_shuffle(self.cards, self.rng)

    def deal_card(self) -> Card:
        """
        Deal the top card.

        Raises:
            ValueError: If the deck is empty
        """
        if not self.cards:
            raise ValueError("Cannot deal from an empty deck")
        return self.cards.pop()

    def deal_hand(self, size: int) -> List[Card]:
        """
        Deal a hand of specified size.

        Args:
            size: Number of cards to deal

        Returns:
            List of cards dealt

        Raises:
            ValueError: If not enough cards remaining
        """
        if len(self.cards) < size:
            raise ValueError(f"Not enough cards in deck. Need {size}, have {len(self.cards)}")

        hand = []
        for _ in range(size):
            hand.append(self.cards.pop())
        return hand

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self.cards) == 0

    def reset(self):
        """Reset deck to full 32 cards and shuffle."""
        self.cards = create_deck()
        self.shuffle()


def sort_hand(hand: List[Card]) -> List[Card]:
    """
    Sort a hand for display: trump strongest first, then fail suits high to low.

    Args:
        hand: List of cards to sort

    Returns:
        Sorted list of cards
    """
    suit_order = {suit: i for i, suit in enumerate(Suit)}
    trumps = sorted((c for c in hand if c.is_trump()), key=card_strength, reverse=True)
    fail = sorted((c for c in hand if not c.is_trump()),
                  key=lambda c: (suit_order[c.suit], -c.rank.value))
    return trumps + fail


def get_cards_by_suit(hand: List[Card]) -> Dict[str, List[Card]]:
    """
    Group cards by playing suit: all trump under "TRUMP", fail cards by suit name.

    Args:
        hand: List of cards

    Returns:
        Dictionary mapping suit names to lists of cards
    """
    by_suit = {}
    for card in hand:
        suit_name = "TRUMP" if card.is_trump() else card.suit.name
        if suit_name not in by_suit:
            by_suit[suit_name] = []
        by_suit[suit_name].append(card)

    for suit in by_suit:
        by_suit[suit] = sorted(by_suit[suit], key=lambda c: c.rank.value)

    return by_suit
