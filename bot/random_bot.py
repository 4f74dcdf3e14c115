"""
Random bot implementation for Sheepshead card game.
Provides a baseline bot that makes random legal moves.
"""

from typing import List, Optional, Tuple
import numpy as np
from sheepshead.card import Card
from sheepshead.player import BotInterface


class RandomBot(BotInterface):
    """Bot that makes random legal moves from a seedable generator."""

    def __init__(self, name: str = "RandomBot", seed: Optional[int] = None,
                 take_probability: float = 0.3):
        self.name = name
        self.rng = np.random.default_rng(seed)
        self.take_probability = take_probability

    def decide_take_blind(self, hand: List[Card], num_players: int) -> bool:
        """Take the blind with a fixed probability."""
        return bool(self.rng.random() < self.take_probability)

    def choose_card(self, hand: List[Card], legal_plays: List[Card],
                    trick_cards: List[Card]) -> Card:
        """Play a uniformly random legal card."""
        if not legal_plays:
            raise ValueError("No valid plays available")
        return legal_plays[int(self.rng.integers(len(legal_plays)))]

    def choose_bury(self, hand: List[Card], blind: List[Card]) -> Tuple[List[Card], List[Card]]:
        """Bury random cards from hand and blind combined."""
        pool = list(hand) + list(blind)
        picks = set(int(i) for i in self.rng.choice(len(pool), size=len(blind), replace=False))
        buried = [card for i, card in enumerate(pool) if i in picks]
        retained = [card for i, card in enumerate(pool) if i not in picks]
        return retained, buried

    def __str__(self):
        return self.name
