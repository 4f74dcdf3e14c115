"""
Heuristic bot implementation for Sheepshead card game.
Uses a weighted hand score to take the blind and simple rules for play and bury.
"""

from typing import List, Tuple
from sheepshead.card import Card, Rank
from sheepshead.player import BotInterface
from sheepshead.rules import SUIT_PRECEDENCE, card_strength, is_leading_card, is_trump

# Hand score weights
QUEEN_WEIGHT = 20
JACK_WEIGHT = 10
OTHER_TRUMP_WEIGHT = 5
FAIL_ACE_WEIGHT = 1

TAKE_THRESHOLD = 100
FIVE_PLAYER_TRUMP_COUNT = 4


class HeuristicBot(BotInterface):
    """Rule-based bot: weighted blind decision, cheapest winning play, weakest bury."""

    def __init__(self, name: str = "HeuristicBot"):
        self.name = name

    def score_hand(self, hand: List[Card]) -> int:
        """Weighted hand score used for the blind decision."""
        score = 0
        for card in hand:
            if card.rank == Rank.QUEEN:
                score += QUEEN_WEIGHT
            elif card.rank == Rank.JACK:
                score += JACK_WEIGHT
            elif is_trump(card):
                score += OTHER_TRUMP_WEIGHT
            elif card.rank == Rank.ACE:
                score += FAIL_ACE_WEIGHT
        return score

    def decide_take_blind(self, hand: List[Card], num_players: int) -> bool:
        """Take on a strong score, or with enough trump at a five-handed table."""
        if self.score_hand(hand) > TAKE_THRESHOLD:
            return True
        trump_count = sum(1 for card in hand if is_trump(card))
        return num_players == 5 and trump_count >= FIVE_PLAYER_TRUMP_COUNT

    def choose_card(self, hand: List[Card], legal_plays: List[Card],
                    trick_cards: List[Card]) -> Card:
        """Strategic card selection."""
        if not legal_plays:
            raise ValueError("No valid plays available")

        if len(legal_plays) == 1:
            return legal_plays[0]

        if not trick_cards:
            return self._choose_lead_card(legal_plays)
        return self._choose_follow_card(legal_plays, trick_cards)

    def _choose_lead_card(self, legal_plays: List[Card]) -> Card:
        """Choose card when leading the trick."""
        # Prefer high fail cards to start tricks
        fail = [c for c in legal_plays if not is_trump(c)]
        if fail:
            return max(fail, key=lambda c: (c.rank.value, SUIT_PRECEDENCE[c.suit]))

        # If only trump, play lowest trump
        return min(legal_plays, key=card_strength)

    def _choose_follow_card(self, legal_plays: List[Card], trick_cards: List[Card]) -> Card:
        """Choose card when following in a trick."""
        # Try to win with the cheapest card that takes the lead
        winning_cards = [c for c in legal_plays if is_leading_card(c, trick_cards)]
        if winning_cards:
            return min(winning_cards, key=self._play_cost)

        # Can't win, throw the least valuable card
        return min(legal_plays, key=lambda c: (c.point_value(),) + self._play_cost(c))

    def _play_cost(self, card: Card) -> Tuple[int, int, int]:
        return (1 if is_trump(card) else 0, card_strength(card), SUIT_PRECEDENCE[card.suit])

    def choose_bury(self, hand: List[Card], blind: List[Card]) -> Tuple[List[Card], List[Card]]:
        """Bury the weakest fail cards, falling back to the weakest trump."""
        pool = list(hand) + list(blind)
        fail = sorted((c for c in pool if not is_trump(c)),
                      key=lambda c: (c.rank.value, c.point_value(), SUIT_PRECEDENCE[c.suit]))
        trumps = sorted((c for c in pool if is_trump(c)), key=card_strength)

        buried = (fail + trumps)[:len(blind)]
        retained = [c for c in pool if c not in buried]
        return retained, buried

    def __str__(self):
        return self.name
