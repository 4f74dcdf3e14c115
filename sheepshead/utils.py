"""
Utility module for Sheepshead card game.
Contains logging and formatting helpers.
"""

import logging
from typing import List, Dict, Optional
from sheepshead.card import Card
from sheepshead.deck import sort_hand
from sheepshead.player import Player


def format_hand(hand: List[Card]) -> str:
    """
    Format a hand of cards for display, trump first.

    Args:
        hand: List of cards

    Returns:
        Formatted string representation
    """
    if not hand:
        return "Empty hand"
    return ' '.join(str(card) for card in sort_hand(hand))


def format_scores(players: List[Player]) -> str:
    """Format current scores for display."""
    score_lines = []
    for player in players:
        score_lines.append(f"{player.name}: {player.score}")
    return '\n'.join(score_lines)


class GameLogger:
    """Logging class for game events."""

    def __init__(self, log_file: Optional[str] = None):
        self.logger = logging.getLogger("SheepsheadGame")
        self.logger.setLevel(logging.DEBUG)

        if not self.logger.handlers:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

            # Console handler
            ch = logging.StreamHandler()
            ch.setLevel(logging.INFO)
            ch.setFormatter(formatter)
            self.logger.addHandler(ch)

            # File handler
            if log_file:
                fh = logging.FileHandler(log_file)
                fh.setLevel(logging.DEBUG)
                fh.setFormatter(formatter)
                self.logger.addHandler(fh)

    def log_game_start(self, player_names: List[str], goal: int):
        """Log the start of a new game session."""
        self.logger.info("=== NEW GAME STARTED ===")
        self.logger.info(f"Goal: {goal if goal else 'unbounded'}")
        self.logger.info(f"Players: {', '.join(player_names)}")

    def log_round_start(self, round_num: int, dealer_name: str):
        """Log start of new hand."""
        self.logger.info(f"=== Hand {round_num} - Dealer: {dealer_name} ===")

    def log_deal(self, player_name: str, hand: List[Card]):
        """Log a dealt hand (debug only)."""
        self.logger.debug(f"{player_name} hand: {format_hand(hand)}")

    def log_auction(self, player_name: str, took_blind: bool):
        """Log a player's blind decision."""
        self.logger.info(f"{player_name} {'takes the blind' if took_blind else 'passes'}")

    def log_bury(self, player_name: str, buried: List[Card]):
        """Log buried cards (debug only, they are hidden at the table)."""
        self.logger.debug(f"{player_name} buries: {', '.join(str(c) for c in buried)}")

    def log_card_play(self, player_name: str, card: Card, trick_state: str):
        """Log a card play."""
        self.logger.info(f"{player_name} plays {card} ({trick_state})")

    def log_trick_winner(self, winner_name: str, trick_cards: List[Card]):
        """Log trick winner and cards played."""
        cards_str = ', '.join(str(card) for card in trick_cards)
        self.logger.info(f"{winner_name} wins trick with: {cards_str}")

    def log_round_result(self, summary: str, awards: Dict[str, int]):
        """Log the outcome of a hand."""
        self.logger.info(summary)
        for name, points in awards.items():
            self.logger.info(f"{name}: {points:+d}")

    def log_game_end(self, winner_names: List[str], final_scores: Dict[str, int]):
        """Log game completion."""
        self.logger.info("=== GAME COMPLETE ===")
        self.logger.info(f"Winner: {', '.join(winner_names)}")
        for name, score in final_scores.items():
            self.logger.info(f"{name}: {score} points")
