"""
Main game module for Sheepshead card game.
Manages overall game state, dealer rotation, hands, and progression to the goal.
"""

from dataclasses import dataclass, replace
from typing import List, Dict, Optional
import logging

from sheepshead.deck import make_rng
from sheepshead.player import Player
from sheepshead.round import HandPhase, HandResult, Round
from sheepshead.rules import validate_player_count
from sheepshead.utils import GameLogger, format_scores

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Settings supplied by the caller when building a game."""
    goal: int = 0  # 0 plays forever
    enforce_follow_suit: bool = False
    seed: Optional[int] = None
    max_hands: Optional[int] = None

    def __post_init__(self):
        if self.goal < 0:
            raise ValueError(f"Goal cannot be negative ({self.goal})")
        if self.max_hands is not None and self.max_hands < 1:
            raise ValueError(f"max_hands must be positive ({self.max_hands})")


class SheepsheadGame:
    """Main game controller for Sheepshead."""

    def __init__(self, players: List[Player], config: Optional[GameConfig] = None,
                 goal: Optional[int] = None, game_logger: Optional[GameLogger] = None):
        validate_player_count(len(players))
        if len({p.player_id for p in players}) != len(players):
            raise ValueError(f"Player ids must be unique (got {[p.player_id for p in players]})")

        self.players = players
        self.config = config or GameConfig()
        if goal is not None:
            self.config = replace(self.config, goal=goal)
        self.rng = make_rng(self.config.seed)
        self.logger = game_logger or GameLogger()

        # Seat 0 starts as dealer; the first hand rotates the deal to seat 1
        self.dealer_seat = 0
        self.current_round = 0
        self.rounds: List[Round] = []
        self.results: List[HandResult] = []
        self.phase = HandPhase.AWAITING_HAND
        self.game_complete = False

    @property
    def goal(self) -> int:
        return self.config.goal

    @property
    def dealer(self) -> Player:
        return self.players[self.dealer_seat]

    def rotate_dealer(self) -> Player:
        """Pass the deal to the left."""
        self.dealer_seat = (self.dealer_seat + 1) % len(self.players)
        return self.dealer

    def play_round(self) -> HandResult:
        """Play a complete hand and apply its awards."""
        if self.game_complete:
            raise ValueError("Game already complete")

        self.rotate_dealer()
        self.current_round += 1
        self.logger.log_round_start(self.current_round, self.dealer.name)

        round_obj = Round(
            self.current_round,
            self.players,
            self.dealer_seat,
            rng=self.rng,
            enforce_follow_suit=self.config.enforce_follow_suit,
            game_logger=self.logger,
        )
        self.rounds.append(round_obj)

        result = round_obj.play()
        for player in self.players:
            player.add_score(result.awards[player.player_id])

        self.results.append(result)
        self.phase = HandPhase.HAND_SCORED
        return result

    def is_game_over(self) -> bool:
        """True once any player reaches a nonzero goal."""
        if self.goal == 0:
            return False
        return any(player.score >= self.goal for player in self.players)

    def play_game(self) -> List[Player]:
        """
        Play hands until the goal is reached.

        Returns:
            Final standings, highest score first
        """
        self.logger.log_game_start([p.name for p in self.players], self.goal)

        while not self.is_game_over():
            if self.config.max_hands is not None and self.current_round >= self.config.max_hands:
                logger.info("Stopping after %d hands", self.current_round)
                break
            self.play_round()
            logger.debug("Standings:\n%s", format_scores(self.players))

        self.game_complete = True
        self.phase = HandPhase.GAME_OVER
        self.logger.log_game_end([p.name for p in self.get_winners()],
                                 {p.name: p.score for p in self.players})
        return self.get_standings()

    def get_final_scores(self) -> Dict[int, int]:
        """Get scores for all players keyed by player id."""
        return {player.player_id: player.score for player in self.players}

    def get_standings(self) -> List[Player]:
        """Players sorted by score, highest first (seat order breaks ties)."""
        return sorted(self.players, key=lambda p: p.score, reverse=True)

    def get_winners(self) -> List[Player]:
        """
        Get every player sharing the top score.

        Ties are not broken: all of them are winners.
        """
        top = max(player.score for player in self.players)
        return [player for player in self.players if player.score == top]

    def get_game_state(self) -> Dict:
        """Get current game state for logging/display."""
        return {
            'current_round': self.current_round,
            'phase': self.phase.value,
            'goal': self.goal,
            'game_complete': self.game_complete,
            'dealer': self.dealer.name,
            'player_scores': {p.name: p.score for p in self.players},
            'current_round_state': self.rounds[-1].get_status() if self.rounds else None,
        }
