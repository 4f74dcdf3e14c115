"""
Round module for Sheepshead card game.
Handles dealing, the blind auction, burying, trick play, and hand scoring.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple
import logging

import numpy as np

from sheepshead.card import Card
from sheepshead.deck import Deck
from sheepshead.player import Player
from sheepshead.rules import (
    TOTAL_CARDS,
    TOTAL_POINTS,
    TAKER_WIN_THRESHOLD,
    ContractViolation,
    blind_size,
    count_points,
    game_multiplier,
    get_legal_plays,
    hand_size,
    is_leading_card,
    partner_of,
)
from sheepshead.utils import GameLogger

logger = logging.getLogger(__name__)


class HandPhase(Enum):
    """Lifecycle of a hand within a game."""
    AWAITING_HAND = "awaiting_hand"
    DEALT = "dealt"
    AUCTIONED = "auctioned"
    BURIED = "buried"
    PLAYING_TRICKS = "playing_tricks"
    HAND_SCORED = "hand_scored"
    GAME_OVER = "game_over"


class Trick:
    """Represents a single trick in the card game."""

    def __init__(self, leader_id: int):
        self.leader_id = leader_id
        self.plays: List[Tuple[int, Card]] = []
        self.winner_id: Optional[int] = None

    @property
    def cards(self) -> List[Card]:
        """Cards played so far, in play order."""
        return [card for _, card in self.plays]

    def add_card(self, player_id: int, card: Card):
        """Add a card to the trick and update the current winner."""
        if is_leading_card(card, self.cards):
            self.winner_id = player_id
        self.plays.append((player_id, card))

    def is_complete(self, num_players: int) -> bool:
        return len(self.plays) == num_players

    def points(self) -> int:
        return count_points(self.cards)

    def __str__(self):
        return ', '.join(str(card) for card in self.cards)


@dataclass
class HandResult:
    """Outcome of one hand. Player references are player ids."""
    round_number: int
    dealer_id: int
    taker_id: Optional[int] = None
    partner_id: Optional[int] = None
    taker_points: int = 0
    defender_points: int = 0
    taker_won: Optional[bool] = None
    multiplier: int = 0
    awards: Dict[int, int] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        """True when nobody took the blind."""
        return self.taker_id is None


class Round:
    """Manages one hand of Sheepshead from deal to score."""

    def __init__(self, round_number: int, players: List[Player], dealer_seat: int,
                 rng: Optional[np.random.Generator] = None, enforce_follow_suit: bool = False,
                 game_logger: Optional[GameLogger] = None):
        self.round_number = round_number
        self.players = players
        self.num_players = len(players)
        self.hand_size = hand_size(self.num_players)
        self.blind_size = blind_size(self.num_players)
        self.dealer_seat = dealer_seat
        self.rng = rng
        self.enforce_follow_suit = enforce_follow_suit
        self.game_logger = game_logger or GameLogger()

        self.phase = HandPhase.AWAITING_HAND
        self.blind: List[Card] = []
        self.buried: List[Card] = []
        self.taker_seat: Optional[int] = None
        self.partner_seat: Optional[int] = None
        self.tricks: List[Trick] = []
        self.current_trick: Optional[Trick] = None
        self.result: Optional[HandResult] = None

        for seat, player in enumerate(players):
            player.is_dealer = seat == dealer_seat

    def seat_order(self, start_seat: int) -> List[int]:
        """All seats in clockwise order starting from start_seat."""
        return [(start_seat + offset) % self.num_players for offset in range(self.num_players)]

    @property
    def first_seat(self) -> int:
        """Seat to the dealer's left: bids first and leads the first trick."""
        return (self.dealer_seat + 1) % self.num_players

    @property
    def taker(self) -> Optional[Player]:
        return self.players[self.taker_seat] if self.taker_seat is not None else None

    @property
    def partner(self) -> Optional[Player]:
        return self.players[self.partner_seat] if self.partner_seat is not None else None

    def deal_hands(self) -> List[Card]:
        """
        Shuffle a fresh deck and deal it out.

        Each dealing pass first fills one blind slot (until the blind is full),
        then gives one card to each player starting left of the dealer.

        Returns:
            The blind
        """
        deck = Deck(rng=self.rng)
        for player in self.players:
            player.reset_round()

        blind: List[Card] = []
        order = self.seat_order(self.first_seat)
        for _ in range(self.hand_size):
            if len(blind) < self.blind_size:
                blind.append(deck.deal_card())
            for seat in order:
                self.players[seat].receive_card(deck.deal_card())

        if not deck.is_empty():
            raise RuntimeError(f"{deck.cards_remaining()} cards left undealt")

        self.blind = blind
        for player in self.players:
            self.game_logger.log_deal(player.name, player.hand)
        self.phase = HandPhase.DEALT
        return blind

    def run_auction(self) -> Optional[Player]:
        """
        Offer the blind to each player from the dealer's left.

        Returns:
            The taker, or None if everybody passed
        """
        for seat in self.seat_order(self.first_seat):
            player = self.players[seat]
            took_blind = player.decide_take_blind(self.num_players)
            self.game_logger.log_auction(player.name, took_blind)
            if took_blind:
                player.is_taker = True
                self.taker_seat = seat
                break

        self.phase = HandPhase.AUCTIONED
        return self.taker

    def run_bury(self) -> List[Card]:
        """
        Let the taker claim the blind and bury the same number of cards.

        Returns:
            The buried cards (empty when nobody took the blind)

        Raises:
            ContractViolation: If the bury does not swap in exactly the blind's card count
        """
        taker = self.taker
        if taker is None:
            return []

        retained, buried = taker.bury(self.blind)
        retained, buried = list(retained), list(buried)
        if len(buried) != len(self.blind):
            raise ContractViolation(
                f"{taker.name} buried {len(buried)} cards, expected {len(self.blind)}")
        if Counter(retained + buried) != Counter(taker.hand + self.blind):
            raise ContractViolation(
                f"{taker.name}'s bury does not match hand plus blind")

        taker.apply_bury(retained)
        self.buried = buried
        self.game_logger.log_bury(taker.name, buried)

        self.partner_seat = partner_of(
            [(seat, player.hand) for seat, player in enumerate(self.players)], self.taker_seat)
        if self.partner is not None:
            self.partner.is_partner = True

        self.phase = HandPhase.BURIED
        return buried

    def _legal_plays(self, player: Player, trick_cards: List[Card]) -> List[Card]:
        if self.enforce_follow_suit:
            return get_legal_plays(player.hand, trick_cards)
        return list(player.hand)

    def play_trick(self, leader_seat: int) -> Trick:
        """
        Play one trick, each seat once, starting from the leader.

        Returns:
            The completed trick

        Raises:
            ContractViolation: If a player chooses a card they may not play
        """
        trick = Trick(leader_seat)
        self.current_trick = trick

        for seat in self.seat_order(leader_seat):
            player = self.players[seat]
            trick_cards = trick.cards
            legal_plays = self._legal_plays(player, trick_cards)

            card = player.choose_card(trick_cards, legal_plays)
            if card not in player.hand:
                raise ContractViolation(f"{player.name} played {card}, which is not in hand")
            if card not in legal_plays:
                raise ContractViolation(f"{player.name} must follow suit; {card} is not legal")

            player.play_card(card)
            trick.add_card(seat, card)
            self.game_logger.log_card_play(player.name, card, f"trick {len(self.tricks) + 1}")

        winner = self.players[trick.winner_id]
        winner.take_trick(trick.cards)
        self.tricks.append(trick)
        self.current_trick = None
        self.game_logger.log_trick_winner(winner.name, trick.cards)
        self._check_card_count()
        return trick

    def play_tricks(self) -> List[Trick]:
        """Play every trick of the hand; each winner leads the next."""
        self.phase = HandPhase.PLAYING_TRICKS
        leader = self.first_seat
        for _ in range(self.hand_size):
            leader = self.play_trick(leader).winner_id
        return self.tricks

    def card_count(self) -> int:
        """Cards held, set aside (blind or bury), and already played."""
        held = sum(len(player.hand) for player in self.players)
        set_aside = len(self.buried) if self.taker_seat is not None else len(self.blind)
        played = sum(len(trick.plays) for trick in self.tricks)
        return held + set_aside + played

    def _check_card_count(self):
        count = self.card_count()
        if count != TOTAL_CARDS:
            raise RuntimeError(f"Card count is {count}, expected {TOTAL_CARDS}")

    def calculate_scores(self) -> HandResult:
        """
        Score the hand.

        The taker's side (taker plus Jack-of-Diamonds partner) owns its tricks
        and the buried cards, and wins with 61 or more. Only the winning side
        is awarded points.
        """
        dealer_id = self.players[self.dealer_seat].player_id
        if self.taker_seat is None:
            result = HandResult(self.round_number, dealer_id,
                                awards={p.player_id: 0 for p in self.players})
            self.result = result
            self.phase = HandPhase.HAND_SCORED
            return result

        side = {self.taker_seat}
        if self.partner_seat is not None:
            side.add(self.partner_seat)

        taker_points = count_points(self.buried)
        taker_tricks = 0
        defender_points = 0
        defender_tricks = 0
        for seat, player in enumerate(self.players):
            if seat in side:
                taker_points += count_points(player.cards_taken)
                taker_tricks += player.tricks_won
            else:
                defender_points += count_points(player.cards_taken)
                defender_tricks += player.tricks_won

        if taker_points + defender_points != TOTAL_POINTS:
            raise RuntimeError(
                f"Points don't add up to {TOTAL_POINTS}: taker {taker_points}, defenders {defender_points}")

        taker_won = taker_points >= TAKER_WIN_THRESHOLD
        awards = {p.player_id: 0 for p in self.players}
        if taker_won:
            multiplier = game_multiplier(defender_points, defender_tricks)
            alone = self.partner_seat is None
            awards[self.taker.player_id] = (4 if alone else 2) * multiplier
            if not alone:
                awards[self.partner.player_id] = multiplier
        else:
            multiplier = game_multiplier(taker_points, taker_tricks)
            for seat, player in enumerate(self.players):
                if seat not in side:
                    awards[player.player_id] = multiplier

        result = HandResult(
            round_number=self.round_number,
            dealer_id=dealer_id,
            taker_id=self.taker.player_id,
            partner_id=self.partner.player_id if self.partner is not None else None,
            taker_points=taker_points,
            defender_points=defender_points,
            taker_won=taker_won,
            multiplier=multiplier,
            awards=awards,
        )
        self.result = result
        self.phase = HandPhase.HAND_SCORED
        return result

    def play(self) -> HandResult:
        """Run the whole hand: deal, auction, bury, tricks, score."""
        self.deal_hands()
        self.run_auction()
        self.run_bury()
        self.play_tricks()
        result = self.calculate_scores()
        self.game_logger.log_round_result(self.summary(), {
            p.name: result.awards[p.player_id] for p in self.players})
        logger.debug("Hand %d finished: %s", self.round_number, result)
        return result

    def summary(self) -> str:
        """One-line description of the hand outcome."""
        if self.result is None:
            return f"Hand {self.round_number} in progress"
        if self.result.passed:
            return f"Hand {self.round_number}: everybody passed, no score"
        side = self.taker.name
        if self.partner is not None:
            side += f" & {self.partner.name}"
        outcome = "win" if self.result.taker_won else "lose"
        return (f"Hand {self.round_number}: {side} {outcome} with {self.result.taker_points} "
                f"to {self.result.defender_points}")

    def get_status(self) -> Dict:
        """Read-only snapshot of the hand for display."""
        return {
            'round_number': self.round_number,
            'phase': self.phase.value,
            'dealer': self.players[self.dealer_seat].name,
            'taker': self.taker.name if self.taker else None,
            'partner': self.partner.name if self.partner else None,
            'tricks_played': len(self.tricks),
            'current_trick': [str(c) for c in self.current_trick.cards] if self.current_trick else [],
            'hand_sizes': {p.name: len(p.hand) for p in self.players},
        }
