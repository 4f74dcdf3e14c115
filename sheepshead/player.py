"""
Player module for Sheepshead card game.
Defines player state, the strategy interface, and human/computer players.
"""

from typing import Callable, List, Optional, Sequence, Tuple
from abc import ABC, abstractmethod
from sheepshead.card import Card

BuryResult = Tuple[List[Card], List[Card]]


class BotInterface(ABC):
    """Abstract interface that all computer strategies must implement."""

    @abstractmethod
    def decide_take_blind(self, hand: List[Card], num_players: int) -> bool:
        """
        Decide whether to take the blind.

        Args:
            hand: Current hand (the blind is never visible here)
            num_players: Number of players at the table

        Returns:
            True to take the blind
        """
        pass

    @abstractmethod
    def choose_card(self, hand: List[Card], legal_plays: List[Card],
                    trick_cards: List[Card]) -> Card:
        """
        Choose which card to play.

        Args:
            hand: Current hand
            legal_plays: Cards that may be played now
            trick_cards: Cards already played in current trick, in order

        Returns:
            Card to play
        """
        pass

    @abstractmethod
    def choose_bury(self, hand: List[Card], blind: List[Card]) -> BuryResult:
        """
        Choose cards to bury after taking the blind.

        Args:
            hand: Hand before taking the blind
            blind: Blind cards

        Returns:
            Tuple of (retained_hand, buried_cards), len(buried_cards) == len(blind)
        """
        pass


class Player:
    """Represents a player in the Sheepshead game."""

    def __init__(self, player_id: int, name: str = None, strategy: Optional[BotInterface] = None):
        self.player_id = player_id
        self.name = name or f"Player {player_id}"
        self.strategy = strategy
        self.hand: List[Card] = []
        self.score = 0
        self.is_dealer = False
        self.is_taker = False
        self.is_partner = False
        self.tricks_won = 0
        self.cards_taken: List[Card] = []

    # Decisions: these only query, the round commits the result.

    def decide_take_blind(self, num_players: int) -> bool:
        """Ask the strategy whether to take the blind."""
        return self._require_strategy().decide_take_blind(list(self.hand), num_players)

    def choose_card(self, trick_cards: Sequence[Card], legal_plays: Optional[List[Card]] = None) -> Card:
        """Ask the strategy which card to play."""
        if legal_plays is None:
            legal_plays = list(self.hand)
        return self._require_strategy().choose_card(list(self.hand), list(legal_plays), list(trick_cards))

    def bury(self, blind: Sequence[Card]) -> BuryResult:
        """Ask the strategy which cards to bury."""
        return self._require_strategy().choose_bury(list(self.hand), list(blind))

    def _require_strategy(self) -> BotInterface:
        if self.strategy is None:
            raise ValueError(f"{self.name} has no strategy")
        return self.strategy

    # State changes

    def receive_cards(self, cards: List[Card]):
        """Replace player's hand."""
        self.hand = list(cards)

    def receive_card(self, card: Card):
        """Add one dealt card to player's hand."""
        self.hand.append(card)

    def play_card(self, card: Card) -> Card:
        """
        Remove and return a card from hand.

        Args:
            card: Card to play

        Returns:
            The played card

        Raises:
            ValueError: If card not in hand
        """
        if card not in self.hand:
            raise ValueError(f"Card {card} not in hand")
        self.hand.remove(card)
        return card

    def apply_bury(self, retained: List[Card]):
        """Keep the retained cards as the new hand."""
        self.hand = list(retained)

    def take_trick(self, cards: List[Card]):
        """Record a won trick."""
        self.tricks_won += 1
        self.cards_taken.extend(cards)

    def reset_round(self):
        """Reset player state for new hand."""
        self.hand = []
        self.is_taker = False
        self.is_partner = False
        self.tricks_won = 0
        self.cards_taken = []

    def add_score(self, points: int):
        """Add points to player's total score."""
        if points < 0:
            raise ValueError(f"Score awards cannot be negative ({points})")
        self.score += points

    def __str__(self):
        return f"{self.name} (Score: {self.score})"


class ComputerPlayer(Player):
    """Rule-based computer player; uses HeuristicBot unless given another strategy."""

    def __init__(self, player_id: int, name: str = None, strategy: Optional[BotInterface] = None):
        if strategy is None:
            # bot depends on sheepshead, so import at call time; pass a strategy to avoid it
            from bot.heuristic_bot import HeuristicBot
            strategy = HeuristicBot(name or f"Computer_{player_id}")
        super().__init__(player_id, name or f"Computer_{player_id}", strategy)


class HumanPlayer(Player):
    """
    Human player backed by front-end callbacks.

    The engine performs no input handling; each decision is forwarded to a
    callback supplied by the presentation layer.
    """

    def __init__(self, player_id: int, name: str = None,
                 play_card_callback: Callable[["HumanPlayer", List[Card]], Card] = None,
                 decide_take_blind_callback: Callable[["HumanPlayer"], bool] = None,
                 bury_callback: Callable[["HumanPlayer", List[Card]], BuryResult] = None):
        super().__init__(player_id, name or f"Human_{player_id}")
        if play_card_callback is None or decide_take_blind_callback is None or bury_callback is None:
            raise ValueError("HumanPlayer needs play_card, decide_take_blind and bury callbacks")
        self.play_card_callback = play_card_callback
        self.decide_take_blind_callback = decide_take_blind_callback
        self.bury_callback = bury_callback

    def decide_take_blind(self, num_players: int) -> bool:
        return bool(self.decide_take_blind_callback(self))

    def choose_card(self, trick_cards: Sequence[Card], legal_plays: Optional[List[Card]] = None) -> Card:
        return self.play_card_callback(self, list(trick_cards))

    def bury(self, blind: Sequence[Card]) -> BuryResult:
        return self.bury_callback(self, list(blind))
