"""
Sheepshead (Jack-of-Diamonds) game engine for 3-5 players.
"""

__version__ = "0.1.0"

from .card import Card, Suit, Rank, create_deck
from .deck import Deck, fisher_yates_shuffle
from .rules import (
    TRUMP,
    ContractViolation,
    PlayerCountError,
    blind_size,
    contains_trump,
    hand_size,
    is_leading_card,
    is_trump,
    max_card_in_set,
)
from .player import BotInterface, ComputerPlayer, HumanPlayer, Player
from .round import HandPhase, HandResult, Round, Trick
from .game import GameConfig, SheepsheadGame

__all__ = [
    'Card',
    'Suit',
    'Rank',
    'create_deck',
    'Deck',
    'fisher_yates_shuffle',
    'TRUMP',
    'ContractViolation',
    'PlayerCountError',
    'blind_size',
    'contains_trump',
    'hand_size',
    'is_leading_card',
    'is_trump',
    'max_card_in_set',
    'BotInterface',
    'ComputerPlayer',
    'HumanPlayer',
    'Player',
    'HandPhase',
    'HandResult',
    'Round',
    'Trick',
    'GameConfig',
    'SheepsheadGame',
]
