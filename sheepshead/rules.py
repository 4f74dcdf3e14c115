"""
Rules module for Sheepshead card game.
Contains trump ranking, trick resolution, rule constants, and validation logic.
"""

from typing import Iterable, List, Optional, Sequence, Tuple, Union
from sheepshead.card import Card, Suit, Rank


class PlayerCountError(ValueError):
    """Raised when a game is configured with an unsupported number of players."""


class ContractViolation(ValueError):
    """Raised when a player decision breaks the player contract."""


# Game constants
MIN_PLAYERS = 3
MAX_PLAYERS = 5
TOTAL_CARDS = 32

# Cards per player and blind size, keyed by player count
HAND_SIZES = {3: 10, 4: 7, 5: 6}
BLIND_SIZES = {3: 2, 4: 4, 5: 2}

# Scoring constants
TOTAL_POINTS = 120
TAKER_WIN_THRESHOLD = 61
SCHNEIDER_POINTS = 30

# Jack-of-Diamonds variant: the holder of this card partners the taker
PARTNER_CARD = Card(Suit.DIAMONDS, Rank.JACK)

# Discriminator for max_card_in_set meaning "any trump"
TRUMP = "TRUMP"

# Precedence among Jacks and Queens of different suits
SUIT_PRECEDENCE = {
    Suit.CLUBS: 3,
    Suit.SPADES: 2,
    Suit.HEARTS: 1,
    Suit.DIAMONDS: 0,
}

Discriminator = Union[str, Suit]


def validate_player_count(num_players: int) -> int:
    """
    Check that the player count is supported.

    Raises:
        PlayerCountError: If the count is outside 3-5
    """
    if not MIN_PLAYERS <= num_players <= MAX_PLAYERS:
        raise PlayerCountError(f"There must be 3-5 players (got {num_players})")
    return num_players


def hand_size(num_players: int) -> int:
    """Cards dealt to each player (also the number of tricks per hand)."""
    return HAND_SIZES[validate_player_count(num_players)]


def blind_size(num_players: int) -> int:
    """Cards set aside for the blind."""
    return BLIND_SIZES[validate_player_count(num_players)]


def is_trump(card: Card) -> bool:
    """True iff the card is a diamond, a Jack, or a Queen."""
    return card.is_trump()


def contains_trump(cards: Iterable[Card]) -> bool:
    """True iff at least one of the cards is trump."""
    return any(is_trump(card) for card in cards)


def trump_power(card: Card) -> int:
    """
    Strength of a trump card.

    Queens beat Jacks beat plain diamonds (A, 10, K, 9, 8, 7). Jacks and
    Queens of different suits break ties clubs > spades > hearts > diamonds.
    """
    power = card.rank.value * 10
    if card.rank.value >= Rank.JACK.value:
        power += SUIT_PRECEDENCE[card.suit]
    return power


def card_strength(card: Card) -> int:
    """Strength within the card's own class: trump power, or fail rank value."""
    if is_trump(card):
        return trump_power(card)
    return card.rank.value


def led_suit_of(card: Card) -> Discriminator:
    """Playing suit of a card: TRUMP for any trump, otherwise its fail suit."""
    return TRUMP if is_trump(card) else card.suit


def max_card_in_set(cards: Iterable[Card], discriminator: Discriminator) -> int:
    """
    Strongest card of a class among the cards.

    Args:
        cards: Cards already played
        discriminator: TRUMP, or a suit (fail cards of that suit only)

    Returns:
        The highest strength among matching cards, or 0 if none match.
        Fail cards give their rank value; trumps give their trump power
        (rank times ten plus suit precedence), so Q♣ gives 143, not 14.
    """
    if discriminator == TRUMP:
        matches = [c for c in cards if is_trump(c)]
    else:
        matches = [c for c in cards if c.suit == discriminator and not is_trump(c)]
    if not matches:
        return 0
    return max(card_strength(c) for c in matches)


def is_leading_card(new_card: Card, previous_cards: Sequence[Card]) -> bool:
    """
    Decide whether a card takes the lead of a trick.

    Args:
        new_card: Card being added
        previous_cards: Cards already in the trick, in play order

    Returns:
        True if new_card becomes the winning card
    """
    if not previous_cards:
        return True

    if contains_trump(previous_cards):
        return is_trump(new_card) and card_strength(new_card) > max_card_in_set(previous_cards, TRUMP)

    if is_trump(new_card):
        return True

    lead_suit = previous_cards[0].suit
    if new_card.suit != lead_suit:
        return False
    return card_strength(new_card) > max_card_in_set(previous_cards, lead_suit)


def determine_trick_winner(plays: Sequence[Tuple[int, Card]]) -> int:
    """
    Determine winner of a trick.

    Args:
        plays: List of (player_id, card) tuples in play order

    Returns:
        Player ID of trick winner
    """
    if not plays:
        raise ValueError("No cards played")

    winner_id = plays[0][0]
    played: List[Card] = []
    for player_id, card in plays:
        if is_leading_card(card, played):
            winner_id = player_id
        played.append(card)
    return winner_id


def count_points(cards: Iterable[Card]) -> int:
    """Total card points in a set of cards."""
    return sum(card.point_value() for card in cards)


def get_legal_plays(hand: List[Card], trick_cards: Sequence[Card]) -> List[Card]:
    """
    Get all legal card plays under follow-suit rules.

    Trump counts as a single suit. A player who cannot follow may play anything.

    Args:
        hand: Player's current hand
        trick_cards: Cards already played this trick

    Returns:
        List of cards that can legally be played
    """
    if not trick_cards:
        return hand.copy()

    led = led_suit_of(trick_cards[0])
    following = [card for card in hand if led_suit_of(card) == led]
    if following:
        return following
    return hand.copy()


def validate_card_play(card: Card, hand: List[Card], trick_cards: Sequence[Card],
                       enforce_follow_suit: bool = False) -> bool:
    """
    Validate that a card play is legal.

    Args:
        card: Card being played
        hand: Player's current hand
        trick_cards: Cards already played this trick
        enforce_follow_suit: Whether follow-suit obligations apply

    Returns:
        True if play is valid
    """
    if card not in hand:
        return False
    if not enforce_follow_suit:
        return True
    return card in get_legal_plays(hand, trick_cards)


def game_multiplier(losing_points: int, losing_tricks: int) -> int:
    """Award multiplier from how badly the losing side did."""
    if losing_tricks == 0:
        return 3
    if losing_points <= SCHNEIDER_POINTS:
        return 2
    return 1


def partner_of(hands: Sequence[Tuple[int, List[Card]]], taker_id: Optional[int]) -> Optional[int]:
    """
    Find the taker's partner: whoever holds the Jack of Diamonds.

    Returns None when nobody took the blind or the taker holds (or buried) it.
    """
    if taker_id is None:
        return None
    for player_id, hand in hands:
        if PARTNER_CARD in hand:
            return None if player_id == taker_id else player_id
    return None



class GameRules:
    """Container class for game rule constants and methods."""

    MIN_PLAYERS = MIN_PLAYERS
    MAX_PLAYERS = MAX_PLAYERS
    TOTAL_CARDS = TOTAL_CARDS
    TOTAL_POINTS = TOTAL_POINTS
    TAKER_WIN_THRESHOLD = TAKER_WIN_THRESHOLD
    SCHNEIDER_POINTS = SCHNEIDER_POINTS
    PARTNER_CARD = PARTNER_CARD

    @staticmethod
    def deal_sizes(num_players: int) -> Tuple[int, int]:
        """Cards per player and blind size."""
        return hand_size(num_players), blind_size(num_players)

    @staticmethod
    def trick_winner(plays: Sequence[Tuple[int, Card]]) -> int:
        """Get the trick winner."""
        return determine_trick_winner(plays)

    @staticmethod
    def legal_plays(hand: List[Card], trick_cards: Sequence[Card]) -> List[Card]:
        """Get legal plays."""
        return get_legal_plays(hand, trick_cards)

    @staticmethod
    def multiplier(losing_points: int, losing_tricks: int) -> int:
        """Get the award multiplier."""
        return game_multiplier(losing_points, losing_tricks)
