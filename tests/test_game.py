"""
Unit tests for Sheepshead game logic.
Tests cards, deck, players, and the game orchestrator.
"""

from dataclasses import FrozenInstanceError

import pytest
from sheepshead.card import Card, Suit, Rank, create_deck
from sheepshead.deck import Deck, fisher_yates_shuffle, make_rng, sort_hand, get_cards_by_suit
from sheepshead.player import Player, HumanPlayer, ComputerPlayer
from sheepshead.rules import PlayerCountError, TOTAL_CARDS, is_trump
from sheepshead.round import HandPhase
from sheepshead.game import GameConfig, SheepsheadGame
from bot.heuristic_bot import HeuristicBot
from bot.random_bot import RandomBot


def create_test_players(count=3, take_probability=0.3):
    players = []
    for i in range(count):
        player = Player(i, f"Bot_{i}")
        player.strategy = RandomBot(f"RandomBot_{i}", seed=100 + i, take_probability=take_probability)
        players.append(player)
    return players


class TestCard:
    """Test card functionality."""

    def test_card_creation(self):
        card = Card(Suit.SPADES, Rank.ACE)
        assert card.suit == Suit.SPADES
        assert card.rank == Rank.ACE
        assert str(card) == "A♠"
        assert str(Card(Suit.HEARTS, Rank.TEN)) == "10♥"

    def test_card_is_immutable(self):
        card = Card(Suit.CLUBS, Rank.SEVEN)
        with pytest.raises(AttributeError):
            card.rank = Rank.QUEEN
        with pytest.raises(FrozenInstanceError):
            card.suit = Suit.HEARTS
        assert card == Card(Suit.CLUBS, Rank.SEVEN)

    def test_card_equality(self):
        assert Card(Suit.CLUBS, Rank.KING) == Card(Suit.CLUBS, Rank.KING)
        assert Card(Suit.CLUBS, Rank.KING) != Card(Suit.SPADES, Rank.KING)
        assert len({Card(Suit.CLUBS, Rank.KING), Card(Suit.CLUBS, Rank.KING)}) == 1

    def test_rank_order(self):
        # 7 < 8 < 9 < K < 10 < A < J < Q
        order = [Rank.SEVEN, Rank.EIGHT, Rank.NINE, Rank.KING,
                 Rank.TEN, Rank.ACE, Rank.JACK, Rank.QUEEN]
        assert [r.value for r in order] == list(range(7, 15))
        assert Card(Suit.HEARTS, Rank.TEN) > Card(Suit.HEARTS, Rank.KING)


class TestDeck:
    """Test deck functionality."""

    def test_create_deck(self):
        deck = create_deck()
        assert len(deck) == 32
        assert len(set(deck)) == 32

    def test_canonical_order(self):
        deck = create_deck()
        assert deck[0] == Card(Suit.CLUBS, Rank.SEVEN)
        assert deck[7] == Card(Suit.CLUBS, Rank.QUEEN)
        assert deck[8] == Card(Suit.SPADES, Rank.SEVEN)
        assert deck[-1] == Card(Suit.DIAMONDS, Rank.QUEEN)
        assert create_deck() == deck

    def test_shuffle_is_permutation(self):
        cards = create_deck()
        shuffled = fisher_yates_shuffle(list(cards), make_rng(7))
        assert set(shuffled) == set(cards)
        assert len(shuffled) == 32

    def test_shuffle_in_place(self):
        cards = create_deck()
        result = fisher_yates_shuffle(cards, make_rng(3))
        assert result is cards

    def test_seeds(self):
        first = fisher_yates_shuffle(create_deck(), make_rng(1))
        again = fisher_yates_shuffle(create_deck(), make_rng(1))
        other = fisher_yates_shuffle(create_deck(), make_rng(2))
        assert first == again
        assert first != other

    def test_deck_dealing(self):
        deck = Deck(seed=11)
        hand = deck.deal_hand(10)

        assert len(hand) == 10
        assert deck.cards_remaining() == 22
        assert len(set(hand)) == 10

        deck.deal_hand(22)
        assert deck.is_empty()
        with pytest.raises(ValueError):
            deck.deal_card()
        with pytest.raises(ValueError):
            deck.deal_hand(1)

        deck.reset()
        assert deck.cards_remaining() == 32

    def test_sort_hand(self):
        hand = [Card(Suit.HEARTS, Rank.SEVEN), Card(Suit.DIAMONDS, Rank.SEVEN),
                Card(Suit.CLUBS, Rank.QUEEN), Card(Suit.CLUBS, Rank.ACE)]
        assert sort_hand(hand) == [Card(Suit.CLUBS, Rank.QUEEN), Card(Suit.DIAMONDS, Rank.SEVEN),
                                   Card(Suit.CLUBS, Rank.ACE), Card(Suit.HEARTS, Rank.SEVEN)]

    def test_cards_by_suit(self):
        hand = [Card(Suit.CLUBS, Rank.QUEEN), Card(Suit.CLUBS, Rank.ACE), Card(Suit.DIAMONDS, Rank.SEVEN)]
        grouped = get_cards_by_suit(hand)
        assert set(grouped) == {"TRUMP", "CLUBS"}
        assert grouped["CLUBS"] == [Card(Suit.CLUBS, Rank.ACE)]
        assert all(is_trump(c) for c in grouped["TRUMP"])


class TestPlayer:
    """Test player functionality."""

    def test_player_creation(self):
        player = Player(0, "TestPlayer")
        assert player.player_id == 0
        assert player.name == "TestPlayer"
        assert player.score == 0
        assert len(player.hand) == 0
        assert Player(4).name == "Player 4"

    def test_card_management(self):
        player = Player(0)
        cards = [Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.KING)]

        player.receive_cards(cards)
        assert len(player.hand) == 2

        played_card = player.play_card(cards[0])
        assert played_card == cards[0]
        assert len(player.hand) == 1
        assert cards[0] not in player.hand

        with pytest.raises(ValueError):
            player.play_card(cards[0])

    def test_choosing_does_not_remove(self):
        player = Player(0, strategy=HeuristicBot())
        cards = [Card(Suit.SPADES, Rank.ACE), Card(Suit.HEARTS, Rank.KING)]
        player.receive_cards(cards)

        choice = player.choose_card([])
        assert choice in cards
        assert player.hand == cards

    def test_scores_only_grow(self):
        player = Player(0)
        player.add_score(3)
        player.add_score(0)
        assert player.score == 3
        with pytest.raises(ValueError):
            player.add_score(-1)

    def test_reset_round_keeps_score(self):
        player = Player(0)
        player.receive_cards([Card(Suit.SPADES, Rank.ACE)])
        player.is_taker = True
        player.take_trick([Card(Suit.SPADES, Rank.ACE)])
        player.add_score(2)
        player.reset_round()
        assert player.hand == []
        assert not player.is_taker
        assert player.tricks_won == 0
        assert player.cards_taken == []
        assert player.score == 2

    def test_player_without_strategy(self):
        with pytest.raises(ValueError):
            Player(0).decide_take_blind(3)

    def test_computer_player_defaults_to_heuristic(self):
        player = ComputerPlayer(2)
        assert isinstance(player.strategy, HeuristicBot)
        assert player.name == "Computer_2"

    def test_computer_player_with_given_strategy(self):
        strategy = RandomBot(seed=4)
        player = ComputerPlayer(3, "Rand", strategy=strategy)
        assert player.strategy is strategy
        assert player.name == "Rand"

    def test_human_player_callbacks(self):
        calls = []

        def play(player, trick):
            calls.append(("play", player.name, list(trick)))
            return player.hand[0]

        def decide(player):
            calls.append(("decide", player.name))
            return True

        def bury(player, blind):
            calls.append(("bury", player.name, list(blind)))
            return list(player.hand), list(blind)

        human = HumanPlayer(0, "Ann", play, decide, bury)
        ace = Card(Suit.SPADES, Rank.ACE)
        human.receive_cards([ace])

        assert human.decide_take_blind(3)
        assert human.choose_card([Card(Suit.SPADES, Rank.SEVEN)]) == ace
        blind = [Card(Suit.HEARTS, Rank.SEVEN)]
        assert human.bury(blind) == ([ace], blind)
        assert [c[0] for c in calls] == ["decide", "play", "bury"]
        assert human.hand == [ace]

    def test_human_player_needs_callbacks(self):
        with pytest.raises(ValueError):
            HumanPlayer(0, "Ann")


class TestGame:
    """Test full game functionality."""

    @pytest.mark.parametrize("count", [0, 1, 2, 6])
    def test_bad_player_count(self, count):
        with pytest.raises(PlayerCountError, match="There must be 3-5 players"):
            SheepsheadGame(create_test_players(count))

    def test_duplicate_player_ids(self):
        players = create_test_players(3)
        players[1].player_id = 0
        with pytest.raises(ValueError, match="Player ids must be unique"):
            SheepsheadGame(players)

    def test_game_creation(self):
        players = create_test_players(4)
        game = SheepsheadGame(players, goal=10)

        assert len(game.players) == 4
        assert game.goal == 10
        assert game.current_round == 0
        assert game.phase == HandPhase.AWAITING_HAND
        assert not game.game_complete

    def test_goal_argument_does_not_mutate_config(self):
        config = GameConfig(goal=5)
        game = SheepsheadGame(create_test_players(), config, goal=9)
        assert game.goal == 9
        assert config.goal == 5

    def test_config_validation(self):
        with pytest.raises(ValueError):
            GameConfig(goal=-1)
        with pytest.raises(ValueError):
            GameConfig(max_hands=0)

    def test_unbounded_game_never_over(self):
        players = create_test_players()
        game = SheepsheadGame(players, GameConfig(goal=0))
        players[0].score = 10_000
        assert not game.is_game_over()

    def test_goal_reached(self):
        players = create_test_players()
        game = SheepsheadGame(players, GameConfig(goal=50))
        assert not game.is_game_over()
        players[1].score = 52
        assert game.is_game_over()

    def test_dealer_rotates_left(self):
        players = create_test_players(4)
        game = SheepsheadGame(players, GameConfig(seed=5))

        dealers = []
        for _ in range(5):
            game.play_round()
            dealers.append(game.dealer_seat)
            assert sum(1 for p in players if p.is_dealer) == 1
            assert players[game.dealer_seat].is_dealer
        assert dealers == [1, 2, 3, 0, 1]

    def test_single_hand_conserves_cards(self):
        players = create_test_players(3)
        game = SheepsheadGame(players, GameConfig(goal=0, seed=42))

        result = game.play_round()
        round_obj = game.rounds[-1]

        assert len(round_obj.tricks) == 10
        assert all(len(trick.plays) == 3 for trick in round_obj.tricks)
        assert all(p.hand == [] for p in players)
        assert round_obj.card_count() == TOTAL_CARDS
        assert sum(len(p.cards_taken) for p in players) == 30
        assert game.results == [result]
        assert not game.is_game_over()

    def test_play_game_to_goal(self):
        players = create_test_players(3, take_probability=1.0)
        game = SheepsheadGame(players, GameConfig(goal=5, seed=9, max_hands=200))

        standings = game.play_game()

        assert game.game_complete
        assert game.phase == HandPhase.GAME_OVER
        assert game.is_game_over()
        assert standings[0].score >= 5
        assert [p.score for p in standings] == sorted((p.score for p in players), reverse=True)
        assert all(not r.passed for r in game.results)
        with pytest.raises(ValueError):
            game.play_round()

    def test_max_hands_bounds_unbounded_game(self):
        players = create_test_players(5)
        game = SheepsheadGame(players, GameConfig(goal=0, seed=1, max_hands=3))
        game.play_game()
        assert game.current_round == 3

    def test_computer_game_with_hand_limit_finishes(self):
        players = [ComputerPlayer(i) for i in range(5)]
        game = SheepsheadGame(players, GameConfig(goal=10, seed=1, max_hands=200))
        standings = game.play_game()

        assert game.game_complete
        assert game.current_round <= 200
        assert game.current_round == 200 or max(p.score for p in players) >= 10
        assert len(standings) == 5

    def test_scores_never_decrease(self):
        players = create_test_players(4, take_probability=0.5)
        game = SheepsheadGame(players, GameConfig(seed=21))
        previous = [0] * 4
        for _ in range(8):
            game.play_round()
            current = [p.score for p in players]
            assert all(c >= p for c, p in zip(current, previous))
            previous = current

    def test_tied_winners(self):
        players = create_test_players(3)
        game = SheepsheadGame(players)
        players[0].score = 7
        players[2].score = 7
        players[1].score = 3
        assert game.get_winners() == [players[0], players[2]]
        assert game.get_final_scores() == {0: 7, 1: 3, 2: 7}

    def test_game_state(self):
        players = create_test_players(3)
        game = SheepsheadGame(players, GameConfig(seed=4))
        assert game.get_game_state()['current_round_state'] is None

        game.play_round()
        state = game.get_game_state()
        assert state['current_round'] == 1
        assert state['dealer'] == players[1].name
        assert state['current_round_state']['phase'] == HandPhase.HAND_SCORED.value
        assert state['current_round_state']['tricks_played'] == 10

    def test_heuristic_game(self):
        players = [ComputerPlayer(i) for i in range(5)]
        game = SheepsheadGame(players, GameConfig(seed=13, max_hands=4, enforce_follow_suit=True))
        game.play_game()
        assert game.current_round == 4
        assert all(p.hand == [] for p in players)


if __name__ == "__main__":
    pytest.main([__file__])
