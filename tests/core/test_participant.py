"""Tests for players and the dealer."""

import pytest

from blackjack.cards import Card, Rank, Suit
from blackjack.errors import InvalidNameLengthError, TurnOrderError
from blackjack.participant import Participant, Role


class TestPlayerName:
    """Player names are trimmed, then must be 2 to 10 characters."""

    @pytest.mark.parametrize("name", ["가비", "열_글자_입니다..", "공백도 포함합니다.", "  ab  "])
    def test_valid_names(self, name):
        player = Participant.player(name)
        assert player.name == name.strip()
        assert player.role == Role.PLAYER

    @pytest.mark.parametrize("name", ["", "1", "   a   ", "abcdqwertyuiopdfghjk"])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidNameLengthError, match="2 ~ 10 글자"):
            Participant.player(name)

    def test_custom_length_limits(self):
        assert Participant.player("a", min_length=1, max_length=3).name == "a"
        with pytest.raises(InvalidNameLengthError):
            Participant.player("abcd", min_length=1, max_length=3)


class TestPlayer:
    """Player turn policy."""

    def test_add_card(self, player):
        player.add_card(Card(Rank.ACE, Suit.CLUBS))
        assert len(player.cards) == 1

    def test_cards_is_a_copy(self, player):
        player.add_card(Card(Rank.ACE, Suit.CLUBS))
        player.cards.append(Card(Rank.TWO, Suit.CLUBS))
        assert len(player.cards) == 1

    def test_new_player_is_active(self, player):
        assert player.is_active
        assert not player.is_stand
        assert not player.is_bust

    def test_stand(self, player):
        player.add_card(Card(Rank.TEN, Suit.CLUBS))
        player.stand()
        assert player.is_stand
        assert not player.is_active

    def test_bust_ends_turn(self, player):
        for rank in (Rank.FIVE, Rank.TEN, Rank.TEN):
            player.add_card(Card(rank, Suit.SPADES))
        assert player.is_bust
        assert not player.is_active

    def test_no_cards_after_bust(self, player):
        for rank in (Rank.FIVE, Rank.TEN, Rank.TEN):
            player.add_card(Card(rank, Suit.SPADES))

        with pytest.raises(TurnOrderError):
            player.add_card(Card(Rank.TWO, Suit.SPADES))
        assert len(player.cards) == 3

    def test_no_cards_after_stand(self, player):
        player.stand()
        with pytest.raises(TurnOrderError):
            player.add_card(Card(Rank.TWO, Suit.SPADES))

    def test_cannot_stand_twice(self, player):
        player.stand()
        with pytest.raises(TurnOrderError):
            player.stand()

    def test_player_does_not_auto_play(self, player, deck):
        with pytest.raises(TurnOrderError):
            player.play_turn(deck)

    def test_str(self, player):
        player.add_card(Card(Rank.TWO, Suit.HEARTS))
        player.add_card(Card(Rank.EIGHT, Suit.SPADES))
        assert str(player) == "연어카드: 2하트, 8스페이드"


class TestDealer:
    """Dealer turn policy: draw while 16 or less."""

    def test_default_name(self, dealer):
        assert dealer.name == "딜러"
        assert dealer.is_dealer

    def test_dealer_on_16_is_not_standing(self, dealer):
        dealer.add_card(Card(Rank.TEN, Suit.CLUBS))
        dealer.add_card(Card(Rank.SIX, Suit.CLUBS))
        assert not dealer.is_stand
        assert dealer.is_active

    def test_dealer_on_17_is_standing(self, dealer):
        dealer.add_card(Card(Rank.TEN, Suit.CLUBS))
        dealer.add_card(Card(Rank.SEVEN, Suit.CLUBS))
        assert dealer.is_stand

    def test_soft_17_stands(self, dealer):
        dealer.add_card(Card(Rank.ACE, Suit.CLUBS))
        dealer.add_card(Card(Rank.SIX, Suit.CLUBS))
        assert dealer.score == 17
        assert dealer.is_stand

    def test_dealer_cannot_stand_by_choice(self, dealer):
        with pytest.raises(TurnOrderError):
            dealer.stand()

    def test_play_turn_draws_to_17(self, dealer, deck):
        # Unshuffled: A, A, A, A, 2, ...
        dealer.add_card(Card(Rank.TEN, Suit.CLUBS))
        dealer.add_card(Card(Rank.TWO, Suit.CLUBS))

        drawn = dealer.play_turn(deck)

        # 12 + A(13) + A(14) + A(15) + A(16) + 2(18)
        assert drawn == 5
        assert dealer.score == 18
        assert dealer.is_stand

    def test_play_turn_never_draws_above_16(self, dealer, deck):
        dealer.add_card(Card(Rank.TEN, Suit.CLUBS))
        dealer.add_card(Card(Rank.NINE, Suit.CLUBS))

        assert dealer.play_turn(deck) == 0
        assert len(deck) == 52
        assert dealer.score == 19

    def test_play_turn_stops_on_bust(self, dealer):
        from blackjack.cards import Deck

        dealer.add_card(Card(Rank.TEN, Suit.CLUBS))
        dealer.add_card(Card(Rank.SIX, Suit.CLUBS))
        deck = Deck.create(lambda cards: cards.reverse())  # King of clubs first

        assert dealer.play_turn(deck) == 1
        assert dealer.is_bust
        assert dealer.is_stand
