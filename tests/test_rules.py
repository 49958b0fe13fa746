import pytest

from blackjack_sim.game.errors import InvalidBetError
from blackjack_sim.game.rules import BetPolicy, Outcome, compare, payout, reconcile, validate_bet
from tests.conftest import cards, scripted_player


@pytest.mark.parametrize('player, dealer, outcome', [
    ((10, 10, 5), (10, 10, 5), Outcome.LOSE),  # both bust, player still loses
    ((10, 10, 5), (10, 7), Outcome.LOSE),
    ((10, 8), (10, 6, 9), Outcome.WIN),
    ((10, 9), (10, 8), Outcome.WIN),
    ((10, 8), (10, 8), Outcome.PUSH),
    ((10, 7), (10, 8), Outcome.LOSE),
    ((1, 13), (7, 7, 7), Outcome.PUSH),
])
def test_compare(player, dealer, outcome):
    assert compare(cards(*player), cards(*dealer)) == outcome


def seat(player, dealer_hand, hand, bet):
    dealer = scripted_player(name='Dealer', balance=0)
    dealer.hand = cards(*dealer_hand)
    player.hand = cards(*hand)
    player.place_bet(bet)
    return dealer


def test_natural_pays_two_and_a_half_times():
    player = scripted_player(balance=100)
    dealer = seat(player, (10, 8), (1, 13), 10)

    assert reconcile(player, dealer) == Outcome.WIN
    assert player.balance == 90 + 25
    assert player.bet == 0


def test_natural_payout_rounds_down():
    assert payout(cards(1, 12), 5, Outcome.WIN) == 12


def test_three_card_21_pays_double():
    player = scripted_player(balance=100)
    dealer = seat(player, (10, 8), (7, 7, 7), 10)

    assert reconcile(player, dealer) == Outcome.WIN
    assert player.balance == 90 + 20


def test_push_refunds_the_bet():
    player = scripted_player(balance=100)
    dealer = seat(player, (10, 8), (9, 9), 30)
    assert player.balance == 70

    assert reconcile(player, dealer) == Outcome.PUSH
    assert player.balance == 100
    assert player.bet == 0
    assert (player.wins, player.losses, player.pushes) == (0, 0, 1)
    assert player.games_played == 1


def test_loss_keeps_the_bet():
    player = scripted_player(balance=100)
    dealer = seat(player, (10, 9), (10, 5, 10), 10)

    assert reconcile(player, dealer) == Outcome.LOSE
    assert player.balance == 90
    assert player.bet == 0
    assert (player.wins, player.losses) == (0, 1)


def test_streaks_reset_each_other():
    player = scripted_player(balance=100)

    dealer = seat(player, (10, 7), (10, 9), 5)
    reconcile(player, dealer)
    dealer = seat(player, (10, 7), (10, 9), 5)
    reconcile(player, dealer)
    assert (player.win_streak, player.lose_streak) == (2, 0)

    dealer = seat(player, (10, 9), (10, 7), 5)
    reconcile(player, dealer)
    assert (player.win_streak, player.lose_streak) == (0, 1)

    # A push leaves both streaks alone.
    dealer = seat(player, (10, 9), (10, 9), 5)
    reconcile(player, dealer)
    assert (player.win_streak, player.lose_streak) == (0, 1)
    assert player.games_played == 4
    assert (player.wins, player.losses) == (2, 1)


def test_validate_bet_accepts_bets_within_balance():
    player = scripted_player(balance=50)
    assert validate_bet(player, 50) == 50
    assert validate_bet(player, 0) == 0


@pytest.mark.parametrize('amount', [-1, 2.5, '10', True])
def test_validate_bet_rejects_bad_amounts(amount):
    player = scripted_player(balance=50)
    with pytest.raises(InvalidBetError):
        validate_bet(player, amount)


def test_validate_bet_clamps_to_balance():
    player = scripted_player(balance=30)
    assert validate_bet(player, 100, BetPolicy.CLAMP) == 30


def test_validate_bet_clamps_to_zero_when_broke():
    player = scripted_player(balance=-20)
    assert validate_bet(player, 5, BetPolicy.CLAMP) == 0


def test_validate_bet_can_reject_overdraw():
    player = scripted_player(balance=30)
    with pytest.raises(InvalidBetError):
        validate_bet(player, 31, BetPolicy.REJECT)
