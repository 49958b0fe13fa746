# rules.py
import enum
import logging
from typing import Sequence

from blackjack_sim.game.cards import Card
from blackjack_sim.game.errors import InvalidBetError
from blackjack_sim.game.hand import BLACKJACK, hand_value, is_natural
from blackjack_sim.game.player import Player

logger = logging.getLogger(__name__)

WIN_MULTIPLIER = 2
NATURAL_MULTIPLIER = 2.5


class Outcome(enum.StrEnum):
    WIN = 'win'
    LOSE = 'lose'
    PUSH = 'push'


class BetPolicy(enum.StrEnum):
    CLAMP = 'clamp'
    REJECT = 'reject'


def compare(player_cards: Sequence[Card], dealer_cards: Sequence[Card]) -> Outcome:
    """
    Decide how a player's hand fares against the dealer's.

    A bust player loses even when the dealer busts too.
    """
    player_value = hand_value(player_cards)
    dealer_value = hand_value(dealer_cards)

    if player_value > BLACKJACK:
        return Outcome.LOSE

    if dealer_value > BLACKJACK:
        return Outcome.WIN

    if player_value > dealer_value:
        return Outcome.WIN

    if player_value == dealer_value:
        return Outcome.PUSH

    return Outcome.LOSE


def payout(cards: Sequence[Card], bet: int, outcome: Outcome) -> int:
    """Amount credited back to the player, stake included."""
    match outcome:
        case Outcome.WIN if is_natural(cards):
            return int(bet * NATURAL_MULTIPLIER)
        case Outcome.WIN:
            return bet * WIN_MULTIPLIER
        case Outcome.PUSH:
            return bet
        case _:
            return 0


def reconcile(player: Player, dealer: Player) -> Outcome:
    """
    Settle the player's bet against the dealer and update the statistics.
    Must run exactly once per player per round, after every turn is over.
    """
    outcome = compare(player.hand, dealer.hand)
    credited = payout(player.hand, player.bet, outcome)

    player.games_played += 1
    player.balance += credited

    match outcome:
        case Outcome.WIN:
            player.wins += 1
            player.win_streak += 1
            player.lose_streak = 0
        case Outcome.LOSE:
            player.losses += 1
            player.lose_streak += 1
            player.win_streak = 0
        case Outcome.PUSH:
            player.pushes += 1

    logger.debug(f'{player.name} {outcome} with bet {player.bet}, credited {credited}')
    player.bet = 0
    return outcome


def validate_bet(player: Player, amount, policy: BetPolicy = BetPolicy.CLAMP) -> int:
    """
    Check a bet before it is debited. Negative or non integer bets are
    always refused; bets over the balance are clamped or refused depending
    on the policy.
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidBetError(player.name, amount, 'bets must be whole numbers')

    if amount < 0:
        raise InvalidBetError(player.name, amount, 'bets cannot be negative')

    if amount > player.balance:
        if policy == BetPolicy.REJECT:
            raise InvalidBetError(player.name, amount, f'only ${player.balance} available')

        clamped = max(player.balance, 0)
        logger.warning(f'{player.name} bet {amount} with only ${player.balance}, clamping to {clamped}')
        return clamped

    return amount
