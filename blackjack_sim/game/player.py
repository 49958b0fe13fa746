from __future__ import annotations

from typing import TYPE_CHECKING

from blackjack_sim.game.cards import Card
from blackjack_sim.game.hand import format_hand, hand_value, is_bust

if TYPE_CHECKING:
    from blackjack_sim.game.strategies import Strategy


class Player:
    """
    Someone seated at the table, the dealer included.

    Balance, counters and streaks live for the whole session. The hand and
    the bet are cleared after every round.
    """

    def __init__(self, name: str, strategy: Strategy, balance: int = 0) -> None:
        self.name = name
        self.strategy = strategy
        self.balance = balance
        self.bet = 0
        self.hand: list[Card] = []

        self.games_played = 0
        self.wins = 0
        self.losses = 0
        self.pushes = 0
        self.win_streak = 0
        self.lose_streak = 0

    @property
    def hand_value(self) -> int:
        return hand_value(self.hand)

    @property
    def is_bust(self) -> bool:
        return is_bust(self.hand)

    @property
    def is_interactive(self) -> bool:
        return self.strategy.interactive

    def take(self, card: Card):
        self.hand.append(card)

    def place_bet(self, amount: int):
        self.bet = amount
        self.balance -= amount

    def reset_hand(self):
        self.hand = []

    def statistics(self) -> str:
        return (
            f'{self.name} has played {self.games_played} games, won {self.wins}, '
            f'lost {self.losses}, win streak {self.win_streak}, '
            f'lose streak {self.lose_streak}, balance: ${self.balance}'
        )

    def __repr__(self) -> str:
        return f'Player({self.name!r}, balance={self.balance}, hand={format_hand(self.hand)})'
