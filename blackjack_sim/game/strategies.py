from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Iterable

from blackjack_sim.game.errors import InvalidBetError, UnrecognizedActionError

if TYPE_CHECKING:
    from blackjack_sim.adapters.console import ConsoleAdapter
    from blackjack_sim.game.player import Player

logger = logging.getLogger(__name__)


class Action(enum.StrEnum):
    HIT = 'hit'
    STAND = 'stand'


class Strategy:
    """
    Decision hooks for a seated player. One method per decision point:
    what to do with the current hand, and how much to bet.
    """

    interactive = False

    def choose_action(self, player: Player) -> Action:
        raise NotImplementedError

    def choose_bet(self, player: Player) -> int:
        raise NotImplementedError


class DealerStrategy(Strategy):

    def __init__(self, stand_threshold: int = 17) -> None:
        self.stand_threshold = stand_threshold

    def choose_action(self, player: Player) -> Action:
        if player.hand_value < self.stand_threshold:
            return Action.HIT
        return Action.STAND

    def choose_bet(self, player: Player) -> int:
        return 0


class ThresholdStrategy(Strategy):
    """
    Hits below a fixed value and doubles the bet after every loss, going
    back to the base bet once ``progression_cap`` losses pile up.
    """

    def __init__(self, hit_below: int = 15, base_bet: int = 5, progression_cap: int = 3) -> None:
        if progression_cap < 1:
            raise ValueError('progression_cap must be at least 1')

        self.hit_below = hit_below
        self.base_bet = base_bet
        self.progression_cap = progression_cap

    def choose_action(self, player: Player) -> Action:
        if player.hand_value < self.hit_below:
            return Action.HIT
        return Action.STAND

    def choose_bet(self, player: Player) -> int:
        return self.base_bet * 2 ** (player.lose_streak % self.progression_cap)


class ScriptedStrategy(Strategy):
    """Replays fixed actions and bets; stands and bets nothing once they run out."""

    def __init__(self, actions: Iterable[str] = (), bets: Iterable[int] = ()) -> None:
        self._actions = iter(list(actions))
        self._bets = iter(list(bets))

    def choose_action(self, player: Player):
        # Raw tokens are passed through, the table decides what is valid.
        return next(self._actions, Action.STAND)

    def choose_bet(self, player: Player) -> int:
        return next(self._bets, 0)


class InteractiveStrategy(Strategy):
    """Asks a human at the console. Blocks until an answer is typed."""

    interactive = True

    def __init__(self, console: ConsoleAdapter, max_prompt_attempts: int = 3) -> None:
        self.console = console
        self.max_prompt_attempts = max_prompt_attempts

    def choose_action(self, player: Player) -> Action:
        answer = None
        for _ in range(self.max_prompt_attempts):
            answer = self.console.prompt_action(player)
            try:
                return Action(answer.strip().lower())
            except ValueError:
                self.console.say(f"Sorry, '{answer}' is not an option.")

        raise UnrecognizedActionError(player.name, answer)

    def choose_bet(self, player: Player) -> int:
        answer = None
        for _ in range(self.max_prompt_attempts):
            answer = self.console.prompt_bet(player)
            try:
                amount = int(answer.strip())
            except ValueError:
                self.console.say(f"Sorry, '{answer}' is not a whole number.")
                continue

            if amount < 0:
                self.console.say('Bets cannot be negative.')
                continue

            return amount

        raise InvalidBetError(player.name, answer, 'no valid bet entered')
