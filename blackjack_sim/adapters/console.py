# console.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from blackjack_sim.game.hand import format_hand

if TYPE_CHECKING:
    from blackjack_sim.game.player import Player
    from blackjack_sim.game.table import RoundResult

logger = logging.getLogger(__name__)


class ConsoleAdapter:
    """
    Line based text session. Everything the players see or type goes
    through here; the game engine never touches stdin or stdout itself.

    ``input_fn`` and ``output_fn`` default to the builtins and can be
    swapped for anything with the same shape (tests feed answers from a list).
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn

    def say(self, text: str = ''):
        self.output_fn(text)

    def ask(self, question: str) -> str:
        self.say(question)
        return self.input_fn('')

    def prompt_bet(self, player: Player) -> str:
        return self.ask(f'{player.name}, how much would you like to bet?')

    def prompt_action(self, player: Player) -> str:
        return self.ask("Would you like to 'hit' or 'stand'?")

    def ask_continue(self) -> bool:
        answer = self.ask("Would you like to play again? 'yes' or 'no'")
        return answer.strip().lower() != 'no'

    def show_dealer_upcard(self, dealer: Player):
        if dealer.hand:
            self.say(f"\n{dealer.name}'s hand: [{dealer.hand[0]}] [x]")

    def show_turn(self, player: Player):
        self.say(f"\nIt's {player.name}'s turn")
        self.show_hand(player)

    def show_hand(self, player: Player):
        self.say(format_hand(player.hand))
        self.say(str(player.hand_value))

    def show_bust(self, player: Player):
        self.say('Bust!')

    def show_round(self, result: RoundResult):
        self.say(f'Game #{result.number} over!\n')
        for entry in result.players:
            self.say(f'{entry.name} {entry.outcome}: {entry.value} {format_hand(entry.cards)}')

    def show_statistics(self, players: Iterable[Player]):
        self.say()
        for player in players:
            self.say(player.statistics())


def silent_console() -> ConsoleAdapter:
    def no_input(prompt: str) -> str:
        raise EOFError('no console attached')

    return ConsoleAdapter(input_fn=no_input, output_fn=lambda text: None)
