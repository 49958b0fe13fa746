import random

import pytest

from blackjack_sim.adapters.console import ConsoleAdapter
from blackjack_sim.game.cards import Card, Deck, Suit
from blackjack_sim.game.player import Player
from blackjack_sim.game.strategies import DealerStrategy, ScriptedStrategy
from blackjack_sim.game.table import Table


def card(rank: int, suit: Suit = Suit.SPADES) -> Card:
    return Card(suit=suit, rank=rank)


def cards(*ranks: int) -> list[Card]:
    suits = list(Suit)
    return [card(rank, suits[i % len(suits)]) for i, rank in enumerate(ranks)]


class ScriptedConsole(ConsoleAdapter):
    """Console that answers prompts from a list and records everything shown."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.lines: list[str] = []
        super().__init__(input_fn=self._answer, output_fn=self.lines.append)

    def _answer(self, prompt: str) -> str:
        if not self.answers:
            raise EOFError('no more scripted answers')
        return self.answers.pop(0)

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)


class StackedTable(Table):
    """Table whose every round starts from the same, unshuffled card order."""

    def __init__(self, *args, stacked: list[Card], **kwargs):
        super().__init__(*args, **kwargs)
        self.stacked = list(stacked)

    def new_deck(self) -> Deck:
        self.deck = Deck(rng=self.rng)
        self.deck.cards = list(self.stacked)
        return self.deck


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def dealer():
    return Player('Dealer', DealerStrategy())


@pytest.fixture
def console():
    return ScriptedConsole()


def scripted_player(name='Alice', balance=100, actions=(), bets=()) -> Player:
    return Player(name, ScriptedStrategy(actions=actions, bets=bets), balance=balance)
