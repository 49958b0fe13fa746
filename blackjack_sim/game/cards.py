# cards.py
import enum
import logging
import random
from typing import Optional

import pydantic

from blackjack_sim.game.errors import EmptyDeckError

logger = logging.getLogger(__name__)


class Suit(enum.StrEnum):
    SPADES = 'Spades'
    HEARTS = 'Hearts'
    DIAMONDS = 'Diamonds'
    CLUBS = 'Clubs'


RANK_NAMES = {
    1: 'Ace',
    11: 'Jack',
    12: 'Queen',
    13: 'King',
}

ACE = 1
RANKS = range(1, 14)


class Card(pydantic.BaseModel):
    """
    A single playing card. Immutable and hashable, so it can be used as a
    dict key or collected into sets.
    """
    model_config = pydantic.ConfigDict(frozen=True)

    suit: Suit
    rank: int = pydantic.Field(ge=1, le=13)

    @property
    def value(self) -> int:
        # Aces always count high here, the hand valuation downgrades them.
        if self.rank == ACE:
            return 11
        if self.rank >= 10:
            return 10
        return self.rank

    def describe(self) -> str:
        rank_name = RANK_NAMES.get(self.rank, str(self.rank))
        return f'{rank_name} of {self.suit}'

    def __str__(self) -> str:
        return self.describe()


def standard_cards() -> list[Card]:
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in RANKS]


class Deck:
    """
    An ordered pile of cards drawn from the front.

    The deck is built in suit/rank order and shuffled straight away. The
    random generator is injected so that a seeded ``random.Random`` gives
    reproducible games.
    """

    def __init__(self, rng: Optional[random.Random] = None, decks: int = 1):
        if decks < 1:
            raise ValueError('A deck needs at least one set of 52 cards.')

        self.rng = rng if rng is not None else random.Random()
        self.decks = decks
        self.cards: list[Card] = []
        self._build()
        self.shuffle()

    def _build(self):
        self.cards = [card for _ in range(self.decks) for card in standard_cards()]

    def shuffle(self):
        self.rng.shuffle(self.cards)

    def draw(self) -> Card:
        if not self.cards:
            raise EmptyDeckError('Cannot draw from an empty deck.')

        return self.cards.pop(0)

    def replenish(self):
        """Throw away whatever is left and start over with a full shuffled set."""
        self._build()
        self.shuffle()
        logger.info(f'Deck replenished with {len(self.cards)} cards.')

    def __len__(self) -> int:
        return len(self.cards)
