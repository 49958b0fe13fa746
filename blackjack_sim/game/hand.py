from typing import Iterable, Sequence

from cachetools import LRUCache, cached

from blackjack_sim.game.cards import Card

BLACKJACK = 21
HIGH_ACE = 11


@cached(cache=LRUCache(maxsize=2**12))
def _total(values: tuple[int, ...]) -> int:
    total = sum(values)
    high_aces = values.count(HIGH_ACE)

    # Downgrade one ace at a time, only as far as needed.
    while total > BLACKJACK and high_aces:
        total -= 10
        high_aces -= 1

    return total


def _values(cards: Iterable[Card]) -> tuple[int, ...]:
    # Sorted so that the same cards in any order share a cache entry.
    return tuple(sorted(card.value for card in cards))


def hand_value(cards: Iterable[Card]) -> int:
    """
    Blackjack value of a hand. Aces count 11 and are turned into 1s one by
    one while the total is over 21. The result can still be over 21, which
    means the hand is bust.
    """
    return _total(_values(cards))


def is_bust(cards: Iterable[Card]) -> bool:
    return hand_value(cards) > BLACKJACK


def is_natural(cards: Sequence[Card]) -> bool:
    return len(cards) == 2 and hand_value(cards) == BLACKJACK


def format_hand(cards: Iterable[Card]) -> str:
    return '[{}]'.format(', '.join(card.describe() for card in cards))
