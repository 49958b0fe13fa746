# table.py
import enum
import logging
import random
from typing import Optional

import pydantic

from blackjack_sim.adapters.console import ConsoleAdapter, silent_console
from blackjack_sim.game.cards import Card, Deck
from blackjack_sim.game.errors import EmptyDeckError, UnrecognizedActionError
from blackjack_sim.game.player import Player
from blackjack_sim.game.rules import BetPolicy, Outcome, payout, reconcile, validate_bet
from blackjack_sim.game.strategies import Action

logger = logging.getLogger(__name__)

INITIAL_CARDS = 2


class TurnState(enum.StrEnum):
    AWAITING_ACTION = 'awaiting_action'
    HIT = 'hit'
    STAND = 'stand'
    BUST = 'bust'


class TableSettings(pydantic.BaseModel):
    decks: int = pydantic.Field(default=1, ge=1)
    reshuffle_when_empty: bool = True
    bet_policy: BetPolicy = BetPolicy.CLAMP


class PlayerResult(pydantic.BaseModel):
    name: str
    cards: list[Card]
    value: int
    outcome: Outcome
    bet: int
    payout: int
    balance: int


class RoundResult(pydantic.BaseModel):
    number: int
    dealer_cards: list[Card]
    dealer_value: int
    players: list[PlayerResult]


class Table:
    """
    Runs complete rounds for one dealer and any number of players.

    A fresh deck is built for every round from the injected random
    generator. Players act in the order they were seated, the dealer last.
    """

    def __init__(
        self,
        dealer: Player,
        players: list[Player],
        settings: Optional[TableSettings] = None,
        console: Optional[ConsoleAdapter] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.dealer = dealer
        self.players = players
        self.settings = settings if settings is not None else TableSettings()
        self.console = console if console is not None else silent_console()
        self.rng = rng if rng is not None else random.Random()
        self.deck: Optional[Deck] = None

    @property
    def everyone(self) -> list[Player]:
        return [*self.players, self.dealer]

    @property
    def has_human(self) -> bool:
        return any(player.is_interactive for player in self.players)

    def new_deck(self) -> Deck:
        self.deck = Deck(rng=self.rng, decks=self.settings.decks)
        return self.deck

    def draw(self) -> Card:
        try:
            return self.deck.draw()
        except EmptyDeckError:
            if not self.settings.reshuffle_when_empty:
                raise

            logger.warning('Deck ran out mid-round, replenishing with a fresh shuffled set.')
            self.deck.replenish()
            return self.deck.draw()

    def place_bets(self):
        # Every bet is checked before any balance is touched.
        amounts = []
        for player in self.players:
            requested = player.strategy.choose_bet(player)
            amount = validate_bet(player, requested, self.settings.bet_policy)
            if amount < requested:
                self.console.say(f'{player.name}, you only have ${player.balance}, your bet is ${amount}.')
            amounts.append(amount)

        for player, amount in zip(self.players, amounts):
            player.place_bet(amount)
            logger.debug(f'{player.name} bets {amount}, balance now {player.balance}')

    def deal(self):
        for _ in range(INITIAL_CARDS):
            for player in self.everyone:
                player.take(self.draw())

    def _next_action(self, player: Player) -> Action:
        action = player.strategy.choose_action(player)
        try:
            return Action(action)
        except ValueError:
            raise UnrecognizedActionError(player.name, action) from None

    def play_turn(self, player: Player) -> TurnState:
        """
        Ask the player's strategy for actions until it stands or the hand
        goes over 21.
        """
        state = TurnState.AWAITING_ACTION

        while state == TurnState.AWAITING_ACTION:
            match self._next_action(player):
                case Action.HIT:
                    state = TurnState.HIT
                    card = self.draw()
                    player.take(card)
                    logger.debug(f'{player.name} draws {card}, value {player.hand_value}')
                    self.console.show_hand(player)

                    if player.is_bust:
                        self.console.show_bust(player)
                        state = TurnState.BUST
                    else:
                        state = TurnState.AWAITING_ACTION

                case Action.STAND:
                    state = TurnState.STAND

        return state

    def settle(self, number: int) -> RoundResult:
        results = []
        for player in self.players:
            bet = player.bet
            outcome = reconcile(player, self.dealer)
            results.append(PlayerResult(
                name=player.name,
                cards=list(player.hand),
                value=player.hand_value,
                outcome=outcome,
                bet=bet,
                payout=payout(player.hand, bet, outcome),
                balance=player.balance,
            ))

        return RoundResult(
            number=number,
            dealer_cards=list(self.dealer.hand),
            dealer_value=self.dealer.hand_value,
            players=results,
        )

    def reset_hands(self):
        for player in self.everyone:
            player.reset_hand()

    def play_round(self, number: int) -> RoundResult:
        self.new_deck()
        self.place_bets()
        self.deal()
        self.console.show_dealer_upcard(self.dealer)

        for player in self.everyone:
            self.console.show_turn(player)
            self.play_turn(player)

        result = self.settle(number)
        summary = ', '.join(f'{entry.name} {entry.outcome}' for entry in result.players)
        logger.info(f'Round {number}: dealer {result.dealer_value}; {summary}')

        self.reset_hands()
        return result
