# config.py
import enum
import logging
import random
from pathlib import Path
from typing import Optional

import pydantic
import yaml

from blackjack_sim.adapters.console import ConsoleAdapter
from blackjack_sim.game.player import Player
from blackjack_sim.game.rules import BetPolicy
from blackjack_sim.game.strategies import (
    DealerStrategy,
    InteractiveStrategy,
    ScriptedStrategy,
    Strategy,
    ThresholdStrategy,
)
from blackjack_sim.game.table import Table, TableSettings

logger = logging.getLogger(__name__)


class StrategyKind(enum.StrEnum):
    THRESHOLD = 'threshold'
    INTERACTIVE = 'interactive'
    SCRIPTED = 'scripted'


class DealerConfig(pydantic.BaseModel):
    name: str = 'Dealer'
    stand_threshold: int = pydantic.Field(default=17, ge=2, le=21)


class PlayerConfig(pydantic.BaseModel):
    name: str
    balance: int = 100
    strategy: StrategyKind = StrategyKind.THRESHOLD

    # threshold
    hit_below: int = pydantic.Field(default=15, ge=2, le=22)
    base_bet: int = pydantic.Field(default=5, ge=0)
    progression_cap: int = pydantic.Field(default=3, ge=1)

    # interactive
    max_prompt_attempts: int = pydantic.Field(default=3, ge=1)

    # scripted
    actions: list[str] = []
    bets: list[int] = []


def default_players() -> list[PlayerConfig]:
    return [
        PlayerConfig(name='Bruce', strategy=StrategyKind.THRESHOLD),
        PlayerConfig(name='Human', strategy=StrategyKind.INTERACTIVE),
    ]


class ConfigModel(pydantic.BaseModel):
    max_rounds: int = pydantic.Field(default=10_000, ge=1)
    seed: Optional[int] = None
    decks: int = pydantic.Field(default=1, ge=1)
    reshuffle_when_empty: bool = True
    bet_policy: BetPolicy = BetPolicy.CLAMP
    log_level: str = 'INFO'
    dealer: DealerConfig = DealerConfig()
    players: list[PlayerConfig] = pydantic.Field(default_factory=default_players, min_length=1)

    @pydantic.field_validator('log_level')
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f'unknown log level {value!r}')
        return level

    @pydantic.model_validator(mode='after')
    def unique_names(self) -> 'ConfigModel':
        names = [player.name for player in self.players] + [self.dealer.name]
        if len(names) != len(set(names)):
            raise ValueError('player names must be unique')
        return self


def load_config(config_path: Path) -> ConfigModel:
    """
    Read the YAML config at ``config_path``. A missing file gives the
    default table. Raises ``pydantic.ValidationError`` on bad content.
    """
    if not config_path.exists():
        logger.warning(f'config file {config_path} does not exist, using defaults')
        return ConfigModel()

    with config_path.open() as config_f:
        config_parsed = yaml.safe_load(config_f)

    return ConfigModel.model_validate(config_parsed or {})


def build_strategy(player_config: PlayerConfig, console: ConsoleAdapter) -> Strategy:
    match player_config.strategy:
        case StrategyKind.INTERACTIVE:
            return InteractiveStrategy(console, max_prompt_attempts=player_config.max_prompt_attempts)
        case StrategyKind.SCRIPTED:
            return ScriptedStrategy(actions=player_config.actions, bets=player_config.bets)
        case _:
            return ThresholdStrategy(
                hit_below=player_config.hit_below,
                base_bet=player_config.base_bet,
                progression_cap=player_config.progression_cap,
            )


def build_table(config: ConfigModel, console: ConsoleAdapter) -> Table:
    dealer = Player(
        name=config.dealer.name,
        strategy=DealerStrategy(stand_threshold=config.dealer.stand_threshold),
    )
    players = [
        Player(name=entry.name, strategy=build_strategy(entry, console), balance=entry.balance)
        for entry in config.players
    ]
    settings = TableSettings(
        decks=config.decks,
        reshuffle_when_empty=config.reshuffle_when_empty,
        bet_policy=config.bet_policy,
    )

    return Table(
        dealer=dealer,
        players=players,
        settings=settings,
        console=console,
        rng=random.Random(config.seed),
    )
