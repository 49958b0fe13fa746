import logging

from blackjack_sim.game.table import RoundResult, Table

logger = logging.getLogger(__name__)


def run_session(table: Table, max_rounds: int, ask_continue: bool = False) -> list[RoundResult]:
    """
    Play rounds back to back until ``max_rounds`` is reached or, when
    ``ask_continue`` is set, someone answers "no" at the prompt.
    """
    results: list[RoundResult] = []
    console = table.console

    for number in range(1, max_rounds + 1):
        result = table.play_round(number)
        results.append(result)

        console.show_round(result)
        console.show_statistics(table.players)

        if ask_continue and number < max_rounds and not console.ask_continue():
            logger.info(f'Session stopped by the player after {number} rounds.')
            break

    logger.info(f'Session finished after {len(results)} rounds.')
    return results
