# main.py
import logging
import os
import sys
from pathlib import Path

import pydantic
import yaml

from blackjack_sim.adapters.console import ConsoleAdapter
from blackjack_sim.config import build_table, load_config
from blackjack_sim.game.errors import BlackjackError
from blackjack_sim.session import run_session

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stderr)
    ]
)
logger = logging.getLogger(__name__)


def main() -> int:
    logger.info('Starting Blackjack simulator...')
    print('Welcome to Blackjack!')

    config_path = Path(os.environ.get('BLACKJACK_CONFIG', 'config.yaml'))

    try:
        config = load_config(config_path)
    except (pydantic.ValidationError, yaml.YAMLError) as e:
        logger.error(f'Invalid config: {e}')
        return 1
    except OSError as e:
        logger.error(f'Can not read config {config_path}: {e}')
        return 1

    logging.getLogger().setLevel(config.log_level)

    console = ConsoleAdapter()
    table = build_table(config, console)

    try:
        run_session(table, max_rounds=config.max_rounds, ask_continue=table.has_human)
    except BlackjackError as e:
        logger.error(f'Session aborted: {e}')
        return 1
    except (KeyboardInterrupt, EOFError):
        logger.info('Session interrupted, goodbye.')

    return 0


# --- Entry point ---
if __name__ == "__main__":
    try:
        exit_code = main()
    except Exception as e:
        logger.critical(f"An unhandled critical error occurred during the session: {e}", exc_info=True)
        exit_code = 1

    sys.exit(exit_code)
