"""Entry point: load the game data, then open the game window."""

import argparse
import logging

from pixeltraders.api import SpaceTradersClient
from pixeltraders.assets import WINDOW_TITLE
from pixeltraders.logger import init_logger_by_service
from pixeltraders.models import init_game_state
from pixeltraders.render import run


def init_space_traders_data(client=None):
    """Set up API logging and load the game state through the client."""
    logger = init_logger_by_service("API", logging.DEBUG)
    if client is None:
        client = SpaceTradersClient(logger=logger)
    return init_game_state(client)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="pixeltraders", description=WINDOW_TITLE)
    parser.parse_args(argv)
    try:
        state = init_space_traders_data()
    except OSError:
        return 1
    return run(state)