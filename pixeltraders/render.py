"""The game window and its main loop."""

import logging

import pygame

from pixeltraders.assets import (
    BLACK,
    FONT_PANEL_SIZE,
    FONT_PATH,
    FRAMERATE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from pixeltraders.events import handle_events
from pixeltraders.logger import init_logger_by_service
from pixeltraders.orbitals import draw_orbitals
from pixeltraders.panels import draw_panel
from pixeltraders.player import Player


def draw_frame(surface, state, player, font):
    """Draw one full frame: background, panel, player and orbitals."""
    surface.fill(BLACK.rgba(), pygame.Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT))
    draw_panel(surface, state.agent, font)
    player.draw(surface)
    draw_orbitals(surface, state.position)


def _load_font(logger):
    try:
        return pygame.font.Font(FONT_PATH, FONT_PANEL_SIZE)
    except (OSError, pygame.error) as exc:
        logger.error("Failed to open font %s", FONT_PATH, exc_info=exc)
        return None


def run(state):
    """Open the window and run the game loop until the player quits."""
    logger = init_logger_by_service("SDL", logging.DEBUG)
    pygame.init()
    try:
        try:
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            logger.error("Failed to create window", exc_info=exc)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        font = _load_font(logger)
        player = Player()

        running = True
        while running:
            running = handle_events(pygame.event.get(), player, logger)
            draw_frame(surface, state, player, font)
            pygame.display.flip()
            pygame.time.delay(1000 // FRAMERATE)
        return 0
    finally:
        pygame.quit()