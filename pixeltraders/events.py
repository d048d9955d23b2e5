"""Keyboard and window event handling."""

import logging

import pygame

_LOGGER = logging.getLogger("pixeltraders.SDL")

_MOVES = {
    pygame.K_LEFT: "move_left",
    pygame.K_q: "move_left",
    pygame.K_DOWN: "move_bottom",
    pygame.K_s: "move_bottom",
    pygame.K_RIGHT: "move_right",
    pygame.K_d: "move_right",
    pygame.K_UP: "move_top",
    pygame.K_z: "move_top",
}


def handle_event(event, player, logger=None):
    """Apply one event; return False when the game should stop."""
    logger = logger or _LOGGER
    if event.type == pygame.QUIT:
        return False
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        logger.debug(
            '[%d ms] Keyboard type: "%d" sym: "%s" keycode: "%s" modifiers: "%d"',
            pygame.time.get_ticks(),
            event.type,
            getattr(event, "key", 0),
            getattr(event, "scancode", 0),
            getattr(event, "mod", 0),
        )
        if event.type == pygame.KEYDOWN:
            key = getattr(event, "key", None)
            if key == pygame.K_ESCAPE:
                return False
            move = _MOVES.get(key)
            if move is not None:
                getattr(player, move)()
    elif event.type == pygame.USEREVENT:
        logger.debug("[%d ms] UserEvent code:%s", pygame.time.get_ticks(), getattr(event, "code", 0))
    return True


def handle_events(events, player, logger=None):
    """Apply every pending event; return False if any asked the game to stop."""
    running = True
    for event in events:
        if not handle_event(event, player, logger):
            running = False
    return running