import logging

import pygame
import pytest

from pixeltraders.assets import MOVE_PLAYER_SIZE, PANEL_GAME_CENTER_X, PANEL_GAME_CENTER_Y
from pixeltraders.events import handle_event, handle_events
from pixeltraders.player import Player

LOGGER = logging.getLogger("test-events")


def _key(key, kind=pygame.KEYDOWN):
    return pygame.event.Event(kind, key=key, scancode=0, mod=0)


def test_quit_stops():
    assert handle_event(pygame.event.Event(pygame.QUIT), Player(), LOGGER) is False


def test_escape_stops():
    assert handle_event(_key(pygame.K_ESCAPE), Player(), LOGGER) is False


@pytest.mark.parametrize(
    "key, dx, dy",
    [
        (pygame.K_LEFT, -MOVE_PLAYER_SIZE, 0),
        (pygame.K_q, -MOVE_PLAYER_SIZE, 0),
        (pygame.K_RIGHT, MOVE_PLAYER_SIZE, 0),
        (pygame.K_d, MOVE_PLAYER_SIZE, 0),
        (pygame.K_UP, 0, -MOVE_PLAYER_SIZE),
        (pygame.K_z, 0, -MOVE_PLAYER_SIZE),
        (pygame.K_DOWN, 0, MOVE_PLAYER_SIZE),
        (pygame.K_s, 0, MOVE_PLAYER_SIZE),
    ],
)
def test_movement_keys(key, dx, dy):
    player = Player()
    assert handle_event(_key(key), player, LOGGER) is True
    assert (player.x, player.y) == (PANEL_GAME_CENTER_X + dx, PANEL_GAME_CENTER_Y + dy)


def test_key_up_does_not_move():
    player = Player()
    assert handle_event(_key(pygame.K_LEFT, pygame.KEYUP), player, LOGGER) is True
    assert (player.x, player.y) == (PANEL_GAME_CENTER_X, PANEL_GAME_CENTER_Y)


def test_user_event_keeps_running():
    event = pygame.event.Event(pygame.USEREVENT, code=7)
    assert handle_event(event, Player(), LOGGER) is True


def test_handle_events_processes_all_after_quit():
    player = Player()
    events = [pygame.event.Event(pygame.QUIT), _key(pygame.K_RIGHT)]
    assert handle_events(events, player, LOGGER) is False
    assert player.x == PANEL_GAME_CENTER_X + MOVE_PLAYER_SIZE


def test_handle_events_empty_keeps_running():
    assert handle_events([], Player(), LOGGER) is True