"""The player's ship: a small square moved with the keyboard."""

from dataclasses import dataclass

import pygame

from pixeltraders.assets import (
    MOVE_PLAYER_SIZE,
    PANEL_GAME_CENTER_X,
    PANEL_GAME_CENTER_Y,
    RED,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

PLAYER_SIZE = 10


def _step(position, forward, backward, limit):
    moved = position + forward - backward
    if moved == 0 or moved == limit - PLAYER_SIZE:
        return position
    return moved


@dataclass
class Player:
    """Position of the player's ship on the game panel."""

    x: int = PANEL_GAME_CENTER_X
    y: int = PANEL_GAME_CENTER_Y

    def _move(self, left=0, right=0, up=0, down=0):
        self.x = _step(self.x, right, left, WINDOW_WIDTH)
        self.y = _step(self.y, down, up, WINDOW_HEIGHT)

    def move_left(self):
        self._move(left=MOVE_PLAYER_SIZE)

    def move_right(self):
        self._move(right=MOVE_PLAYER_SIZE)

    def move_top(self):
        self._move(up=MOVE_PLAYER_SIZE)

    def move_bottom(self):
        self._move(down=MOVE_PLAYER_SIZE)

    def rect(self):
        """The square the ship occupies."""
        return pygame.Rect(self.x, self.y, PLAYER_SIZE, PLAYER_SIZE)

    def draw(self, surface):
        pygame.draw.rect(surface, RED.rgba(), self.rect())