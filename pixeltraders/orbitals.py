"""Drawing of the bodies orbiting the player's starting waypoint."""

import pygame

from pixeltraders.assets import BROWN, PANEL_GAME_CENTER_X, PANEL_GAME_CENTER_Y

ORBITAL_SPACING = 50
ORBITAL_SIZE = 10


def orbital_rects(system):
    """One square per orbital, spaced leftwards from the panel centre."""
    return [
        pygame.Rect(
            PANEL_GAME_CENTER_X - (index + 1) * ORBITAL_SPACING,
            PANEL_GAME_CENTER_Y,
            ORBITAL_SIZE,
            ORBITAL_SIZE,
        )
        for index, _ in enumerate(system.orbitals)
    ]


def draw_orbitals(surface, system):
    for rect in orbital_rects(system):
        pygame.draw.rect(surface, BROWN.rgba(), rect)