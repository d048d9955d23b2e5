"""The information panel at the bottom of the window."""

import pygame

from pixeltraders.assets import (
    FONT_PANEL_SIZE,
    GREEN,
    ORANGE,
    PANEL_HEIGHT,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

TEXT_WIDTH = 150


def panel_lines(agent):
    """The labels shown in the panel, each with its top-left position."""
    return [
        (agent.symbol_label(), (10, 510)),
        (agent.headquarter_label(), (10, 539)),
        (agent.credits_label(), (10, 568)),
        (agent.faction_label(), (500, 510)),
        (agent.fleet_label(), (500, 560)),
    ]


def panel_rect():
    return pygame.Rect(0, WINDOW_HEIGHT - PANEL_HEIGHT, WINDOW_WIDTH, PANEL_HEIGHT)


def draw_panel(surface, agent, font):
    """Paint the panel background and, when a font is given, the agent's details."""
    surface.fill(ORANGE.rgba(), panel_rect())
    if font is None:
        return
    clip = pygame.Rect(0, 0, TEXT_WIDTH, FONT_PANEL_SIZE)
    for text, position in panel_lines(agent):
        rendered = font.render(text, False, GREEN.rgba())
        surface.blit(rendered, position, area=clip)