import pygame

from pixeltraders.assets import BROWN, PANEL_GAME_CENTER_X, PANEL_GAME_CENTER_Y
from pixeltraders.models import Orbital, System
from pixeltraders.orbitals import ORBITAL_SIZE, ORBITAL_SPACING, draw_orbitals, orbital_rects


def _system(count):
    return System(orbitals=[Orbital(f"X1-AB-{n}") for n in range(count)])


def test_no_orbitals_no_rects():
    assert orbital_rects(System()) == []


def test_one_rect_per_orbital():
    assert len(orbital_rects(_system(3))) == 3


def test_rects_spaced_leftwards_from_center():
    rects = orbital_rects(_system(4))
    assert rects[0].x == PANEL_GAME_CENTER_X - ORBITAL_SPACING
    xs = [rect.x for rect in rects]
    assert all(a - b == ORBITAL_SPACING for a, b in zip(xs, xs[1:]))
    assert all(rect.y == PANEL_GAME_CENTER_Y for rect in rects)
    assert all(rect.size == (ORBITAL_SIZE, ORBITAL_SIZE) for rect in rects)


def test_draw_paints_brown():
    surface = pygame.Surface((800, 600))
    system = _system(2)
    draw_orbitals(surface, system)
    for rect in orbital_rects(system):
        assert tuple(surface.get_at(rect.topleft)) == BROWN.rgba()