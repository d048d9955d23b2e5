"""Window geometry, game constants and the colour palette."""

from dataclasses import dataclass

WINDOW_TITLE = "Space Traders The PixelGames"
WINDOW_HEIGHT = 600
WINDOW_WIDTH = 800
FRAMERATE = 60

PANEL_HEIGHT = 100

PANEL_GAME_CENTER_X = WINDOW_WIDTH // 2
PANEL_GAME_CENTER_Y = (WINDOW_HEIGHT // 2) - PANEL_HEIGHT

FONT_PATH = "./../assets/test.ttf"
FONT_PANEL_SIZE = 16

MOVE_PLAYER_SIZE = 10

SPACE_TRADER_API = "https://api.spacetraders.io/v2"


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def rgba(self):
        """Return the colour as an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)


PURPLE = Color(255, 0, 255)
GREEN = Color(0, 158, 48)
RED = Color(255, 0, 0)
BROWN = Color(153, 76, 0)
BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
ORANGE = Color(RED.r, GREEN.g, GREEN.b)