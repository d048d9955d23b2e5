"""Pixel client for the Space Traders game: API client, game data and a pygame window."""

__version__ = "0.1.0"