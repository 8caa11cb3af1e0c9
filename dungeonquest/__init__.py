"""Game logic for a small text role-playing game: items, player, monsters, battles and screens."""

__version__ = "0.1.0"