"""
Example games.

Small descriptors for common turn-order patterns, used by the tests and
as templates for new games.
"""

from .serpentine import create_serpentine_game
from .starting_player import create_starting_player_game

__all__ = ["create_serpentine_game", "create_starting_player_game"]
