"""
Gameflow - Turn and Phase Engine for Turn-Based Games

A deterministic engine that drives an immutable (G, ctx) snapshot through
the phases and turns declared by a game descriptor. It provides:
- Phase/turn state machine with pluggable turn-order rules
- Move resolution (phase-scoped moves shadow global ones)
- Plugin wrapping around every move invocation
- An in-memory session layer for collaborators
"""

from .game import Game, NormalizedGame, create_game

__version__ = "0.1.0"

__all__ = ["Game", "NormalizedGame", "create_game"]
