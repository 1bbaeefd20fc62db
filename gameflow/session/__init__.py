"""
Session Module - Holds the authoritative snapshot of running games.

A session represents one play-through of a game:
- Created when a game starts
- Applies moves and control events in submission order
- Destroyed when the game ends

Sessions are EPHEMERAL: no persistence.
"""

from .manager import Session, SessionManager

__all__ = [
    "Session",
    "SessionManager",
]
