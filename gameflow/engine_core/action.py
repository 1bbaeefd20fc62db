"""
Action System - What callers submit to the engine.

Two kinds of action exist:
1. Moves: named game moves, resolved against the descriptor's move tables
2. Events: control operations on the flow (end_turn, end_phase, set_phase)

Moves only change G; events only change ctx.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ActionType(Enum):
    """Types of actions in the system."""
    MAKE_MOVE = "make_move"
    GAME_EVENT = "game_event"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to a game state.

    type is the move or event name, args its extra arguments.
    """
    action_type: ActionType
    type: str
    args: tuple[Any, ...] = field(default_factory=tuple)
    player_id: str | None = None

    @classmethod
    def make_move(cls, type: str, *args: Any, player_id: str | None = None) -> Action:
        """Factory for a move action."""
        return cls(action_type=ActionType.MAKE_MOVE, type=type, args=args, player_id=player_id)

    @classmethod
    def game_event(cls, type: str, *args: Any, player_id: str | None = None) -> Action:
        """Factory for a control event."""
        return cls(action_type=ActionType.GAME_EVENT, type=type, args=args, player_id=player_id)

    @classmethod
    def coerce(cls, action: Action | Mapping[str, Any]) -> Action:
        """
        Accept an Action or a {"type", "args", "player_id"} mapping.

        A mapping is read as a move; "playerID" is accepted for player_id.
        """
        if isinstance(action, Action):
            return action
        args = action.get("args")
        player_id = action.get("player_id", action.get("playerID"))
        return cls.make_move(action["type"], *(args or ()), player_id=player_id)
