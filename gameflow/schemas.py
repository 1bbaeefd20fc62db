"""
Pydantic Schemas - Boundary models for collaborators.

A transport or session layer receives raw payloads such as

    {"kind": "move", "type": "build", "args": [3], "playerID": "1"}
    {"kind": "event", "type": "set_phase", "args": ["main"]}

and validates them here before they reach the engine. Snapshots go the
other way as StateSnapshot.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from .engine_core.action import Action


class ActionKind(str, Enum):
    """Kinds of submitted action."""
    MOVE = "move"
    EVENT = "event"


class ActionRequest(BaseModel):
    """A move or control event submitted by a player or a transport."""
    model_config = ConfigDict(populate_by_name=True)

    kind: ActionKind = ActionKind.MOVE
    type: str = Field(min_length=1, description="Move or event name")
    args: list[Any] = Field(default_factory=list)
    player_id: Optional[str] = Field(default=None, alias="playerID")

    def to_action(self) -> Action:
        if self.kind == ActionKind.EVENT:
            return Action.game_event(self.type, *self.args, player_id=self.player_id)
        return Action.make_move(self.type, *self.args, player_id=self.player_id)


class CtxInfo(BaseModel):
    """Engine context as seen by collaborators."""
    model_config = ConfigDict(from_attributes=True)

    num_players: int
    play_order: list[str]
    play_order_pos: int
    current_player: Optional[str] = None
    phase: str = ""
    turn: int = 0


class StateSnapshot(BaseModel):
    """A (G, ctx) snapshot, with G already filtered for one player if requested."""
    G: Any = None
    ctx: CtxInfo
    player_id: Optional[str] = None
    move_names: list[str] = Field(default_factory=list)
