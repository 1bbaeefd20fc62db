"""
Game State - The (G, ctx) snapshot collaborators hold.

Design principles:
- Immutable: every transition returns a new snapshot
- G is opaque: game-author defined, never inspected by the engine
- ctx is engine owned: only the flow state machine produces new ones
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any

from .context import Ctx


@dataclass(frozen=True)
class GameState:
    """Complete game state at a point in time."""
    G: Any
    ctx: Ctx

    @property
    def current_player(self) -> str | None:
        return self.ctx.current_player

    @property
    def phase(self) -> str:
        return self.ctx.phase

    def with_G(self, G: Any) -> GameState:
        """Return new state with G replaced."""
        return replace(self, G=G)

    def with_ctx(self, ctx: Ctx) -> GameState:
        """Return new state with ctx replaced."""
        return replace(self, ctx=ctx)
