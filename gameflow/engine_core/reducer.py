"""
Reducer - Applies actions to game snapshots.

The reducer is the single point where snapshots advance:

    (state, action) -> new_state

Moves go through the game's process_move and replace G. Events go
through the flow and replace ctx. Exceptions raised by game code reach
the caller untouched; nothing is rolled back because nothing was mutated.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping

from .action import Action, ActionType
from .state import GameState

if TYPE_CHECKING:
    from ..game import NormalizedGame


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """
    game: NormalizedGame

    def apply(self, state: GameState, action: Action | Mapping[str, Any]) -> GameState:
        """Apply one action and return the next snapshot."""
        action = Action.coerce(action)
        handler = self._get_handler(action.action_type)
        return handler(state, action)

    def _get_handler(self, action_type: ActionType):
        handlers = {
            ActionType.MAKE_MOVE: self._handle_move,
            ActionType.GAME_EVENT: self._handle_event,
        }
        return handlers[action_type]

    def _handle_move(self, state: GameState, action: Action) -> GameState:
        G = self.game.process_move(state.G, action, state.ctx)
        if G is state.G:
            return state
        return state.with_G(G)

    def _handle_event(self, state: GameState, action: Action) -> GameState:
        ctx = self.game.flow.process_event(state.G, state.ctx, action.type, *action.args)
        if ctx is state.ctx:
            return state
        return state.with_ctx(ctx)


def apply_action(game: NormalizedGame, state: GameState, action: Action | Mapping[str, Any]) -> GameState:
    """Convenience function to apply a single action."""
    return Reducer(game).apply(state, action)
