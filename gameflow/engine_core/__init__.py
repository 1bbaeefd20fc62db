"""
Engine Core - Turn/phase state machine and move dispatch.

The engine is the runtime that:
1. Tracks ctx (phase, turn, play order, current player)
2. Computes turn order on phase entry and turn end
3. Resolves move names against phase and global move tables
4. Wraps moves with plugins before invoking them
5. Applies actions to (G, ctx) snapshots via the reducer
"""

from .context import Ctx
from .turn_order import TurnOrder, compute_first, compute_next
from .executable import DirectMove, Executable, MoveWithMetadata, to_executable
from .plugins import Plugin, fn_wrap, run_setup
from .flow import Flow
from .state import GameState
from .action import Action, ActionType
from .reducer import Reducer, apply_action

__all__ = [
    "Ctx",
    "TurnOrder",
    "compute_first",
    "compute_next",
    "DirectMove",
    "Executable",
    "MoveWithMetadata",
    "to_executable",
    "Plugin",
    "fn_wrap",
    "run_setup",
    "Flow",
    "GameState",
    "Action",
    "ActionType",
    "Reducer",
    "apply_action",
]
