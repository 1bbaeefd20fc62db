"""
Game - Normalizes a game descriptor into the engine's callable surface.

    game = create_game({
        "moves": {"draw": draw},
        "phases": {"main": {"start": True}},
    })

    state = game.initial_state(num_players=4)
    G = game.process_move(state.G, {"type": "draw", "args": [2]}, state.ctx)

The convention is that action.type names the move and action.args holds
any extra arguments; the move is called as move(G, ctx, *args) and returns
the new G.

Plugins may wrap every move invocation and augment the initial G:

    Plugin(
        # Optional: wraps a move and returns the wrapped function.
        fn_wrap=lambda fn: lambda G, ctx, *args: post(fn(pre(G), ctx, *args)),

        # Optional: called during setup to add state to G.
        setup=lambda G, ctx: G,
    )
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .config import DEFAULT_NUM_PLAYERS
from .engine_core.action import Action
from .engine_core.context import Ctx
from .engine_core.executable import Executable
from .engine_core.flow import Flow
from .engine_core.plugins import Plugin, fn_wrap, run_setup
from .engine_core.state import GameState
from .game_schema import GameDescriptor, PhaseConfig, ensure_valid

logger = logging.getLogger("gameflow.game")


@dataclass(frozen=True, eq=False)
class NormalizedGame:
    """A game descriptor with defaults applied and its flow wired in."""
    descriptor: GameDescriptor
    flow: Flow = field(init=False)
    move_names: tuple[str, ...] = field(init=False)

    def __post_init__(self):
        flow = Flow(self.descriptor)
        object.__setattr__(self, "flow", flow)
        object.__setattr__(self, "move_names", flow.move_names)

    # Descriptor fields, flattened for callers
    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def setup(self) -> Callable[[Ctx], Any]:
        return self.descriptor.setup

    @property
    def moves(self) -> dict[str, Executable]:
        return self.descriptor.moves

    @property
    def phases(self) -> dict[str, PhaseConfig]:
        return self.descriptor.phases

    @property
    def player_view(self) -> Callable[[Any, Ctx, str | None], Any]:
        return self.descriptor.player_view

    @property
    def plugins(self) -> tuple[Plugin, ...]:
        return self.descriptor.plugins

    @property
    def seed(self) -> Any:
        return self.descriptor.seed

    def process_move(self, G: Any, action: Action | Mapping[str, Any], ctx: Ctx) -> Any:
        """
        Apply a move to G and return the new G.

        Unknown moves, and long-form moves without a callable, return G
        unchanged. Exceptions from the move or a plugin propagate.
        """
        action = Action.coerce(action)
        executable = self.flow.get_move(ctx, action.type, action.player_id)
        move_fn = executable.callable if executable is not None else None
        if move_fn is None:
            return G

        ctx_with_player_id = ctx.with_player_id(action.player_id)
        fn = fn_wrap(move_fn, self.plugins)
        return fn(G, ctx_with_player_id, *action.args)

    def initial_state(
        self,
        num_players: int | None = None,
        play_order: tuple[str, ...] | None = None,
    ) -> GameState:
        """
        Build the opening snapshot.

        setup runs first, then each plugin's setup, then the start phase
        is entered so its turn order can read the initial G.
        """
        if num_players is None:
            num_players = DEFAULT_NUM_PLAYERS
        ctx = self.flow.init_ctx(num_players, play_order)
        G = self.setup(ctx)
        G = run_setup(G, ctx, self.plugins)
        ctx = self.flow.start(G, ctx)
        return GameState(G=G, ctx=ctx)


def create_game(game: GameDescriptor | Mapping[str, Any] | Any) -> NormalizedGame:
    """
    Normalize a game descriptor.

    Anything that already exposes process_move has been normalized before
    and is returned as is. Validation warnings are logged, errors raise
    DescriptorValidationError.
    """
    if callable(getattr(game, "process_move", None)):
        return game
    if isinstance(game, Mapping) and callable(game.get("process_move")):
        return game

    descriptor = GameDescriptor.from_mapping(game)
    result = ensure_valid(descriptor)
    for warning in result.warnings:
        logger.warning("Game %r: %s", descriptor.name, warning)
    return NormalizedGame(descriptor)


Game = create_game
