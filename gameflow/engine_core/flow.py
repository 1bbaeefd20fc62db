"""
Flow - Phase/turn state machine and move resolver.

States are the declared phases plus "" (no active phase). Only three
control events move between them:

    end_turn   next player per the active phase's turn order, turn += 1
    end_phase  enter the phase's "next" (or "" when it has none)
    set_phase  enter any declared phase directly

Entering a phase always recomputes the current player with the phase's
"first" rule and resets turn to 0. Moves never touch ctx.

Every operation is a pure function of (G, ctx) and returns a new ctx.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any

from .context import Ctx
from .executable import Executable
from .turn_order import DEFAULT, TurnOrder, compute_first, compute_next
from ..errors import UnknownPhaseError

if TYPE_CHECKING:
    from ..game_schema import GameDescriptor

logger = logging.getLogger("gameflow.flow")


class Flow:
    """
    Flow for one game descriptor.

    Stateless - all state is in ctx.
    """

    def __init__(self, descriptor: GameDescriptor):
        self.descriptor = descriptor
        self.phases = descriptor.phases
        self.start_phase = descriptor.start_phase
        self.move_names = tuple(self._collect_move_names())
        self._events = {
            "end_turn": self.end_turn,
            "end_phase": self.end_phase,
            "set_phase": self.set_phase,
        }

    @property
    def event_names(self) -> tuple[str, ...]:
        return tuple(self._events)

    # =========================================================================
    # Context lifecycle
    # =========================================================================

    def init_ctx(self, num_players: int, play_order: tuple[str, ...] | None = None) -> Ctx:
        """Context before the game starts: no phase, turn 0."""
        return Ctx.create(num_players, play_order)

    def start(self, G: Any, ctx: Ctx) -> Ctx:
        """Enter the start phase, or stay in "" when none is declared."""
        return self._enter_phase(G, ctx, self.start_phase)

    def end_turn(self, G: Any, ctx: Ctx) -> Ctx:
        """Hand the turn to the next player of the active phase."""
        pos = compute_next(G, ctx, self.turn_order(ctx.phase))
        new_ctx = ctx.next_turn(pos)
        logger.debug(
            "end_turn phase=%r turn=%d player=%r",
            new_ctx.phase, new_ctx.turn, new_ctx.current_player,
        )
        return new_ctx

    def end_phase(self, G: Any, ctx: Ctx) -> Ctx:
        """Leave the active phase for its "next" phase, or for "" without one."""
        if not ctx.phase:
            return ctx
        phase = self._get_phase(ctx.phase)
        return self._enter_phase(G, ctx, phase.next or "")

    def set_phase(self, G: Any, ctx: Ctx, phase_id: str) -> Ctx:
        """Enter phase_id directly, skipping any "next" chain."""
        self._get_phase(phase_id)
        return self._enter_phase(G, ctx, phase_id)

    def process_event(self, G: Any, ctx: Ctx, event_type: str, *args: Any) -> Ctx:
        """
        Dispatch a control event by name.

        Unknown event names leave ctx unchanged.
        """
        handler = self._events.get(event_type)
        if handler is None:
            logger.warning("Ignoring unknown event %r", event_type)
            return ctx
        return handler(G, ctx, *args)

    def _enter_phase(self, G: Any, ctx: Ctx, phase_id: str) -> Ctx:
        entered = ctx.entering_phase(phase_id)
        pos = compute_first(G, entered, self.turn_order(phase_id))
        new_ctx = entered.at_position(pos)
        logger.debug("enter phase=%r player=%r", phase_id, new_ctx.current_player)
        return new_ctx

    # =========================================================================
    # Phase lookup
    # =========================================================================

    def _get_phase(self, phase_id: str):
        phase = self.phases.get(phase_id)
        if phase is None:
            raise UnknownPhaseError(phase_id, self.phases)
        return phase

    def turn_order(self, phase_id: str) -> TurnOrder:
        """Turn-order rule of a phase; the default rule for "" or when unset."""
        phase = self.phases.get(phase_id)
        if phase is None or phase.turn_order is None:
            return DEFAULT
        return phase.turn_order

    # =========================================================================
    # Moves
    # =========================================================================

    def get_move(self, ctx: Ctx, name: str, player_id: str | None = None) -> Executable | None:
        """
        Resolve a move name in ctx.

        A move of the active phase shadows the global move of the same name.
        """
        phase = self.phases.get(ctx.phase)
        if phase is not None and name in phase.moves:
            return phase.moves[name]
        return self.descriptor.moves.get(name)

    def _collect_move_names(self) -> list[str]:
        """Global move names, then each phase's new names in declaration order."""
        names = list(self.descriptor.moves)
        seen = set(names)
        for phase in self.phases.values():
            for name in phase.moves:
                if name not in seen:
                    seen.add(name)
                    names.append(name)
        return names
