"""
Context - The engine-owned half of a game snapshot.

Ctx holds who is playing and where the game is in its phase/turn
lifecycle. It is a frozen value: the flow state machine produces a new
Ctx for every transition and never mutates one in place.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace


def default_play_order(num_players: int) -> tuple[str, ...]:
    """Player ids "0".."N-1" in seating order."""
    return tuple(str(i) for i in range(num_players))


@dataclass(frozen=True)
class Ctx:
    """
    Game context.

    Invariant: after any phase entry or turn advance,
    current_player == play_order[play_order_pos] (or None when the
    turn-order rule produced a position outside play_order).
    """
    num_players: int = 2
    play_order: tuple[str, ...] = field(default=("0", "1"))
    play_order_pos: int = 0
    current_player: str | None = "0"
    phase: str = ""
    turn: int = 0

    # Only set inside a move invocation
    player_id: str | None = None

    @classmethod
    def create(cls, num_players: int, play_order: tuple[str, ...] | None = None) -> Ctx:
        """Fresh context in the no-phase state, first seat to act."""
        order = tuple(play_order) if play_order is not None else default_play_order(num_players)
        return cls(
            num_players=num_players,
            play_order=order,
            play_order_pos=0,
            current_player=player_at(order, 0),
            phase="",
            turn=0,
        )

    def at_position(self, pos: int) -> Ctx:
        """Return ctx with play_order_pos and current_player moved together."""
        return replace(self, play_order_pos=pos, current_player=player_at(self.play_order, pos))

    def entering_phase(self, phase: str) -> Ctx:
        """Return ctx switched to phase with the turn counter reset."""
        return replace(self, phase=phase, turn=0)

    def next_turn(self, pos: int) -> Ctx:
        """Return ctx advanced one turn with pos as the new position."""
        return replace(self.at_position(pos), turn=self.turn + 1)

    def with_player_id(self, player_id: str | None) -> Ctx:
        return replace(self, player_id=player_id)


def player_at(play_order: tuple[str, ...], pos: int) -> str | None:
    """
    Look up the player at pos.

    Positions outside play_order (including negatives) give None.
    """
    if 0 <= pos < len(play_order):
        return play_order[pos]
    return None
