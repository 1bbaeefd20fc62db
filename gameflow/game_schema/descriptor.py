"""
Game Descriptor - Declarative description of a game.

A descriptor says what a game is; it holds no state:

    {
        "name": "catan-setup",
        "setup": lambda ctx: {...},
        "moves": {"build": build},
        "phases": {
            "setup": {"start": True, "turn_order": {...}, "next": "main"},
            "main": {"moves": {"trade": trade}},
        },
        "player_view": lambda G, ctx, player_id: G,
        "plugins": [...],
    }

Plain mappings and GameDescriptor instances are both accepted; missing
fields fall back to the defaults below.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from ..engine_core.context import Ctx
from ..engine_core.executable import Executable, normalize_move_table
from ..engine_core.plugins import Plugin, normalize_plugins
from ..engine_core.turn_order import TurnOrder


def _empty_setup(ctx: Ctx) -> Any:
    return {}


def _identity_view(G: Any, ctx: Ctx, player_id: str | None) -> Any:
    return G


@dataclass(frozen=True)
class PhaseConfig:
    """
    One phase of the game.

    turn_order is None when the phase uses the default rule.
    """
    moves: dict[str, Executable] = field(default_factory=dict)
    turn_order: TurnOrder | None = None
    start: bool = False
    next: str | None = None

    def __post_init__(self):
        # Instances built directly may still hold raw tables
        object.__setattr__(self, "moves", normalize_move_table(self.moves))
        if self.turn_order is not None:
            object.__setattr__(self, "turn_order", TurnOrder.coerce(self.turn_order))

    @classmethod
    def from_mapping(cls, data: PhaseConfig | Mapping[str, Any] | None) -> PhaseConfig:
        if isinstance(data, PhaseConfig):
            return data
        data = data or {}

        rule = data.get("turn_order")
        if rule is None:
            # Nested spelling: {"turn": {"order": {...}}}
            rule = (data.get("turn") or {}).get("order")

        return cls(
            moves=data.get("moves") or {},
            turn_order=rule,
            start=bool(data.get("start", False)),
            next=data.get("next"),
        )


@dataclass(frozen=True)
class GameDescriptor:
    """A game descriptor with every default applied."""
    name: str = "default"
    setup: Callable[[Ctx], Any] = _empty_setup
    moves: dict[str, Executable] = field(default_factory=dict)
    phases: dict[str, PhaseConfig] = field(default_factory=dict)
    player_view: Callable[[Any, Ctx, str | None], Any] = _identity_view
    plugins: tuple[Plugin, ...] = ()

    # Opaque seeding hook for collaborators; the engine never reads it
    seed: Any = None

    def __post_init__(self):
        object.__setattr__(self, "moves", normalize_move_table(self.moves))
        object.__setattr__(self, "phases", {
            phase_id: PhaseConfig.from_mapping(phase)
            for phase_id, phase in (self.phases or {}).items()
        })
        object.__setattr__(self, "plugins", normalize_plugins(self.plugins))

    @classmethod
    def from_mapping(cls, data: GameDescriptor | Mapping[str, Any]) -> GameDescriptor:
        """Apply defaults and normalize nested tables."""
        if isinstance(data, GameDescriptor):
            return data

        def pick(key: str, default: Any) -> Any:
            value = data.get(key)
            return default if value is None else value

        return cls(
            name=pick("name", "default"),
            setup=pick("setup", _empty_setup),
            moves=data.get("moves") or {},
            phases=data.get("phases") or {},
            player_view=pick("player_view", _identity_view),
            plugins=data.get("plugins") or (),
            seed=data.get("seed"),
        )

    @property
    def start_phase(self) -> str:
        """Id of the phase marked start=True, or "" if none is."""
        for phase_id, phase in self.phases.items():
            if phase.start:
                return phase_id
        return ""
