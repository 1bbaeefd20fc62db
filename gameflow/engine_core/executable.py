"""
Executable - Normalized move table entries.

Move tables accept two spellings:

    moves = {
        "draw": draw,                                   # short form
        "build": {"move": build, "label": "Build"},     # long form
    }

Both become an Executable. Only the function is ever invoked; long-form
metadata is kept untouched for collaborators such as a UI.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from .context import Ctx

MoveFn = Callable[..., Any]


@dataclass(frozen=True)
class DirectMove:
    """Short-form move: a bare function."""
    fn: MoveFn

    @property
    def callable(self) -> MoveFn | None:
        return self.fn if callable(self.fn) else None

    @property
    def metadata(self) -> dict[str, Any]:
        return {}

    def invoke(self, G: Any, ctx: Ctx, args: Sequence[Any] = ()) -> Any:
        return self.fn(G, ctx, *args)


@dataclass(frozen=True)
class MoveWithMetadata:
    """Long-form move: {"move": fn, ...metadata}. fn may be missing."""
    fn: MoveFn | None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def callable(self) -> MoveFn | None:
        return self.fn if callable(self.fn) else None

    def invoke(self, G: Any, ctx: Ctx, args: Sequence[Any] = ()) -> Any:
        return self.fn(G, ctx, *args)


Executable = DirectMove | MoveWithMetadata


def to_executable(entry: Any) -> Executable:
    """Normalize one move table entry."""
    if isinstance(entry, (DirectMove, MoveWithMetadata)):
        return entry
    if isinstance(entry, Mapping):
        metadata = {k: v for k, v in entry.items() if k != "move"}
        return MoveWithMetadata(fn=entry.get("move"), metadata=metadata)
    return DirectMove(fn=entry)


def normalize_move_table(moves: Mapping[str, Any] | None) -> dict[str, Executable]:
    """Normalize a whole move table, keeping declaration order."""
    if not moves:
        return {}
    return {name: to_executable(entry) for name, entry in moves.items()}
