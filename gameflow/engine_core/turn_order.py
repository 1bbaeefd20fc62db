"""
Turn Order - Computes which seat acts next.

A TurnOrder rule is a pair of author functions over (G, ctx):
- first: position taken when a phase becomes active
- next:  position taken when a turn ends

Positions index ctx.play_order. They are coerced to int here so rules may
return anything int() accepts (e.g. a player id kept in G). They are not
range-checked: a bad position shows up as current_player = None until the
next phase entry recomputes it. A value int() cannot convert (None, "x")
is not a position at all and raises TurnOrderError.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .context import Ctx
from ..errors import TurnOrderError

RuleFn = Callable[[Any, Ctx], Any]


def _default_first(G: Any, ctx: Ctx) -> int:
    return 0


def _default_next(G: Any, ctx: Ctx) -> int:
    return (ctx.play_order_pos + 1) % len(ctx.play_order)


@dataclass(frozen=True)
class TurnOrder:
    """A turn-order rule."""
    first: RuleFn = _default_first
    next: RuleFn = _default_next

    @classmethod
    def coerce(cls, rule: TurnOrder | Mapping[str, RuleFn] | None) -> TurnOrder:
        """
        Build a rule from a TurnOrder, a {"first", "next"} mapping, or None.

        Missing functions come from the default rule.
        """
        if rule is None:
            return DEFAULT
        if isinstance(rule, TurnOrder):
            return rule
        return cls(
            first=rule.get("first") or _default_first,
            next=rule.get("next") or _default_next,
        )


DEFAULT = TurnOrder()


def compute_first(G: Any, ctx: Ctx, rule: TurnOrder = DEFAULT) -> int:
    """Position for the player who opens a newly entered phase."""
    return _to_position("first", rule.first(G, ctx))


def compute_next(G: Any, ctx: Ctx, rule: TurnOrder = DEFAULT) -> int:
    """Position for the player who takes the turn after ctx.current_player."""
    return _to_position("next", rule.next(G, ctx))


def _to_position(rule_name: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise TurnOrderError(rule_name, value) from None
