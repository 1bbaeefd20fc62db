"""
Serpentine setup - the pattern used in Catan and Twilight Imperium.

Players place in seat order, then again in reverse seat order, then the
main game runs clockwise from seat 0.
"""

from __future__ import annotations
from typing import Any

from ..engine_core.context import Ctx
from ..game import NormalizedGame, create_game

FIRST_ROUND = "first setup round"
SECOND_ROUND = "second setup round"
MAIN_PHASE = "main phase"


def forward(G: Any, ctx: Ctx) -> int:
    return (ctx.play_order_pos + 1) % len(ctx.play_order)


def backward(G: Any, ctx: Ctx) -> int:
    # Left unwrapped: ending the last reverse turn points before seat 0,
    # and entering the main phase resets the position anyway.
    return ctx.play_order_pos - 1


def place_settlement(G: dict, ctx: Ctx, spot: str) -> dict:
    placements = {**G["placements"], spot: ctx.current_player}
    return {**G, "placements": placements}


def create_serpentine_game() -> NormalizedGame:
    return create_game({
        "name": "serpentine",
        "setup": lambda ctx: {"placements": {}},
        "phases": {
            FIRST_ROUND: {
                "start": True,
                "moves": {"place_settlement": place_settlement},
                "turn": {"order": {"first": lambda G, ctx: 0, "next": forward}},
                "next": SECOND_ROUND,
            },
            SECOND_ROUND: {
                "moves": {"place_settlement": place_settlement},
                "turn": {
                    "order": {
                        "first": lambda G, ctx: len(ctx.play_order) - 1,
                        "next": backward,
                    },
                },
                "next": MAIN_PHASE,
            },
            MAIN_PHASE: {
                "turn_order": {"first": lambda G, ctx: 0, "next": forward},
            },
        },
    })
