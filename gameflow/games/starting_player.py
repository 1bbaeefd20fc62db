"""
Starting player token - the round structure of worker placement games
such as Agricola and Viticulture.

Whoever takes the token opens the next round. A round starts by
re-entering the "main" phase.
"""

from __future__ import annotations
from typing import Any

from ..engine_core.context import Ctx
from ..game import NormalizedGame, create_game


def take_starting_player_token(G: dict, ctx: Ctx) -> dict:
    return {**G, "starting_player_token": ctx.current_player}


def create_starting_player_game() -> NormalizedGame:
    return create_game({
        "name": "starting-player-token",
        "setup": lambda ctx: {"starting_player_token": 0},
        "moves": {"take_starting_player_token": take_starting_player_token},
        "phases": {
            "main": {
                "start": True,
                "turn_order": {
                    # The token holds a player id; positions are coerced to int
                    "first": lambda G, ctx: G["starting_player_token"],
                    "next": lambda G, ctx: (ctx.play_order_pos + 1) % len(ctx.play_order),
                },
            },
        },
    })
