"""
Pytest fixtures for gameflow tests.
"""

import pytest

from ..engine_core.context import Ctx
from ..game import NormalizedGame, create_game
from ..games import create_serpentine_game, create_starting_player_game
from ..session import SessionManager


@pytest.fixture
def basic_game() -> NormalizedGame:
    """Global moves in short and long form, one phase overriding A."""
    return create_game({
        "moves": {
            "A": lambda G, ctx: G,
            "B": lambda G, ctx: None,
            "C": {"move": lambda G, ctx: "C"},
        },
        "phases": {
            "PA": {
                "moves": {"A": lambda G, ctx: "PA.A"},
            },
        },
    })


@pytest.fixture
def phased_game() -> NormalizedGame:
    """Three phases chained by next, the last one without next."""
    return create_game({
        "setup": lambda ctx: {"log": []},
        "phases": {
            "draft": {"start": True, "next": "play"},
            "play": {"next": "score"},
            "score": {},
        },
    })


@pytest.fixture
def four_player_ctx() -> Ctx:
    return Ctx.create(4)


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def serpentine_game() -> NormalizedGame:
    return create_serpentine_game()


@pytest.fixture
def starting_player_game() -> NormalizedGame:
    return create_starting_player_game()
