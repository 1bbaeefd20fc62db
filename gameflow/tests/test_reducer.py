"""
Tests for the reducer (snapshot transitions).
"""

import pytest

from ..engine_core.action import Action, ActionType
from ..engine_core.reducer import Reducer, apply_action
from ..game import create_game


@pytest.fixture
def counter_game():
    return create_game({
        "setup": lambda ctx: {"count": 0},
        "moves": {"add": lambda G, ctx, n: {"count": G["count"] + n}},
        "phases": {"main": {"start": True}},
    })


class TestReducer:
    """Tests for Reducer.apply."""

    def test_move_replaces_G_only(self, counter_game):
        state = counter_game.initial_state(2)
        new_state = apply_action(counter_game, state, Action.make_move("add", 3))

        assert new_state.G == {"count": 3}
        assert new_state.ctx is state.ctx
        assert state.G == {"count": 0}

    def test_event_replaces_ctx_only(self, counter_game):
        state = counter_game.initial_state(2)
        new_state = apply_action(counter_game, state, Action.game_event("end_turn"))

        assert new_state.G is state.G
        assert new_state.current_player == "1"
        assert new_state.ctx.turn == 1

    def test_noops_return_same_state(self, counter_game):
        reducer = Reducer(counter_game)
        state = counter_game.initial_state(2)

        assert reducer.apply(state, Action.make_move("missing")) is state
        assert reducer.apply(state, Action.game_event("missing")) is state

    def test_mapping_action_is_a_move(self, counter_game):
        state = counter_game.initial_state(2)
        new_state = apply_action(counter_game, state, {"type": "add", "args": [2]})
        assert new_state.G == {"count": 2}

    def test_sequential_actions(self, counter_game):
        """Each action sees the result of the previous one."""
        reducer = Reducer(counter_game)
        state = counter_game.initial_state(3)
        actions = [
            Action.make_move("add", 1),
            Action.game_event("end_turn"),
            Action.make_move("add", 2),
            Action.game_event("set_phase", "main"),
        ]
        for action in actions:
            state = reducer.apply(state, action)

        assert state.G == {"count": 3}
        assert state.phase == "main"
        assert state.current_player == "0"
        assert state.ctx.turn == 0

    def test_factories(self):
        action = Action.make_move("add", 1, 2, player_id="0")
        assert action.action_type == ActionType.MAKE_MOVE
        assert action.args == (1, 2)
        assert Action.coerce(action) is action
