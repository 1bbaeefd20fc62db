"""
Tests for descriptor normalization and move processing.

Tests:
- Defaults and move names
- Move resolution (phase shadows global, long form)
- Unknown moves are ignored
- Idempotent normalization
"""

import logging

import pytest

from ..engine_core.action import Action
from ..engine_core.context import Ctx
from ..engine_core.executable import MoveWithMetadata
from ..errors import DescriptorValidationError
from ..game import Game, create_game
from ..game_schema import GameDescriptor


class TestNormalization:
    """Tests for create_game defaults and surface."""

    def test_sanity(self, basic_game):
        """Move names are listed and process_move is callable."""
        assert basic_game.move_names == ("A", "B", "C")
        assert callable(basic_game.process_move)

    def test_defaults(self):
        """An empty descriptor gets every default."""
        game = create_game({})
        ctx = Ctx()

        assert game.name == "default"
        assert game.setup(ctx) == {}
        assert game.moves == {}
        assert game.phases == {}
        assert game.plugins == ()
        assert game.seed is None
        G = {"secret": 1}
        assert game.player_view(G, ctx, "0") is G

    def test_seed_is_passed_through(self):
        """The seed hook is exposed untouched."""
        game = create_game({"seed": "abc"})
        assert game.seed == "abc"

    def test_move_names_deduplicated(self):
        """Phase moves add only names not seen before, in declaration order."""
        game = create_game({
            "moves": {"A": lambda G, ctx: G, "B": lambda G, ctx: G},
            "phases": {
                "one": {"moves": {"B": lambda G, ctx: G, "C": lambda G, ctx: G}},
                "two": {"moves": {"D": lambda G, ctx: G, "A": lambda G, ctx: G}},
            },
        })
        assert game.move_names == ("A", "B", "C", "D")
        assert len(game.move_names) == len(set(game.move_names))

    def test_idempotent(self, basic_game):
        """Normalizing a normalized game returns the same object."""
        again = create_game(basic_game)
        assert again is basic_game
        assert again.process_move == basic_game.process_move
        assert again.move_names is basic_game.move_names

    def test_mapping_with_process_move_passes_through(self):
        """A mapping that already carries process_move is not re-wrapped."""
        game = {"process_move": lambda G, action, ctx: G, "move_names": []}
        assert create_game(game) is game

    def test_game_alias(self):
        """Game is the same normalizer."""
        assert Game is create_game

    def test_accepts_descriptor_instance(self):
        """A GameDescriptor is accepted as well as a mapping."""
        game = create_game(GameDescriptor(name="typed"))
        assert game.name == "typed"

    def test_descriptor_instance_with_raw_tables(self):
        """A GameDescriptor built from raw moves, phases and plugins is normalized."""
        trace = []

        def wrap(fn):
            def wrapped(G, ctx, *args):
                trace.append("wrapped")
                return fn(G, ctx, *args)
            return wrapped

        game = create_game(GameDescriptor(
            moves={"A": lambda G, ctx: "A", "C": {"move": lambda G, ctx: "C"}},
            phases={
                "PA": {"start": True, "moves": {"A": lambda G, ctx: "PA.A"}},
                "PB": {"turn_order": {"first": lambda G, ctx: 1}},
            },
            plugins=[{"fn_wrap": wrap}],
        ))

        assert game.move_names == ("A", "C")
        assert game.phases["PA"].start
        assert game.process_move({}, {"type": "A"}, Ctx(phase="PA")) == "PA.A"
        assert game.process_move({}, {"type": "C"}, Ctx(phase="")) == "C"
        assert trace == ["wrapped", "wrapped"]

        state = game.initial_state(3)
        assert state.ctx.phase == "PA"
        assert game.flow.set_phase(state.G, state.ctx, "PB").current_player == "1"

    def test_move_names_are_immutable(self, basic_game):
        """move_names is computed once and cannot be changed by callers."""
        assert isinstance(basic_game.move_names, tuple)
        assert basic_game.move_names is basic_game.flow.move_names

    def test_long_form_metadata_kept(self):
        """Long-form keys other than move are kept for collaborators."""
        game = create_game({"moves": {"C": {"move": lambda G, ctx: G, "label": "Cee"}}})
        executable = game.moves["C"]
        assert isinstance(executable, MoveWithMetadata)
        assert executable.metadata == {"label": "Cee"}


class TestProcessMove:
    """Tests for process_move."""

    def test_process_move(self, basic_game):
        """Moves resolve globally or per phase; unknown moves are ignored."""
        test_obj = {"test": True}
        ctx = Ctx(phase="")

        assert basic_game.process_move(test_obj, {"type": "A"}, ctx) is test_obj
        assert basic_game.process_move(test_obj, {"type": "D"}, ctx) is test_obj
        assert basic_game.process_move(test_obj, {"type": "B"}, ctx) is None
        assert basic_game.process_move(test_obj, {"type": "A"}, Ctx(phase="PA")) == "PA.A"

    def test_long_form_move(self, basic_game):
        """Long-form moves resolve like short-form ones."""
        assert basic_game.process_move({}, {"type": "C"}, Ctx(phase="")) == "C"

    def test_global_move_available_in_phase(self, basic_game):
        """Phases without an override fall back to the global move."""
        assert basic_game.process_move({}, {"type": "C"}, Ctx(phase="PA")) == "C"

    def test_long_form_without_move_is_ignored(self):
        """A long-form entry with no callable is a silent no-op."""
        game = create_game({"moves": {"X": {"label": "not playable"}}})
        G = {"x": 1}
        assert game.process_move(G, {"type": "X"}, Ctx()) is G

    def test_args_and_player_id(self):
        """Args are passed positionally and ctx carries the acting player."""
        seen = {}

        def move(G, ctx, a, b):
            seen["player_id"] = ctx.player_id
            return G + a + b

        game = create_game({"moves": {"add": move}})
        ctx = Ctx()
        result = game.process_move(1, Action.make_move("add", 2, 3, player_id="1"), ctx)

        assert result == 6
        assert seen["player_id"] == "1"
        assert ctx.player_id is None

    def test_camel_case_player_id_accepted(self):
        """Mapping actions may spell the player as playerID."""
        game = create_game({"moves": {"who": lambda G, ctx: ctx.player_id}})
        assert game.process_move(None, {"type": "who", "playerID": "3"}, Ctx()) == "3"

    def test_move_exception_propagates(self):
        """Errors raised by a move reach the caller."""
        def broken(G, ctx):
            raise ValueError("boom")

        game = create_game({"moves": {"broken": broken}})
        with pytest.raises(ValueError, match="boom"):
            game.process_move({}, {"type": "broken"}, Ctx())

    def test_moves_do_not_touch_ctx(self, starting_player_game):
        """A move changes G only."""
        state = starting_player_game.initial_state(4)
        starting_player_game.process_move(
            state.G, {"type": "take_starting_player_token"}, state.ctx
        )
        assert state.ctx == starting_player_game.initial_state(4).ctx


class TestValidation:
    """Tests for descriptor validation during normalization."""

    def test_two_start_phases_rejected(self):
        with pytest.raises(DescriptorValidationError) as exc_info:
            create_game({"phases": {"a": {"start": True}, "b": {"start": True}}})
        assert "start=True" in exc_info.value.errors[0]

    def test_unknown_next_rejected(self):
        with pytest.raises(DescriptorValidationError) as exc_info:
            create_game({"phases": {"a": {"next": "missing"}}})
        assert "missing" in exc_info.value.errors[0]

    def test_non_callable_setup_rejected(self):
        with pytest.raises(DescriptorValidationError):
            create_game({"setup": 42})

    def test_unplayable_move_warning_is_logged(self, caplog):
        """A long-form entry without a move is accepted and reported."""
        with caplog.at_level(logging.WARNING, logger="gameflow.game"):
            game = create_game({"name": "warned", "moves": {"X": {"label": "x"}}})

        assert game.move_names == ("X",)
        assert "'X'" in caplog.text
        assert "no callable move" in caplog.text
        assert "warned" in caplog.text
