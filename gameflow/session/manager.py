"""
Session Manager - Creates and manages game sessions.

A session owns the authoritative snapshot of one play-through:
- Created when a game starts, from a normalized game
- Applies moves and control events one at a time, in submission order
- Destroyed when the game ends

Sessions are EPHEMERAL and in-memory. The engine keeps no internal queue
and no lock; whoever drives a session serializes access to it.
"""

from __future__ import annotations
import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from ..config import DEFAULT_NUM_PLAYERS
from ..engine_core.action import Action
from ..engine_core.reducer import Reducer
from ..engine_core.state import GameState
from ..errors import SessionNotFoundError
from ..game import NormalizedGame, create_game
from ..schemas import ActionRequest, CtxInfo, StateSnapshot

logger = logging.getLogger("gameflow.session")


class _Dispatcher:
    """Attribute access turns into a dispatched action: proxy.name(*args)."""

    def __init__(self, session: Session, factory: Callable[..., Action], names: tuple[str, ...]):
        self._session = session
        self._factory = factory
        self._names = tuple(names)

    def __getattr__(self, name: str) -> Callable[..., GameState]:
        if name.startswith("_") or name not in self._names:
            raise AttributeError(name)

        def dispatch(*args: Any, player_id: str | None = None) -> GameState:
            return self._session.apply(self._factory(name, *args, player_id=player_id))

        dispatch.__name__ = name
        return dispatch

    def __dir__(self) -> list[str]:
        return list(self._names)


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The normalized game
    - The latest (G, ctx) snapshot
    - Session metadata
    """
    session_id: str
    game: NormalizedGame
    state: GameState
    created_at: float = field(default_factory=time.time)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self._reducer = Reducer(self.game)
        self.moves = _Dispatcher(self, Action.make_move, self.game.move_names)
        self.events = _Dispatcher(self, Action.game_event, self.game.flow.event_names)

    def get_state(self) -> GameState:
        return self.state

    def apply(self, action: Action | Mapping[str, Any]) -> GameState:
        """Apply one action to the current snapshot and keep the result."""
        self.state = self._reducer.apply(self.state, action)
        return self.state

    def dispatch(self, payload: Mapping[str, Any]) -> GameState:
        """
        Validate a raw payload and apply it.

        Raises pydantic.ValidationError for malformed payloads.
        """
        request = ActionRequest.model_validate(payload)
        return self.apply(request.to_action())

    def make_move(self, name: str, *args: Any, player_id: str | None = None) -> GameState:
        return self.apply(Action.make_move(name, *args, player_id=player_id))

    def end_turn(self) -> GameState:
        return self.apply(Action.game_event("end_turn"))

    def end_phase(self) -> GameState:
        return self.apply(Action.game_event("end_phase"))

    def set_phase(self, phase_id: str) -> GameState:
        return self.apply(Action.game_event("set_phase", phase_id))

    def player_view(self, player_id: str | None) -> Any:
        """G filtered by the game's player_view for one player."""
        return self.game.player_view(self.state.G, self.state.ctx, player_id)

    def snapshot(self, player_id: str | None = None) -> StateSnapshot:
        """Serializable snapshot for player_id (or the unfiltered G when None)."""
        G = self.state.G if player_id is None else self.player_view(player_id)
        return StateSnapshot(
            G=G,
            ctx=CtxInfo.model_validate(self.state.ctx),
            player_id=player_id,
            move_names=self.game.move_names,
        )


class SessionManager:
    """
    Manages active game sessions.

    Sessions are stored in memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        game: Any,
        num_players: int | None = None,
        play_order: tuple[str, ...] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Session:
        """Normalize game if needed, build its opening snapshot, register a session."""
        game = create_game(game)
        if num_players is None:
            num_players = DEFAULT_NUM_PLAYERS
        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            state=game.initial_state(num_players, play_order),
            metadata=metadata or {},
        )
        self._sessions[session.session_id] = session
        logger.info(
            "Created session %s for game %r with %d players",
            session.session_id, game.name, num_players,
        )
        return session

    def get_session(self, session_id: str) -> Session:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def end_session(self, session_id: str) -> Session:
        """Remove a session; its state is discarded."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(session_id)
        logger.info("Ended session %s", session_id)
        return session

    def list_sessions(self) -> list[str]:
        return list(self._sessions)
