"""
gameflow.errors - Exception hierarchy
=====================================

Resolution failures (unknown move names) are not errors and never show up
here. Exceptions raised by author-supplied functions (setup, moves,
turn-order rules, plugin hooks) are not wrapped either; they reach the
caller unchanged.
"""

from __future__ import annotations
from typing import Iterable


class GameflowError(Exception):
    """Base exception for all gameflow errors."""
    pass


class ConfigurationError(GameflowError):
    """The game descriptor cannot support the requested operation."""
    pass


class UnknownPhaseError(ConfigurationError):
    """Raised when a transition targets a phase the descriptor does not declare."""

    def __init__(self, phase_id: str, known_phases: Iterable[str] = ()):
        self.phase_id = phase_id
        self.known_phases = list(known_phases)
        known = ", ".join(repr(p) for p in self.known_phases) or "none"
        super().__init__(f"Unknown phase {phase_id!r} (declared phases: {known})")


class DescriptorValidationError(ConfigurationError):
    """Raised when a game descriptor fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Game descriptor validation failed with {len(errors)} error(s): "
            + "; ".join(errors)
        )


class SessionNotFoundError(GameflowError):
    """Raised when a session id is unknown or the session has ended."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Session {session_id!r} not found")


class TurnOrderError(ConfigurationError):
    """Raised when a turn-order rule returns something that is not a position."""

    def __init__(self, rule_name: str, value: object):
        self.rule_name = rule_name
        self.value = value
        super().__init__(
            f"Turn-order rule {rule_name!r} returned {value!r}, expected an integer position"
        )
