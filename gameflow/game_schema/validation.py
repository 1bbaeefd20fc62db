"""
Descriptor Validation - Structural checks on a game descriptor.

Validates that:
1. At most one phase is marked start=True
2. Every phase's "next" names a declared phase
3. Phase ids are strings (the empty id is reserved for "no phase")
4. setup and player_view are callable
"""

from __future__ import annotations
from dataclasses import dataclass

from .descriptor import GameDescriptor
from ..errors import DescriptorValidationError


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_descriptor(descriptor: GameDescriptor) -> ValidationResult:
    """
    Validate a normalized game descriptor.

    Returns ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not callable(descriptor.setup):
        errors.append("setup must be callable")
    if not callable(descriptor.player_view):
        errors.append("player_view must be callable")

    start_phases = [pid for pid, phase in descriptor.phases.items() if phase.start]
    if len(start_phases) > 1:
        errors.append(
            f"Only one phase may set start=True, found {len(start_phases)}: "
            + ", ".join(repr(p) for p in start_phases)
        )

    for phase_id, phase in descriptor.phases.items():
        if not isinstance(phase_id, str) or not phase_id:
            errors.append(f"Phase id {phase_id!r} must be a non-empty string")
            continue
        if phase.next is not None and phase.next not in descriptor.phases:
            errors.append(f"Phase '{phase_id}' has unknown next phase '{phase.next}'")

    warnings.extend(_unplayable_moves("moves", descriptor.moves))
    for phase_id, phase in descriptor.phases.items():
        warnings.extend(_unplayable_moves(f"phases['{phase_id}'].moves", phase.moves))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def ensure_valid(descriptor: GameDescriptor) -> ValidationResult:
    """Validate and raise DescriptorValidationError on any error."""
    result = validate_descriptor(descriptor)
    if not result.valid:
        raise DescriptorValidationError(result.errors)
    return result


def _unplayable_moves(where: str, moves: dict) -> list[str]:
    """Moves that resolve to nothing callable are silently ignored at runtime."""
    return [
        f"{where}['{name}'] has no callable move and will be ignored"
        for name, executable in moves.items()
        if executable.callable is None
    ]
