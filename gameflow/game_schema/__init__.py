"""Game descriptor schema - declarative game definitions and their validation."""

from .descriptor import GameDescriptor, PhaseConfig
from .validation import ValidationResult, ensure_valid, validate_descriptor

__all__ = [
    "GameDescriptor",
    "PhaseConfig",
    "ValidationResult",
    "ensure_valid",
    "validate_descriptor",
]
