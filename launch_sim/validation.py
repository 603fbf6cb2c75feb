"""
Launch Mission Simulator - Validation Checks and Error Types

This module implements the entity construction checks and the two error
kinds raised by the simulator:
- ValidationError: malformed rocket/target parameters (construction time)
- InvalidOperationError: an operation attempted in a state that forbids it

Both are raised synchronously to the immediate caller.
"""

import numbers

import numpy as np


class ValidationError(ValueError):
    """Raised when an entity is constructed with invalid parameters."""
    pass


class InvalidOperationError(RuntimeError):
    """Raised when a mission or rocket operation is not allowed in the current state."""
    pass


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_name(name: str, kind: str) -> str:
    """
    Verify an entity name is non-empty.

    Args:
        name: Proposed name
        kind: Entity kind used in the error message ("Rocket", "Target")

    Returns:
        The name stripped of surrounding whitespace
    """
    if name is None or not str(name).strip():
        raise ValidationError(f"{kind} name cannot be empty")
    return str(name).strip()


def check_positive(value: float, label: str) -> float:
    """
    Check that a quantity is a finite, strictly positive number.

    Returns:
        The value as float, raises ValidationError otherwise
    """
    if not _is_real(value) or not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{label} must be positive, got {value!r}")
    return float(value)


def check_non_negative(value: float, label: str) -> float:
    """Check that a quantity is finite and >= 0."""
    if not _is_real(value) or not np.isfinite(value) or value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value!r}")
    return float(value)


def check_stage_count(stages: int) -> int:
    """Check that the stage count is a positive whole number."""
    if isinstance(stages, bool) or not isinstance(stages, numbers.Integral) or stages < 1:
        raise ValidationError(f"Total stages must be a positive integer, got {stages!r}")
    return int(stages)
