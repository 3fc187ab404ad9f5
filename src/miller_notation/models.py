"""
Data classes for parsed Miller notation.

A parse yields one of three frozen results: a lattice plane, a lattice
direction, or a failure carrying the reason and a user-facing message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

import numpy as np

# Intercept used for a zero index (plane parallel to that axis)
ZERO_INDEX_INTERCEPT = 0.5


class NotationKind(str, Enum):
    """Kind of notation, selected by the outer delimiter pair."""

    PLANE = "plane"
    DIRECTION = "direction"


class FailureReason(str, Enum):
    """Why an input could not be parsed."""

    INVALID_FORMAT = "invalid_format"
    NO_VALID_INDICES = "no_valid_indices"


def indices_to_unit_vector(indices: tuple[int, ...]) -> np.ndarray | None:
    """Normalize an index vector in a cubic lattice.

    Args:
        indices: Signed Miller indices

    Returns:
        Unit vector, or None if every index is zero
    """
    vector = np.asarray(indices, dtype=float)
    norm = np.linalg.norm(vector)
    if norm < 1e-12:
        return None
    return vector / norm


def _format_indices(indices: tuple[int, ...]) -> str:
    return "".join(str(i) for i in indices)


@dataclass(frozen=True)
class PlaneNotation:
    """A lattice plane such as (100).

    Attributes:
        indices: Signed indices in axis order
        intercepts: Per-axis intercepts, 1/index or ZERO_INDEX_INTERCEPT
    """
    indices: tuple[int, ...]
    intercepts: tuple[float, ...]

    kind: ClassVar[NotationKind] = NotationKind.PLANE

    @property
    def notation(self) -> str:
        return f"({_format_indices(self.indices)})"

    def unit_vector(self) -> np.ndarray | None:
        """Plane normal for a cubic lattice."""
        return indices_to_unit_vector(self.indices)

    def to_dict(self) -> dict[str, Any]:
        return {
            'type': self.kind.value,
            'indices': [float(i) for i in self.indices],
            'intercept': list(self.intercepts),
        }


@dataclass(frozen=True)
class DirectionNotation:
    """A lattice direction such as [111]."""
    indices: tuple[int, ...]

    kind: ClassVar[NotationKind] = NotationKind.DIRECTION

    @property
    def notation(self) -> str:
        return f"[{_format_indices(self.indices)}]"

    def unit_vector(self) -> np.ndarray | None:
        """Direction vector for a cubic lattice."""
        return indices_to_unit_vector(self.indices)

    def to_dict(self) -> dict[str, Any]:
        return {
            'type': self.kind.value,
            'indices': [float(i) for i in self.indices],
            'intercept': None,
        }


@dataclass(frozen=True)
class ParseFailure:
    """An input that could not be parsed."""
    reason: FailureReason
    message: str


ParseResult = PlaneNotation | DirectionNotation | ParseFailure
