"""
Miller Notation - Lattice plane and direction notation parser.

Parses Miller index notation into signed indices and, for planes, the
per-axis intercepts used to place the plane in a unit cell.

Example:
    >>> from miller_notation import parse_notation
    >>>
    >>> result = parse_notation("(1-10)")
    >>> result.indices, result.intercepts
    ((1, -1, 0), (1.0, -1.0, 0.5))

    >>> parse_notation("[111]").to_dict()
    {'type': 'direction', 'indices': [1.0, 1.0, 1.0], 'intercept': None}
"""

__version__ = "1.0.0"

# Data classes
from .models import (
    ZERO_INDEX_INTERCEPT,
    DirectionNotation,
    FailureReason,
    NotationKind,
    ParseFailure,
    ParseResult,
    PlaneNotation,
    indices_to_unit_vector,
)

# Parser
from .parser import (
    classify_delimiters,
    compute_intercepts,
    iter_index_tokens,
    parse_notation,
)

__all__ = [
    # Version
    "__version__",
    # Parser
    "parse_notation",
    "classify_delimiters",
    "iter_index_tokens",
    "compute_intercepts",
    # Data classes
    "PlaneNotation",
    "DirectionNotation",
    "ParseFailure",
    "ParseResult",
    "NotationKind",
    "FailureReason",
    "ZERO_INDEX_INTERCEPT",
    "indices_to_unit_vector",
]
