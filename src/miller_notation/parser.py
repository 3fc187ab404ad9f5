"""
Miller Notation Parser.

Parses plane notation like "(1-10)" and direction notation like "[111]"
into signed indices. Indices are single digits; a minus sign applies to
the digit immediately after it.
"""

from collections.abc import Iterator, Sequence

import numpy as np

from .models import (
    ZERO_INDEX_INTERCEPT,
    DirectionNotation,
    FailureReason,
    NotationKind,
    ParseFailure,
    ParseResult,
    PlaneNotation,
)

INVALID_FORMAT_MESSAGE = (
    "Invalid format. Use parentheses for planes (e.g., (100)) "
    "or brackets for directions (e.g., [111])."
)
NO_VALID_INDICES_MESSAGE = "No valid indices found"

DELIMITERS = {
    NotationKind.PLANE: ('(', ')'),
    NotationKind.DIRECTION: ('[', ']'),
}

_DIGITS = frozenset('0123456789')


def classify_delimiters(text: str) -> NotationKind | None:
    """Select the notation kind from the first and last characters.

    Args:
        text: Trimmed notation string

    Returns:
        NotationKind, or None if no delimiter pair matches
    """
    # Needs at least an opening and a closing character
    if len(text) < 2:
        return None

    for kind, (opening, closing) in DELIMITERS.items():
        if text[0] == opening and text[-1] == closing:
            return kind
    return None


def iter_index_tokens(content: str) -> Iterator[int]:
    """Lazily scan signed single-digit indices from notation content.

    Unrecognized characters are skipped. A minus sign not followed by a
    digit is dropped together with the character after it, so "--1"
    yields 1 and "12" yields 1 then 2.

    Args:
        content: Text between the delimiters

    Yields:
        Signed index values in axis order
    """
    chars = iter(content)
    for char in chars:
        sign = 1
        if char == '-':
            sign = -1
            char = next(chars, None)
            if char is None:
                return
        if char in _DIGITS:
            yield sign * int(char)


def compute_intercepts(indices: Sequence[int]) -> tuple[float, ...]:
    """Compute per-axis intercepts for a plane.

    Args:
        indices: Signed plane indices

    Returns:
        1/index for each non-zero index, ZERO_INDEX_INTERCEPT otherwise
    """
    values = np.asarray(indices, dtype=float)
    intercepts = np.full(values.shape, ZERO_INDEX_INTERCEPT)
    np.divide(1.0, values, out=intercepts, where=values != 0)
    return tuple(intercepts.tolist())


def parse_notation(text: str) -> ParseResult:
    """Parse a plane or direction notation string.

    Args:
        text: Notation like "(100)" or "[111]", surrounding whitespace allowed

    Returns:
        PlaneNotation, DirectionNotation, or ParseFailure

    Examples:
        >>> parse_notation("(1-10)")
        PlaneNotation(indices=(1, -1, 0), intercepts=(1.0, -1.0, 0.5))
        >>> parse_notation("[111]")
        DirectionNotation(indices=(1, 1, 1))
        >>> parse_notation("{100}").reason
        <FailureReason.INVALID_FORMAT: 'invalid_format'>
    """
    text = text.strip()
    kind = classify_delimiters(text)
    if kind is None:
        return ParseFailure(FailureReason.INVALID_FORMAT, INVALID_FORMAT_MESSAGE)

    indices = tuple(iter_index_tokens(text[1:-1]))
    if not indices:
        return ParseFailure(FailureReason.NO_VALID_INDICES, NO_VALID_INDICES_MESSAGE)

    if kind is NotationKind.DIRECTION:
        return DirectionNotation(indices)
    return PlaneNotation(indices, compute_intercepts(indices))
