from __future__ import annotations

"""Levenshtein edit distance over byte or code-point sequences."""

from typing import Any, Sequence, Tuple

Prepared = Sequence[Any]


def prepare_sequences(a: str, b: str, fast_mode: bool = False) -> Tuple[Prepared, Prepared]:
    """Turn *a* and *b* into the element sequences the engine compares.

    In fast mode the UTF-8 encoding is used as-is, one element per byte.
    Otherwise a ``str`` already indexes by code point, so it is returned
    unchanged.
    """

    if fast_mode:
        return a.encode("utf-8"), b.encode("utf-8")
    return a, b


def prepared_length(text: str, fast_mode: bool = False) -> int:
    """Number of elements *text* contributes in the given mode."""

    return len(text.encode("utf-8")) if fast_mode else len(text)


def levenshtein(a: Prepared, b: Prepared) -> int:
    """Return the Levenshtein distance between the sequences *a* and *b*.

    Elements only need to support ``==``. A single rolling row sized to the
    shorter sequence is kept, so memory is ``O(min(len(a), len(b)))``. The
    result is a plain Python ``int``, so there is no fixed-width ceiling on
    input length.
    """

    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                insert_cost = current[j - 1]
                delete_cost = previous[j]
                replace_cost = previous[j - 1]
                current.append(1 + min(insert_cost, delete_cost, replace_cost))
        previous = current
    return previous[-1]


def compute_distance(a: str, b: str, fast_mode: bool = False) -> int:
    """Edit distance between two texts.

    With ``fast_mode=False`` the result counts characters (Unicode code
    points) and is correct for any text. With ``fast_mode=True`` the UTF-8
    bytes are compared directly. Both modes agree on ASCII input, but every
    multi-byte character counts once per encoded byte, so the result for
    non-ASCII text is a byte-level distance that can differ from the
    character distance. No warning is issued; callers that need
    character semantics must not pass ``fast_mode=True``. The distance is an
    unbounded Python ``int``; only :mod:`lexdist.matrix` caps lengths at
    ``uint32``.
    """

    seq_a, seq_b = prepare_sequences(a, b, fast_mode)
    return levenshtein(seq_a, seq_b)
