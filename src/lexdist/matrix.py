from __future__ import annotations

"""Full dynamic-programming table realised as a fixed-width numpy array."""

from typing import Union

import numpy as np

from .engine import prepare_sequences

DTYPE = np.uint32
# Every cell is bounded by max(m, n), so this is also the longest input a
# uint32 table can hold without wrapping.
MAX_SEQUENCE_LENGTH = int(np.iinfo(DTYPE).max)


class SequenceTooLongError(OverflowError):
    """Raised when a prepared sequence does not fit the table's integer width."""


def _as_codes(sequence: Union[bytes, str]) -> np.ndarray:
    if isinstance(sequence, bytes):
        return np.frombuffer(sequence, dtype=np.uint8).astype(DTYPE)
    return np.fromiter((ord(char) for char in sequence), dtype=DTYPE, count=len(sequence))


def distance_matrix(a: str, b: str, fast_mode: bool = False) -> np.ndarray:
    """Return the complete ``(m + 1) x (n + 1)`` edit-distance table.

    Cell ``[i, j]`` is the distance between the first ``i`` elements of *a*
    and the first ``j`` elements of *b*. Row 0 and column 0 hold the plain
    prefix lengths.
    """

    seq_a, seq_b = prepare_sequences(a, b, fast_mode)
    m, n = len(seq_a), len(seq_b)
    for length in (m, n):
        if length > MAX_SEQUENCE_LENGTH:
            raise SequenceTooLongError(
                f"Sequence of {length} elements exceeds the uint32 ceiling of "
                f"{MAX_SEQUENCE_LENGTH}"
            )

    codes_a = _as_codes(seq_a)
    codes_b = _as_codes(seq_b)
    table = np.empty((m + 1, n + 1), dtype=DTYPE)
    offsets = np.arange(n + 1, dtype=np.int64)
    previous = offsets.copy()
    table[0] = previous
    for i in range(1, m + 1):
        mismatch = (codes_b != codes_a[i - 1]).astype(np.int64)
        best = np.empty(n + 1, dtype=np.int64)
        best[0] = i
        # substitution (or free match) against deletion
        np.minimum(previous[:-1] + mismatch, previous[1:] + 1, out=best[1:])
        # insertions chain left to right: row[j] = min_k<=j(best[k] + j - k)
        current = np.minimum.accumulate(best - offsets) + offsets
        table[i] = current
        previous = current
    return table


def matrix_distance(a: str, b: str, fast_mode: bool = False) -> int:
    """Edit distance read from the bottom-right cell of :func:`distance_matrix`."""

    return int(distance_matrix(a, b, fast_mode)[-1, -1])
