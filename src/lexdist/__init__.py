"""lexdist: Levenshtein edit distance over characters or UTF-8 bytes."""
from importlib.metadata import version, PackageNotFoundError

from .engine import compute_distance, levenshtein, prepare_sequences
from .matrix import distance_matrix, matrix_distance

try:
    __version__ = version("lexdist")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "compute_distance",
    "distance_matrix",
    "levenshtein",
    "matrix_distance",
    "prepare_sequences",
]
