from __future__ import annotations

from typing import Any

import numpy as np

from . import formatting as _formatting
from .coercion import matrix_shape
from .linalg_cache import cached_inverse


def _placeholder() -> np.ndarray:
    return np.empty((0, 0), dtype=np.float64)


class MatrixCache:
    """A matrix together with its lazily computed inverse.

    The cache holds exactly one matrix and at most one inverse. Replacing
    the matrix with `set_matrix` drops the inverse; nothing else does.
    Nothing is validated: `set_inverse` accepts any object, and a matrix
    mutated in place keeps whatever inverse was stored before.

    Intended for sequential use from a single thread.
    """

    def __init__(self, matrix: Any = None):
        self._matrix = _placeholder() if matrix is None else matrix
        self._inverse: Any = None
        self._epoch = 0

    def set_matrix(self, matrix: Any) -> None:
        self._matrix = matrix
        self._inverse = None
        self._epoch += 1

    def get_matrix(self) -> Any:
        return self._matrix

    def set_inverse(self, inverse: Any) -> None:
        self._inverse = inverse

    def get_inverse(self) -> Any:
        """Return the cached inverse, or None if absent."""
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def epoch(self) -> int:
        """Number of times `set_matrix` has replaced the matrix."""
        return self._epoch

    @property
    def shape(self) -> tuple[int, int] | None:
        return matrix_shape(self._matrix)

    def invert(self) -> Any:
        return cached_inverse(self)

    def __str__(self) -> str:
        return _formatting.cache_str(self)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} shape={self.shape} epoch={self._epoch} cached={self.has_inverse}>"


def make_cache_matrix(x: Any = None) -> MatrixCache:
    """Create a MatrixCache holding `x` (an empty placeholder if omitted)."""
    return MatrixCache(x)
