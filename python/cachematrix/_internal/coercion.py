from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def matrix_shape(candidate: Any) -> tuple[int, int] | None:
    """Best-effort 2D shape of a matrix-like object, or None."""
    try:
        return int(candidate.rows()), int(candidate.cols())
    except Exception:
        pass

    shape = getattr(candidate, "shape", None)
    if isinstance(shape, tuple):
        if len(shape) == 2:
            return int(shape[0]), int(shape[1])
        return None

    if is_sequence_like(candidate):
        rows = list(candidate)
        if not rows:
            return 0, 0
        if all(is_sequence_like(row) for row in rows):
            cols = len(rows[0])
            if all(len(row) == cols for row in rows):
                return len(rows), cols
    return None


def coerce_accessor_matrix(candidate: Any) -> list[list[Any]] | None:
    rows_attr: Any = getattr(candidate, "rows", None)
    cols_attr: Any = getattr(candidate, "cols", None)
    get_attr: Any = getattr(candidate, "get", None)
    if not (callable(rows_attr) and callable(cols_attr) and callable(get_attr)):
        return None

    n_rows = int(rows_attr())
    n_cols = int(cols_attr())
    out: list[list[Any]] = []
    for i in range(n_rows):
        out.append([get_attr(i, j) for j in range(n_cols)])
    return out


def as_matrix_array(candidate: Any) -> np.ndarray:
    """Return `candidate` as a NumPy array without validating its shape.

    NumPy arrays are returned unchanged; objects exposing `rows()`, `cols()`
    and `get(i, j)` are read element by element; everything else goes
    through `np.asarray`.
    """
    if isinstance(candidate, np.ndarray):
        return candidate

    rows = coerce_accessor_matrix(candidate)
    if rows is not None:
        if not rows:
            return np.empty((0, int(candidate.cols())), dtype=np.float64)
        return np.asarray(rows)

    return np.asarray(candidate)
