from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np

from . import observability as _observability
from .coercion import as_matrix_array
from .errors import NotInvertibleError


def solve_inverse(matrix: Any) -> np.ndarray:
    """Compute the inverse of `matrix` without touching any cache.

    Raises NotInvertibleError for empty, non-2D, non-square or singular
    input. Ragged or non-numeric data is left to NumPy.
    """
    array = as_matrix_array(matrix)
    shape = tuple(int(d) for d in array.shape)

    if array.ndim != 2:
        raise NotInvertibleError(f"expected a 2D matrix, got {array.ndim}D input", shape=shape)
    if array.size == 0:
        reason = "no matrix has been set" if shape == (0, 0) else "matrix is empty"
        raise NotInvertibleError(reason, shape=shape)
    if shape[0] != shape[1]:
        raise NotInvertibleError("matrix is not square", shape=shape)

    try:
        inverse = np.linalg.inv(array)
    except np.linalg.LinAlgError as exc:
        raise NotInvertibleError(str(exc).lower() or "singular matrix", shape=shape) from exc

    # LU only fails on an exact zero pivot; reject anything whose 1-norm
    # reciprocal condition number is below machine precision.
    with np.errstate(all="ignore"):
        cond = float(np.linalg.norm(array, 1) * np.linalg.norm(inverse, 1))
    eps = float(np.finfo(inverse.dtype).eps)
    rcond = 1.0 / cond if np.isfinite(cond) and cond > 0.0 else 0.0
    if rcond < eps:
        raise NotInvertibleError(f"matrix is computationally singular (rcond={rcond:.3g})", shape=shape)
    return inverse


def cached_inverse(
    cache: Any,
    *,
    solver: Callable[[Any], Any] | None = None,
    observability: _observability.InverseObservability | None = None,
) -> Any:
    """Return the inverse of the cache's matrix, computing it at most once.

    On a hit the stored inverse is returned as-is and `cache` is not touched.
    On a miss the inverse is computed with `solver` (default `solve_inverse`),
    stored with `cache.set_inverse` and returned. Errors from the solver
    propagate unchanged and leave the cache empty.

    Not thread-safe: the check-compute-store sequence is not atomic, so
    concurrent callers on one cache may compute twice.
    """
    obs = observability if observability is not None else _observability.default_instance()
    started = time.perf_counter()

    inv = cache.get_inverse()
    if inv is not None:
        obs.record(cache, outcome="hit", started=started)
        return inv

    solve = solver if solver is not None else solve_inverse
    try:
        inv = solve(cache.get_matrix())
    except Exception as exc:
        obs.record(cache, outcome="error", started=started, error=exc)
        raise

    cache.set_inverse(inv)
    obs.record(cache, outcome="miss", started=started)
    return inv
