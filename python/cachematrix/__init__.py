"""Memoized matrix inversion.

A `MatrixCache` holds a matrix and, once computed, its inverse.
`cached_inverse` returns the stored inverse when there is one and otherwise
computes, stores and returns it. Replacing the matrix clears the inverse.
"""
from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version as _dist_version

    __version__ = _dist_version("cachematrix")
except PackageNotFoundError:
    __version__ = "unknown"

from typing import Any, Callable

from ._internal import formatting as _formatting
from ._internal import linalg_cache as _linalg_cache
from ._internal import observability as _observability
from ._internal.errors import NotInvertibleError
from ._internal.linalg_cache import solve_inverse
from ._internal.matrix_cache import MatrixCache, make_cache_matrix

_formatting.configure(edge_items=4)


def cached_inverse(cache: Any, *, solver: Callable[[Any], Any] | None = None) -> Any:
    """
    Return the inverse of the matrix held by `cache`.

    The first call computes the inverse and stores it on the cache; later
    calls return the stored object until `cache.set_matrix` replaces the
    matrix.

    Args:
        cache: A MatrixCache, or any object with get_matrix/get_inverse/set_inverse.
        solver: Optional replacement for `solve_inverse`, used only on a miss.

    Returns:
        The (possibly cached) inverse matrix.

    Raises:
        NotInvertibleError: If the matrix is empty, not square or singular.
    """
    return _linalg_cache.cached_inverse(cache, solver=solver)


cache_solve = cached_inverse


def last_inverse_trace(outcome: str | None = None) -> dict[str, Any] | None:
    """Return the latest inverse trace record, optionally for one outcome ("hit", "miss", "error")."""
    return _observability.default_instance().last(outcome)


def inverse_traces() -> list[dict[str, Any]]:
    return _observability.default_instance().records()


def inverse_stats() -> dict[str, int]:
    """Return hit/miss/error counts since the last clear."""
    return _observability.default_instance().stats()


def clear_inverse_traces() -> None:
    _observability.default_instance().clear()


def set_inverse_tracing(enabled: bool) -> bool:
    return _observability.default_instance().set_enabled(enabled)


def is_inverse_tracing() -> bool:
    return _observability.default_instance().is_enabled()


def set_print_edge_items(n: int) -> None:
    """Set how many leading/trailing rows and columns `str(cache)` shows."""
    _formatting.configure(edge_items=n)


def get_print_edge_items() -> int:
    return _formatting.edge_items()


__all__ = [
    "MatrixCache",
    "make_cache_matrix",
    "cached_inverse",
    "cache_solve",
    "solve_inverse",
    "NotInvertibleError",
    "last_inverse_trace",
    "inverse_traces",
    "inverse_stats",
    "clear_inverse_traces",
    "set_inverse_tracing",
    "is_inverse_tracing",
    "set_print_edge_items",
    "get_print_edge_items",
]
