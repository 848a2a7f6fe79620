from __future__ import annotations

import warnings
from typing import Any

from . import solvers as _solvers
from .cache_matrix import MatrixCacheProtocol
from .runtime import runtime as _runtime
from .warnings import CachedInverseNotice

CACHE_HIT_MESSAGE = "Retrieving cached inverse."


def cache_solve(
    cache: MatrixCacheProtocol,
    quiet: bool | None = None,
    *,
    method: str | _solvers.Solver | None = None,
    **solver_options: Any,
) -> Any:
    """Compute or retrieve the cached inverse held by `cache`.

    On a cache hit the stored inverse is returned as-is and, unless `quiet`,
    a CachedInverseNotice is emitted. On a miss the current matrix is inverted
    with the selected solver (extra keyword arguments are passed through
    verbatim), stored with ``set_inverse`` and returned. Failures propagate and
    leave the cache untouched.

    Args:
        cache: Object exposing ``get``, ``get_inverse`` and ``set_inverse``.
        quiet: Suppress the cache-hit notice. ``None`` uses CACHEMATRIX_QUIET.
        method: Solver name or callable. ``None`` uses CACHEMATRIX_SOLVER.
        **solver_options: Forwarded to the solver.

    Raises:
        TypeError: If `cache` does not provide the cache interface.
        NotInvertibleError: If the matrix is singular.
        InvalidShapeError: If the solver output does not match the matrix shape.
    """

    if not isinstance(cache, MatrixCacheProtocol):
        raise TypeError(
            f"cache_solve expects a CacheMatrix-like object, got {type(cache).__name__}"
        )

    cached = cache.get_inverse()
    if cached is not None:
        if not _runtime.resolve_quiet(quiet):
            warnings.warn(CACHE_HIT_MESSAGE, CachedInverseNotice, stacklevel=2)
        return cached

    solver = _solvers.resolve_solver(method, default=_runtime.default_solver())
    matrix = cache.get()
    inverse = _solvers.invert(matrix, solver, **solver_options)
    cache.set_inverse(inverse)
    return cache.get_inverse()
