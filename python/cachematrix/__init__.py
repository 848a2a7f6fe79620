"""Memoized matrix inversion.

``make_cache_matrix`` wraps a square matrix; ``cache_solve`` returns its
inverse, computing it with NumPy on the first call and serving the cached
value until the matrix is replaced with ``CacheMatrix.set``.
"""
from __future__ import annotations

import warnings as _warnings

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from ._internal import formatting as _formatting
from ._internal.runtime import runtime as _runtime
from ._internal.cache_matrix import CacheMatrix, MatrixCacheProtocol, make_cache_matrix
from ._internal.linalg_cache import CACHE_HIT_MESSAGE, cache_solve
from ._internal.solvers import available_solvers, get_solver, register_solver
from ._internal.errors import CacheMatrixError, InvalidShapeError, NotInvertibleError
from ._internal.warnings import CacheMatrixWarning, CachedInverseNotice

# Report every cache hit. Appended, so user filters take precedence.
_warnings.simplefilter("always", CachedInverseNotice, append=True)


def set_print_edge_items(edge_items: int) -> None:
    """Set how many leading/trailing rows and columns ``str()`` shows."""
    _formatting.configure(edge_items=edge_items)


def reload_config() -> None:
    """Re-read CACHEMATRIX_* environment variables on next use."""
    _runtime.reset()


__all__ = [
    "CacheMatrix",
    "MatrixCacheProtocol",
    "make_cache_matrix",
    "cache_solve",
    "CACHE_HIT_MESSAGE",
    "register_solver",
    "get_solver",
    "available_solvers",
    "set_print_edge_items",
    "reload_config",
    "CacheMatrixError",
    "InvalidShapeError",
    "NotInvertibleError",
    "CacheMatrixWarning",
    "CachedInverseNotice",
]
