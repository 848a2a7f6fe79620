from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np

from .coercion import coerce_square_matrix, read_only_view
from .formatting import MatrixMixin


@runtime_checkable
class MatrixCacheProtocol(Protocol):
    """What cache_solve needs from a cache holder."""

    def get(self) -> Any: ...

    def get_inverse(self) -> Any: ...

    def set_inverse(self, value: Any) -> None: ...


class CacheMatrix(MatrixMixin):
    """Hold one square matrix and at most one cached inverse for it.

    The matrix is stored as a read-only copy of the input. Replacing it with
    ``set`` always drops the cached inverse, even when the new matrix equals
    the old one. The inverse slot is filled by ``cache_solve`` through
    ``set_inverse``; nothing here checks that the stored value is correct.
    """

    def __init__(self, initial: Any) -> None:
        self._matrix: np.ndarray = coerce_square_matrix(initial)
        self._inverse: Any | None = None

    def set(self, new_matrix: Any) -> None:
        matrix = coerce_square_matrix(new_matrix)
        self._matrix = matrix
        self._inverse = None

    def get(self) -> np.ndarray:
        return self._matrix

    def set_inverse(self, value: Any) -> None:
        self._inverse = read_only_view(value)

    def get_inverse(self) -> Any | None:
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._matrix.shape
        return int(rows), int(cols)

    def size(self) -> int:
        return int(self._matrix.shape[0])


def make_cache_matrix(initial: Any) -> CacheMatrix:
    """Build a CacheMatrix holding `initial` with no cached inverse.

    Args:
        initial: A square 2D NumPy array or nested sequence of numbers.

    Returns:
        A new CacheMatrix.

    Raises:
        InvalidShapeError: If `initial` is empty, not 2D, not square or not numeric.
    """
    return CacheMatrix(initial)
