from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

from .errors import InvalidShapeError

# Inexact dtypes numpy.linalg can factor. Integer and bool input is promoted
# to float64 by linalg itself.
_LINALG_INEXACT = frozenset({np.float32, np.float64, np.complex64, np.complex128})


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _check_sequence_rows(candidate: Any) -> None:
    rows = list(candidate)
    if not rows:
        raise InvalidShapeError("Matrix data must not be empty.")
    size = len(rows)
    for row in rows:
        if not (is_sequence_like(row) or isinstance(row, np.ndarray)):
            raise InvalidShapeError("Each matrix row must be a sequence of entries.")
        if len(row) != size:
            raise InvalidShapeError(
                "Matrix data must describe a square matrix (same number of rows and columns)."
            )


def coerce_square_matrix(candidate: Any) -> np.ndarray:
    """Return `candidate` as an owned, read-only, square 2D ndarray.

    Accepts NumPy arrays, anything exposing ``__array__`` and square nested
    sequences. Raises InvalidShapeError for empty, non-2D, non-square or
    non-numeric input.
    """

    if candidate is None or isinstance(candidate, (str, bytes, bytearray)):
        raise InvalidShapeError(
            "Matrix data must be provided as a square nested sequence or a NumPy array."
        )

    if is_sequence_like(candidate):
        _check_sequence_rows(candidate)

    try:
        array = np.array(candidate, copy=True)
    except (TypeError, ValueError) as exc:
        raise InvalidShapeError(f"Matrix data could not be converted to an array: {exc}") from exc

    if array.ndim != 2:
        raise InvalidShapeError(f"Matrix input must be 2D (got ndim={array.ndim}).")
    rows, cols = array.shape
    if rows != cols:
        raise InvalidShapeError(
            f"Matrix input must be square (rows == columns), got shape=({rows}, {cols})."
        )
    if rows == 0:
        raise InvalidShapeError("Matrix data must not be empty.")
    if array.dtype.kind not in "biufc":
        raise InvalidShapeError(f"Matrix entries must be numeric (got dtype={array.dtype}).")
    if array.dtype.type is np.float16:
        array = array.astype(np.float32)
    elif array.dtype.kind in "fc" and array.dtype.type not in _LINALG_INEXACT:
        raise InvalidShapeError(
            f"Matrix dtype {array.dtype} is not supported by numpy.linalg "
            "(use float32, float64, complex64 or complex128)."
        )

    array.setflags(write=False)
    return array


def read_only_view(value: Any) -> Any:
    """Return a non-writeable view of an ndarray; other values pass through.

    The caller's array keeps its own flags.
    """
    if isinstance(value, np.ndarray):
        view = value.view()
        view.setflags(write=False)
        return view
    return value
