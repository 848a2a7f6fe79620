"""Exception taxonomy for cachematrix.

Each error also subclasses the builtin (or NumPy) exception that code outside
this package would already be catching for the same condition.
"""
from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for all cachematrix errors."""


class InvalidShapeError(CacheMatrixError, ValueError):
    """Matrix input is not a non-empty, square, 2D numeric structure."""


class NotInvertibleError(CacheMatrixError, np.linalg.LinAlgError):
    """The inversion primitive could not produce an inverse."""
