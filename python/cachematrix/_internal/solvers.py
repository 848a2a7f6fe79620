from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .errors import InvalidShapeError, NotInvertibleError

Solver = Callable[..., Any]


def _solve_against_identity(matrix: Any, **options: Any) -> Any:
    identity = np.eye(matrix.shape[0], dtype=np.result_type(matrix.dtype, np.float64))
    return np.linalg.solve(matrix, identity, **options)


_SOLVERS: dict[str, Solver] = {
    "inv": np.linalg.inv,
    "solve": _solve_against_identity,
    "pinv": np.linalg.pinv,
}


def register_solver(name: str, fn: Solver, *, replace: bool = False) -> None:
    """Register an inversion primitive under `name`.

    The callable receives the matrix followed by any solver options passed to
    cache_solve, and must return the inverse or raise.
    """

    if not isinstance(name, str) or not name:
        raise ValueError("Solver name must be a non-empty string")
    if not callable(fn):
        raise TypeError(f"Solver {name!r} must be callable")
    if name in _SOLVERS and not replace:
        raise ValueError(f"Solver {name!r} is already registered (pass replace=True)")
    _SOLVERS[name] = fn


def get_solver(name: str) -> Solver:
    try:
        return _SOLVERS[name]
    except KeyError:
        known = ", ".join(sorted(_SOLVERS))
        raise ValueError(f"Unknown solver {name!r} (available: {known})") from None


def available_solvers() -> tuple[str, ...]:
    return tuple(sorted(_SOLVERS))


def resolve_solver(method: str | Solver | None, *, default: str) -> Solver:
    if method is None:
        return get_solver(default)
    if callable(method):
        return method
    return get_solver(method)


def invert(matrix: Any, solver: Solver, **options: Any) -> Any:
    """Run `solver` on `matrix`, mapping failures to the package taxonomy."""
    try:
        result = solver(matrix, **options)
    except np.linalg.LinAlgError as exc:
        if isinstance(exc, NotInvertibleError):
            raise
        raise NotInvertibleError(f"Matrix is not invertible: {exc}") from exc

    result = np.asarray(result)
    if result.shape != matrix.shape:
        raise InvalidShapeError(
            f"Solver returned shape {result.shape}, expected {matrix.shape}"
        )
    if result.dtype.kind in "fc" and not np.all(np.isfinite(result)):
        raise NotInvertibleError("Matrix is numerically singular (inverse is not finite)")
    return result
