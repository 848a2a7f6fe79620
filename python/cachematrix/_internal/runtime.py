from __future__ import annotations

import os


_TRUTHY = frozenset({"1", "true", "yes", "on"})


class Runtime:
    def __init__(
        self,
        *,
        quiet_env_var: str = "CACHEMATRIX_QUIET",
        solver_env_var: str = "CACHEMATRIX_SOLVER",
        default_solver: str = "inv",
    ) -> None:
        self._quiet_env_var = quiet_env_var
        self._solver_env_var = solver_env_var
        self._default_solver = default_solver
        self._quiet_cache: bool | None = None
        self._solver_cache: str | None = None

    def default_quiet(self) -> bool:
        if self._quiet_cache is not None:
            return self._quiet_cache

        env = os.environ.get(self._quiet_env_var)
        quiet = env is not None and env.strip().lower() in _TRUTHY
        self._quiet_cache = quiet
        return quiet

    def default_solver(self) -> str:
        if self._solver_cache is not None:
            return self._solver_cache

        env = os.environ.get(self._solver_env_var)
        name = env.strip() if env and env.strip() else self._default_solver
        self._solver_cache = name
        return name

    def resolve_quiet(self, quiet: bool | None) -> bool:
        if quiet is None:
            return self.default_quiet()
        return bool(quiet)

    def reset(self) -> None:
        """Forget cached environment lookups (tests change the environment)."""
        self._quiet_cache = None
        self._solver_cache = None


runtime = Runtime()
