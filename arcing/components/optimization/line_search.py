from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np
from scipy.optimize import minimize_scalar

from arcing.components.interfaces import LineSearch, LineSearchResult

logger = logging.getLogger(__name__)


@dataclass
class BracketRefineLineSearch(LineSearch):
    """
    Bounded one-dimensional minimizer: coarse grid to bracket, then refine.

    The coarse pass evaluates `n_grid` equally spaced points over [low, high].
    The grid neighbours of the best point (or the best point itself when it
    is an endpoint) form a bracket that is refined with SciPy's bounded Brent
    search. The better of the refined point and the grid point is returned.

    Deterministic for a fixed objective and interval; holds no state between
    calls, so one instance can be shared by independent builders.
    """

    n_grid: int = 3
    max_iter: int = 20
    xtol: float = 1e-6

    def minimize(
        self,
        objective: Callable[[float], float],
        low: float,
        high: float,
    ) -> LineSearchResult:
        low, high = float(low), float(high)
        if not low < high:
            raise ValueError(f"line search needs low < high; got [{low}, {high}]")

        grid = np.linspace(low, high, max(int(self.n_grid), 3))
        values = np.array([float(objective(float(x))) for x in grid])
        ibest = int(np.argmin(values))
        x_grid, f_grid = float(grid[ibest]), float(values[ibest])

        # Bracket is the best grid point and its neighbours, clipped to the interval
        x1 = float(grid[max(ibest - 1, 0)])
        x3 = float(grid[min(ibest + 1, grid.size - 1)])

        res = minimize_scalar(
            objective,
            bounds=(x1, x3),
            method="bounded",
            options={"xatol": self.xtol, "maxiter": int(self.max_iter)},
        )
        x_ref, f_ref = float(res.x), float(res.fun)
        logger.debug(
            "line search: grid x=%.6g f=%.6g, refined x=%.6g f=%.6g (nfev=%s)",
            x_grid, f_grid, x_ref, f_ref, getattr(res, "nfev", None),
        )

        if np.isfinite(f_ref) and f_ref <= f_grid:
            return LineSearchResult(x=x_ref, fx=f_ref)
        return LineSearchResult(x=x_grid, fx=f_grid)
