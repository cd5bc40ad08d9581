from __future__ import annotations

from arcing.contracts.line_search_configs import LineSearchConfig

from arcing.components.interfaces import LineSearch
from arcing.components.optimization.line_search import BracketRefineLineSearch


def make_line_search(cfg: LineSearchConfig) -> LineSearch:
    return BracketRefineLineSearch(n_grid=cfg.n_grid, max_iter=cfg.max_iter, xtol=cfg.xtol)
