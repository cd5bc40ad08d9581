from __future__ import annotations

"""Binary output codes ("colorings") for AdaBoost.OC.

A coloring assigns every class to -1 or +1. A coloring and its full sign
complement describe the same partition and score identically, so only the
canonical half (class 0 colored -1) is ever enumerated.

The score of a coloring under a C x C weight matrix W is the total weight
W[a, b] over ordered class pairs that receive different colors.
"""

import itertools
import logging
import warnings
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

import numpy as np
from joblib import Parallel, delayed
from numpy.random import Generator

logger = logging.getLogger(__name__)

ScoreFn = Callable[[np.ndarray, np.ndarray], float]


def coloring_score(w: np.ndarray, coloring: np.ndarray) -> float:
    """Sum of w[a, b] over class pairs (a, b) with coloring[a] != coloring[b]."""
    col = np.asarray(coloring)
    differs = col[:, None] != col[None, :]
    return float(np.sum(np.asarray(w, dtype=float)[differs]))


def iter_canonical_colorings(n_classes: int) -> Iterator[np.ndarray]:
    """
    Yield the 2**(C-1) canonical colorings: class 0 fixed to -1, every other
    class an independent binary choice.

    +1 is tried before -1 for each free class, so the first coloring yielded
    is [-1, +1, +1, ...] and the trivial all -1 coloring comes last.
    """
    n_classes = int(n_classes)
    if n_classes < 2:
        raise ValueError(f"colorings need at least 2 classes; got {n_classes}")
    for rest in itertools.product((1, -1), repeat=n_classes - 1):
        yield np.array((-1,) + rest, dtype=int)


def canonicalize(coloring: np.ndarray) -> np.ndarray:
    """Flip signs if needed so that class 0 is colored -1."""
    col = np.asarray(coloring, dtype=int)
    return -col if col[0] > 0 else col.copy()


@dataclass(frozen=True)
class ColoringSearchResult:
    coloring: np.ndarray
    score: float
    n_evaluated: int


@dataclass
class ExhaustiveColoringSearch:
    """Score every canonical partition; first-seen wins ties."""

    score_fn: ScoreFn = coloring_score
    n_jobs: Optional[int] = None

    def search(self, w: np.ndarray) -> ColoringSearchResult:
        w = np.asarray(w, dtype=float)
        candidates = list(iter_canonical_colorings(w.shape[0]))

        if self.n_jobs is None or self.n_jobs == 1:
            scores = [self.score_fn(w, col) for col in candidates]
        else:
            scores = Parallel(n_jobs=self.n_jobs, prefer="threads")(
                delayed(self.score_fn)(w, col) for col in candidates
            )

        best = -np.inf
        ibest = 0
        for i, s in enumerate(scores):
            if s > best:
                best = s
                ibest = i
        return ColoringSearchResult(
            coloring=candidates[ibest].copy(),
            score=float(best),
            n_evaluated=len(candidates),
        )


@dataclass
class RandomizedColoringSearch:
    """
    Hill-climb from `n_restarts` random nontrivial partitions.

    Each climb repeatedly applies the single-class flip that most improves the
    score until no flip helps. Meant for class counts where 2**(C-1) is too
    many partitions to enumerate.
    """

    rng: Generator = field(default_factory=np.random.default_rng)
    n_restarts: int = 32
    score_fn: ScoreFn = coloring_score

    def _random_start(self, n_classes: int) -> np.ndarray:
        while True:
            col = self.rng.choice(np.array([-1, 1]), size=n_classes)
            if np.any(col != col[0]):
                return canonicalize(col)

    def search(self, w: np.ndarray) -> ColoringSearchResult:
        w = np.asarray(w, dtype=float)
        C = w.shape[0]
        if C < 2:
            raise ValueError(f"colorings need at least 2 classes; got {C}")

        n_evaluated = 0
        best_col: Optional[np.ndarray] = None
        best = -np.inf

        for _ in range(max(1, int(self.n_restarts))):
            col = self._random_start(C)
            score = self.score_fn(w, col)
            n_evaluated += 1
            improved = True
            while improved:
                improved = False
                flip_best, flip_score = None, score
                for k in range(C):
                    trial = col.copy()
                    trial[k] = -trial[k]
                    if np.all(trial == trial[0]):
                        continue
                    s = self.score_fn(w, trial)
                    n_evaluated += 1
                    if s > flip_score:
                        flip_best, flip_score = trial, s
                if flip_best is not None:
                    col, score = canonicalize(flip_best), flip_score
                    improved = True
            if score > best:
                best, best_col = score, col

        return ColoringSearchResult(coloring=best_col, score=float(best), n_evaluated=n_evaluated)


@dataclass
class AutoColoringSearch:
    """Exhaustive up to `max_exhaustive_classes`, randomized beyond."""

    exhaustive: ExhaustiveColoringSearch
    randomized: RandomizedColoringSearch
    max_exhaustive_classes: int = 10

    def search(self, w: np.ndarray) -> ColoringSearchResult:
        C = np.asarray(w).shape[0]
        if C <= self.max_exhaustive_classes:
            return self.exhaustive.search(w)
        logger.debug("coloring: %d classes exceed exhaustive limit %d; using random restarts",
                     C, self.max_exhaustive_classes)
        return self.randomized.search(w)


def make_coloring_search(
    strategy: str,
    *,
    rng: Optional[Generator] = None,
    n_restarts: int = 32,
    max_exhaustive_classes: int = 10,
    n_classes: Optional[int] = None,
    n_jobs: Optional[int] = None,
):
    """Build the search object for a configured strategy name."""
    exhaustive = ExhaustiveColoringSearch(n_jobs=n_jobs)
    randomized = RandomizedColoringSearch(
        rng=rng if rng is not None else np.random.default_rng(),
        n_restarts=n_restarts,
    )

    if strategy == "exhaustive":
        if n_classes is not None and n_classes > max_exhaustive_classes:
            warnings.warn(
                f"Exhaustive coloring search over {n_classes} classes scores 2**{n_classes - 1} "
                f"partitions per member. Continuing with exhaustive search as configured.",
                UserWarning,
            )
        return exhaustive
    if strategy == "random":
        return randomized
    if strategy == "auto":
        return AutoColoringSearch(
            exhaustive=exhaustive,
            randomized=randomized,
            max_exhaustive_classes=max_exhaustive_classes,
        )
    raise ValueError(f"Unknown coloring strategy: {strategy!r}")
