from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Callable, Optional

import numpy as np

from arcing.core.training_set import TrainingSet


class BaseLearner(Protocol):
    """Capability set every trainable model must offer to the ensemble layer.

    A learner has a single scalar output. The ensemble layer clips that output
    to [-1, 1] wherever it consumes it, so the natural range need not be bounded,
    though learners whose natural range is [-1, 1] work best.
    """

    def reset(self) -> None:
        """Discard any training data so the instance can be reused."""
        ...

    def add_case(self, inputs: np.ndarray, target: float, importance: float = 1.0) -> None:
        """Append one training example. Not valid after train() without reset()."""
        ...

    def train(self) -> None:
        """Fit to every case added since the last reset()."""
        ...

    def predict(self, inputs: np.ndarray) -> float:
        """Return an unbounded real-valued prediction for one input vector."""
        ...


# Called with no arguments; must return a fresh, independent learner each time.
LearnerFactory = Callable[[], BaseLearner]


@dataclass(frozen=True)
class LineSearchResult:
    x: float
    fx: float


class LineSearch(Protocol):
    def minimize(
        self,
        objective: Callable[[float], float],
        low: float,
        high: float,
    ) -> LineSearchResult:
        """Return an approximate minimizer of `objective` over [low, high]."""
        ...


class Ensemble(Protocol):
    """A trained ensemble as seen by drivers."""

    n_members: int

    def class_predict(self, inputs: np.ndarray) -> int:
        """Return the predicted class index, or -1 when no member was trained."""
        ...


class EnsembleBuilder(Protocol):
    """
    Strategy that turns a config into a trained ensemble.

    - `make_ensemble()` returns an unconstructed builder (Bagging/AdaBoostMH/AdaBoostOC).
    - `fit()` constructs it on the provided training set and returns it.
    """

    def make_ensemble(
        self,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[object] = None,
        stream: str = "ensemble",
    ) -> Ensemble:
        ...

    def fit(
        self,
        training_set: TrainingSet,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[object] = None,
        stream: str = "ensemble",
    ) -> Ensemble:
        ...
