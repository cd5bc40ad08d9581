from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional

import numpy as np

from arcing.components.interfaces import BaseLearner, LearnerFactory, LineSearch
from arcing.components.ensembles.slots import SlotJob, predict_rows, train_slots
from arcing.components.optimization.line_search import BracketRefineLineSearch
from arcing.core.errors import EnsembleConstructionError
from arcing.core.numeric import CLASS_SENTINEL, clip_unit, first_argmax, normalize_distribution
from arcing.core.shapes import coerce_input_vector
from arcing.core.training_set import TrainingSet

logger = logging.getLogger(__name__)

# Called after every distribution update with (member index, copy of the distribution)
UpdateCallback = Callable[[int, np.ndarray], None]


class AdaBoostMH:
    """
    Confidence-rated multiclass boosting (AdaBoost.MH).

    Each member is one slot per class. The sign of a slot output is its
    verdict for "this class vs the rest" and the magnitude is its confidence.
    Outputs are hard-limited to [-1, 1], which keeps the step-size search on a
    known interval.

    The joint (case, class) distribution starts uniform. After each member the
    step size alpha minimizes sum(dist * exp(-alpha * u)) over [low, high],
    where u is the clipped output times the +/-1 target, and the distribution
    is reweighted by exp(-alpha * u) and renormalized.

    Degenerate members end training early:
      - no negative margin ("perfect"): kept with alpha = 0.5 * ln(N)
      - no positive margin ("worthless"): discarded
    """

    kind = "adaboost_mh"

    def __init__(
        self,
        learner_factory: LearnerFactory,
        *,
        line_search: Optional[LineSearch] = None,
        low: float = -1.0,
        high: float = 1.0,
        n_jobs: Optional[int] = None,
        update_callback: Optional[UpdateCallback] = None,
    ):
        self.learner_factory = learner_factory
        self.line_search = line_search if line_search is not None else BracketRefineLineSearch()
        self.low = float(low)
        self.high = float(high)
        self.n_jobs = n_jobs
        self.update_callback = update_callback

        self.n_requested = 0
        self.n_classes = 0
        self.n_inputs = 0
        self.stop_reason = "completed"
        self.slots: List[List[BaseLearner]] = []
        self.alphas: List[float] = []

    @property
    def n_members(self) -> int:
        return len(self.alphas)

    def construct(self, training_set: TrainingSet, n_models: int) -> "AdaBoostMH":
        n_models = int(n_models)
        if n_models < 0:
            raise ValueError(f"n_models must be >= 0; got {n_models}")

        n = training_set.n_cases
        C = training_set.n_classes
        inputs = training_set.inputs
        targets = training_set.targets

        self.n_requested = n_models
        self.n_classes = C
        self.n_inputs = training_set.n_inputs
        self.stop_reason = "completed"
        self.slots = []
        self.alphas = []

        dist = np.full((n, C), 1.0 / (n * C), dtype=float)

        for imodel in range(n_models):
            member = [self.learner_factory() for _ in range(C)]
            jobs = [
                SlotJob(learner=member[c], inputs=inputs, targets=targets[:, c], importance=dist[:, c].copy())
                for c in range(C)
            ]
            try:
                train_slots(jobs, n_jobs=self.n_jobs)
                h = np.column_stack([clip_unit(predict_rows(member[c], inputs)) for c in range(C)])
            except Exception as e:
                raise EnsembleConstructionError(self.kind, imodel, repr(e)) from e

            # Margin: positive when the slot's verdict agrees with the target
            u = h * targets
            n_good = int(np.count_nonzero(u > 0.0))
            n_bad = int(np.count_nonzero(u < 0.0))

            if n_bad == 0:
                self.slots.append(member)
                self.alphas.append(0.5 * math.log(n))
                self.stop_reason = "perfect"
                logger.info(
                    "adaboost_mh: member %d never fails; stopping with %d member(s)",
                    imodel, self.n_members,
                )
                break

            if n_good == 0:
                self.stop_reason = "worthless"
                logger.info(
                    "adaboost_mh: member %d never succeeds; discarded, stopping with %d member(s)",
                    imodel, self.n_members,
                )
                break

            alpha = self._optimal_alpha(dist, u, imodel)
            self.slots.append(member)
            self.alphas.append(alpha)

            dist *= np.exp(-alpha * u)
            normalize_distribution(dist)

            logger.debug(
                "adaboost_mh: member %d alpha=%.6g good=%d bad=%d",
                imodel, alpha, n_good, n_bad,
            )
            if self.update_callback is not None:
                self.update_callback(imodel, dist.copy())

        return self

    fit = construct

    def _optimal_alpha(self, dist: np.ndarray, u: np.ndarray, imodel: int) -> float:
        d = dist.ravel()
        uu = u.ravel()

        def criterion(trial_alpha: float) -> float:
            return float(np.dot(d, np.exp(-trial_alpha * uu)))

        try:
            result = self.line_search.minimize(criterion, self.low, self.high)
        except Exception as e:
            raise EnsembleConstructionError(self.kind, imodel, f"line search failed: {e!r}") from e
        return float(result.x)

    def decision_scores(self, inputs) -> np.ndarray:
        """Per-class alpha-weighted sum of clipped slot outputs."""
        x = coerce_input_vector(inputs, n_inputs=self.n_inputs)
        scores = np.zeros(self.n_classes, dtype=float)
        for alpha, member in zip(self.alphas, self.slots):
            for c, learner in enumerate(member):
                scores[c] += alpha * clip_unit(learner.predict(x))
        return scores

    def class_predict(self, inputs) -> int:
        if self.n_members == 0:
            return CLASS_SENTINEL
        return first_argmax(self.decision_scores(inputs))
