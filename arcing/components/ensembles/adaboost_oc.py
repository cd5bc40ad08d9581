from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional

import numpy as np

from arcing.components.interfaces import BaseLearner, LearnerFactory
from arcing.components.ensembles.coloring import ExhaustiveColoringSearch
from arcing.components.ensembles.slots import SlotJob, predict_rows, train_slots
from arcing.core.errors import EnsembleConstructionError
from arcing.core.numeric import (
    CLASS_SENTINEL,
    clamp_probability,
    first_argmax,
    normalize_distribution,
    sign_of,
)
from arcing.core.shapes import coerce_input_vector
from arcing.core.training_set import TrainingSet

logger = logging.getLogger(__name__)

# Called after every error-distribution update with (member index, copy of the distribution)
UpdateCallback = Callable[[int, np.ndarray], None]


def agreement_counts(coloring: np.ndarray, true_classes: np.ndarray, h: np.ndarray) -> np.ndarray:
    """
    (N, C) count k in {0, 1, 2} per (case, class):
    one for the true class's color disagreeing with h, plus one for the
    class's color agreeing with h.
    """
    true_miss = (coloring[true_classes] != h).astype(int)
    class_hit = (coloring[None, :] == h[:, None]).astype(int)
    return true_miss[:, None] + class_hit


class AdaBoostOC:
    """
    Multiclass boosting through binary output codes (AdaBoost.OC).

    Every member is a single binary slot trained on a two-group partition of
    the classes (a coloring) and only the sign of its output is used. Colors
    are -1/+1 rather than 0/1, since many learners train better on symmetric
    targets; the arithmetic is the same.

    State is an error distribution over (case, class) pairs that never puts
    weight on a case's own class. Each round:
      1. W[a, b] = error weight at class a of cases whose true class is b
      2. pick the coloring that separates the most W weight
      3. train on cases weighted by the error mass across the cut
      4. reweight (case, class) pairs by exp(alpha * k) and renormalize
    """

    kind = "adaboost_oc"

    def __init__(
        self,
        learner_factory: LearnerFactory,
        *,
        coloring_search=None,
        n_jobs: Optional[int] = None,
        update_callback: Optional[UpdateCallback] = None,
    ):
        self.learner_factory = learner_factory
        self.coloring_search = coloring_search if coloring_search is not None else ExhaustiveColoringSearch()
        self.n_jobs = n_jobs
        self.update_callback = update_callback

        self.n_requested = 0
        self.n_classes = 0
        self.n_inputs = 0
        self.stop_reason = "completed"
        self.slots: List[BaseLearner] = []
        self.alphas: List[float] = []
        self.colorings: List[np.ndarray] = []

    @property
    def n_members(self) -> int:
        return len(self.alphas)

    @staticmethod
    def weight_matrix(err_dist: np.ndarray, true_classes: np.ndarray) -> np.ndarray:
        """W[a, b] = sum of err_dist[i, a] over cases i of true class b."""
        C = err_dist.shape[1]
        onehot = np.zeros((err_dist.shape[0], C), dtype=float)
        onehot[np.arange(err_dist.shape[0]), true_classes] = 1.0
        return err_dist.T @ onehot

    def construct(self, training_set: TrainingSet, n_models: int) -> "AdaBoostOC":
        n_models = int(n_models)
        if n_models < 0:
            raise ValueError(f"n_models must be >= 0; got {n_models}")

        n = training_set.n_cases
        C = training_set.n_classes
        inputs = training_set.inputs
        tclass = training_set.true_classes
        rows = np.arange(n)

        self.n_requested = n_models
        self.n_classes = C
        self.n_inputs = training_set.n_inputs
        self.stop_reason = "completed"
        self.slots = []
        self.alphas = []
        self.colorings = []

        err_dist = np.full((n, C), 1.0 / (n * (C - 1)), dtype=float)
        err_dist[rows, tclass] = 0.0

        for imodel in range(n_models):
            w = self.weight_matrix(err_dist, tclass)
            found = self.coloring_search.search(w)
            coloring = np.asarray(found.coloring, dtype=int).copy()
            coloring.setflags(write=False)

            # Casewise selection weight: error mass on classes across the cut
            across = coloring[None, :] != coloring[tclass][:, None]
            case_dist = normalize_distribution(np.sum(err_dist * across, axis=1))

            learner = self.learner_factory()
            job = SlotJob(
                learner=learner,
                inputs=inputs,
                targets=coloring[tclass].astype(float),
                importance=case_dist,
            )
            try:
                train_slots([job], n_jobs=self.n_jobs)
                raw = predict_rows(learner, inputs)
            except Exception as e:
                raise EnsembleConstructionError(self.kind, imodel, repr(e)) from e
            h = np.where(raw > 0.0, 1, -1)

            k = agreement_counts(coloring, tclass, h)
            err = clamp_probability(0.5 * float(np.sum(k * err_dist)))
            alpha = 0.5 * math.log((1.0 - err) / err)

            self.slots.append(learner)
            self.alphas.append(alpha)
            self.colorings.append(coloring)

            err_dist *= np.exp(alpha * k)
            normalize_distribution(err_dist)

            logger.debug(
                "adaboost_oc: member %d coloring=%s score=%.6g err=%.6g alpha=%.6g (%d partitions scored)",
                imodel, coloring.tolist(), found.score, err, alpha, found.n_evaluated,
            )
            if self.update_callback is not None:
                self.update_callback(imodel, err_dist.copy())

        return self

    fit = construct

    def decision_scores(self, inputs) -> np.ndarray:
        """Per-class sum of alphas of members whose predicted color matches the class."""
        x = coerce_input_vector(inputs, n_inputs=self.n_inputs)
        scores = np.zeros(self.n_classes, dtype=float)
        for alpha, coloring, learner in zip(self.alphas, self.colorings, self.slots):
            hh = sign_of(learner.predict(x))
            scores[coloring == hh] += alpha
        return scores

    def class_predict(self, inputs) -> int:
        if self.n_members == 0:
            return CLASS_SENTINEL
        return first_argmax(self.decision_scores(inputs))
