from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np
from numpy.random import Generator

from arcing.components.interfaces import BaseLearner, LearnerFactory
from arcing.components.ensembles.slots import SlotJob, train_slots
from arcing.core.errors import EnsembleConstructionError
from arcing.core.numeric import CLASS_SENTINEL, clip_unit, first_argmax
from arcing.core.shapes import coerce_input_vector
from arcing.core.training_set import TrainingSet

logger = logging.getLogger(__name__)


class Bagging:
    """
    Bootstrap aggregation with one slot per (replicate, class).

    Each replicate is trained on its own bootstrap sample: N cases drawn
    uniformly with replacement. The slot for class c learns +1 for cases of
    class c and -1 for every other case.

    Predictions:
      - numeric_predict: per-class mean of clipped slot outputs, in [-1, 1]
      - class_predict: majority vote of per-replicate argmax classes
    """

    kind = "bagging"

    def __init__(
        self,
        learner_factory: LearnerFactory,
        *,
        rng: Optional[Generator] = None,
        n_jobs: Optional[int] = None,
    ):
        self.learner_factory = learner_factory
        self.rng = rng if rng is not None else np.random.default_rng()
        self.n_jobs = n_jobs

        self.n_requested = 0
        self.n_classes = 0
        self.n_inputs = 0
        self.slots: List[List[BaseLearner]] = []

    @property
    def n_members(self) -> int:
        return len(self.slots)

    def construct(self, training_set: TrainingSet, n_replicates: int) -> "Bagging":
        n_replicates = int(n_replicates)
        if n_replicates < 0:
            raise ValueError(f"n_replicates must be >= 0; got {n_replicates}")

        n = training_set.n_cases
        C = training_set.n_classes
        self.n_requested = n_replicates
        self.n_classes = C
        self.n_inputs = training_set.n_inputs
        self.slots = []

        inputs = training_set.inputs
        targets = training_set.targets

        for iboot in range(n_replicates):
            idx = self.rng.integers(0, n, size=n)
            boot_inputs = inputs[idx]
            replicate = [self.learner_factory() for _ in range(C)]
            jobs = [
                SlotJob(learner=replicate[c], inputs=boot_inputs, targets=targets[idx, c])
                for c in range(C)
            ]
            try:
                train_slots(jobs, n_jobs=self.n_jobs)
            except Exception as e:
                raise EnsembleConstructionError(self.kind, iboot, repr(e)) from e
            self.slots.append(replicate)
            logger.debug("bagging: replicate %d trained on %d unique cases", iboot, np.unique(idx).size)

        return self

    fit = construct

    def _raw_outputs(self, x: np.ndarray) -> np.ndarray:
        """(n_members, n_classes) raw slot predictions for one input."""
        out = np.empty((self.n_members, self.n_classes), dtype=float)
        for m, replicate in enumerate(self.slots):
            for c, learner in enumerate(replicate):
                out[m, c] = float(learner.predict(x))
        return out

    def numeric_predict(self, inputs) -> np.ndarray:
        if self.n_members == 0:
            return np.zeros(self.n_classes, dtype=float)
        x = coerce_input_vector(inputs, n_inputs=self.n_inputs)
        return np.mean(clip_unit(self._raw_outputs(x)), axis=0)

    def vote_counts(self, inputs) -> np.ndarray:
        """Number of replicates whose largest slot output is each class."""
        if self.n_classes < 2:
            raise ValueError("class prediction requires at least 2 classes")
        counts = np.zeros(self.n_classes, dtype=int)
        if self.n_members == 0:
            return counts
        x = coerce_input_vector(inputs, n_inputs=self.n_inputs)
        for row in self._raw_outputs(x):
            counts[first_argmax(row)] += 1
        return counts

    def class_predict(self, inputs) -> int:
        if self.n_members == 0:
            return CLASS_SENTINEL
        return first_argmax(self.vote_counts(inputs))
