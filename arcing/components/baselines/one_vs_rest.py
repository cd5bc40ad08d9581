from __future__ import annotations

from typing import List, Optional

import numpy as np

from arcing.components.interfaces import BaseLearner, LearnerFactory
from arcing.components.ensembles.slots import SlotJob, train_slots
from arcing.core.numeric import clip_unit, first_argmax
from arcing.core.shapes import coerce_input_vector
from arcing.core.training_set import TrainingSet


class OneVsRestModel:
    """
    Reference model: a single learner per class, trained once on the whole set.

    This is the yardstick the resampling methods are compared against. Class
    prediction is the argmax of raw outputs; numeric prediction is the
    per-class output clipped to [-1, 1].
    """

    kind = "reference"

    def __init__(self, learner_factory: LearnerFactory, *, n_jobs: Optional[int] = None):
        self.learner_factory = learner_factory
        self.n_jobs = n_jobs
        self.n_classes = 0
        self.n_inputs = 0
        self.slots: List[BaseLearner] = []

    @property
    def n_members(self) -> int:
        return 1 if self.slots else 0

    def construct(self, training_set: TrainingSet) -> "OneVsRestModel":
        C = training_set.n_classes
        self.n_classes = C
        self.n_inputs = training_set.n_inputs
        self.slots = [self.learner_factory() for _ in range(C)]
        jobs = [
            SlotJob(learner=self.slots[c], inputs=training_set.inputs, targets=training_set.targets[:, c])
            for c in range(C)
        ]
        train_slots(jobs, n_jobs=self.n_jobs)
        return self

    def _raw(self, inputs) -> np.ndarray:
        x = coerce_input_vector(inputs, n_inputs=self.n_inputs)
        return np.array([float(s.predict(x)) for s in self.slots], dtype=float)

    def numeric_predict(self, inputs) -> np.ndarray:
        return clip_unit(self._raw(inputs))

    def class_predict(self, inputs) -> int:
        return first_argmax(self._raw(inputs))
