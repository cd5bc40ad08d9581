from __future__ import annotations

"""Model-slot helpers shared by the ensemble builders.

A slot is one learner owned by one (member, class) pair. Slots of the same
construction step read a frozen distribution and write only themselves, so
they may be trained concurrently; across steps everything stays sequential.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from joblib import Parallel, delayed

from arcing.components.interfaces import BaseLearner


@dataclass
class SlotJob:
    """Everything needed to (re)train one slot.

    `importance` is None for unweighted training (bagging); then the
    two-argument `add_case` form is used so learners without importance
    support still conform.
    """

    learner: BaseLearner
    inputs: np.ndarray
    targets: np.ndarray
    importance: Optional[np.ndarray] = None


def fill_and_train(job: SlotJob) -> BaseLearner:
    learner = job.learner
    learner.reset()
    if job.importance is None:
        for x, t in zip(job.inputs, job.targets):
            learner.add_case(x, float(t))
    else:
        for x, t, w in zip(job.inputs, job.targets, job.importance):
            learner.add_case(x, float(t), float(w))
    learner.train()
    return learner


def train_slots(jobs: Sequence[SlotJob], *, n_jobs: Optional[int] = None) -> None:
    """Train every job's learner; threads when n_jobs asks for more than one worker."""
    if n_jobs is None or n_jobs == 1 or len(jobs) < 2:
        for job in jobs:
            fill_and_train(job)
        return

    Parallel(n_jobs=n_jobs, prefer="threads")(delayed(fill_and_train)(job) for job in jobs)


def predict_rows(learner: BaseLearner, inputs: np.ndarray) -> np.ndarray:
    """Raw (unclipped) prediction for every row of `inputs`."""
    return np.array([float(learner.predict(x)) for x in inputs], dtype=float)
