"""
Shared learners and data for the arcing test-suite.

The scripted learners below make boosting outcomes exact: a memorizing
learner is perfect on its own training cases, a contrary learner is wrong on
every one of them.
"""

import numpy as np
import pytest

from arcing.core.training_set import TrainingSet
from arcing.extras.datasets.synthetic import make_cluster_dataset


class MemorizingLearner:
    """Returns the target seen for an input; `sign` = -1 flips every answer."""

    def __init__(self, sign: float = 1.0):
        self.sign = float(sign)
        self.reset()

    def reset(self):
        self.table = {}
        self.importances = []
        self.trained = False

    def add_case(self, inputs, target, importance=1.0):
        self.table[tuple(np.asarray(inputs, dtype=float).ravel())] = float(target)
        self.importances.append(float(importance))

    def train(self):
        self.trained = True

    def predict(self, inputs):
        key = tuple(np.asarray(inputs, dtype=float).ravel())
        return self.sign * self.table.get(key, 0.0)


class ConstantLearner:
    def __init__(self, value: float):
        self.value = float(value)

    def reset(self):
        pass

    def add_case(self, inputs, target, importance=1.0):
        pass

    def train(self):
        pass

    def predict(self, inputs):
        return self.value


class FailingLearner(ConstantLearner):
    def __init__(self):
        super().__init__(0.0)

    def train(self):
        raise RuntimeError("boom")


@pytest.fixture
def tiny_set():
    """Four distinct cases, two classes."""
    X = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    return TrainingSet.from_class_labels(X, [0, 1, 0, 1])


@pytest.fixture
def three_class_set():
    X = np.array([[float(i), float(i % 3)] for i in range(9)])
    return TrainingSet.from_class_labels(X, [i % 3 for i in range(9)])


@pytest.fixture
def overlapping_set():
    """Four heavily overlapping classes; no linear slot can fit it perfectly."""
    return make_cluster_dataset(60, 4, 0.2, rng=np.random.default_rng(7))


@pytest.fixture
def separated_set():
    return make_cluster_dataset(60, 3, 1.0, rng=np.random.default_rng(3))
