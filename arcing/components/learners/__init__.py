"""Concrete learners conforming to :class:`arcing.components.interfaces.BaseLearner`."""

from .grnn import GRNNLearner
from .sklearn_learner import SklearnLearner

__all__ = ["GRNNLearner", "SklearnLearner"]
