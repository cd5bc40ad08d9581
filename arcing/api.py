"""Public arcing API.

This module is the **stable public surface**. Prefer importing from here
instead of reaching into internal subpackages:

    from arcing.api import TrainingSet, fit_ensemble, run_comparison

The underlying implementations live under :mod:`arcing.use_cases` and
:mod:`arcing.components`.
"""

from __future__ import annotations

from arcing.use_cases.comparison import run_comparison
from arcing.use_cases.ensembles import (
    class_error,
    evaluate_ensemble,
    fit_ensemble,
    numeric_error,
    summarize_ensemble,
)

from arcing.components.ensembles import AdaBoostMH, AdaBoostOC, Bagging
from arcing.components.interfaces import BaseLearner, LearnerFactory, LineSearch
from arcing.components.learners import GRNNLearner, SklearnLearner
from arcing.components.optimization.line_search import BracketRefineLineSearch
from arcing.contracts import (
    AdaBoostMHConfig,
    AdaBoostOCConfig,
    BaggingConfig,
    ComparisonRunConfig,
    EnsembleConfig,
)
from arcing.core.numeric import CLASS_SENTINEL
from arcing.core.progress import ProgressCallback
from arcing.core.training_set import TrainingSet
from arcing.extras.datasets.synthetic import make_cluster_dataset
from arcing.factories.learner_factory import make_learner_factory
from arcing.runtime.random.rng import RngManager

__all__ = [
    "fit_ensemble",
    "evaluate_ensemble",
    "summarize_ensemble",
    "class_error",
    "numeric_error",
    "run_comparison",
    "Bagging",
    "AdaBoostMH",
    "AdaBoostOC",
    "BaseLearner",
    "LearnerFactory",
    "LineSearch",
    "GRNNLearner",
    "SklearnLearner",
    "BracketRefineLineSearch",
    "BaggingConfig",
    "AdaBoostMHConfig",
    "AdaBoostOCConfig",
    "EnsembleConfig",
    "ComparisonRunConfig",
    "CLASS_SENTINEL",
    "ProgressCallback",
    "TrainingSet",
    "make_cluster_dataset",
    "make_learner_factory",
    "RngManager",
]
