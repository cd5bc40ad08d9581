from __future__ import annotations

from typing import Dict, List, Optional

from .common import ResultModel
from .ensemble import EnsembleSummary
from ..choices import LearnerAlgo


class MethodErrors(ResultModel):
    """Error rates of one method, averaged over completed tries.

    `numeric_error` is the mean squared error of clipped per-class outputs
    against the +/-1 targets; it is only defined for methods with a numeric
    output (reference model and bagging).
    """

    train_class_error: float
    test_class_error: float
    numeric_error: Optional[float] = None


class TrySummary(ResultModel):
    index: int
    errors: Dict[str, MethodErrors]
    ensembles: List[EnsembleSummary] = []


class ComparisonResult(ResultModel):
    n_tries_requested: int
    n_tries_done: int
    n_samples: int
    n_classes: int
    n_models: int
    learner_algo: LearnerAlgo

    # keys: "reference", "bagging", "adaboost_mh", "adaboost_oc"
    mean_errors: Dict[str, MethodErrors]
    tries: List[TrySummary] = []
