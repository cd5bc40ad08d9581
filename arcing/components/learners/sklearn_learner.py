from __future__ import annotations

import inspect
from typing import Any, List, Optional

import numpy as np
from sklearn.base import clone, is_classifier

from arcing.components.interfaces import BaseLearner
from arcing.core.errors import LearnerContractError


def _accepts_sample_weight(estimator: Any) -> bool:
    fit = getattr(estimator, "fit", None)
    if fit is None:
        return False
    try:
        return "sample_weight" in inspect.signature(fit).parameters
    except (TypeError, ValueError):
        return False


class SklearnLearner(BaseLearner):
    """
    Adapter that drives a scikit-learn regressor or binary classifier through
    the learner contract.

    Cases are buffered by add_case() and fitted in one go by train(), on a
    fresh clone of the template estimator so slots never share fitted state.
    Importance weights are passed as `sample_weight`; the template must
    accept it. predict() uses decision_function when the estimator has one
    and predict otherwise, so a classifier contributes its log-odds. A
    classifier that only ever saw one label predicts that label.
    """

    def __init__(self, estimator: Any):
        if not _accepts_sample_weight(estimator):
            raise LearnerContractError(
                f"{type(estimator).__name__}.fit does not accept sample_weight; "
                "importance-weighted boosting needs it."
            )
        self.template = estimator
        self.reset()

    def reset(self) -> None:
        self._inputs: List[np.ndarray] = []
        self._targets: List[float] = []
        self._weights: List[float] = []
        self.model_: Optional[Any] = None
        self.constant_: Optional[float] = None

    def add_case(self, inputs, target: float, importance: float = 1.0) -> None:
        if self.is_trained:
            raise LearnerContractError("add_case() called after train() without reset()")
        importance = float(importance)
        if importance < 0.0 or not np.isfinite(importance):
            raise LearnerContractError(f"importance must be finite and non-negative; got {importance}")
        self._inputs.append(np.asarray(inputs, dtype=float).ravel())
        self._targets.append(float(target))
        self._weights.append(importance)

    @property
    def is_trained(self) -> bool:
        return self.model_ is not None or self.constant_ is not None

    @property
    def n_cases(self) -> int:
        return len(self._targets)

    def train(self) -> None:
        if not self._targets:
            raise LearnerContractError("train() called with no cases")

        X = np.vstack(self._inputs)
        y = np.asarray(self._targets, dtype=float)
        sw = np.asarray(self._weights, dtype=float)
        total = float(sw.sum())
        # All-zero importance carries no preference; fall back to uniform
        sw = np.full_like(sw, 1.0 / sw.size) if total <= 0.0 else sw / total

        if is_classifier(self.template) and np.unique(y).size < 2:
            # A classifier cannot fit one label; answer it everywhere
            self.constant_ = float(y[0])
            return

        model = clone(self.template)
        model.fit(X, y, sample_weight=sw * sw.size)
        self.model_ = model

    def predict(self, inputs) -> float:
        if not self.is_trained:
            raise LearnerContractError("predict() called before train()")
        if self.constant_ is not None:
            return self.constant_
        x = np.asarray(inputs, dtype=float).reshape(1, -1)
        if hasattr(self.model_, "decision_function"):
            out = self.model_.decision_function(x)
        else:
            out = self.model_.predict(x)
        return float(np.ravel(out)[0])
