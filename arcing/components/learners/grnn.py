from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np
from numpy.random import Generator
from scipy.optimize import dual_annealing

from arcing.components.interfaces import BaseLearner
from arcing.core.errors import LearnerContractError

logger = logging.getLogger(__name__)

# Floor on a kernel density so a case far from every training case still has a defined output
_MIN_DENSITY = 1e-180


class GRNNLearner(BaseLearner):
    """
    General Regression Neural Network with one output.

    The prediction is a Gaussian-kernel weighted average of the training
    targets, with a separate width (sigma) per input. Each case's kernel is
    further scaled by its importance, so a boosting distribution shifts the
    average toward heavily weighted cases.

    Training searches log-sigma in [-log_sigma_bound, log_sigma_bound] with
    SciPy's dual annealing, starting from sigma = 1. The criterion is the
    importance-weighted leave-one-out squared error on the training set.
    `max_iter` caps the annealing iterations and `max_evals` the criterion
    evaluations.
    """

    def __init__(
        self,
        rng: Optional[Generator] = None,
        *,
        max_iter: int = 50,
        max_evals: int = 2000,
        log_sigma_bound: float = 5.0,
    ):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_iter = int(max_iter)
        self.max_evals = int(max_evals)
        self.log_sigma_bound = float(log_sigma_bound)
        self.reset()

    def reset(self) -> None:
        self._inputs: List[np.ndarray] = []
        self._targets: List[float] = []
        self._weights: List[float] = []
        self.X_: Optional[np.ndarray] = None
        self.y_: Optional[np.ndarray] = None
        self.w_: Optional[np.ndarray] = None
        self.sigma_: Optional[np.ndarray] = None

    def add_case(self, inputs, target: float, importance: float = 1.0) -> None:
        if self.sigma_ is not None:
            raise LearnerContractError("add_case() called after train() without reset()")
        self._inputs.append(np.asarray(inputs, dtype=float).ravel())
        self._targets.append(float(target))
        self._weights.append(max(0.0, float(importance)))

    def _kernel(self, A: np.ndarray, B: np.ndarray, sigma: np.ndarray) -> np.ndarray:
        diff = (A[:, None, :] - B[None, :, :]) / sigma
        return np.maximum(np.exp(-np.sum(diff * diff, axis=2)), _MIN_DENSITY)

    def _loo_error(self, sigma: np.ndarray) -> float:
        X, y, w = self.X_, self.y_, self.w_
        K = self._kernel(X, X, sigma) * w[None, :]
        np.fill_diagonal(K, 0.0)
        denom = K.sum(axis=1)
        # A lone case (or all other weights zero) has no leave-one-out estimate
        ok = denom > 0.0
        if not np.any(ok):
            return float(np.sum(w * y * y))
        pred = np.zeros_like(y)
        pred[ok] = (K[ok] @ y) / denom[ok]
        diff = pred - y
        return float(np.sum(w * diff * diff) / max(float(np.sum(w)), _MIN_DENSITY))

    def train(self) -> None:
        if not self._targets:
            raise LearnerContractError("train() called with no cases")

        self.X_ = np.vstack(self._inputs)
        self.y_ = np.asarray(self._targets, dtype=float)
        w = np.asarray(self._weights, dtype=float)
        self.w_ = np.full_like(w, 1.0 / w.size) if w.sum() <= 0.0 else w / w.sum()

        n_inputs = self.X_.shape[1]
        bound = self.log_sigma_bound

        def criterion(log_sigma: np.ndarray) -> float:
            return self._loo_error(np.exp(log_sigma))

        res = dual_annealing(
            criterion,
            bounds=[(-bound, bound)] * n_inputs,
            maxiter=self.max_iter,
            maxfun=self.max_evals,
            seed=int(self.rng.integers(0, 2**32 - 1)),
            x0=np.zeros(n_inputs),
        )
        logger.debug("grnn: loo error %.6g after %d evaluations", float(res.fun), int(res.nfev))

        self.sigma_ = np.exp(np.asarray(res.x, dtype=float))

    def predict(self, inputs) -> float:
        if self.sigma_ is None:
            raise LearnerContractError("predict() called before train()")
        x = np.asarray(inputs, dtype=float).reshape(1, -1)
        k = self._kernel(x, self.X_, self.sigma_)[0] * self.w_
        denom = float(k.sum())
        if denom <= 0.0:
            return 0.0
        return float(k @ self.y_) / denom
