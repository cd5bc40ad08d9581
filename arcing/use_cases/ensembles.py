from __future__ import annotations

"""Use-cases for building and scoring a single ensemble."""

from typing import Any, Dict, Optional

import numpy as np

from arcing.contracts.ensemble_configs import EnsembleConfig
from arcing.contracts.results.ensemble import EnsembleSummary
from arcing.components.interfaces import LearnerFactory
from arcing.core.numeric import CLASS_SENTINEL
from arcing.core.training_set import TrainingSet
from arcing.factories.ensemble_factory import make_ensemble_strategy
from arcing.runtime.random.rng import RngManager


def fit_ensemble(
    cfg: EnsembleConfig,
    training_set: TrainingSet,
    learner_factory: LearnerFactory,
    *,
    rngm: Optional[RngManager] = None,
    stream: Optional[str] = None,
) -> Any:
    """Build the ensemble described by `cfg` and construct it on `training_set`."""
    strategy = make_ensemble_strategy(cfg)
    return strategy.fit(
        training_set,
        learner_factory,
        rngm=rngm,
        stream=stream or str(cfg.kind),
    )


def summarize_ensemble(ensemble: Any) -> EnsembleSummary:
    colorings = getattr(ensemble, "colorings", None)
    return EnsembleSummary(
        kind=ensemble.kind,
        n_requested=int(ensemble.n_requested),
        n_members=int(ensemble.n_members),
        n_classes=int(ensemble.n_classes),
        stop_reason=getattr(ensemble, "stop_reason", "completed"),
        alphas=[float(a) for a in getattr(ensemble, "alphas", [])],
        colorings=None if colorings is None else [np.asarray(c).astype(int).tolist() for c in colorings],
    )


def class_error(model: Any, data: TrainingSet) -> float:
    """Fraction of cases whose predicted class is wrong; the no-model sentinel counts as wrong."""
    wrong = 0
    for x, true_class in zip(data.inputs, data.true_classes):
        k = int(model.class_predict(x))
        if k == CLASS_SENTINEL or k != int(true_class):
            wrong += 1
    return wrong / data.n_cases


def numeric_error(model: Any, data: TrainingSet) -> float:
    """Mean squared error of per-class numeric outputs against the +/-1 targets."""
    total = 0.0
    for x, t in zip(data.inputs, data.targets):
        diff = np.asarray(model.numeric_predict(x), dtype=float) - t
        total += float(np.dot(diff, diff))
    return total / (data.n_cases * data.n_classes)


def evaluate_ensemble(model: Any, data: TrainingSet) -> Dict[str, Optional[float]]:
    """Class error always; numeric error when the model offers numeric_predict."""
    out: Dict[str, Optional[float]] = {"class_error": class_error(model, data), "numeric_error": None}
    if hasattr(model, "numeric_predict"):
        out["numeric_error"] = numeric_error(model, data)
    return out
