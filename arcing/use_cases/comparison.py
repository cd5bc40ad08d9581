from __future__ import annotations

"""Compare a single one-vs-rest model against bagging, AdaBoost.MH and AdaBoost.OC.

Each try draws a fresh training set and an independent, larger test set from
the synthetic cluster generator, trains all four methods on the training set
with the same base learner, and records training and test error. Results are
averaged over the tries that completed.
"""

import logging
from typing import Dict, List, Optional

import numpy as np

from arcing.contracts.ensemble_configs import AdaBoostMHConfig, AdaBoostOCConfig, BaggingConfig
from arcing.contracts.results.comparison import ComparisonResult, MethodErrors, TrySummary
from arcing.contracts.run_config import ComparisonRunConfig
from arcing.components.baselines.one_vs_rest import OneVsRestModel
from arcing.core.progress import ProgressCallback
from arcing.extras.datasets.synthetic import make_cluster_dataset
from arcing.factories.learner_factory import make_learner_factory
from arcing.runtime.random.rng import RngManager
from arcing.use_cases.ensembles import (
    class_error,
    fit_ensemble,
    numeric_error,
    summarize_ensemble,
)

logger = logging.getLogger(__name__)

METHODS = ("reference", "bagging", "adaboost_mh", "adaboost_oc")


def _ensemble_configs(cfg: ComparisonRunConfig):
    n_classes = cfg.data.n_classes
    return [
        BaggingConfig(n_models=cfg.n_models, n_jobs=cfg.n_jobs),
        AdaBoostMHConfig(n_models=cfg.n_models, n_jobs=cfg.n_jobs, line_search=cfg.line_search),
        # One binary slot per member: match the slot budget of the per-class methods
        AdaBoostOCConfig(n_models=cfg.n_models * n_classes, n_jobs=cfg.n_jobs, coloring=cfg.coloring),
    ]


def _mean_errors(per_try: List[Dict[str, MethodErrors]]) -> Dict[str, MethodErrors]:
    out: Dict[str, MethodErrors] = {}
    for method in METHODS:
        rows = [t[method] for t in per_try]
        numeric = [r.numeric_error for r in rows if r.numeric_error is not None]
        out[method] = MethodErrors(
            train_class_error=float(np.mean([r.train_class_error for r in rows])),
            test_class_error=float(np.mean([r.test_class_error for r in rows])),
            numeric_error=float(np.mean(numeric)) if numeric else None,
        )
    return out


def run_comparison(
    cfg: ComparisonRunConfig,
    *,
    progress: Optional[ProgressCallback] = None,
) -> ComparisonResult:
    rngm = RngManager(cfg.seed)
    data = cfg.data
    n_test = data.n_samples * data.test_multiplier

    if progress is not None:
        progress.init(total=cfg.n_tries, label=f"Comparing 0/{cfg.n_tries}")

    tries: List[TrySummary] = []
    per_try: List[Dict[str, MethodErrors]] = []

    try:
        for itry in range(cfg.n_tries):
            trm = rngm.child_manager(f"try_{itry}")
            train = make_cluster_dataset(
                data.n_samples, data.n_classes, data.separation,
                rng=trm.child_generator("train"),
            )
            test = make_cluster_dataset(
                n_test, data.n_classes, data.separation,
                rng=trm.child_generator("test"),
            )

            errors: Dict[str, MethodErrors] = {}

            reference = OneVsRestModel(
                make_learner_factory(cfg.learner, rngm=trm, stream="reference/learner"),
                n_jobs=cfg.n_jobs,
            ).construct(train)
            errors["reference"] = MethodErrors(
                train_class_error=class_error(reference, train),
                test_class_error=class_error(reference, test),
                numeric_error=numeric_error(reference, test),
            )

            summaries = []
            for ens_cfg in _ensemble_configs(cfg):
                kind = ens_cfg.kind
                ens = fit_ensemble(
                    ens_cfg,
                    train,
                    make_learner_factory(cfg.learner, rngm=trm, stream=f"{kind}/learner"),
                    rngm=trm,
                    stream=kind,
                )
                errors[kind] = MethodErrors(
                    train_class_error=class_error(ens, train),
                    test_class_error=class_error(ens, test),
                    numeric_error=numeric_error(ens, test) if hasattr(ens, "numeric_predict") else None,
                )
                summaries.append(summarize_ensemble(ens))

            per_try.append(errors)
            tries.append(TrySummary(index=itry, errors=errors, ensembles=summaries))

            logger.info(
                "try %d: test class error reference=%.4f bagging=%.4f adaboost_mh=%.4f adaboost_oc=%.4f",
                itry,
                errors["reference"].test_class_error,
                errors["bagging"].test_class_error,
                errors["adaboost_mh"].test_class_error,
                errors["adaboost_oc"].test_class_error,
            )
            if progress is not None:
                progress.update(current=itry + 1, label=f"Comparing {itry + 1}/{cfg.n_tries}")
    finally:
        if progress is not None:
            progress.finalize(label="Done")

    return ComparisonResult(
        n_tries_requested=cfg.n_tries,
        n_tries_done=len(per_try),
        n_samples=data.n_samples,
        n_classes=data.n_classes,
        n_models=cfg.n_models,
        learner_algo=str(cfg.learner.algo),
        mean_errors=_mean_errors(per_try),
        tries=tries,
    )
