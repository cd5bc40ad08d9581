import math

import numpy as np
import pytest

from arcing.api import (
    AdaBoostMHConfig,
    AdaBoostOCConfig,
    BaggingConfig,
    CLASS_SENTINEL,
    ComparisonRunConfig,
    RngManager,
    class_error,
    evaluate_ensemble,
    fit_ensemble,
    numeric_error,
    run_comparison,
    summarize_ensemble,
)
from arcing.contracts.run_config import SyntheticDataModel

from conftest import MemorizingLearner


def test_fit_ensemble_honours_config(tiny_set):
    mh = fit_ensemble(AdaBoostMHConfig(n_models=3), tiny_set, MemorizingLearner)
    summary = summarize_ensemble(mh)

    assert summary.kind == "adaboost_mh"
    assert summary.n_requested == 3
    assert summary.n_members == 1
    assert summary.stop_reason == "perfect"
    assert summary.alphas == [pytest.approx(0.5 * math.log(4))]
    assert summary.colorings is None


def test_summary_lists_oc_colorings(three_class_set):
    oc = fit_ensemble(AdaBoostOCConfig(n_models=2), three_class_set, MemorizingLearner)
    summary = summarize_ensemble(oc)

    assert len(summary.colorings) == 2
    assert all(c[0] == -1 for c in summary.colorings)


def test_bagging_random_state_overrides_manager(separated_set):
    from sklearn.linear_model import Ridge
    from arcing.components.learners import SklearnLearner

    def ridge():
        return SklearnLearner(Ridge())

    cfg = BaggingConfig(n_models=3, random_state=17)
    a = fit_ensemble(cfg, separated_set, ridge, rngm=RngManager(1))
    b = fit_ensemble(cfg, separated_set, ridge, rngm=RngManager(2))
    x = separated_set.inputs[0]
    np.testing.assert_array_equal(a.numeric_predict(x), b.numeric_predict(x))


def test_errors_of_a_perfect_model(tiny_set):
    bag = fit_ensemble(BaggingConfig(n_models=0), tiny_set, MemorizingLearner)
    # the sentinel is always wrong; numeric output of an empty ensemble is all zeros
    assert class_error(bag, tiny_set) == 1.0
    assert numeric_error(bag, tiny_set) == pytest.approx(1.0)

    mh = fit_ensemble(AdaBoostMHConfig(n_models=1), tiny_set, MemorizingLearner)
    assert evaluate_ensemble(mh, tiny_set) == {"class_error": 0.0, "numeric_error": None}


def test_sentinel_is_not_a_class():
    assert CLASS_SENTINEL < 0


def _small_run(**kw):
    return ComparisonRunConfig(
        data=SyntheticDataModel(n_samples=24, n_classes=3, separation=0.8, test_multiplier=2),
        n_models=2,
        n_tries=2,
        seed=0,
        **kw,
    )


class _Progress:
    def __init__(self):
        self.events = []

    def init(self, *, total, label=None):
        self.events.append(("init", total))

    def update(self, *, current, label=None):
        self.events.append(("update", current))

    def finalize(self, *, label=None):
        self.events.append(("finalize", None))


def test_comparison_reports_every_method():
    progress = _Progress()
    res = run_comparison(_small_run(), progress=progress)

    assert res.n_tries_done == 2
    assert set(res.mean_errors) == {"reference", "bagging", "adaboost_mh", "adaboost_oc"}
    for errs in res.mean_errors.values():
        assert 0.0 <= errs.train_class_error <= 1.0
        assert 0.0 <= errs.test_class_error <= 1.0
    assert res.mean_errors["reference"].numeric_error is not None
    assert res.mean_errors["bagging"].numeric_error is not None
    assert res.mean_errors["adaboost_mh"].numeric_error is None
    assert res.mean_errors["adaboost_oc"].numeric_error is None

    assert progress.events == [("init", 2), ("update", 1), ("update", 2), ("finalize", None)]


def test_comparison_gives_oc_one_member_per_class_slot():
    res = run_comparison(_small_run())
    oc = [s for s in res.tries[0].ensembles if s.kind == "adaboost_oc"][0]
    assert oc.n_requested == 2 * 3


def test_comparison_is_reproducible_for_a_seed():
    a = run_comparison(_small_run())
    b = run_comparison(_small_run())
    assert a.model_dump() == b.model_dump()
