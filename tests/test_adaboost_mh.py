import math

import numpy as np
import pytest
from sklearn.linear_model import Ridge
from sklearn.tree import DecisionTreeRegressor

from arcing.components.ensembles import AdaBoostMH
from arcing.components.learners import SklearnLearner
from arcing.core.errors import EnsembleConstructionError
from arcing.core.numeric import CLASS_SENTINEL
from arcing.use_cases.ensembles import class_error

from conftest import ConstantLearner, FailingLearner, MemorizingLearner


def test_perfect_member_stops_with_half_log_n_alpha(tiny_set):
    mh = AdaBoostMH(MemorizingLearner).construct(tiny_set, 5)

    assert mh.stop_reason == "perfect"
    assert mh.n_members == 1
    assert mh.alphas[0] == pytest.approx(0.5 * math.log(4))
    for x, k in zip(tiny_set.inputs, tiny_set.true_classes):
        assert mh.class_predict(x) == k


def test_worthless_member_is_discarded(tiny_set):
    mh = AdaBoostMH(lambda: MemorizingLearner(sign=-1.0)).construct(tiny_set, 5)

    assert mh.stop_reason == "worthless"
    assert mh.n_members == 0
    assert mh.class_predict(tiny_set.inputs[0]) == CLASS_SENTINEL


def test_zero_models_predicts_sentinel(tiny_set):
    mh = AdaBoostMH(MemorizingLearner).construct(tiny_set, 0)
    assert mh.n_members == 0
    assert mh.stop_reason == "completed"
    assert mh.class_predict(tiny_set.inputs[0]) == CLASS_SENTINEL


def test_distribution_stays_a_probability_distribution(overlapping_set):
    seen = []
    mh = AdaBoostMH(
        lambda: SklearnLearner(Ridge(alpha=1.0)),
        update_callback=lambda i, d: seen.append((i, d)),
    ).construct(overlapping_set, 4)

    assert mh.stop_reason == "completed"
    assert [i for i, _ in seen] == [0, 1, 2, 3]
    for _, dist in seen:
        assert dist.shape == (overlapping_set.n_cases, overlapping_set.n_classes)
        assert np.all(dist >= 0.0)
        assert dist.sum() == pytest.approx(1.0, abs=1e-9)


def test_alphas_respect_the_search_interval(overlapping_set):
    mh = AdaBoostMH(lambda: SklearnLearner(Ridge(alpha=1.0)), low=-0.5, high=0.5).construct(overlapping_set, 3)
    assert all(-0.5 <= a <= 0.5 for a in mh.alphas)


def test_first_member_sees_uniform_importance(three_class_set):
    created = []

    def factory():
        learner = MemorizingLearner()
        created.append(learner)
        return learner

    AdaBoostMH(factory).construct(three_class_set, 1)
    n, c = three_class_set.n_cases, three_class_set.n_classes
    for learner in created:
        np.testing.assert_allclose(learner.importances, 1.0 / (n * c))


def test_decision_scores_weight_clipped_outputs(tiny_set):
    mh = AdaBoostMH(lambda: ConstantLearner(5.0)).construct(tiny_set, 1)
    # a constant +1 verdict fails every negative target and is kept
    assert mh.stop_reason == "completed"
    np.testing.assert_allclose(mh.decision_scores(tiny_set.inputs[0]), [mh.alphas[0]] * 2)


def test_learner_failure_is_wrapped(tiny_set):
    with pytest.raises(EnsembleConstructionError) as exc:
        AdaBoostMH(FailingLearner).construct(tiny_set, 3)
    assert exc.value.kind == "adaboost_mh"


def test_boosted_stumps_learn_separated_clusters(separated_set):
    mh = AdaBoostMH(
        lambda: SklearnLearner(DecisionTreeRegressor(max_depth=2, random_state=0))
    ).construct(separated_set, 5)
    assert mh.n_members >= 1
    assert class_error(mh, separated_set) < 0.5
