import numpy as np
import pytest
from sklearn.linear_model import LinearRegression, LogisticRegression
from sklearn.neural_network import MLPRegressor
from sklearn.neighbors import KNeighborsRegressor

from arcing.components.ensembles import AdaBoostMH
from arcing.components.learners import GRNNLearner, SklearnLearner
from arcing.core.errors import LearnerContractError


def test_sklearn_learner_fits_weighted_linear_target():
    learner = SklearnLearner(LinearRegression())
    for x in np.linspace(-1.0, 1.0, 9):
        learner.add_case([x], 2.0 * x, 1.0)
    # a wild case with zero importance must not move the fit
    learner.add_case([0.5], 100.0, 0.0)
    learner.train()

    assert learner.predict([0.25]) == pytest.approx(0.5, abs=1e-8)


def test_sklearn_learner_uses_decision_function_when_available():
    learner = SklearnLearner(LogisticRegression())
    for x, t in [(-2.0, -1.0), (-1.0, -1.0), (1.0, 1.0), (2.0, 1.0)]:
        learner.add_case([x], t)
    learner.train()

    assert learner.predict([3.0]) > 0.0
    assert learner.predict([-3.0]) < 0.0


def test_classifier_that_sees_one_label_predicts_it():
    learner = SklearnLearner(LogisticRegression())
    for x in (0.0, 1.0, 2.0):
        learner.add_case([x], -1.0, 0.5)
    learner.train()

    assert learner.is_trained
    assert learner.predict([10.0]) == -1.0
    with pytest.raises(LearnerContractError):
        learner.add_case([3.0], 1.0)


def test_small_network_learns_weighted_sign():
    learner = SklearnLearner(MLPRegressor(hidden_layer_sizes=(2,), activation="tanh", solver="lbfgs", random_state=0))
    for x in np.linspace(-2.0, 2.0, 21):
        learner.add_case([x, 0.0], 1.0 if x > 0 else -1.0, 1.0)
    learner.train()

    assert learner.predict([1.8, 0.0]) > 0.0
    assert learner.predict([-1.8, 0.0]) < 0.0


def test_small_network_drives_boosting(separated_set):
    mh = AdaBoostMH(
        lambda: SklearnLearner(MLPRegressor(hidden_layer_sizes=(2,), solver="lbfgs", max_iter=200, random_state=0))
    ).construct(separated_set, 2)
    assert mh.n_members >= 1
    assert all(np.isfinite(a) for a in mh.alphas)


def test_sklearn_learner_requires_sample_weight_support():
    with pytest.raises(LearnerContractError):
        SklearnLearner(KNeighborsRegressor())


def test_sklearn_learner_enforces_call_order():
    learner = SklearnLearner(LinearRegression())
    with pytest.raises(LearnerContractError):
        learner.train()
    with pytest.raises(LearnerContractError):
        learner.predict([0.0])

    learner.add_case([0.0], 0.0)
    learner.add_case([1.0], 1.0)
    learner.train()
    with pytest.raises(LearnerContractError):
        learner.add_case([2.0], 2.0)

    learner.reset()
    assert learner.n_cases == 0


def test_sklearn_learner_rejects_negative_importance():
    with pytest.raises(LearnerContractError):
        SklearnLearner(LinearRegression()).add_case([0.0], 1.0, -0.5)


def test_sklearn_learner_does_not_fit_the_template():
    template = LinearRegression()
    learner = SklearnLearner(template)
    learner.add_case([0.0], 0.0)
    learner.add_case([1.0], 1.0)
    learner.train()
    assert not hasattr(template, "coef_")


def _grnn(seed=0):
    return GRNNLearner(np.random.default_rng(seed), max_iter=20, max_evals=400)


def test_grnn_output_stays_within_target_range():
    learner = _grnn()
    xs = np.linspace(-2.0, 2.0, 12)
    for x in xs:
        learner.add_case([x, -x], 1.0 if x > 0 else -1.0)
    learner.train()

    assert learner.sigma_.shape == (2,)
    for x in (-3.0, -0.1, 0.1, 3.0):
        assert -1.0 <= learner.predict([x, -x]) <= 1.0
    assert learner.predict([1.5, -1.5]) > 0.0
    assert learner.predict([-1.5, 1.5]) < 0.0


def test_grnn_same_seed_same_widths():
    a, b = _grnn(3), _grnn(3)
    for learner in (a, b):
        for x in range(6):
            learner.add_case([float(x)], float(x % 2), 1.0 + x)
        learner.train()
    np.testing.assert_array_equal(a.sigma_, b.sigma_)


def test_grnn_enforces_call_order():
    learner = _grnn()
    with pytest.raises(LearnerContractError):
        learner.train()
    with pytest.raises(LearnerContractError):
        learner.predict([0.0])
