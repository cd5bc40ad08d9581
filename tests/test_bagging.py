import numpy as np
import pytest
from sklearn.linear_model import Ridge

from arcing.components.ensembles import Bagging
from arcing.components.learners import SklearnLearner
from arcing.contracts import BaggingConfig
from arcing.core.errors import EnsembleConstructionError
from arcing.core.numeric import CLASS_SENTINEL
from arcing.runtime.random.rng import RngManager
from arcing.use_cases.ensembles import fit_ensemble

from conftest import FailingLearner, MemorizingLearner


def _ridge():
    return SklearnLearner(Ridge(alpha=1.0))


def test_vote_counts_sum_to_replicates(separated_set):
    bag = Bagging(_ridge, rng=np.random.default_rng(0)).construct(separated_set, 7)

    assert bag.n_members == 7
    assert all(len(rep) == separated_set.n_classes for rep in bag.slots)
    for x in separated_set.inputs[:10]:
        counts = bag.vote_counts(x)
        assert counts.sum() == 7
        assert bag.class_predict(x) == int(np.argmax(counts))


def test_numeric_predict_is_clipped_mean(separated_set):
    bag = Bagging(_ridge, rng=np.random.default_rng(1)).construct(separated_set, 4)
    out = bag.numeric_predict(separated_set.inputs[0])

    assert out.shape == (separated_set.n_classes,)
    assert np.all(out >= -1.0) and np.all(out <= 1.0)


def test_same_seed_reproduces_predictions(separated_set):
    a = Bagging(_ridge, rng=np.random.default_rng(42)).construct(separated_set, 3)
    b = Bagging(_ridge, rng=np.random.default_rng(42)).construct(separated_set, 3)
    for x in separated_set.inputs[:5]:
        np.testing.assert_array_equal(a.numeric_predict(x), b.numeric_predict(x))
    for x in separated_set.inputs:
        assert a.class_predict(x) == b.class_predict(x)


def test_config_random_state_fixes_every_vote(separated_set):
    cfg = BaggingConfig(n_models=5, random_state=11)
    # random_state wins over whatever manager the caller passes in
    a = fit_ensemble(cfg, separated_set, _ridge, rngm=RngManager(1))
    b = fit_ensemble(cfg, separated_set, _ridge, rngm=RngManager(2))

    assert a.n_members == b.n_members == 5
    for x in separated_set.inputs:
        assert a.class_predict(x) == b.class_predict(x)
        np.testing.assert_array_equal(a.vote_counts(x), b.vote_counts(x))


def test_bootstrap_draws_cases_from_the_training_set(tiny_set):
    bag = Bagging(MemorizingLearner, rng=np.random.default_rng(5)).construct(tiny_set, 6)
    known = {tuple(x) for x in tiny_set.inputs}

    for rep in bag.slots:
        for learner in rep:
            assert learner.trained
            assert set(learner.table) <= known
            # unweighted training: every case enters with the default importance
            assert set(learner.importances) == {1.0}


def test_zero_replicates_predicts_sentinel(tiny_set):
    bag = Bagging(MemorizingLearner).construct(tiny_set, 0)

    assert bag.n_members == 0
    assert bag.class_predict(tiny_set.inputs[0]) == CLASS_SENTINEL
    np.testing.assert_array_equal(bag.numeric_predict(tiny_set.inputs[0]), [0.0, 0.0])


def test_learner_failure_is_wrapped(tiny_set):
    with pytest.raises(EnsembleConstructionError) as exc:
        Bagging(FailingLearner).construct(tiny_set, 2)
    assert exc.value.kind == "bagging"
    assert exc.value.member == 0


def test_threaded_slots_match_sequential(separated_set):
    seq = Bagging(_ridge, rng=np.random.default_rng(8)).construct(separated_set, 3)
    par = Bagging(_ridge, rng=np.random.default_rng(8), n_jobs=2).construct(separated_set, 3)
    for x in separated_set.inputs[:5]:
        np.testing.assert_allclose(seq.numeric_predict(x), par.numeric_predict(x))


def test_wrong_input_length_is_rejected(separated_set):
    bag = Bagging(_ridge, rng=np.random.default_rng(0)).construct(separated_set, 1)
    with pytest.raises(ValueError):
        bag.class_predict([1.0, 2.0, 3.0])
