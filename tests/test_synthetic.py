import numpy as np
import pytest

from arcing.extras.datasets.synthetic import class_shift, make_cluster_dataset


def test_shape_and_labels():
    ts = make_cluster_dataset(40, 5, 0.7, rng=np.random.default_rng(0))

    assert ts.n_cases == 40
    assert ts.n_inputs == 2
    assert ts.n_classes == 5
    assert ts.true_classes.min() >= 0
    assert ts.true_classes.max() <= 4


def test_same_generator_seed_same_data():
    a = make_cluster_dataset(20, 3, 0.5, rng=np.random.default_rng(11))
    b = make_cluster_dataset(20, 3, 0.5, rng=np.random.default_rng(11))
    np.testing.assert_array_equal(a.inputs, b.inputs)
    np.testing.assert_array_equal(a.targets, b.targets)


def test_class_shift_zig_zags():
    # sep = 4 * separation; odd classes pulled back by half a step
    np.testing.assert_allclose(class_shift(np.arange(4), 1.0), [0.0, 2.0, 8.0, 10.0])


def test_zero_separation_centres_every_class_together():
    ts = make_cluster_dataset(2000, 2, 0.0, rng=np.random.default_rng(1))
    for k in range(2):
        centre = ts.inputs[ts.true_classes == k].mean(axis=0)
        np.testing.assert_allclose(centre, [0.0, 0.0], atol=0.15)


@pytest.mark.parametrize("args", [(0, 3, 0.5), (10, 1, 0.5), (10, 3, -0.1)])
def test_invalid_arguments(args):
    with pytest.raises(ValueError):
        make_cluster_dataset(*args)
