from __future__ import annotations

"""Synthetic multiclass data for comparing resampling methods.

Every case is a bivariate normal point with moderate positive correlation.
Class k is shifted up and to the left by an amount that grows with k, with
odd classes pulled back by half a step so neighbouring clusters overlap in a
zig-zag rather than along a straight line.
"""

from typing import Optional

import numpy as np
from numpy.random import Generator

from arcing.core.training_set import TrainingSet

# Multiplier applied to the user-facing separation, matching the binary variant's scale
SEPARATION_SCALE = 4.0

_CORRELATION_WEIGHT = 0.7071


def class_shift(k: np.ndarray, separation: float) -> np.ndarray:
    sep = SEPARATION_SCALE * float(separation)
    k = np.asarray(k, dtype=float)
    return k * sep - 0.5 * np.mod(k, 2) * sep


def make_cluster_dataset(
    n_samples: int,
    n_classes: int,
    separation: float,
    rng: Optional[Generator] = None,
) -> TrainingSet:
    """Draw `n_samples` cases with 2 inputs and classes uniform over 0..n_classes-1."""
    if n_samples < 1:
        raise ValueError(f"n_samples must be >= 1; got {n_samples}")
    if n_classes < 2:
        raise ValueError(f"n_classes must be >= 2; got {n_classes}")
    if separation < 0.0:
        raise ValueError(f"separation must be >= 0; got {separation}")

    gen = rng if rng is not None else np.random.default_rng()

    x0 = gen.standard_normal(n_samples)
    x1 = _CORRELATION_WEIGHT * x0 + _CORRELATION_WEIGHT * gen.standard_normal(n_samples)
    k = gen.integers(0, n_classes, size=n_samples)

    shift = class_shift(k, separation)
    X = np.column_stack([x0 - shift, x1 + shift])

    return TrainingSet.from_class_labels(X, k, n_classes=n_classes)
