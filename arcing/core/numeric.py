from __future__ import annotations

"""Numeric guards used at every point where learner outputs or probabilities are consumed."""

import numpy as np

# Returned by class_predict when no member was trained; never a valid class index.
CLASS_SENTINEL = -1

# Probabilities and error rates are kept inside [PROB_EPS, 1 - PROB_EPS] before log/division.
PROB_EPS = 1e-12


def clip_unit(value):
    """Hard-limit a learner output (scalar or array) to [-1, 1]."""
    if np.ndim(value) == 0:
        return float(min(1.0, max(-1.0, float(value))))
    return np.clip(np.asarray(value, dtype=float), -1.0, 1.0)


def clamp_probability(p: float, eps: float = PROB_EPS) -> float:
    return float(min(1.0 - eps, max(eps, float(p))))


def sign_of(value: float) -> int:
    """Binary decision from a raw output: strictly positive is +1, everything else -1."""
    return 1 if float(value) > 0.0 else -1


def first_argmax(values) -> int:
    """Index of the largest entry; ties resolve to the lowest index."""
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise ValueError("first_argmax requires at least one value")
    # np.argmax returns the first occurrence of the maximum
    return int(np.argmax(arr))


def normalize_distribution(weights: np.ndarray) -> np.ndarray:
    """Rescale non-negative weights in place so they sum to 1.0 and return them."""
    total = float(np.sum(weights))
    if not np.isfinite(total) or total <= 0.0:
        raise FloatingPointError(f"cannot normalize a distribution with total mass {total!r}")
    weights /= total
    return weights
