from __future__ import annotations

"""Shape/orientation helpers.

Conventions
-----------
- inputs are 2D: (n_cases, n_inputs)
- targets are 2D: (n_cases, n_classes), entries in {-1, +1}
- a single input vector is 1D: (n_inputs,)
"""

from typing import Optional

import numpy as np


def coerce_input_vector(x, *, n_inputs: Optional[int] = None) -> np.ndarray:
    """Return `x` as a contiguous 1D float vector.

    A (1, n_inputs) row is accepted and flattened. When `n_inputs` is given the
    length is enforced.
    """

    arr = np.asarray(x, dtype=float)
    if arr.ndim == 2 and arr.shape[0] == 1:
        arr = arr[0]
    if arr.ndim != 1:
        raise ValueError(f"input vector must be 1D; got shape {arr.shape}")
    if n_inputs is not None and arr.shape[0] != int(n_inputs):
        raise ValueError(f"input vector has {arr.shape[0]} entries; expected {n_inputs}")
    return np.ascontiguousarray(arr)


def coerce_inputs(X) -> np.ndarray:
    """Basic coercion for a block of input vectors.

    - Accepts 1D and reshapes to (n_cases, 1)
    - Enforces 2D and non-empty.
    """

    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X[:, None]

    if X.ndim != 2:
        raise ValueError(f"inputs must be 2D; got {X.shape}")

    n_rows, n_cols = X.shape
    if n_rows < 1 or n_cols < 1:
        raise ValueError(f"inputs must have at least 1 case and 1 column; got {X.shape}")

    return X
