from __future__ import annotations

"""Training set contract shared by every ensemble builder.

A training set is N cases, each an input vector of length D plus a label vector
of length C holding +1 at the true class and -1 everywhere else. The arrays are
copied and frozen on construction, so a set can be handed to several builders
without any of them being able to disturb the others.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from arcing.core.errors import TrainingSetError
from arcing.core.shapes import coerce_inputs


@dataclass(frozen=True, eq=False)
class TrainingSet:
    """N cases of (inputs, +/-1 one-hot targets).

    Notes
    -----
    - `inputs` has shape (n_cases, n_inputs).
    - `targets` has shape (n_cases, n_classes), exactly one +1 per row.
    - `true_classes` is derived once and cached; it is the column holding +1.
    """

    inputs: np.ndarray
    targets: np.ndarray
    true_classes: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        try:
            X = coerce_inputs(self.inputs)
        except ValueError as e:
            raise TrainingSetError(str(e)) from e

        T = np.asarray(self.targets, dtype=float)
        if T.ndim != 2:
            raise TrainingSetError(f"targets must be 2D (n_cases, n_classes); got {T.shape}")
        if T.shape[0] != X.shape[0]:
            raise TrainingSetError(
                f"inputs and targets length mismatch: {X.shape[0]} vs {T.shape[0]}"
            )
        if T.shape[1] < 2:
            raise TrainingSetError(f"at least 2 classes are required; got {T.shape[1]}")
        if not np.all((T == 1.0) | (T == -1.0)):
            raise TrainingSetError("target entries must be +1 (true class) or -1")

        positives = np.sum(T > 0.0, axis=1)
        bad_rows = np.flatnonzero(positives != 1)
        if bad_rows.size:
            raise TrainingSetError(
                f"every case needs exactly one +1 target; offending rows: {bad_rows[:10].tolist()}"
            )

        X = np.array(X, dtype=float, copy=True)
        T = np.array(T, dtype=float, copy=True)
        tclass = np.argmax(T, axis=1).astype(int)
        for arr in (X, T, tclass):
            arr.setflags(write=False)

        object.__setattr__(self, "inputs", X)
        object.__setattr__(self, "targets", T)
        object.__setattr__(self, "true_classes", tclass)

    @property
    def n_cases(self) -> int:
        return int(self.inputs.shape[0])

    @property
    def n_inputs(self) -> int:
        return int(self.inputs.shape[1])

    @property
    def n_classes(self) -> int:
        return int(self.targets.shape[1])

    def __len__(self) -> int:
        return self.n_cases

    @classmethod
    def from_class_labels(cls, X, y, n_classes: Optional[int] = None) -> "TrainingSet":
        """Build a set from integer class labels 0..C-1 (encoded as +/-1 one-hot targets)."""
        y = np.asarray(y).ravel()
        if y.size and not np.all(np.equal(np.mod(y, 1), 0)):
            raise TrainingSetError("class labels must be integers")
        y = y.astype(int)
        if y.size and y.min() < 0:
            raise TrainingSetError("class labels must be non-negative")

        C = int(n_classes) if n_classes is not None else (int(y.max()) + 1 if y.size else 0)
        if y.size and y.max() >= C:
            raise TrainingSetError(f"label {int(y.max())} out of range for {C} classes")

        targets = -np.ones((y.shape[0], C), dtype=float)
        targets[np.arange(y.shape[0]), y] = 1.0
        return cls(inputs=np.asarray(X, dtype=float), targets=targets)

    @classmethod
    def from_flat(cls, rows, n_inputs: int, n_classes: int) -> "TrainingSet":
        """Build a set from flat rows laid out as [inputs..., targets...]."""
        width = int(n_inputs) + int(n_classes)
        arr = np.asarray(rows, dtype=float)
        if arr.ndim == 1:
            if arr.size % width:
                raise TrainingSetError(
                    f"flat buffer of {arr.size} values is not a multiple of n_inputs+n_classes={width}"
                )
            arr = arr.reshape(-1, width)
        if arr.ndim != 2 or arr.shape[1] != width:
            raise TrainingSetError(f"rows must have {width} columns; got shape {arr.shape}")
        return cls(inputs=arr[:, :n_inputs], targets=arr[:, n_inputs:])
