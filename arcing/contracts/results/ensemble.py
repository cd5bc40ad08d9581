from __future__ import annotations

from typing import List, Optional

from .common import ResultModel
from ..choices import EnsembleKind, StopReason


class EnsembleSummary(ResultModel):
    """What a construction call actually produced.

    `n_members` can be smaller than `n_requested` when boosting stops early;
    `alphas` and `colorings` are empty for bagging.
    """

    kind: EnsembleKind
    n_requested: int
    n_members: int
    n_classes: int
    stop_reason: StopReason = "completed"
    alphas: List[float] = []
    colorings: Optional[List[List[int]]] = None
