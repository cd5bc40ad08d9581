from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .ensemble_configs import ColoringSearchConfig
from .learner_configs import LearnerConfig, RidgeLearnerConfig
from .line_search_configs import LineSearchConfig


class SyntheticDataModel(BaseModel):
    """
    Bivariate correlated clusters, one cluster per class.

    `separation` controls how far successive class centres are shifted;
    test sets hold `test_multiplier` times as many cases as training sets.
    """
    n_samples: int = Field(50, ge=1)
    n_classes: int = Field(5, ge=2)
    separation: float = Field(0.7, ge=0.0)
    test_multiplier: int = Field(10, ge=1)


class ComparisonRunConfig(BaseModel):
    """
    End-to-end configuration for comparing the reference model, bagging,
    AdaBoost.MH and AdaBoost.OC on repeated synthetic draws.

    AdaBoost.OC trains one binary learner per member, so it is given
    `n_models * n_classes` members to match the slot budget of the others.
    """
    data: SyntheticDataModel = Field(default_factory=SyntheticDataModel)
    learner: LearnerConfig = Field(default_factory=RidgeLearnerConfig)

    n_models: int = Field(10, ge=1)
    n_tries: int = Field(10, ge=1)
    n_jobs: Optional[int] = None

    line_search: LineSearchConfig = Field(default_factory=LineSearchConfig)
    coloring: ColoringSearchConfig = Field(default_factory=ColoringSearchConfig)

    seed: Optional[int] = None
