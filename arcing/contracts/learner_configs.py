from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class RidgeLearnerConfig(BaseModel):
    """Linear least squares with an L2 penalty; accepts per-case importance."""
    algo: Literal["ridge"] = "ridge"

    alpha: float = Field(1.0, ge=0.0)
    fit_intercept: bool = True


class TreeLearnerConfig(BaseModel):
    """Shallow regression tree; depth 1 is the classic boosting stump."""
    algo: Literal["tree"] = "tree"

    max_depth: Optional[int] = Field(2, ge=1)
    min_samples_leaf: int = Field(1, ge=1)


class GRNNLearnerConfig(BaseModel):
    """General Regression Neural Network with annealed per-input kernel widths."""
    algo: Literal["grnn"] = "grnn"

    max_iter: int = Field(50, ge=1)
    max_evals: int = Field(2000, ge=1)
    log_sigma_bound: float = Field(5.0, gt=0.0)


class LogisticLearnerConfig(BaseModel):
    """L2-regularized logistic regression; the slot output is its log-odds."""
    algo: Literal["logistic"] = "logistic"

    C: float = Field(1.0, gt=0.0)
    max_iter: int = Field(1000, ge=1)


class MLPLearnerConfig(BaseModel):
    """
    Small feed-forward network with one hidden layer.

    Defaults give a 2-2-1 tanh network for the two-input cluster data.
    """
    algo: Literal["mlp"] = "mlp"

    hidden_units: int = Field(2, ge=1)
    activation: Literal["tanh", "relu", "logistic"] = "tanh"
    solver: Literal["lbfgs", "adam"] = "lbfgs"
    alpha: float = Field(1e-4, ge=0.0)
    max_iter: int = Field(500, ge=1)


LearnerConfig = Annotated[
    Union[
        RidgeLearnerConfig,
        TreeLearnerConfig,
        GRNNLearnerConfig,
        LogisticLearnerConfig,
        MLPLearnerConfig,
    ],
    Field(discriminator="algo"),
]


__all__ = [
    "RidgeLearnerConfig",
    "TreeLearnerConfig",
    "GRNNLearnerConfig",
    "LogisticLearnerConfig",
    "MLPLearnerConfig",
    "LearnerConfig",
]
