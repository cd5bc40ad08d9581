"""Literal-based choice sets used by the configuration contracts."""

from typing import Literal

EnsembleKind = Literal["bagging", "adaboost_mh", "adaboost_oc"]

LearnerAlgo = Literal["ridge", "tree", "grnn", "logistic", "mlp"]

ColoringStrategy = Literal["auto", "exhaustive", "random"]

StopReason = Literal["completed", "perfect", "worthless"]

__all__ = ["EnsembleKind", "LearnerAlgo", "ColoringStrategy", "StopReason"]
