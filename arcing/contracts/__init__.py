"""Configuration and result contracts.

This package contains Pydantic models and Literal-based choice types used to
validate configuration payloads across arcing.

Export policy:
- Keep module imports explicit in most of the codebase:
    from arcing.contracts.ensemble_configs import BaggingConfig
- The names re-exported here are a small set of convenience imports for
  callers that prefer a single namespace.
"""

from .choices import ColoringStrategy, EnsembleKind, LearnerAlgo, StopReason
from .ensemble_configs import (
    AdaBoostMHConfig,
    AdaBoostOCConfig,
    BaggingConfig,
    ColoringSearchConfig,
    EnsembleConfig,
)
from .learner_configs import (
    GRNNLearnerConfig,
    LogisticLearnerConfig,
    MLPLearnerConfig,
    LearnerConfig,
    RidgeLearnerConfig,
    TreeLearnerConfig,
)
from .line_search_configs import LineSearchConfig
from .run_config import ComparisonRunConfig, SyntheticDataModel

__all__ = [
    # choice types
    "ColoringStrategy",
    "EnsembleKind",
    "LearnerAlgo",
    "StopReason",
    # ensembles
    "BaggingConfig",
    "AdaBoostMHConfig",
    "AdaBoostOCConfig",
    "ColoringSearchConfig",
    "EnsembleConfig",
    # learners
    "RidgeLearnerConfig",
    "TreeLearnerConfig",
    "GRNNLearnerConfig",
    "LogisticLearnerConfig",
    "MLPLearnerConfig",
    "LearnerConfig",
    # optimizer / runs
    "LineSearchConfig",
    "SyntheticDataModel",
    "ComparisonRunConfig",
]
