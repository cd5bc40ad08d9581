from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .choices import ColoringStrategy
from .line_search_configs import LineSearchConfig


# -----------------------------
# Bagging
# -----------------------------

class BaggingConfig(BaseModel):
    kind: Literal["bagging"] = "bagging"

    # number of bootstrap replicates; each replicate owns one slot per class
    n_models: int = Field(10, ge=0)

    # slots of one replicate may be trained concurrently (None/1 -> sequential)
    n_jobs: Optional[int] = None
    random_state: Optional[int] = None


# -----------------------------
# AdaBoost.MH
# -----------------------------

class AdaBoostMHConfig(BaseModel):
    kind: Literal["adaboost_mh"] = "adaboost_mh"

    n_models: int = Field(10, ge=0)
    n_jobs: Optional[int] = None

    line_search: LineSearchConfig = Field(default_factory=LineSearchConfig)


# -----------------------------
# AdaBoost.OC
# -----------------------------

class ColoringSearchConfig(BaseModel):
    """
    How each member's binary class partition is chosen.

    Notes:
      - "exhaustive" scores all 2**(C-1) canonical partitions.
      - "random" runs `n_restarts` hill-climbs from random partitions.
      - "auto" is exhaustive up to `max_exhaustive_classes`, random beyond.
    """
    strategy: ColoringStrategy = "auto"
    max_exhaustive_classes: int = Field(10, ge=2)
    n_restarts: int = Field(32, ge=1)


class AdaBoostOCConfig(BaseModel):
    kind: Literal["adaboost_oc"] = "adaboost_oc"

    n_models: int = Field(10, ge=0)
    n_jobs: Optional[int] = None

    coloring: ColoringSearchConfig = Field(default_factory=ColoringSearchConfig)
    random_state: Optional[int] = None


# -----------------------------
# Discriminated union
# -----------------------------

EnsembleConfig = Annotated[
    Union[
        BaggingConfig,
        AdaBoostMHConfig,
        AdaBoostOCConfig,
    ],
    Field(discriminator="kind"),
]


__all__ = [
    "BaggingConfig",
    "AdaBoostMHConfig",
    "ColoringSearchConfig",
    "AdaBoostOCConfig",
    "EnsembleConfig",
]
