from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class LineSearchConfig(BaseModel):
    """
    Bracket-and-refine settings for the boosting step-size search.

    The coarse pass evaluates `n_grid` equally spaced points over [low, high];
    the refine pass stops after `max_iter` iterations or once the bracket is
    narrower than `xtol`.
    """
    low: float = -1.0
    high: float = 1.0
    n_grid: int = Field(3, ge=3)
    max_iter: int = Field(20, ge=1)
    xtol: float = Field(1e-6, gt=0.0)

    @model_validator(mode="after")
    def _check_interval(self) -> "LineSearchConfig":
        if not self.low < self.high:
            raise ValueError(f"line search needs low < high; got [{self.low}, {self.high}]")
        return self
