from __future__ import annotations

from typing import Optional

from arcing.contracts.learner_configs import LearnerConfig

from arcing.registries.learners import make_learner_factory as _make_factory

from arcing.components.interfaces import LearnerFactory
from arcing.runtime.random.rng import RngManager


def make_learner_factory(
    cfg: LearnerConfig,
    *,
    rngm: Optional[RngManager] = None,
    stream: str = "learner",
) -> LearnerFactory:
    """Return a zero-argument callable producing fresh learners for `cfg`."""
    return _make_factory(cfg, rngm or RngManager(None), stream)
