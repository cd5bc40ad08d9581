from __future__ import annotations

"""Learner algos: `algo` on a learner config -> factory of fresh learners."""

from typing import Callable

from arcing.components.interfaces import LearnerFactory
from arcing.contracts.learner_configs import LearnerConfig
from arcing.registries.base import Registry
from arcing.runtime.random.rng import RngManager

# (cfg, rngm, stream) -> zero-argument callable; each call returns an untrained learner
LearnerFactoryBuilder = Callable[[LearnerConfig, RngManager, str], LearnerFactory]

_LEARNERS: Registry[str, LearnerFactoryBuilder] = Registry(
    _name="learner algo",
    _builtins="arcing.registries.builtins.learners",
)


def register_learner_algo(algo: str):
    return _LEARNERS.register(algo.lower())


def make_learner_factory(cfg: LearnerConfig, rngm: RngManager, stream: str = "learner") -> LearnerFactory:
    return _LEARNERS.get(str(cfg.algo).lower())(cfg, rngm, stream)


def list_learner_algos() -> list[str]:
    return _LEARNERS.names()
