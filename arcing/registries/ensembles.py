from __future__ import annotations

"""Ensemble kinds: `kind` on an ensemble config -> strategy that builds it."""

from typing import Callable

from arcing.components.interfaces import EnsembleBuilder
from arcing.contracts.ensemble_configs import EnsembleConfig
from arcing.registries.base import Registry

EnsembleStrategyFactory = Callable[[EnsembleConfig], EnsembleBuilder]

_ENSEMBLES: Registry[str, EnsembleStrategyFactory] = Registry(
    _name="ensemble kind",
    _builtins="arcing.registries.builtins.ensembles",
)


def register_ensemble_kind(kind: str):
    return _ENSEMBLES.register(kind.lower())


def make_ensemble_strategy(cfg: EnsembleConfig) -> EnsembleBuilder:
    return _ENSEMBLES.get(str(cfg.kind).lower())(cfg)


def list_ensemble_kinds() -> list[str]:
    return _ENSEMBLES.names()
