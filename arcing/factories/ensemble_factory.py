from __future__ import annotations

from typing import Any

from arcing.contracts.ensemble_configs import EnsembleConfig

from arcing.registries.ensembles import make_ensemble_strategy as _make_strategy

from arcing.components.interfaces import EnsembleBuilder


def make_ensemble_strategy(cfg: EnsembleConfig) -> EnsembleBuilder:
    """Thin wrapper around the ensemble registry."""
    return _make_strategy(cfg)


def make_ensemble(cfg: EnsembleConfig, learner_factory, **kwargs: Any) -> Any:
    """Convenience helper: build an unconstructed ensemble."""
    return make_ensemble_strategy(cfg).make_ensemble(learner_factory, **kwargs)
