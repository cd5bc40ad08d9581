"""Built-in ensemble strategy registrations."""

from __future__ import annotations

from arcing.registries.ensembles import register_ensemble_kind

from arcing.contracts.ensemble_configs import AdaBoostMHConfig, AdaBoostOCConfig, BaggingConfig

from arcing.components.ensembles.strategies import (
    AdaBoostMHEnsembleStrategy,
    AdaBoostOCEnsembleStrategy,
    BaggingEnsembleStrategy,
)


@register_ensemble_kind("bagging")
def _bagging(cfg: BaggingConfig):
    return BaggingEnsembleStrategy(cfg)


@register_ensemble_kind("adaboost_mh")
def _adaboost_mh(cfg: AdaBoostMHConfig):
    return AdaBoostMHEnsembleStrategy(cfg)


@register_ensemble_kind("adaboost_oc")
def _adaboost_oc(cfg: AdaBoostOCConfig):
    return AdaBoostOCEnsembleStrategy(cfg)
