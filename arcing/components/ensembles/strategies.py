from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from arcing.contracts.ensemble_configs import AdaBoostMHConfig, AdaBoostOCConfig, BaggingConfig

from arcing.components.interfaces import EnsembleBuilder, LearnerFactory
from arcing.components.ensembles.adaboost_mh import AdaBoostMH
from arcing.components.ensembles.adaboost_oc import AdaBoostOC
from arcing.components.ensembles.bagging import Bagging
from arcing.components.ensembles.coloring import make_coloring_search
from arcing.factories.line_search_factory import make_line_search
from arcing.core.training_set import TrainingSet
from arcing.runtime.random.rng import RngManager


def _resolve_rngm(rngm: Optional[RngManager], random_state: Optional[int]) -> RngManager:
    if random_state is not None:
        return RngManager(int(random_state))
    return rngm or RngManager(None)


@dataclass
class BaggingEnsembleStrategy(EnsembleBuilder):
    cfg: BaggingConfig

    def make_ensemble(
        self,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[RngManager] = None,
        stream: str = "bagging",
    ) -> Bagging:
        rngm = _resolve_rngm(rngm, self.cfg.random_state)
        return Bagging(
            learner_factory,
            rng=rngm.child_generator(f"{stream}/bootstrap"),
            n_jobs=self.cfg.n_jobs,
        )

    def fit(
        self,
        training_set: TrainingSet,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[RngManager] = None,
        stream: str = "bagging",
    ) -> Bagging:
        ens = self.make_ensemble(learner_factory, rngm=rngm, stream=stream)
        return ens.construct(training_set, self.cfg.n_models)


@dataclass
class AdaBoostMHEnsembleStrategy(EnsembleBuilder):
    cfg: AdaBoostMHConfig

    def make_ensemble(
        self,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[RngManager] = None,
        stream: str = "adaboost_mh",
    ) -> AdaBoostMH:
        ls = self.cfg.line_search
        return AdaBoostMH(
            learner_factory,
            line_search=make_line_search(ls),
            low=ls.low,
            high=ls.high,
            n_jobs=self.cfg.n_jobs,
        )

    def fit(
        self,
        training_set: TrainingSet,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[RngManager] = None,
        stream: str = "adaboost_mh",
    ) -> AdaBoostMH:
        ens = self.make_ensemble(learner_factory, rngm=rngm, stream=stream)
        return ens.construct(training_set, self.cfg.n_models)


@dataclass
class AdaBoostOCEnsembleStrategy(EnsembleBuilder):
    cfg: AdaBoostOCConfig

    def make_ensemble(
        self,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[RngManager] = None,
        stream: str = "adaboost_oc",
        n_classes: Optional[int] = None,
    ) -> AdaBoostOC:
        rngm = _resolve_rngm(rngm, self.cfg.random_state)
        col = self.cfg.coloring
        search = make_coloring_search(
            col.strategy,
            rng=rngm.child_generator(f"{stream}/coloring"),
            n_restarts=col.n_restarts,
            max_exhaustive_classes=col.max_exhaustive_classes,
            n_classes=n_classes,
            n_jobs=self.cfg.n_jobs,
        )
        return AdaBoostOC(learner_factory, coloring_search=search, n_jobs=self.cfg.n_jobs)

    def fit(
        self,
        training_set: TrainingSet,
        learner_factory: LearnerFactory,
        *,
        rngm: Optional[RngManager] = None,
        stream: str = "adaboost_oc",
    ) -> AdaBoostOC:
        ens = self.make_ensemble(
            learner_factory,
            rngm=rngm,
            stream=stream,
            n_classes=training_set.n_classes,
        )
        return ens.construct(training_set, self.cfg.n_models)
