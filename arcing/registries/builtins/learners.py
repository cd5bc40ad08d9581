"""Built-in learner registrations.

Every factory hands each new learner its own named random stream, so slot
k of a run always sees the same draws regardless of how many other slots
exist or in what order they are created.
"""

from __future__ import annotations

import itertools

from sklearn.linear_model import LogisticRegression, Ridge
from sklearn.neural_network import MLPRegressor
from sklearn.tree import DecisionTreeRegressor

from arcing.registries.learners import register_learner_algo

from arcing.contracts.learner_configs import (
    GRNNLearnerConfig,
    LogisticLearnerConfig,
    MLPLearnerConfig,
    RidgeLearnerConfig,
    TreeLearnerConfig,
)
from arcing.components.learners import GRNNLearner, SklearnLearner
from arcing.runtime.random.rng import RngManager


@register_learner_algo("ridge")
def _ridge(cfg: RidgeLearnerConfig, rngm: RngManager, stream: str):
    template = Ridge(alpha=cfg.alpha, fit_intercept=cfg.fit_intercept)

    def factory() -> SklearnLearner:
        return SklearnLearner(template)

    return factory


@register_learner_algo("tree")
def _tree(cfg: TreeLearnerConfig, rngm: RngManager, stream: str):
    counter = itertools.count()

    def factory() -> SklearnLearner:
        seed = rngm.child_seed(f"{stream}/tree_{next(counter)}")
        return SklearnLearner(
            DecisionTreeRegressor(
                max_depth=cfg.max_depth,
                min_samples_leaf=cfg.min_samples_leaf,
                random_state=seed,
            )
        )

    return factory


@register_learner_algo("grnn")
def _grnn(cfg: GRNNLearnerConfig, rngm: RngManager, stream: str):
    counter = itertools.count()

    def factory() -> GRNNLearner:
        return GRNNLearner(
            rngm.child_generator(f"{stream}/grnn_{next(counter)}"),
            max_iter=cfg.max_iter,
            max_evals=cfg.max_evals,
            log_sigma_bound=cfg.log_sigma_bound,
        )

    return factory


@register_learner_algo("logistic")
def _logistic(cfg: LogisticLearnerConfig, rngm: RngManager, stream: str):
    template = LogisticRegression(C=cfg.C, max_iter=cfg.max_iter)

    def factory() -> SklearnLearner:
        return SklearnLearner(template)

    return factory


@register_learner_algo("mlp")
def _mlp(cfg: MLPLearnerConfig, rngm: RngManager, stream: str):
    counter = itertools.count()

    def factory() -> SklearnLearner:
        # Initial weights differ per slot but are fixed by the run seed
        seed = rngm.child_seed(f"{stream}/mlp_{next(counter)}")
        return SklearnLearner(
            MLPRegressor(
                hidden_layer_sizes=(cfg.hidden_units,),
                activation=cfg.activation,
                solver=cfg.solver,
                alpha=cfg.alpha,
                max_iter=cfg.max_iter,
                random_state=seed,
            )
        )

    return factory
