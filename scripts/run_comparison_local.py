# scripts/run_comparison_local.py
from __future__ import annotations

import logging

from arcing.contracts.ensemble_configs import ColoringSearchConfig
from arcing.contracts.learner_configs import (  # noqa: F401
    GRNNLearnerConfig,
    LogisticLearnerConfig,
    MLPLearnerConfig,
    RidgeLearnerConfig,
    TreeLearnerConfig,
)
from arcing.contracts.line_search_configs import LineSearchConfig
from arcing.contracts.run_config import ComparisonRunConfig, SyntheticDataModel
from arcing.api import run_comparison

# ==== EDIT THESE AS YOU LIKE ==================================================
DATA = SyntheticDataModel(
    n_samples=50,        # training cases per try
    n_classes=5,
    separation=0.7,      # 0 puts every class on top of each other
    test_multiplier=10,  # test set is 10x the training set
)

# Example A: linear slots
LEARNER = RidgeLearnerConfig(alpha=1.0)

# Example B: boosting stumps
# LEARNER = TreeLearnerConfig(max_depth=1)

# Example C: kernel regression (slow, but the classic weak learner here)
# LEARNER = GRNNLearnerConfig(max_iter=50, max_evals=2000)

# Example D: 2-2-1 tanh network
# LEARNER = MLPLearnerConfig(hidden_units=2)

# Example E: logistic regression (log-odds output)
# LEARNER = LogisticLearnerConfig(C=1.0)

LINE_SEARCH = LineSearchConfig(low=-1.0, high=1.0, n_grid=3, max_iter=20)

COLORING = ColoringSearchConfig(
    strategy="auto",           # "exhaustive" | "random" | "auto"
    max_exhaustive_classes=10,
    n_restarts=32,
)

N_MODELS = 10
N_TRIES = 10
N_JOBS = None   # >1 trains the slots of one member in threads
SEED = 42
# ============================================================================


class _PrintProgress:
    def init(self, *, total, label=None):
        print(f"[{label}] total={total}")

    def update(self, *, current, label=None):
        print(f"[{label}]")

    def finalize(self, *, label=None):
        print(f"[{label}]")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg = ComparisonRunConfig(
        data=DATA,
        learner=LEARNER,
        n_models=N_MODELS,
        n_tries=N_TRIES,
        n_jobs=N_JOBS,
        line_search=LINE_SEARCH,
        coloring=COLORING,
        seed=SEED,
    )
    result = run_comparison(cfg, progress=_PrintProgress())

    print("\n=== COMPARISON RESULT ===")
    print(f"Learner: {result.learner_algo}  cases={result.n_samples}  classes={result.n_classes}")
    print(f"Tries: {result.n_tries_done}/{result.n_tries_requested}  models={result.n_models}")
    print(f"{'method':<12} {'train':>8} {'test':>8} {'numeric':>8}")
    for method, errs in result.mean_errors.items():
        numeric = "-" if errs.numeric_error is None else f"{errs.numeric_error:8.4f}"
        print(f"{method:<12} {errs.train_class_error:8.4f} {errs.test_class_error:8.4f} {numeric:>8}")


if __name__ == "__main__":
    main()
