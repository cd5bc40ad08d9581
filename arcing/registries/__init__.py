"""Registries.

The idea is:
- add a new ensemble kind or learner
- register it
- the rest of the system stays closed for modification
"""

from .ensembles import make_ensemble_strategy, register_ensemble_kind, list_ensemble_kinds
from .learners import make_learner_factory, register_learner_algo, list_learner_algos
