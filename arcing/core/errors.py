"""Exception types shared across the arcing package.

These are intentionally lightweight so they can be raised from compute paths
without importing configuration or reporting modules.
"""


class ArcingError(Exception):
    """Base class for all arcing errors."""


class TrainingSetError(ArcingError, ValueError):
    """Raised when a training set violates the input/label layout."""


class LearnerContractError(ArcingError, RuntimeError):
    """Raised when a base learner is driven outside reset -> add_case -> train -> predict."""


class EnsembleConstructionError(ArcingError, RuntimeError):
    """Raised when a learner or optimizer fails while an ensemble is being built."""

    def __init__(self, kind: str, member: int, message: str):
        self.kind = kind
        self.member = member
        super().__init__(f"{kind}: construction failed at member {member}: {message}")
