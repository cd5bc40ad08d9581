"""Result contracts returned by the use-cases."""

from .common import ResultModel
from .ensemble import EnsembleSummary
from .comparison import ComparisonResult, MethodErrors, TrySummary

__all__ = [
    "ResultModel",
    "EnsembleSummary",
    "ComparisonResult",
    "MethodErrors",
    "TrySummary",
]
