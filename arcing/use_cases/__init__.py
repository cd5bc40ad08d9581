from .comparison import run_comparison
from .ensembles import (
    class_error,
    evaluate_ensemble,
    fit_ensemble,
    numeric_error,
    summarize_ensemble,
)

__all__ = [
    "fit_ensemble",
    "evaluate_ensemble",
    "summarize_ensemble",
    "class_error",
    "numeric_error",
    "run_comparison",
]
