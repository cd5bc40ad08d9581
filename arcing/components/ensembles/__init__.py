"""Ensemble builders: bagging, AdaBoost.MH and AdaBoost.OC."""

from .adaboost_mh import AdaBoostMH
from .adaboost_oc import AdaBoostOC
from .bagging import Bagging

__all__ = ["AdaBoostMH", "AdaBoostOC", "Bagging"]
