"""arcing: bagging and multiclass boosting over an arbitrary trainable base learner."""

__version__ = "0.1.0"
