"""Category classification on top of the field checks."""

from .categories import Category
from .classifier import Classification, Classifier, Outcome, compose_label
from .diagnostics import last_failed_step

__all__ = [
    "Category",
    "Classification",
    "Classifier",
    "Outcome",
    "compose_label",
    "last_failed_step",
]
