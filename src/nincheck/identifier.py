from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .engine.categories import Category
from .engine.classifier import Classification, Classifier, Outcome


@dataclass(frozen=True)
class Identifier:
    """
    An identifier string with the validation operations attached.

    Construction never validates; ``Identifier("abc")`` is fine and simply
    reports itself as invalid. Results do not touch the context-local
    diagnostics; read ``Outcome.failed_step`` instead.
    """
    value: str
    classifier: Classifier = field(default_factory=Classifier, repr=False, compare=False)

    def check(self, production: Optional[bool] = None) -> Outcome:
        return self.classifier.validate(self.value, production=production)

    def is_valid(self, production: Optional[bool] = None) -> bool:
        return self.check(production).is_valid

    def is_category(self, category: Category) -> bool:
        return self.classifier.check(self.value, category).is_valid

    @property
    def classification(self) -> Classification:
        return self.classifier.classify(self.value)

    @property
    def label(self) -> str:
        return self.classification.label

    @property
    def birthdate(self) -> Optional[date]:
        return self.classifier.birthdate(self.value)

    @property
    def has_birthdate(self) -> bool:
        return self.birthdate is not None

    def __str__(self) -> str:
        return self.value
