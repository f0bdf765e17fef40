"""
Rules-file backed implementation of PetAgeRulesPort.
"""

from __future__ import annotations

from src.components.pet_age.models import FutureBirthDatePolicy, UnknownSpeciesCurve
from src.rules.models import PetAgeRules


class RulesPetAgeAdapter:
    """Exposes the `pet_age` section of rules.yaml through PetAgeRulesPort."""

    def __init__(self, rules: PetAgeRules) -> None:
        self._rules = rules

    def get_future_birth_date_policy(self) -> FutureBirthDatePolicy:
        return self._rules.future_birth_date

    def get_unknown_species_curve(self) -> UnknownSpeciesCurve:
        return self._rules.unknown_species_curve

    def get_milestone_limit(self) -> int:
        return self._rules.milestone_limit

    def get_chart_ages(self) -> tuple[float, ...]:
        return tuple(self._rules.chart_ages)
