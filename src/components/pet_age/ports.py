"""
Pet age component port definitions.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from .models import FutureBirthDatePolicy, UnknownSpeciesCurve


class TodayPort(Protocol):
    """Port supplying the reference date for age calculations."""

    def today(self) -> date:
        """Return the current calendar date."""
        ...


class PetAgeRulesPort(Protocol):
    """Port for pet age rules configuration."""

    def get_future_birth_date_policy(self) -> FutureBirthDatePolicy:
        """How to treat birth dates after the reference date."""
        ...

    def get_unknown_species_curve(self) -> UnknownSpeciesCurve:
        """Which human-age curve applies to species other than dog/cat."""
        ...

    def get_milestone_limit(self) -> int:
        """Maximum number of upcoming milestones to report."""
        ...

    def get_chart_ages(self) -> tuple[float, ...]:
        """Ages (in years) listed in the conversion chart."""
        ...
