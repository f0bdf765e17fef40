"""
Pet age component input/output models.

Covers calendar age, human-equivalent age, life stages, upcoming
milestones, the age conversion chart and multi-pet comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

# --- Types ---

Species = Literal["dog", "cat", "other"]

FutureBirthDatePolicy = Literal["clamp", "reject"]
UnknownSpeciesCurve = Literal["dog", "none"]

DEFAULT_CHART_AGES: tuple[float, ...] = (0.5, 1, 2, 3, 5, 7, 10, 13, 16)

MAX_CHART_AGE = 30

DEFAULT_MILESTONE_LIMIT = 3

MAX_MILESTONE_LIMIT = 10


# --- Validation Error ---


@dataclass(frozen=True)
class PetAgeValidationError:
    """Pet age validation error or warning."""

    code: str
    message: str
    field_name: str | None = None


# --- Value Objects ---


@dataclass(frozen=True)
class CalendarAge:
    """Whole completed years and residual completed months since birth."""

    years: int = 0
    months: int = 0

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    @property
    def in_years(self) -> float:
        """Fractional age in years (years + months / 12)."""
        return self.years + self.months / 12


@dataclass(frozen=True)
class LifeStage:
    """
    Named developmental bracket with care guidance.

    `min_age` is the age in years at which the stage begins; the
    table in stages.py keeps stages ordered by it.
    """

    name: str
    emoji: str
    color: str  # tailwind gradient token, e.g. "from-blue-400 to-cyan-400"
    description: str
    tips: tuple[str, ...] = ()
    min_age: float = 0.0


@dataclass(frozen=True)
class Milestone:
    """A life stage the pet has not reached yet."""

    stage: str
    age: float
    human_age: int
    reached_on: date
    months_until: int


@dataclass(frozen=True)
class AgeChartRow:
    """One row of the age conversion chart."""

    age: float
    human_age: int
    stage: str
    is_current: bool = False


# --- Input Models ---


@dataclass(frozen=True)
class PetAgeInput:
    """Input for the aggregate age query."""

    species: str | None
    date_of_birth: str | date | None
    now: date | None = None
    include_milestones: bool = False
    name: str | None = None


@dataclass(frozen=True)
class AgeChartInput:
    """Input for building an age conversion chart."""

    species: str | None
    ages: tuple[float, ...] | None = None
    current_age: float | None = None


# --- Output Models ---


@dataclass(frozen=True)
class PetAgeInfo:
    """Composite age result for one pet."""

    species: Species
    actual_age: CalendarAge
    human_age: int
    life_stage: LifeStage
    formatted_age: str
    milestones: tuple[Milestone, ...] = ()
    warnings: tuple[PetAgeValidationError, ...] = ()
    errors: tuple[PetAgeValidationError, ...] = ()
    name: str | None = None

    @property
    def age_in_years(self) -> float:
        return self.actual_age.in_years

    @property
    def success(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class AgeChartOutput:
    """Output from chart generation."""

    species: Species
    rows: tuple[AgeChartRow, ...]
    errors: list[PetAgeValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class PetAgeConfig:
    """Calculator policy, usually read from the rules file."""

    future_birth_date: FutureBirthDatePolicy = "clamp"
    unknown_species_curve: UnknownSpeciesCurve = "dog"
    milestone_limit: int = DEFAULT_MILESTONE_LIMIT
    chart_ages: tuple[float, ...] = DEFAULT_CHART_AGES


@dataclass(frozen=True)
class ComparePetsInput:
    """Input for ranking several pets by human-equivalent age."""

    pets: tuple[PetAgeInput, ...]
    now: date | None = None


@dataclass(frozen=True)
class ComparePetsOutput:
    """Pets ordered oldest first by human-equivalent age."""

    ranked: tuple[PetAgeInfo, ...]

    @property
    def oldest(self) -> PetAgeInfo | None:
        """Oldest pet with a usable birth date, if any."""
        if self.ranked and self.ranked[0].success:
            return self.ranked[0]
        return None
