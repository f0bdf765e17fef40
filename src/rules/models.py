from typing import Literal

from pydantic import BaseModel, Field, field_validator

from src.components.pet_age.models import (
    DEFAULT_CHART_AGES,
    DEFAULT_MILESTONE_LIMIT,
    MAX_CHART_AGE,
    MAX_MILESTONE_LIMIT,
)


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class PetAgeRules(BaseModel):
    future_birth_date: Literal["clamp", "reject"] = "clamp"
    unknown_species_curve: Literal["dog", "none"] = "dog"
    milestone_limit: int = Field(default=DEFAULT_MILESTONE_LIMIT, ge=0, le=MAX_MILESTONE_LIMIT)
    chart_ages: list[float] = Field(
        default_factory=lambda: list(DEFAULT_CHART_AGES), min_length=1
    )

    @field_validator("chart_ages")
    @classmethod
    def validate_chart_ages(cls, v: list[float]) -> list[float]:
        for age in v:
            if not 0 < age <= MAX_CHART_AGE:
                raise ValueError(f"chart age must be in (0, {MAX_CHART_AGE}], got {age}")
        return v

class Rules(BaseModel):
    project: ProjectRules
    pet_age: PetAgeRules = Field(default_factory=PetAgeRules)
