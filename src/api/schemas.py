from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

# --- Shared Enums/Types ---
SpeciesType = Literal["dog", "cat", "other"]


# --- Age Query ---
class PetAgeRequest(BaseModel):
    species: str | None = Field(None, description="Species tag, e.g. 'dog' or 'cat'")
    date_of_birth: str | None = Field(None, description="ISO-8601 date of birth")
    include_milestones: bool = True
    name: str | None = Field(None, description="Optional display name")


class CalendarAgeModel(BaseModel):
    years: int
    months: int


class LifeStageModel(BaseModel):
    stage: str
    emoji: str
    color: str
    description: str
    tips: list[str] = []


class MilestoneModel(BaseModel):
    stage: str
    age: float
    human_age: int
    reached_on: date
    months_until: int


class IssueModel(BaseModel):
    code: str
    message: str
    field: str | None = None


class PetAgeResponse(BaseModel):
    name: str | None = None
    species: SpeciesType
    actual_age: CalendarAgeModel
    human_age: int
    life_stage: LifeStageModel
    formatted_age: str
    age_in_years: float
    milestones: list[MilestoneModel] = []
    warnings: list[IssueModel] = []


# --- Multi-pet Comparison ---
class ComparePetsRequest(BaseModel):
    pets: list[PetAgeRequest] = Field(..., min_length=1)


class RankedPetModel(BaseModel):
    rank: int
    name: str | None = None
    species: SpeciesType
    human_age: int
    formatted_age: str
    errors: list[IssueModel] = []


class ComparePetsResponse(BaseModel):
    oldest: str | None = None
    pets: list[RankedPetModel]


# --- Age Chart ---
class AgeChartRowModel(BaseModel):
    age: float
    human_age: int
    stage: str
    is_current: bool = False


class AgeChartResponse(BaseModel):
    species: SpeciesType
    rows: list[AgeChartRowModel]
