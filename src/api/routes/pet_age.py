"""
Pet age endpoints.

Endpoints:
- POST /api/pet-age        Human-equivalent age, life stage and milestones
- POST /api/pet-age/compare Rank several pets, oldest first
- GET  /api/pet-age/chart  Age conversion chart for a species

Public routes (no auth). The calculator itself never raises; inputs it
cannot use (missing or malformed birth date, rejected future date) are
returned as 422.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.adapters.pet_age_rules import RulesPetAgeAdapter
from src.api.deps import get_clock, get_pet_age_rules
from src.api.schemas import (
    AgeChartResponse,
    AgeChartRowModel,
    CalendarAgeModel,
    ComparePetsRequest,
    ComparePetsResponse,
    IssueModel,
    LifeStageModel,
    MilestoneModel,
    PetAgeRequest,
    PetAgeResponse,
    RankedPetModel,
)
from src.components.pet_age import (
    AgeChartInput,
    AgeChartOutput,
    ComparePetsInput,
    ComparePetsOutput,
    PetAgeInfo,
    PetAgeInput,
    PetAgeValidationError,
    TodayPort,
    run,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _issue(error: PetAgeValidationError) -> IssueModel:
    return IssueModel(code=error.code, message=error.message, field=error.field_name)


def _to_response(info: PetAgeInfo) -> PetAgeResponse:
    stage = info.life_stage
    return PetAgeResponse(
        name=info.name,
        species=info.species,
        actual_age=CalendarAgeModel(
            years=info.actual_age.years,
            months=info.actual_age.months,
        ),
        human_age=info.human_age,
        life_stage=LifeStageModel(
            stage=stage.name,
            emoji=stage.emoji,
            color=stage.color,
            description=stage.description,
            tips=list(stage.tips),
        ),
        formatted_age=info.formatted_age,
        age_in_years=info.age_in_years,
        milestones=[
            MilestoneModel(
                stage=m.stage,
                age=m.age,
                human_age=m.human_age,
                reached_on=m.reached_on,
                months_until=m.months_until,
            )
            for m in info.milestones
        ],
        warnings=[_issue(w) for w in info.warnings],
    )


@router.post(
    "",
    response_model=PetAgeResponse,
    summary="Calculate pet age",
    description="Calendar age, human-equivalent age, life stage and upcoming milestones.",
)
def calculate_pet_age(
    request: PetAgeRequest,
    rules: RulesPetAgeAdapter = Depends(get_pet_age_rules),
    clock: TodayPort = Depends(get_clock),
) -> PetAgeResponse:
    inp = PetAgeInput(
        species=request.species,
        date_of_birth=request.date_of_birth,
        include_milestones=request.include_milestones,
        name=request.name,
    )
    result = run(inp, rules=rules, clock=clock)
    assert isinstance(result, PetAgeInfo)

    if not result.success:
        first = result.errors[0]
        logger.info("Pet age request rejected: %s", first.code)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"code": first.code, "message": first.message},
        )

    for warning in result.warnings:
        logger.debug("Pet age warning %s: %s", warning.code, warning.message)

    return _to_response(result)


@router.post(
    "/compare",
    response_model=ComparePetsResponse,
    summary="Compare pets by age",
    description="Rank pets oldest first by human-equivalent age.",
)
def compare_pets(
    request: ComparePetsRequest,
    rules: RulesPetAgeAdapter = Depends(get_pet_age_rules),
    clock: TodayPort = Depends(get_clock),
) -> ComparePetsResponse:
    inp = ComparePetsInput(
        pets=tuple(
            PetAgeInput(
                species=pet.species,
                date_of_birth=pet.date_of_birth,
                name=pet.name,
            )
            for pet in request.pets
        )
    )
    result = run(inp, rules=rules, clock=clock)
    assert isinstance(result, ComparePetsOutput)

    oldest = result.oldest
    return ComparePetsResponse(
        oldest=oldest.name if oldest else None,
        pets=[
            RankedPetModel(
                rank=position,
                name=info.name,
                species=info.species,
                human_age=info.human_age,
                formatted_age=info.formatted_age,
                errors=[_issue(e) for e in info.errors],
            )
            for position, info in enumerate(result.ranked, start=1)
        ],
    )


@router.get(
    "/chart",
    response_model=AgeChartResponse,
    summary="Age conversion chart",
)
def age_chart(
    species: str = Query("dog", description="Species tag"),
    current_age: float | None = Query(None, ge=0, description="Pet age in years; flags its row"),
    rules: RulesPetAgeAdapter = Depends(get_pet_age_rules),
) -> AgeChartResponse:
    result = run(AgeChartInput(species=species, current_age=current_age), rules=rules)
    assert isinstance(result, AgeChartOutput)

    if not result.success:
        first = result.errors[0]
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"code": first.code, "message": first.message},
        )

    return AgeChartResponse(
        species=result.species,
        rows=[
            AgeChartRowModel(
                age=row.age,
                human_age=row.human_age,
                stage=row.stage,
                is_current=row.is_current,
            )
            for row in result.rows
        ],
    )
