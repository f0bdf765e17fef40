"""
Pet age component - Human-equivalent age and life-stage calculator.
"""

from .component import (
    build_age_chart,
    calculate_calendar_age,
    calculate_cat_age,
    calculate_dog_age,
    calculate_human_age,
    config_from_rules,
    format_age,
    get_life_stage,
    get_pet_age_info,
    get_upcoming_milestones,
    milestone_date,
    normalize_species,
    parse_birth_date,
    rank_pets_by_age,
    round_half_up,
    run,
    run_build_chart,
    run_compare_pets,
    run_get_age_info,
)
from .models import (
    DEFAULT_CHART_AGES,
    MAX_CHART_AGE,
    AgeChartInput,
    AgeChartOutput,
    AgeChartRow,
    CalendarAge,
    ComparePetsInput,
    ComparePetsOutput,
    LifeStage,
    Milestone,
    PetAgeConfig,
    PetAgeInfo,
    PetAgeInput,
    PetAgeValidationError,
    Species,
)
from .ports import PetAgeRulesPort, TodayPort
from .stages import CAT_LIFE_STAGES, DOG_LIFE_STAGES, UNKNOWN_LIFE_STAGE

__all__ = [
    # Component
    "run",
    "run_get_age_info",
    "run_build_chart",
    "run_compare_pets",
    # Pure functions
    "get_pet_age_info",
    "calculate_calendar_age",
    "calculate_human_age",
    "calculate_dog_age",
    "calculate_cat_age",
    "get_life_stage",
    "get_upcoming_milestones",
    "build_age_chart",
    "rank_pets_by_age",
    "format_age",
    "milestone_date",
    "normalize_species",
    "parse_birth_date",
    "round_half_up",
    "config_from_rules",
    # Constants
    "DEFAULT_CHART_AGES",
    "MAX_CHART_AGE",
    "DOG_LIFE_STAGES",
    "CAT_LIFE_STAGES",
    "UNKNOWN_LIFE_STAGE",
    # Models
    "Species",
    "CalendarAge",
    "LifeStage",
    "Milestone",
    "AgeChartRow",
    "PetAgeInput",
    "AgeChartInput",
    "PetAgeInfo",
    "AgeChartOutput",
    "ComparePetsInput",
    "ComparePetsOutput",
    "PetAgeConfig",
    "PetAgeValidationError",
    # Ports
    "PetAgeRulesPort",
    "TodayPort",
]
