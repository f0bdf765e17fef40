"""
Pet age component - Calendar age, human-equivalent age and life stages.

Converts a birth date and species into elapsed calendar age, an
equivalent "human years" figure, and a life-stage record with care tips.

Invariants:
- Calendar age counts whole completed months only (0 <= months <= 11)
- Calendar age is never negative; future birth dates collapse to zero
- Exactly one life stage applies for any (species, age)
- Display-path calculations never raise; problems are reported as
  validation errors/warnings on the output
"""

from __future__ import annotations

import math
from datetime import date, datetime

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

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
    UnknownSpeciesCurve,
)
from .ports import PetAgeRulesPort, TodayPort
from .stages import (
    AGING_RATE_AFTER_TWO,
    LIFE_STAGE_TABLES,
    UNKNOWN_LIFE_STAGE,
)

# --- Default Configuration ---

# Rough month length used for "in N months" countdowns
DAYS_PER_MONTH = 30


# --- Pure Functions (Functional Core) ---


def _as_date(value: date) -> date:
    """Drop the time of day from datetimes; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding towards +infinity.

    Python's round() uses banker's rounding (round(28.5) == 28); the
    published conversion tables round 28.5 up to 29.
    """
    return math.floor(value + 0.5)


def normalize_species(tag: str | None) -> Species:
    """Map a free-form species tag to "dog", "cat" or "other"."""
    if not tag:
        return "other"

    value = tag.strip().lower()
    if value == "dog":
        return "dog"
    if value == "cat":
        return "cat"
    return "other"


def parse_birth_date(
    value: str | date | None,
) -> tuple[date | None, list[PetAgeValidationError]]:
    """
    Parse a birth date from an ISO-8601 date or datetime.

    Time of day and UTC offset are discarded; only the calendar date
    matters.

    Args:
        value: ISO string, date/datetime, or None

    Returns:
        Tuple of (parsed date or None, validation errors)
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None, [
            PetAgeValidationError(
                code="MISSING_BIRTH_DATE",
                message="Date of birth is required",
                field_name="date_of_birth",
            )
        ]

    if isinstance(value, datetime):
        return value.date(), []
    if isinstance(value, date):
        return value, []

    try:
        return date_parser.isoparse(value.strip()).date(), []
    except (ValueError, OverflowError):
        return None, [
            PetAgeValidationError(
                code="INVALID_BIRTH_DATE",
                message=f"Date of birth is not an ISO-8601 date: {value!r}",
                field_name="date_of_birth",
            )
        ]


def calculate_calendar_age(birth_date: date | None, now: date) -> CalendarAge:
    """
    Whole years and residual whole months between birth_date and now.

    A partial current month is not counted. Missing or future birth
    dates yield a zero age.
    """
    now = _as_date(now)
    if birth_date is None:
        return CalendarAge()

    birth_date = _as_date(birth_date)
    if birth_date > now:
        return CalendarAge()

    years = now.year - birth_date.year
    months = now.month - birth_date.month

    if months < 0:
        years -= 1
        months += 12

    # Day of month not reached yet
    if now.day < birth_date.day:
        months -= 1
        if months < 0:
            years -= 1
            months += 12

    return CalendarAge(years=years, months=months)


def _human_age_curve(total_years: float, rate_after_two: float) -> int:
    if total_years <= 1:
        return round_half_up(total_years * 15)
    if total_years <= 2:
        return round_half_up(15 + (total_years - 1) * 9)
    return round_half_up(24 + (total_years - 2) * rate_after_two)


def calculate_human_age(
    species: Species,
    total_years: float,
    *,
    unknown_species_curve: UnknownSpeciesCurve = "dog",
) -> int:
    """
    Convert an age in years to human-equivalent years.

    First year maps to 15 human years, the second adds 9, then each
    further year adds 4.5 (dog) or 4 (cat). Each segment is rounded
    on its own.

    Species other than dog/cat use the dog curve unless
    unknown_species_curve is "none", in which case 0 is returned.
    """
    if total_years <= 0:
        return 0

    if species in AGING_RATE_AFTER_TWO:
        rate = AGING_RATE_AFTER_TWO[species]
    elif unknown_species_curve == "dog":
        rate = AGING_RATE_AFTER_TWO["dog"]
    else:
        return 0

    return _human_age_curve(total_years, rate)


def calculate_dog_age(age_in_years: float, age_in_months: float = 0) -> int:
    """Dog age in human years for years + additional months."""
    total_months = age_in_years * 12 + age_in_months
    return calculate_human_age("dog", total_months / 12)


def calculate_cat_age(age_in_years: float, age_in_months: float = 0) -> int:
    """Cat age in human years for years + additional months."""
    total_months = age_in_years * 12 + age_in_months
    return calculate_human_age("cat", total_months / 12)


def get_life_stage(species: Species, age_in_years: float) -> LifeStage:
    """
    Select the life stage for a species at the given age.

    Unknown species get a degenerate "Unknown" stage with no tips.
    """
    table = LIFE_STAGE_TABLES.get(species, ())
    if not table:
        return UNKNOWN_LIFE_STAGE

    for stage in reversed(table):
        if age_in_years >= stage.min_age:
            return stage
    return table[0]


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_age(age: CalendarAge) -> str:
    """
    Human-readable age, e.g. "2 years, 3 months", "1 year" or "5 months".
    """
    if age.years > 0:
        text = _pluralize(age.years, "year")
        if age.months > 0:
            text = f"{text}, {_pluralize(age.months, 'month')}"
        return text
    return _pluralize(age.months, "month")


def milestone_date(birth_date: date, age: float) -> date:
    """
    Calendar date on which a pet born on birth_date reaches `age` years.

    Fractional years are converted to whole months; days past the end
    of a shorter month are clamped to its last day.
    """
    whole_years = math.floor(age)
    extra_months = round_half_up((age - whole_years) * 12)
    return birth_date + relativedelta(years=whole_years, months=extra_months)


def get_upcoming_milestones(
    species: Species,
    birth_date: date | None,
    now: date,
    limit: int = 3,
) -> tuple[Milestone, ...]:
    """
    Next life stages the pet has not reached yet, soonest first.

    Args:
        species: Normalized species
        birth_date: Parsed birth date (None yields no milestones)
        now: Reference date
        limit: Maximum number of milestones returned

    Returns:
        Tuple of Milestone records (empty for unknown species)
    """
    if birth_date is None or limit <= 0:
        return ()

    now = _as_date(now)
    birth_date = _as_date(birth_date)
    if birth_date > now:
        return ()

    current_age = calculate_calendar_age(birth_date, now).in_years
    milestones: list[Milestone] = []

    for stage in LIFE_STAGE_TABLES.get(species, ()):
        if stage.min_age <= current_age:
            continue

        reached_on = milestone_date(birth_date, stage.min_age)
        # Month-end births: the clamped date can land on or before today
        # while the calendar age has not completed the month yet
        if reached_on <= now:
            continue

        milestones.append(
            Milestone(
                stage=stage.name,
                age=stage.min_age,
                human_age=calculate_human_age(species, stage.min_age),
                reached_on=reached_on,
                months_until=round_half_up((reached_on - now).days / DAYS_PER_MONTH),
            )
        )
        if len(milestones) >= limit:
            break

    return tuple(milestones)


def validate_chart_ages(ages: tuple[float, ...]) -> list[PetAgeValidationError]:
    """Chart ages must be positive and at most MAX_CHART_AGE years."""
    errors: list[PetAgeValidationError] = []

    if not ages:
        errors.append(
            PetAgeValidationError(
                code="INVALID_CHART_AGE",
                message="At least one chart age is required",
                field_name="ages",
            )
        )
        return errors

    for age in ages:
        if not 0 < age <= MAX_CHART_AGE:
            errors.append(
                PetAgeValidationError(
                    code="INVALID_CHART_AGE",
                    message=f"Chart age must be in (0, {MAX_CHART_AGE}], got {age}",
                    field_name="ages",
                )
            )

    return errors


def build_age_chart(
    species: Species,
    ages: tuple[float, ...] = DEFAULT_CHART_AGES,
    *,
    unknown_species_curve: UnknownSpeciesCurve = "dog",
    current_age: float | None = None,
) -> AgeChartOutput:
    """
    Age conversion chart: human age and life stage at each listed age.

    When `current_age` is given, the row whose age equals its whole
    years is flagged as current.
    """
    current_row = math.floor(current_age) if current_age is not None else None
    errors = validate_chart_ages(ages)
    if errors:
        return AgeChartOutput(species=species, rows=(), errors=errors, success=False)

    rows = tuple(
        AgeChartRow(
            age=age,
            human_age=calculate_human_age(
                species, age, unknown_species_curve=unknown_species_curve
            ),
            stage=get_life_stage(species, age).name,
            is_current=age == current_row,
        )
        for age in ages
    )
    return AgeChartOutput(species=species, rows=rows)


def get_pet_age_info(
    species: str | None,
    date_of_birth: str | date | None,
    now: date | None = None,
    *,
    config: PetAgeConfig | None = None,
    include_milestones: bool = False,
    name: str | None = None,
) -> PetAgeInfo:
    """
    Complete age information for one pet.

    Pure given `now`; when omitted the system date is used.

    Args:
        species: Species tag ("dog", "cat", anything else is "other")
        date_of_birth: ISO-8601 date string or date
        now: Reference date
        config: Calculator policy (defaults when None)
        include_milestones: Also compute upcoming milestones
        name: Display name carried through to the result

    Returns:
        PetAgeInfo; never raises for bad input
    """
    cfg = config or PetAgeConfig()
    today = now or date.today()
    if isinstance(today, datetime):
        today = today.date()

    normalized = normalize_species(species)
    birth_date, errors = parse_birth_date(date_of_birth)
    warnings: list[PetAgeValidationError] = []

    if birth_date is not None and birth_date > today:
        future = PetAgeValidationError(
            code="FUTURE_BIRTH_DATE",
            message=f"Date of birth {birth_date.isoformat()} is after {today.isoformat()}",
            field_name="date_of_birth",
        )
        if cfg.future_birth_date == "reject":
            errors.append(future)
        else:
            warnings.append(future)

    if normalized == "other":
        curve_note = (
            "dog curve used for human age"
            if cfg.unknown_species_curve == "dog"
            else "human age not computed"
        )
        warnings.append(
            PetAgeValidationError(
                code="UNKNOWN_SPECIES",
                message=f"Unrecognized species {species!r}; {curve_note}",
                field_name="species",
            )
        )

    age = calculate_calendar_age(birth_date, today)
    human_age = calculate_human_age(
        normalized,
        age.total_months / 12,
        unknown_species_curve=cfg.unknown_species_curve,
    )

    milestones: tuple[Milestone, ...] = ()
    if include_milestones:
        milestones = get_upcoming_milestones(
            normalized, birth_date, today, limit=cfg.milestone_limit
        )

    return PetAgeInfo(
        species=normalized,
        actual_age=age,
        human_age=human_age,
        life_stage=get_life_stage(normalized, age.in_years),
        formatted_age=format_age(age),
        milestones=milestones,
        warnings=tuple(warnings),
        errors=tuple(errors),
        name=name,
    )


def rank_pets_by_age(
    pets: tuple[PetAgeInput, ...],
    now: date | None = None,
    *,
    config: PetAgeConfig | None = None,
) -> ComparePetsOutput:
    """
    Order pets oldest first by human-equivalent age.

    Pets with errors (e.g. no birth date) sort after every valid pet.
    Ties keep input order.
    """
    infos = [
        get_pet_age_info(
            pet.species,
            pet.date_of_birth,
            pet.now or now,
            config=config,
            include_milestones=pet.include_milestones,
            name=pet.name,
        )
        for pet in pets
    ]
    ranked = sorted(infos, key=lambda info: (not info.success, -info.human_age))
    return ComparePetsOutput(ranked=tuple(ranked))


def config_from_rules(rules: PetAgeRulesPort) -> PetAgeConfig:
    """Build calculator policy from a rules port."""
    return PetAgeConfig(
        future_birth_date=rules.get_future_birth_date_policy(),
        unknown_species_curve=rules.get_unknown_species_curve(),
        milestone_limit=rules.get_milestone_limit(),
        chart_ages=tuple(rules.get_chart_ages()),
    )


# --- Component Entry Points ---


def run_get_age_info(
    inp: PetAgeInput,
    *,
    rules: PetAgeRulesPort | None = None,
    clock: TodayPort | None = None,
) -> PetAgeInfo:
    """
    Aggregate age query handler (Functional Core).

    An explicit `now` on the input wins over the clock port.
    """
    config = config_from_rules(rules) if rules else PetAgeConfig()
    now = inp.now or (clock.today() if clock else None)

    return get_pet_age_info(
        inp.species,
        inp.date_of_birth,
        now,
        config=config,
        include_milestones=inp.include_milestones,
        name=inp.name,
    )


def run_build_chart(
    inp: AgeChartInput,
    *,
    rules: PetAgeRulesPort | None = None,
) -> AgeChartOutput:
    """
    Age chart handler (Functional Core).
    """
    config = config_from_rules(rules) if rules else PetAgeConfig()
    ages = inp.ages if inp.ages is not None else config.chart_ages

    return build_age_chart(
        normalize_species(inp.species),
        ages,
        unknown_species_curve=config.unknown_species_curve,
        current_age=inp.current_age,
    )


def run_compare_pets(
    inp: ComparePetsInput,
    *,
    rules: PetAgeRulesPort | None = None,
    clock: TodayPort | None = None,
) -> ComparePetsOutput:
    """
    Multi-pet comparison handler (Functional Core).
    """
    config = config_from_rules(rules) if rules else PetAgeConfig()
    now = inp.now or (clock.today() if clock else None)

    return rank_pets_by_age(inp.pets, now, config=config)


def run(
    inp: PetAgeInput | AgeChartInput | ComparePetsInput,
    *,
    rules: PetAgeRulesPort | None = None,
    clock: TodayPort | None = None,
) -> PetAgeInfo | AgeChartOutput | ComparePetsOutput:
    """
    Main component entry point (Atomic Component Pattern).

    Args:
        inp: Input model (PetAgeInput, AgeChartInput or ComparePetsInput)
        rules: Configuration rules port
        clock: Reference date port

    Returns:
        Output model (PetAgeInfo, AgeChartOutput or ComparePetsOutput)
    """
    if isinstance(inp, PetAgeInput):
        return run_get_age_info(inp, rules=rules, clock=clock)
    elif isinstance(inp, AgeChartInput):
        return run_build_chart(inp, rules=rules)
    elif isinstance(inp, ComparePetsInput):
        return run_compare_pets(inp, rules=rules, clock=clock)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
