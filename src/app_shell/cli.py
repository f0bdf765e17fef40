import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from pathlib import Path

from src.adapters.clock import FixedClock, SystemClock
from src.adapters.pet_age_rules import RulesPetAgeAdapter
from src.components.pet_age import (
    AgeChartInput,
    AgeChartOutput,
    PetAgeInfo,
    PetAgeInput,
    run,
)
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_rules_port(path: str) -> RulesPetAgeAdapter:
    rules_path = Path(path)
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)

    try:
        rules = load_rules(rules_path)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    return RulesPetAgeAdapter(rules.pet_age)


def _parse_now(value: str | None) -> FixedClock | SystemClock:
    if value is None:
        return SystemClock()
    try:
        return FixedClock(date.fromisoformat(value))
    except ValueError:
        logger.error(f"--now must be YYYY-MM-DD, got {value!r}")
        sys.exit(2)


def print_age_info(info: PetAgeInfo) -> None:
    stage = info.life_stage
    print(f"Age:         {info.formatted_age}")
    print(f"Human years: {info.human_age}")
    print(f"Life stage:  {stage.emoji} {stage.name} - {stage.description}")
    for tip in stage.tips:
        print(f"  - {tip}")

    if info.milestones:
        print("Upcoming milestones:")
        for m in info.milestones:
            print(
                f"  {m.stage}: {m.age:g} years ({m.human_age} human years) "
                f"on {m.reached_on.isoformat()}, in {m.months_until} months"
            )


def handle_age(rules: RulesPetAgeAdapter, args: argparse.Namespace) -> int:
    clock = _parse_now(args.now)
    inp = PetAgeInput(
        species=args.species,
        date_of_birth=args.date_of_birth,
        include_milestones=True,
    )
    info = run(inp, rules=rules, clock=clock)
    assert isinstance(info, PetAgeInfo)

    for warning in info.warnings:
        logger.warning(warning.message)
    for error in info.errors:
        logger.error(error.message)

    if args.json:
        payload = asdict(info)
        payload["age_in_years"] = info.age_in_years
        payload["success"] = info.success
        print(json.dumps(payload, default=str, ensure_ascii=False, indent=2))
    else:
        print_age_info(info)

    return 0 if info.success else 1


def handle_chart(rules: RulesPetAgeAdapter, args: argparse.Namespace) -> int:
    chart = run(AgeChartInput(species=args.species), rules=rules)
    assert isinstance(chart, AgeChartOutput)

    if not chart.success:
        for error in chart.errors:
            logger.error(error.message)
        return 1

    print(f"{'Pet age':>8}  {'Human':>5}  Life stage")
    for row in chart.rows:
        print(f"{row.age:>8g}  {row.human_age:>5}  {row.stage}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pet Age Lab CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # age
    age_parser = subparsers.add_parser("age", help="Calculate a pet's age and life stage")
    age_parser.add_argument("species", help="Species (dog, cat, ...)")
    age_parser.add_argument("date_of_birth", help="Date of birth (YYYY-MM-DD)")
    age_parser.add_argument("--now", help="Reference date (YYYY-MM-DD), default today")
    age_parser.add_argument("--json", action="store_true", help="Print JSON output")

    # chart
    chart_parser = subparsers.add_parser("chart", help="Print the age conversion chart")
    chart_parser.add_argument("species", help="Species (dog, cat, ...)")

    args = parser.parse_args(argv)

    rules = get_rules_port(args.rules)

    if args.command == "age":
        return handle_age(rules, args)
    elif args.command == "chart":
        return handle_chart(rules, args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
