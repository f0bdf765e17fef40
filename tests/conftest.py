from datetime import date
from pathlib import Path

import pytest

from src.adapters.clock import FixedClock
from src.adapters.pet_age_rules import RulesPetAgeAdapter
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent

# Reference date shared by tests that need a pinned "today"
REFERENCE_DATE = date(2024, 6, 15)


@pytest.fixture
def rules_path() -> Path:
    """Path to the project's real rules.yaml."""
    path = PROJECT_ROOT / "rules.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Rules not found at {path}")
    return path


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def pet_age_rules(rules: Rules) -> RulesPetAgeAdapter:
    return RulesPetAgeAdapter(rules.pet_age)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(REFERENCE_DATE)
