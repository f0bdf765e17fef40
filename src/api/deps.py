import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.clock import SystemClock
from src.adapters.pet_age_rules import RulesPetAgeAdapter
from src.components.pet_age.ports import TodayPort
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        rules_env = os.environ.get("PET_AGE_RULES_PATH")
        self.rules_path = Path(rules_env) if rules_env else self.base_dir / "rules.yaml"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


def get_pet_age_rules(rules: Rules = Depends(get_rules)) -> RulesPetAgeAdapter:
    return RulesPetAgeAdapter(rules.pet_age)


# --- Clock ---
def get_clock() -> TodayPort:
    return SystemClock()
