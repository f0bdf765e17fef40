"""
Rules schema validation tests.

Verifies that the rules loader reads rules.yaml and rejects invalid
pet age policy.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from src.adapters.pet_age_rules import RulesPetAgeAdapter
from src.components.pet_age.models import (
    DEFAULT_CHART_AGES,
    DEFAULT_MILESTONE_LIMIT,
    MAX_CHART_AGE,
    MAX_MILESTONE_LIMIT,
    PetAgeConfig,
)
from src.rules.loader import load_rules
from src.rules.models import PetAgeRules, Rules


def write_rules(tmp_path: Path, rules: dict[str, Any]) -> Path:
    """Write a rules dict to a temporary YAML file."""
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.dump(rules), encoding="utf-8")
    return path


def minimal_rules(**pet_age: Any) -> dict[str, Any]:
    return {
        "project": {"slug": "pet-age-lab", "rules_version": "1.0"},
        "pet_age": pet_age,
    }


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_actual_rules_file(self, rules_path: Path) -> None:
        """Project rules file loads successfully."""
        rules = load_rules(rules_path)
        assert isinstance(rules, Rules)
        assert rules.project.slug == "pet-age-lab"
        assert rules.pet_age.future_birth_date == "clamp"
        assert rules.pet_age.unknown_species_curve == "dog"
        assert rules.pet_age.chart_ages == [0.5, 1, 2, 3, 5, 7, 10, 13, 16]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_defaults_when_section_absent(self, tmp_path: Path) -> None:
        path = write_rules(
            tmp_path, {"project": {"slug": "x", "rules_version": "1"}}
        )
        rules = load_rules(path)
        assert rules.pet_age == PetAgeRules()
        assert rules.pet_age.milestone_limit == 3

    def test_markdown_fenced_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text(
            "# Rules\n\n```yaml\n"
            "project:\n  slug: fenced\n  rules_version: '2'\n"
            "pet_age:\n  future_birth_date: reject\n"
            "```\n\nTrailing notes.\n",
            encoding="utf-8",
        )
        rules = load_rules(path)
        assert rules.project.slug == "fenced"
        assert rules.pet_age.future_birth_date == "reject"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("project: [unclosed", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_rules(path)


class TestPetAgeRulesValidation:
    """Schema constraints on the pet_age section."""

    @pytest.mark.parametrize(
        "pet_age",
        [
            {"future_birth_date": "raise"},
            {"unknown_species_curve": "cat"},
            {"milestone_limit": -1},
            {"milestone_limit": 11},
            {"chart_ages": []},
            {"chart_ages": [0]},
            {"chart_ages": [1, 31]},
        ],
    )
    def test_invalid_values(self, tmp_path: Path, pet_age: dict[str, Any]) -> None:
        path = write_rules(tmp_path, minimal_rules(**pet_age))
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_defaults_match_component(self) -> None:
        """Rules defaults and the component defaults share one source."""
        defaults = PetAgeRules()
        assert defaults.chart_ages == list(DEFAULT_CHART_AGES)
        assert defaults.milestone_limit == DEFAULT_MILESTONE_LIMIT
        assert PetAgeConfig().chart_ages is DEFAULT_CHART_AGES
        assert PetAgeConfig().milestone_limit == DEFAULT_MILESTONE_LIMIT

    def test_limits_are_inclusive(self) -> None:
        rules = PetAgeRules(milestone_limit=MAX_MILESTONE_LIMIT, chart_ages=[MAX_CHART_AGE])
        assert rules.chart_ages == [MAX_CHART_AGE]

    def test_missing_project(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"pet_age": {}})
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)


class TestRulesPetAgeAdapter:
    """RulesPetAgeAdapter exposes the pet_age section."""

    def test_adapter_reads_rules(self) -> None:
        adapter = RulesPetAgeAdapter(
            PetAgeRules(
                future_birth_date="reject",
                unknown_species_curve="none",
                milestone_limit=5,
                chart_ages=[1, 2],
            )
        )
        assert adapter.get_future_birth_date_policy() == "reject"
        assert adapter.get_unknown_species_curve() == "none"
        assert adapter.get_milestone_limit() == 5
        assert adapter.get_chart_ages() == (1, 2)
