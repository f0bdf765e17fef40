"""
Static life-stage tables.

Stages are ordered by `min_age`; a stage covers ages from its own
`min_age` up to (but excluding) the next stage's `min_age`. The last
stage is open-ended.
"""

from __future__ import annotations

from types import MappingProxyType

from .models import LifeStage, Species

DOG_LIFE_STAGES: tuple[LifeStage, ...] = (
    LifeStage(
        name="Puppy",
        emoji="🐕",
        color="from-blue-400 to-cyan-400",
        description="Rapid growth and development phase",
        tips=(
            "Start socialization and basic training",
            "Frequent vet checkups for vaccinations",
            "High-energy puppy food required",
            "Puppy-proof your home",
        ),
        min_age=0.0,
    ),
    LifeStage(
        name="Young Puppy",
        emoji="🐕",
        color="from-blue-400 to-indigo-400",
        description="Learning and socializing",
        tips=(
            "Continue training and socialization",
            "Complete vaccination series",
            "Begin leash training",
            "Establish routines",
        ),
        min_age=0.5,
    ),
    LifeStage(
        name="Adolescent",
        emoji="🐶",
        color="from-indigo-400 to-violet-400",
        description="High energy and playful",
        tips=(
            "Continue obedience training",
            "Provide plenty of exercise",
            "Consider spaying/neutering",
            "Regular dental care",
        ),
        min_age=1.0,
    ),
    LifeStage(
        name="Adult",
        emoji="🦮",
        color="from-violet-400 to-purple-400",
        description="Prime of life, fully mature",
        tips=(
            "Maintain regular exercise routine",
            "Annual vet checkups",
            "Monitor weight and diet",
            "Continue mental stimulation",
        ),
        min_age=3.0,
    ),
    LifeStage(
        name="Mature Adult",
        emoji="🐕‍🦺",
        color="from-purple-400 to-pink-400",
        description="Slowing down slightly",
        tips=(
            "Watch for signs of aging",
            "Adjust exercise as needed",
            "Senior wellness exams",
            "Joint health supplements",
        ),
        min_age=7.0,
    ),
    LifeStage(
        name="Senior",
        emoji="🦴",
        color="from-orange-400 to-amber-400",
        description="Golden years - extra care needed",
        tips=(
            "Bi-annual vet checkups",
            "Senior-specific diet",
            "Gentle exercise",
            "Monitor for age-related issues",
            "Extra comfort and love",
        ),
        min_age=10.0,
    ),
)

CAT_LIFE_STAGES: tuple[LifeStage, ...] = (
    LifeStage(
        name="Kitten",
        emoji="🐱",
        color="from-pink-400 to-rose-400",
        description="Playful and curious",
        tips=(
            "Provide safe toys and environment",
            "Start litter training",
            "Kitten vaccination series",
            "High-protein kitten food",
        ),
        min_age=0.0,
    ),
    LifeStage(
        name="Young Kitten",
        emoji="🐱",
        color="from-pink-400 to-purple-400",
        description="Growing and exploring",
        tips=(
            "Complete vaccination schedule",
            "Begin grooming routine",
            "Provide scratching posts",
            "Socialization training",
        ),
        min_age=0.5,
    ),
    LifeStage(
        name="Junior",
        emoji="😺",
        color="from-violet-400 to-indigo-400",
        description="Active and playful",
        tips=(
            "Maintain play and exercise",
            "Consider spaying/neutering",
            "Dental care routine",
            "Regular vet checkups",
        ),
        min_age=1.0,
    ),
    LifeStage(
        name="Prime",
        emoji="😸",
        color="from-indigo-400 to-blue-400",
        description="Peak physical condition",
        tips=(
            "Annual health screenings",
            "Maintain healthy weight",
            "Interactive play sessions",
            "Monitor behavior changes",
        ),
        min_age=3.0,
    ),
    LifeStage(
        name="Mature",
        emoji="😺",
        color="from-purple-400 to-violet-400",
        description="Middle-aged, still active",
        tips=(
            "Watch for early aging signs",
            "Senior wellness checks",
            "Adjust diet if needed",
            "Monitor for common issues",
        ),
        min_age=7.0,
    ),
    LifeStage(
        name="Senior",
        emoji="🐈",
        color="from-orange-400 to-yellow-400",
        description="Slowing down, needs care",
        tips=(
            "Bi-annual vet visits",
            "Senior cat food",
            "Watch for arthritis",
            "Keep litter box accessible",
            "Extra warmth and comfort",
        ),
        min_age=11.0,
    ),
    LifeStage(
        name="Geriatric",
        emoji="🐈‍⬛",
        color="from-amber-400 to-orange-400",
        description="Golden years - special care",
        tips=(
            "Frequent vet monitoring",
            "Easy access to food/water",
            "Soft bedding",
            "Manage chronic conditions",
            "Lots of gentle affection",
        ),
        min_age=15.0,
    ),
)

UNKNOWN_LIFE_STAGE = LifeStage(
    name="Unknown",
    emoji="🐾",
    color="from-gray-400 to-gray-500",
    description="Pet age information",
    tips=(),
)

LIFE_STAGE_TABLES: MappingProxyType[Species, tuple[LifeStage, ...]] = MappingProxyType(
    {
        "dog": DOG_LIFE_STAGES,
        "cat": CAT_LIFE_STAGES,
        "other": (),
    }
)

# Per-year rate after the second year of the human-equivalent curve
AGING_RATE_AFTER_TWO: MappingProxyType[Species, float] = MappingProxyType(
    {
        "dog": 4.5,
        "cat": 4.0,
    }
)
