"""Trait feature space shared by the quiz rules and the career profiles."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class Trait(str, Enum):
    """Personality / skill dimensions. Declaration order is the vector order."""

    ANALYTICAL = "analytical"
    CREATIVE = "creative"
    SOCIAL = "social"
    ORGANIZED = "organized"
    TECHNICAL = "technical"
    ENTREPRENEURIAL = "entrepreneurial"
    CARING = "caring"
    LEADERSHIP = "leadership"
    RESEARCH = "research"
    VISUAL = "visual"


TRAITS: tuple[Trait, ...] = tuple(Trait)

# Every trait present, zero when unset
TraitVector = dict[Trait, float]

# Partial, read-only weights: only the traits a rule or profile touches
TraitWeights = Mapping[Trait, float]

# Shorthands for the static registry tables
A = Trait.ANALYTICAL
CR = Trait.CREATIVE
SO = Trait.SOCIAL
OR = Trait.ORGANIZED
TE = Trait.TECHNICAL
EN = Trait.ENTREPRENEURIAL
CA = Trait.CARING
LE = Trait.LEADERSHIP
RE = Trait.RESEARCH
VI = Trait.VISUAL


def zero_vector() -> TraitVector:
    return {trait: 0.0 for trait in TRAITS}


def frozen_weights(weights: Mapping[Trait, float]) -> TraitWeights:
    """Read-only copy of ``weights``; item assignment raises TypeError."""
    return MappingProxyType(dict(weights))
