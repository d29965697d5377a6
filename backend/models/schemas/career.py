"""Career archetypes and per-career classifier output."""

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from models.schemas.traits import Trait, TraitWeights, frozen_weights


class CareerProfile(BaseModel):
    """Trait weights describing the ideal candidate for one career."""

    model_config = ConfigDict(frozen=True)

    name: str
    traits: dict[Trait, float]
    description: str
    learning_path: tuple[str, ...]

    @field_validator("traits")
    @classmethod
    def _freeze_traits(cls, v: dict[Trait, float]) -> TraitWeights:
        return frozen_weights(v)

    @field_serializer("traits")
    def _serialize_traits(self, v: TraitWeights) -> dict[Trait, float]:
        return dict(v)


class ClassifierResult(BaseModel):
    """Similarity of the user's trait vector to one career profile.

    ``confidence`` is the raw score relative to the best-ranked career.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    career: str
    raw_score: float
    confidence: float
    description: str
    learning_path: list[str]
