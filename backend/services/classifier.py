"""Local trait-vector career classifier.

Deterministic and network-free:

    quiz answers ──encode_answers──▶ TraitVector
                                        │ cosine_similarity vs. each CareerProfile
                                        ▼
                      ranked ClassifierResult list (stable, descending)
                                        │ classify_to_prediction
                                        ▼
                    PredictionResult (primary + 2 alternatives)

The classifier is the source of truth for which careers are recommended;
LLM enrichment in ``career_predictor`` may only reword the description.
"""

import logging
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from models.responses import AlternativeCareer, PredictionResult
from models.schemas.career import CareerProfile, ClassifierResult
from models.schemas.quiz import QuizAnswer
from models.schemas.traits import TRAITS, TraitVector, TraitWeights, zero_vector
from services.career_profiles import CAREER_PROFILES
from services.quiz_catalog import CUSTOM_ANSWER_BONUS, OPTION_TRAIT_RULES

logger = logging.getLogger(__name__)

# Primary confidence is rescaled into [CONFIDENCE_FLOOR, CONFIDENCE_CEILING]
CONFIDENCE_FLOOR = 0.52
CONFIDENCE_CEILING = 0.97
CONFIDENCE_SPAN = 0.48


def _add(vec: TraitVector, contribution: TraitWeights) -> None:
    for trait, weight in contribution.items():
        vec[trait] += weight


def encode_answers(answers: Iterable[QuizAnswer]) -> TraitVector:
    """Fold quiz answers into a trait vector.

    Each answer contributes the traits of the first rule whose key occurs in
    its lower-cased text. Custom (free-text) answers also add a fixed
    research/entrepreneurial bonus, whether or not a rule matched.
    """
    vec = zero_vector()
    for ans in answers:
        lower = ans.answer.lower()
        for rule in OPTION_TRAIT_RULES:
            if rule.match_key in lower:
                _add(vec, rule.contribution)
                break
        if ans.is_custom:
            _add(vec, CUSTOM_ANSWER_BONUS)
    return vec


def _as_array(vec: TraitVector) -> np.ndarray:
    return np.array([float(vec.get(trait, 0.0)) for trait in TRAITS])


def cosine_similarity(a: TraitVector, b: TraitVector) -> float:
    """Cosine similarity over the trait space. Zero-magnitude input gives 0.0."""
    vec_a = _as_array(a)
    vec_b = _as_array(b)

    magnitude_a = float(np.linalg.norm(vec_a))
    magnitude_b = float(np.linalg.norm(vec_b))
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    return float(np.dot(vec_a, vec_b)) / (magnitude_a * magnitude_b)


def profile_vector(profile: CareerProfile) -> TraitVector:
    vec = zero_vector()
    _add(vec, profile.traits)
    return vec


def classify_career(answers: Sequence[QuizAnswer]) -> list[ClassifierResult]:
    """Rank every career profile by similarity to the user's answers.

    Ties keep registry order (``sorted`` is stable).
    """
    user_vec = encode_answers(answers)

    scored = sorted(
        (
            (profile, cosine_similarity(user_vec, profile_vector(profile)))
            for profile in CAREER_PROFILES
        ),
        key=lambda item: item[1],
        reverse=True,
    )

    top_score = scored[0][1] or 1.0

    return [
        ClassifierResult(
            career=profile.name,
            raw_score=score,
            confidence=score / top_score,
            description=profile.description,
            learning_path=list(profile.learning_path),
        )
        for profile, score in scored
    ]


def round_confidence(value: float) -> float:
    """Round half-up to two decimals on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def rescale_confidence(raw_score: float) -> float:
    return min(CONFIDENCE_CEILING, max(CONFIDENCE_FLOOR, CONFIDENCE_FLOOR + raw_score * CONFIDENCE_SPAN))


def classify_to_prediction(answers: Sequence[QuizAnswer]) -> PredictionResult:
    """Build the user-facing prediction from the top three ranked careers.

    Raw cosine scores over these small sparse vectors rarely approach 1, so
    the primary score is rescaled into [0.52, 0.97]. Alternatives are shown
    relative to the primary rather than rescaled on their own.
    """
    first, second, third = classify_career(answers)[:3]

    normalised = rescale_confidence(first.raw_score)
    divisor = first.raw_score or 1.0

    logger.debug(
        "Classified %d answers: %s (raw=%.4f)", len(answers), first.career, first.raw_score
    )

    return PredictionResult(
        primary_career=first.career,
        confidence=round_confidence(normalised),
        description=first.description,
        alternatives=(
            AlternativeCareer(
                career=second.career,
                confidence=round_confidence(normalised * (second.raw_score / divisor)),
                description=second.description,
            ),
            AlternativeCareer(
                career=third.career,
                confidence=round_confidence(normalised * (third.raw_score / divisor)),
                description=third.description,
            ),
        ),
        learning_path=first.learning_path,
    )
