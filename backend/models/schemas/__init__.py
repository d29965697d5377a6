"""Domain schemas for the career classifier and interview practice."""

from models.schemas.traits import TRAITS, Trait, TraitVector, TraitWeights, frozen_weights, zero_vector
from models.schemas.quiz import QuizAnswer, QuizQuestion
from models.schemas.career import CareerProfile, ClassifierResult
from models.schemas.interview import (
    AnswerReview,
    CategoryScores,
    Difficulty,
    InterviewFeedback,
    InterviewMessage,
    InterviewMode,
)

__all__ = [
    "TRAITS",
    "Trait",
    "TraitVector",
    "TraitWeights",
    "frozen_weights",
    "zero_vector",
    "QuizAnswer",
    "QuizQuestion",
    "CareerProfile",
    "ClassifierResult",
    "AnswerReview",
    "CategoryScores",
    "Difficulty",
    "InterviewFeedback",
    "InterviewMessage",
    "InterviewMode",
]
