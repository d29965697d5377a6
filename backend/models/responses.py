from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas.career import ClassifierResult
from models.schemas.interview import (
    AnswerReview,
    CategoryScores,
    Difficulty,
    InterviewFeedback,
    InterviewMode,
)
from models.schemas.traits import Trait


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AlternativeCareer(_CamelModel):
    model_config = ConfigDict(frozen=True)

    career: str
    confidence: float
    description: str


class PredictionResult(_CamelModel):
    model_config = ConfigDict(frozen=True)

    primary_career: str
    confidence: float
    description: str
    alternatives: tuple[AlternativeCareer, AlternativeCareer]
    learning_path: list[str]


class ClassificationBreakdown(_CamelModel):
    trait_vector: dict[Trait, float]
    ranking: list[ClassifierResult]


class InterviewQuestion(_CamelModel):
    question: str
    difficulty: Difficulty
    degraded: bool = False


class InterviewTurn(_CamelModel):
    feedback: InterviewFeedback
    questions_answered: int
    difficulty: Difficulty
    next_question: str | None = None
    finished: bool = False
    degraded: bool = False


class InterviewHint(_CamelModel):
    hint: str
    hints_remaining: int
    degraded: bool = False


class InterviewVerdict(_CamelModel):
    hired: bool = False
    feedback: str = ""
    degraded: bool = False


class InterviewReport(_CamelModel):
    career: str
    mode: InterviewMode
    duration_ms: int = 0
    overall_score: int = 0
    verdict: Literal["hired", "consider", "rejected"] = "rejected"
    summary: str = ""
    category_scores: CategoryScores = CategoryScores()
    answers_review: list[AnswerReview] = []
    strengths: list[str] = []
    improvements: list[str] = []
    recommendations: list[str] = []
    weak_topics: list[str] = []
    practice_suggestions: list[str] = []
    degraded: bool = False


class AssistantReply(_CamelModel):
    reply: str
    degraded: bool = False
