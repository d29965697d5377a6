"""Interview-practice building blocks shared by requests and responses."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Difficulty(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class InterviewMode(str, Enum):
    TECHNICAL = "TECHNICAL"
    BEHAVIORAL = "BEHAVIORAL"
    MIXED = "MIXED"
    STRESS = "STRESS"


class InterviewMessage(BaseModel):
    """One line of the transcript. ``ai`` is the interviewer."""

    role: Literal["ai", "user"]
    text: str = Field(..., max_length=5000)


class InterviewFeedback(BaseModel):
    """Per-answer evaluation."""

    score: int = Field(0, ge=0, le=100)
    strengths: list[str] = []
    improvements: list[str] = []
    comment: str = ""


class AnswerReview(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    question: str
    answer: str
    score: int = Field(0, ge=0, le=100)
    feedback: str = ""


class CategoryScores(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    technical: int = Field(0, ge=0, le=100)
    communication: int = Field(0, ge=0, le=100)
    problem_solving: int = Field(0, ge=0, le=100)
    culture_fit: int = Field(0, ge=0, le=100)
