from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.schemas.interview import AnswerReview, Difficulty, InterviewMessage, InterviewMode
from models.schemas.quiz import QuizAnswer


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PredictRequest(_CamelModel):
    answers: list[QuizAnswer] = Field(..., max_length=10, description="One answer per quiz question")


class InterviewQuestionRequest(_CamelModel):
    career: str = Field(..., min_length=1, max_length=200)
    history: list[InterviewMessage] = Field([], max_length=50)
    difficulty: Difficulty = Difficulty.EASY
    mode: InterviewMode = InterviewMode.MIXED


class InterviewAnswerRequest(_CamelModel):
    career: str = Field(..., min_length=1, max_length=200)
    history: list[InterviewMessage] = Field([], max_length=50)
    answer: str = Field(..., min_length=1, max_length=5000)
    questions_answered: int = Field(0, ge=0)
    mode: InterviewMode = InterviewMode.MIXED


class InterviewHintRequest(_CamelModel):
    career: str = Field(..., min_length=1, max_length=200)
    question: str = Field(..., min_length=1, max_length=5000)
    hints_used: int = Field(0, ge=0)


class InterviewVerdictRequest(_CamelModel):
    career: str = Field(..., min_length=1, max_length=200)
    history: list[InterviewMessage] = Field([], max_length=50)


class InterviewReportRequest(_CamelModel):
    career: str = Field(..., min_length=1, max_length=200)
    mode: InterviewMode = InterviewMode.MIXED
    history: list[InterviewMessage] = Field([], max_length=50)
    answers_review: list[AnswerReview] = Field([], max_length=20)
    duration_ms: int = Field(0, ge=0)


class AssistantRequest(_CamelModel):
    message: str = Field(..., min_length=1, max_length=2000)
    career: str | None = Field(None, max_length=200)
