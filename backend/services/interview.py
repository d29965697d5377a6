"""Interview practice: adaptive questions, per-answer feedback, final report.

Stateless. The client keeps the transcript and the answered-question count
and sends them with every call. Every Gemini-backed operation has a fixed
fallback, flagged with ``degraded=True``, so a failing model never breaks a
session.
"""

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from config import settings
from models.responses import (
    InterviewHint,
    InterviewQuestion,
    InterviewReport,
    InterviewTurn,
    InterviewVerdict,
)
from models.schemas.interview import (
    AnswerReview,
    CategoryScores,
    Difficulty,
    InterviewFeedback,
    InterviewMessage,
    InterviewMode,
)
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

DEFAULT_QUESTION = "Na trego si do e qaseshe këtë rol në 90 ditët e para?"

DEFAULT_FEEDBACK = InterviewFeedback(
    score=60,
    strengths=["Përgjigjja ka bazë"],
    improvements=["Shto më shumë shembuj praktikë dhe metrika"],
    comment="Përgjigjja ka bazë, por duhet më shumë shembuj praktikë dhe metrika.",
)

DEFAULT_HINT = (
    "Mendo për një shembull konkret nga përvoja jote dhe strukturoje përgjigjen: "
    "situata, veprimi, rezultati."
)

DEFAULT_VERDICT_FEEDBACK = (
    "Performanca ishte premtuese, por duhen forcuar përgjigjet teknike dhe shembujt konkretë."
)

DEFAULT_REPORT_SUMMARY = (
    "Raporti u gjenerua nga vlerësimet e përgjigjeve (shërbimi AI nuk ishte i disponueshëm)."
)

DEFAULT_RECOMMENDATIONS = [
    "Përgatit 3-4 histori konkrete nga përvoja jote me rezultate të matshme",
    "Rishiko konceptet bazë të fushës para intervistës së ardhshme",
]

DEFAULT_PRACTICE_SUGGESTIONS = [
    "Praktiko përgjigjet me zë të lartë me kohëmatës",
    "Regjistro një intervistë provë dhe analizo përgjigjet",
]

# Verdict thresholds on the 0-100 overall score
HIRED_THRESHOLD = 70
CONSIDER_THRESHOLD = 50


def next_difficulty(questions_answered: int) -> Difficulty:
    """Difficulty of the next question after ``questions_answered`` answers."""
    if questions_answered >= 5:
        return Difficulty.HARD
    if questions_answered >= 3:
        return Difficulty.MEDIUM
    return Difficulty.EASY


def verdict_for(score: int) -> str:
    if score >= HIRED_THRESHOLD:
        return "hired"
    if score >= CONSIDER_THRESHOLD:
        return "consider"
    return "rejected"


def _to_score(value: Any, default: int) -> int:
    """Coerce a model-reported score into 0-100."""
    if isinstance(value, bool):
        return default
    try:
        score = round(float(value))
    except (TypeError, ValueError, OverflowError):
        return default
    return min(100, max(0, score))


def _to_str_list(value: Any, default: list[str]) -> list[str]:
    if not isinstance(value, list):
        return list(default)
    items = [str(v).strip() for v in value if str(v).strip()]
    return items or list(default)


def _last_question(history: Sequence[InterviewMessage]) -> str:
    for message in reversed(history):
        if message.role == "ai":
            return message.text
    return ""


async def generate_question(
    career: str,
    history: Sequence[InterviewMessage],
    difficulty: Difficulty,
    mode: InterviewMode = InterviewMode.MIXED,
) -> InterviewQuestion:
    prompt = prompt_builder.build_interview_question_prompt(career, history, difficulty, mode)
    try:
        text = await gemini_client.with_retry(
            lambda: gemini_client.generate_text(prompt, system_prompt=prompt_builder.INTERVIEWER_SYSTEM)
        )
    except Exception as e:
        logger.warning("Interview question generation failed: %s", e)
        return InterviewQuestion(question=DEFAULT_QUESTION, difficulty=difficulty, degraded=True)

    if not text:
        return InterviewQuestion(question=DEFAULT_QUESTION, difficulty=difficulty, degraded=True)
    return InterviewQuestion(question=text, difficulty=difficulty)


async def evaluate_answer(career: str, question: str, answer: str) -> tuple[InterviewFeedback, bool]:
    """Score one answer. Returns (feedback, degraded)."""
    prompt = prompt_builder.build_answer_evaluation_prompt(career, question, answer)
    try:
        data = await gemini_client.generate_json(
            prompt, {}, system_prompt=prompt_builder.EVALUATOR_SYSTEM
        )
    except Exception as e:
        logger.warning("Answer evaluation failed: %s", e)
        return DEFAULT_FEEDBACK, True

    if not data:
        return DEFAULT_FEEDBACK, True

    feedback = InterviewFeedback(
        score=_to_score(data.get("score"), DEFAULT_FEEDBACK.score),
        strengths=_to_str_list(data.get("strengths"), []),
        improvements=_to_str_list(data.get("improvements"), []),
        comment=str(data.get("comment") or ""),
    )
    return feedback, False


async def submit_answer(
    career: str,
    history: Sequence[InterviewMessage],
    answer: str,
    questions_answered: int,
    mode: InterviewMode = InterviewMode.MIXED,
) -> InterviewTurn:
    """Evaluate the answer to the last question and move the session on.

    The session finishes once ``interview_max_questions`` answers are in;
    otherwise the next question is asked at the adjusted difficulty.
    """
    feedback, degraded = await evaluate_answer(career, _last_question(history), answer)

    answered = questions_answered + 1
    difficulty = next_difficulty(answered)

    if answered >= settings.interview_max_questions:
        return InterviewTurn(
            feedback=feedback,
            questions_answered=answered,
            difficulty=difficulty,
            finished=True,
            degraded=degraded,
        )

    transcript = [*history, InterviewMessage(role="user", text=answer)]
    question = await generate_question(career, transcript, difficulty, mode)
    return InterviewTurn(
        feedback=feedback,
        questions_answered=answered,
        difficulty=difficulty,
        next_question=question.question,
        degraded=degraded or question.degraded,
    )


async def generate_hint(career: str, question: str, hints_used: int) -> InterviewHint:
    remaining = max(0, settings.interview_max_hints - hints_used - 1)
    prompt = prompt_builder.build_hint_prompt(career, question)
    try:
        text = await gemini_client.with_retry(
            lambda: gemini_client.generate_text(prompt, system_prompt=prompt_builder.INTERVIEWER_SYSTEM)
        )
    except Exception as e:
        logger.warning("Hint generation failed: %s", e)
        return InterviewHint(hint=DEFAULT_HINT, hints_remaining=remaining, degraded=True)

    if not text:
        return InterviewHint(hint=DEFAULT_HINT, hints_remaining=remaining, degraded=True)
    return InterviewHint(hint=text, hints_remaining=remaining)


async def evaluate_final(career: str, history: Sequence[InterviewMessage]) -> InterviewVerdict:
    """Hire / no-hire decision for the whole session."""
    fallback = InterviewVerdict(hired=False, feedback=DEFAULT_VERDICT_FEEDBACK, degraded=True)

    prompt = prompt_builder.build_final_verdict_prompt(career, history)
    try:
        data = await gemini_client.generate_json(
            prompt, {}, system_prompt=prompt_builder.HIRING_MANAGER_SYSTEM
        )
    except Exception as e:
        logger.warning("Final interview evaluation failed: %s", e)
        return fallback

    hired = data.get("hired")
    feedback = data.get("feedback")
    if not isinstance(hired, bool) or not isinstance(feedback, str) or not feedback.strip():
        logger.warning("Final verdict payload missing fields, using default")
        return fallback
    return InterviewVerdict(hired=hired, feedback=feedback.strip())


def _mean_score(answers_review: Sequence[AnswerReview]) -> int:
    if not answers_review:
        return 0
    return round(float(np.mean([a.score for a in answers_review])))


async def generate_report(
    career: str,
    mode: InterviewMode,
    history: Sequence[InterviewMessage],
    answers_review: Sequence[AnswerReview],
    duration_ms: int = 0,
) -> InterviewReport:
    """Build the end-of-session report.

    The verdict is always derived from the overall score. When Gemini is
    unavailable the overall and category scores fall back to the mean of the
    per-answer scores.
    """
    local_score = _mean_score(answers_review)
    fallback = InterviewReport(
        career=career,
        mode=mode,
        duration_ms=duration_ms,
        overall_score=local_score,
        verdict=verdict_for(local_score),
        summary=DEFAULT_REPORT_SUMMARY,
        category_scores=CategoryScores(
            technical=local_score,
            communication=local_score,
            problem_solving=local_score,
            culture_fit=local_score,
        ),
        answers_review=list(answers_review),
        recommendations=list(DEFAULT_RECOMMENDATIONS),
        practice_suggestions=list(DEFAULT_PRACTICE_SUGGESTIONS),
        degraded=True,
    )

    prompt = prompt_builder.build_report_prompt(career, mode, history, answers_review)
    try:
        data = await gemini_client.generate_json(
            prompt, {}, system_prompt=prompt_builder.HIRING_MANAGER_SYSTEM
        )
    except Exception as e:
        logger.warning("Interview report generation failed, using local scores: %s", e)
        return fallback

    if not data:
        return fallback

    score = _to_score(data.get("score"), local_score)
    categories = data.get("categoryScores")
    if not isinstance(categories, dict):
        categories = {}
    improvements = _to_str_list(data.get("improvements"), [])

    return InterviewReport(
        career=career,
        mode=mode,
        duration_ms=duration_ms,
        overall_score=score,
        verdict=verdict_for(score),
        summary=str(data.get("summary") or DEFAULT_REPORT_SUMMARY),
        category_scores=CategoryScores(
            technical=_to_score(categories.get("technical"), score),
            communication=_to_score(categories.get("communication"), score),
            problem_solving=_to_score(categories.get("problemSolving"), score),
            culture_fit=_to_score(categories.get("cultureFit"), score),
        ),
        answers_review=list(answers_review),
        strengths=_to_str_list(data.get("strengths"), []),
        improvements=improvements,
        recommendations=_to_str_list(data.get("recommendations"), DEFAULT_RECOMMENDATIONS),
        weak_topics=_to_str_list(data.get("weakTopics"), improvements),
        practice_suggestions=_to_str_list(
            data.get("practiceSuggestions"), DEFAULT_PRACTICE_SUGGESTIONS
        ),
    )
