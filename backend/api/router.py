from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import (
    AssistantRequest,
    InterviewAnswerRequest,
    InterviewHintRequest,
    InterviewQuestionRequest,
    InterviewReportRequest,
    InterviewVerdictRequest,
    PredictRequest,
)
from models.responses import (
    AssistantReply,
    ClassificationBreakdown,
    InterviewHint,
    InterviewQuestion,
    InterviewReport,
    InterviewTurn,
    InterviewVerdict,
    PredictionResult,
)
from models.schemas.quiz import QuizQuestion
from services import assistant, career_predictor, classifier, interview
from services.quiz_catalog import QUIZ_QUESTIONS

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.get("/quiz/questions", response_model=list[QuizQuestion])
async def quiz_questions():
    return list(QUIZ_QUESTIONS)


@router.post("/predict", response_model=PredictionResult)
@limiter.limit("10/minute")
async def predict(request: Request, body: PredictRequest):
    return await career_predictor.predict_career(body.answers)


@router.post("/predict/breakdown", response_model=ClassificationBreakdown)
async def predict_breakdown(body: PredictRequest):
    return ClassificationBreakdown(
        trait_vector=classifier.encode_answers(body.answers),
        ranking=classifier.classify_career(body.answers),
    )


@router.post("/interview/question", response_model=InterviewQuestion)
@limiter.limit("30/minute")
async def interview_question(request: Request, body: InterviewQuestionRequest):
    return await interview.generate_question(body.career, body.history, body.difficulty, body.mode)


@router.post("/interview/answer", response_model=InterviewTurn)
@limiter.limit("30/minute")
async def interview_answer(request: Request, body: InterviewAnswerRequest):
    if body.questions_answered >= settings.interview_max_questions:
        raise HTTPException(status_code=400, detail="Interview already finished")
    return await interview.submit_answer(
        body.career, body.history, body.answer, body.questions_answered, body.mode
    )


@router.post("/interview/hint", response_model=InterviewHint)
@limiter.limit("30/minute")
async def interview_hint(request: Request, body: InterviewHintRequest):
    if body.hints_used >= settings.interview_max_hints:
        raise HTTPException(
            status_code=400,
            detail=f"No hints left (max {settings.interview_max_hints} per interview)",
        )
    return await interview.generate_hint(body.career, body.question, body.hints_used)


@router.post("/interview/verdict", response_model=InterviewVerdict)
@limiter.limit("30/minute")
async def interview_verdict(request: Request, body: InterviewVerdictRequest):
    return await interview.evaluate_final(body.career, body.history)


@router.post("/interview/report", response_model=InterviewReport)
@limiter.limit("30/minute")
async def interview_report(request: Request, body: InterviewReportRequest):
    return await interview.generate_report(
        body.career, body.mode, body.history, body.answers_review, body.duration_ms
    )


@router.post("/assistant", response_model=AssistantReply)
@limiter.limit("30/minute")
async def assistant_reply(request: Request, body: AssistantRequest):
    return await assistant.get_assistant_response(body.message, body.career)
