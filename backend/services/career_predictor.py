"""Prediction orchestrator: local classifier first, Gemini enrichment second.

Pipeline:
1. Trait-vector classification (always; a complete result on its own)
2. Gemini justification of the primary career (optional, reworded
   description only)

The classifier decides which careers are recommended and how confident we
are. Gemini can only replace the description text, and any failure on that
path falls back to the local result without surfacing an error.
"""

import logging
from collections.abc import Sequence

from config import settings
from models.responses import PredictionResult
from models.schemas.quiz import QuizAnswer
from services import gemini_client, prompt_builder
from services.classifier import classify_to_prediction

logger = logging.getLogger(__name__)


async def predict_career(answers: Sequence[QuizAnswer]) -> PredictionResult:
    """Classify quiz answers and, when Gemini is configured, enrich the description."""
    local_result = classify_to_prediction(answers)

    if not settings.gemini_api_key:
        return local_result

    prompt = prompt_builder.build_enrichment_prompt(answers, local_result.primary_career)
    try:
        text = await gemini_client.with_retry(
            lambda: gemini_client.generate_text(
                prompt, system_prompt=prompt_builder.CAREER_ADVISOR_SYSTEM
            )
        )
    except Exception as e:
        logger.warning("Career enrichment unavailable, using local classifier: %s", e)
        return local_result

    text = text.strip()
    if len(text) < settings.enrichment_min_length:
        logger.info("Enrichment reply too short (%d chars), keeping local description", len(text))
        return local_result

    return local_result.model_copy(update={"description": text})
