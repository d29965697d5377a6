"""Career-coach chat replies."""

import logging

from models.responses import AssistantReply
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

DEFAULT_REPLY = "Më vjen keq, provo ta riformulosh pyetjen me më shumë detaje."

ASSISTANT_TEMPERATURE = 0.6


async def get_assistant_response(message: str, career: str | None = None) -> AssistantReply:
    system_prompt = prompt_builder.build_assistant_system_prompt(career)
    try:
        text = await gemini_client.with_retry(
            lambda: gemini_client.generate_text(
                message, system_prompt=system_prompt, temperature=ASSISTANT_TEMPERATURE
            )
        )
    except Exception as e:
        logger.warning("Assistant reply failed: %s", e)
        return AssistantReply(reply=DEFAULT_REPLY, degraded=True)

    if not text:
        return AssistantReply(reply=DEFAULT_REPLY, degraded=True)
    return AssistantReply(reply=text)
