import pytest

from services.assistant import DEFAULT_REPLY, get_assistant_response


@pytest.mark.asyncio
async def test_reply_includes_career_context(fake_llm):
    fake_llm.queue("Fillo me një kurs Python dhe ndërto projekte të vogla.")
    reply = await get_assistant_response("Si të filloj?", career="Zhvillues Software")
    assert reply.reply.startswith("Fillo me një kurs Python")
    assert reply.degraded is False
    assert "Zhvillues Software" in fake_llm.system_prompts[0]


@pytest.mark.asyncio
async def test_general_context_without_career(fake_llm):
    fake_llm.queue("Provo kuizin tonë.")
    await get_assistant_response("Çfarë të studioj?")
    assert "Këshilla të përgjithshme" in fake_llm.system_prompts[0]


@pytest.mark.asyncio
async def test_failure_returns_apology():
    reply = await get_assistant_response("Përshëndetje")
    assert reply.reply == DEFAULT_REPLY
    assert reply.degraded is True
