"""LangChain ChatAnthropic wrapper."""

from __future__ import annotations

import logging

from kraftai.config import settings
from kraftai.llm.model_router import get_model_for_task
from kraftai.llm.narrative import NarrativeRequest

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "[LLM not configured — set ANTHROPIC_API_KEY in .env]"


async def generate_text(request: NarrativeRequest) -> str:
    """Run one generation request. No timeout or retry is applied here."""
    if not settings.anthropic_api_key:
        return NOT_CONFIGURED_MESSAGE

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage

    model_id = get_model_for_task(request.task)
    llm = ChatAnthropic(
        model=model_id,
        api_key=settings.anthropic_api_key,
        max_tokens=request.max_tokens,
        temperature=settings.llm_temperature,
    )

    logger.debug("Generating %s with %s (max_tokens=%d)", request.task, model_id, request.max_tokens)
    response = await llm.ainvoke([HumanMessage(content=request.prompt)])
    return str(response.content) or "No response generated"
