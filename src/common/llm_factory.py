"""
Builds the chat model behind LangChainTextGenerator.

Only this module constructs ChatOpenAI; everything else asks for a
generator. The model is built with retries off, so a quota error reaches
the generator on the first attempt and becomes RateLimited.
"""

import logging
from typing import Any, List, Optional

from langchain_core.callbacks import BaseCallbackHandler
from langchain_openai import ChatOpenAI

from src.common.config import Config

logger = logging.getLogger(__name__)


def create_llm(
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    timeout: Optional[float] = None,
    callbacks: Optional[List[BaseCallbackHandler]] = None,
    **kwargs: Any,
) -> ChatOpenAI:
    """
    ChatOpenAI configured from Config; explicit arguments win over it.

    Extra keyword arguments pass straight to ChatOpenAI.
    """
    options = {
        "model": model or Config.DEFAULT_MODEL,
        "temperature": Config.LLM_TEMPERATURE if temperature is None else temperature,
        "timeout": Config.LLM_TIMEOUT_SECONDS if timeout is None else timeout,
    }
    logger.debug(f"Creating chat model {options}")

    return ChatOpenAI(
        api_key=Config.get_llm_api_key(),
        base_url=Config.get_llm_base_url(),
        max_retries=0,
        callbacks=callbacks or [],
        **options,
        **kwargs,
    )
