"""
Generative-Text Client.

Wraps a single external text-generation call: prompt string in, completion
string out. The client performs no parsing; callers interpret the text.

Failure mapping:
    - quota / HTTP 429 rejection      -> RateLimited
    - any other upstream error        -> GenerationFailed
    - empty or non-text completion    -> MalformedResponse

Usage:
    from src.common.generation import LangChainTextGenerator

    generator = LangChainTextGenerator()
    text = generator.generate("Summarise the market for data engineers")
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Optional

import openai
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from src.common.error_handling import GenerationFailed, MalformedResponse, RateLimited
from src.common.llm_factory import create_llm

logger = logging.getLogger(__name__)


class TextGeneratorInterface(ABC):
    """Abstract interface for the generative-text service."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Send one prompt and wait for the completion.

        Args:
            prompt: Plain-text prompt

        Returns:
            Completion text (never empty)

        Raises:
            RateLimited: Upstream rejected the call for quota reasons
            GenerationFailed: Any other upstream error
            MalformedResponse: Upstream answered without usable text
        """
        pass


class LangChainTextGenerator(TextGeneratorInterface):
    """Generative-text client backed by a LangChain chat model."""

    def __init__(self, llm: Optional[BaseChatModel] = None):
        """
        Initialize the client.

        Args:
            llm: Chat model to use (defaults to create_llm() on first call)
        """
        self._llm = llm

    @property
    def llm(self) -> BaseChatModel:
        """Lazy-initialize the chat model."""
        if self._llm is None:
            self._llm = create_llm()
        return self._llm

    def generate(self, prompt: str) -> str:
        start = time.monotonic()
        try:
            response = self.llm.invoke([HumanMessage(content=prompt)])
        except openai.RateLimitError as e:
            logger.warning(f"Generation rate limited: {e}")
            raise RateLimited(f"Text generation rate limited: {e}") from e
        except Exception as e:
            logger.error(f"Generation failed: {type(e).__name__}: {e}")
            raise GenerationFailed(f"Text generation failed: {e}") from e

        text = _extract_text(getattr(response, "content", None))
        duration_ms = int((time.monotonic() - start) * 1000)

        if not text or not text.strip():
            logger.error(f"Generation returned no text after {duration_ms}ms")
            raise MalformedResponse("Text generation returned an empty completion")

        logger.info(
            f"Generation completed in {duration_ms}ms "
            f"(prompt={len(prompt)} chars, completion={len(text)} chars)"
        )
        return text


def _extract_text(content: Any) -> str:
    """
    Flatten a chat message's content into plain text.

    Content is either a string or a list of content blocks
    (strings or {"type": "text", "text": ...} dicts).
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts)
    return ""
