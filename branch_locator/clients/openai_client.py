"""
Rate-limited OpenAI client shared by every fallback lookup of the process.
"""
import os
from typing import Dict, List

from aiolimiter import AsyncLimiter
from openai import AsyncOpenAI
from loguru import logger

from branch_locator.config import (
    CONCURRENCY,
    FALLBACK_TIMEOUT,
    OPENAI_API_KEY,
    OPENAI_MAX_RETRIES,
    OPENAI_MODEL,
)


class OpenAIClient:
    """
    Singleton wrapper around AsyncOpenAI for JSON-mode branch resolution.

    The SDK request timeout matches the fallback deadline so an abandoned
    lookup does not keep retrying in the background.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not OpenAIClient._initialized:
            api_key = OPENAI_API_KEY or os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ValueError("OPENAI_API_KEY must be set in environment or config")

            self.client = AsyncOpenAI(
                api_key=api_key,
                timeout=FALLBACK_TIMEOUT,
                max_retries=OPENAI_MAX_RETRIES,
            )
            # at most CONCURRENCY requests per second across all lookups
            self.rate_limiter = AsyncLimiter(max_rate=CONCURRENCY, time_period=1.0)
            OpenAIClient._initialized = True

    async def complete_json(self, messages: List[Dict[str, str]], model: str = OPENAI_MODEL) -> str:
        """
        Run a deterministic JSON-mode chat completion.

        Args:
            messages (List[Dict[str, str]]): Chat messages sent to the model.
            model (str): Model name. Defaults to OPENAI_MODEL.

        Returns:
            str: Raw message content of the first choice ("" when the model returns none).
        """
        async with self.rate_limiter:
            try:
                resp = await self.client.chat.completions.create(
                    model=model,
                    messages=messages,
                    response_format={"type": "json_object"},
                    temperature=0,
                )
            except Exception as e:
                logger.debug(f"⚠️ OpenAI request failed ({model}): {e}")
                raise
        return resp.choices[0].message.content or ""
