"""
Chat-completion client used for drafting.

Pure API wrapper: callers build the prompt, this sends it as a single user
message and returns the text of the first choice.
"""
import logging
from typing import Optional

import httpx
from openai import AsyncOpenAI, APIError
from openai.types.chat import ChatCompletion

from config import OPENAI_API_KEY, OPENAI_BASE_URL, LLM_MODEL
from .exceptions import GenerationError

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    OpenAI-compatible chat completions client.

    SDK retries are off: a non-success response fails the call immediately.
    """

    DEFAULT_MODEL = "gpt-4"

    def __init__(
        self,
        api_key: str = None,
        model: str = None,
        base_url: str = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize completion client.

        Args:
            api_key: API key (optional, uses OPENAI_API_KEY)
            model: Model name (optional, uses LLM_MODEL)
            base_url: API base URL (optional, uses OPENAI_BASE_URL)
            http_client: Optional httpx client, mainly for tests
        """
        self.client = AsyncOpenAI(
            base_url=base_url or OPENAI_BASE_URL,
            api_key=api_key or OPENAI_API_KEY,
            max_retries=0,
            http_client=http_client,
        )
        self.model_name = model or LLM_MODEL or self.DEFAULT_MODEL

    async def complete(self, prompt: str, temperature: float, max_tokens: int) -> str:
        """
        Send one prompt and return the generated text.

        Raises:
            GenerationError: If the service call fails, returns an error status
                or replies without any choices
        """
        try:
            completion = await self.client.chat.completions.create(
                model=self.model_name,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except APIError as e:
            logger.warning(f"Completion request failed: {e}")
            raise GenerationError(f"Completion request failed: {e}") from e

        if not isinstance(completion, ChatCompletion) or not getattr(completion, "choices", None):
            logger.warning(f"Completion service returned no choices: {str(completion)[:80]!r}")
            raise GenerationError("Completion service returned no choices")

        return completion.choices[0].message.content or ""
