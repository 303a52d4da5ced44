# completion_gateway.py
import logging

import groq
from groq import AsyncGroq

from channel_api.config import (
    GROQ_API_KEY,
    GROQ_MODEL,
    COMPLETION_TIMEOUT,
    COMPLETION_MAX_TOKENS,
    require,
)
from channel_api.errors import UpstreamError

logger = logging.getLogger(__name__)


class CompletionGateway:
    """Single-shot text completion through Groq.

    One request per call: no retries, no streaming. Every provider failure
    comes back as ``UpstreamError``.
    """

    def __init__(self, client: AsyncGroq, model: str = GROQ_MODEL, max_tokens: int = COMPLETION_MAX_TOKENS):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    @classmethod
    def from_env(cls) -> "CompletionGateway":
        client = AsyncGroq(
            api_key=require("GROQ_API_KEY", GROQ_API_KEY),
            timeout=COMPLETION_TIMEOUT,
            max_retries=0,
        )
        return cls(client)

    async def complete(self, prompt: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
            )
        except groq.APIError as e:
            logger.error(f"Completion request failed: {e}")
            raise UpstreamError() from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            logger.error(f"Malformed completion response: {e}")
            raise UpstreamError() from e

        if not content:
            logger.error("Completion response has no content")
            raise UpstreamError()
        return content

    async def close(self):
        await self.client.close()
