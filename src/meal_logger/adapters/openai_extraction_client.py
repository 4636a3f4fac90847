"""OpenAI chat completions client for meal extraction."""

from collections.abc import Callable
from dataclasses import dataclass

from openai import AsyncOpenAI

from meal_logger.services.extraction import ExtractionClient


@dataclass
class OpenAIExtractionClient(ExtractionClient):
    """Extraction client backed by OpenAI chat completions.

    The API key is supplied per call because users enter it at runtime.
    """

    client_factory: Callable[[str], AsyncOpenAI]

    @classmethod
    def create(cls) -> "OpenAIExtractionClient":
        """Create a client that builds an SDK client per API key."""
        return cls(client_factory=_sdk_client)

    async def complete(
        self, *, api_key: str, model: str, system_prompt: str, text: str
    ) -> str:
        """Send the description with the system prompt and return the reply."""
        client = self.client_factory(api_key)
        try:
            response = await client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": text},
                ],
                temperature=0.0,
            )
        finally:
            await client.close()
        content = response.choices[0].message.content
        if not content:
            raise RuntimeError("OpenAI returned an empty response")
        return content


def _sdk_client(api_key: str) -> AsyncOpenAI:
    return AsyncOpenAI(api_key=api_key)
