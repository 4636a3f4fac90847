"""CalorieNinjas nutrition API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class CalorieNinjasClient(Protocol):
    """Interface for CalorieNinjas API interactions."""

    async def nutrition(self, query: str, api_key: str) -> dict[str, object]:
        """Look up a natural-language query and return raw API data."""


@dataclass
class HttpxCalorieNinjasClient(CalorieNinjasClient):
    """HTTPX-backed CalorieNinjas client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(cls, base_url: str, timeout: float = 15) -> "HttpxCalorieNinjasClient":
        """Create a CalorieNinjas client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def nutrition(self, query: str, api_key: str) -> dict[str, object]:
        """Query the nutrition endpoint."""
        response = await self.http_client.get(
            f"{self.base_url}/nutrition",
            params={"query": query},
            headers={"X-Api-Key": api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
