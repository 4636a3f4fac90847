"""Nutritionix natural-language nutrients API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_NOT_FOUND = 404


class NutritionixClient(Protocol):
    """Interface for Nutritionix API interactions."""

    async def natural_nutrients(
        self, query: str, app_id: str, app_key: str
    ) -> dict[str, object]:
        """Look up a natural-language query and return raw API data."""


@dataclass
class HttpxNutritionixClient(NutritionixClient):
    """HTTPX-backed Nutritionix client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(cls, base_url: str, timeout: float = 15) -> "HttpxNutritionixClient":
        """Create a Nutritionix client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient(), timeout=timeout)

    async def natural_nutrients(
        self, query: str, app_id: str, app_key: str
    ) -> dict[str, object]:
        """Query the natural nutrients endpoint.

        Nutritionix answers 404 when nothing in the query matched a food; that
        is returned as an empty ``foods`` list.
        """
        response = await self.http_client.post(
            f"{self.base_url}/natural/nutrients",
            json={"query": query},
            headers={"x-app-id": app_id, "x-app-key": app_key},
            timeout=self.timeout,
        )
        if response.status_code == _NOT_FOUND:
            return {"foods": []}
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
