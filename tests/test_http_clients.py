"""Tests for HTTP-based adapters."""

import asyncio
import json
from types import SimpleNamespace

import httpx
import pytest

from meal_logger.adapters.calorieninjas_client import HttpxCalorieNinjasClient
from meal_logger.adapters.nutritionix_client import HttpxNutritionixClient
from meal_logger.adapters.openai_extraction_client import OpenAIExtractionClient


class _FakeCompletions:
    def __init__(self, content: str | None) -> None:
        self.content = content
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class _FakeOpenAI:
    def __init__(self, content: str | None) -> None:
        self.completions = _FakeCompletions(content)
        self.chat = SimpleNamespace(completions=self.completions)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def test_openai_extraction_client_returns_content() -> None:
    created: dict[str, _FakeOpenAI] = {}

    def factory(api_key: str) -> _FakeOpenAI:
        created[api_key] = _FakeOpenAI('[{"item_name": "egg", "quantity": "2"}]')
        return created[api_key]

    client = OpenAIExtractionClient(client_factory=factory)

    result = asyncio.run(
        client.complete(
            api_key="user-key",
            model="gpt-3.5-turbo",
            system_prompt="Extract foods",
            text="2 eggs",
        )
    )

    assert result == '[{"item_name": "egg", "quantity": "2"}]'
    sdk = created["user-key"]
    assert sdk.closed is True
    payload = sdk.completions.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-3.5-turbo"
    assert payload["temperature"] == 0.0
    assert payload["messages"] == [
        {"role": "system", "content": "Extract foods"},
        {"role": "user", "content": "2 eggs"},
    ]


def test_openai_extraction_client_rejects_empty_content() -> None:
    client = OpenAIExtractionClient(client_factory=lambda api_key: _FakeOpenAI(None))

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.complete(
                api_key="user-key",
                model="gpt-3.5-turbo",
                system_prompt="Extract foods",
                text="2 eggs",
            )
        )


def test_calorieninjas_client_sends_query_and_key() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v1/nutrition"
        assert request.url.params["query"] == "2 egg, 1 cup coffee"
        assert request.headers["X-Api-Key"] == "cn-key"
        return httpx.Response(200, json={"items": [{"name": "egg"}]})

    transport = httpx.MockTransport(handler)
    client = HttpxCalorieNinjasClient(
        base_url="https://api.test/v1",
        http_client=httpx.AsyncClient(transport=transport),
    )

    payload = asyncio.run(client.nutrition("2 egg, 1 cup coffee", api_key="cn-key"))

    assert payload == {"items": [{"name": "egg"}]}


def test_calorieninjas_client_raises_on_auth_failure() -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(401, json={"error": "Invalid API Key."})
    )
    client = HttpxCalorieNinjasClient(
        base_url="https://api.test/v1",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.nutrition("1 apple", api_key="bad"))


def test_nutritionix_client_posts_query_with_app_headers() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/v2/natural/nutrients"
        assert request.headers["x-app-id"] == "app-id"
        assert request.headers["x-app-key"] == "app-key"
        assert json.loads(request.content.decode()) == {"query": "1 apple"}
        return httpx.Response(200, json={"foods": [{"food_name": "apple"}]})

    transport = httpx.MockTransport(handler)
    client = HttpxNutritionixClient(
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )

    payload = asyncio.run(
        client.natural_nutrients("1 apple", app_id="app-id", app_key="app-key")
    )

    assert payload == {"foods": [{"food_name": "apple"}]}


def test_nutritionix_client_maps_not_found_to_empty_foods() -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            404, json={"message": "We couldn't match any of your foods"}
        )
    )
    client = HttpxNutritionixClient(
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )

    payload = asyncio.run(
        client.natural_nutrients("unobtainium", app_id="app-id", app_key="app-key")
    )

    assert payload == {"foods": []}


def test_nutritionix_client_raises_on_server_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(500))
    client = HttpxNutritionixClient(
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.natural_nutrients("1 apple", app_id="a", app_key="b"))
