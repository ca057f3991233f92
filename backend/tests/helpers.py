"""JSON-over-HTTP helpers for the integration tests."""
from typing import TypeVar

from httpx import AsyncClient
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


async def post_json(
    client: AsyncClient,
    url: str,
    payload: BaseModel,
    response_model: type[ModelT],
    expected_status: int = 200,
) -> ModelT:
    """POST ``payload`` as JSON and parse the reply into ``response_model``."""
    response = await client.post(url, json=payload.model_dump(by_alias=True))
    assert response.status_code == expected_status, response.text
    return response_model.model_validate(response.json())


async def get_json(
    client: AsyncClient,
    url: str,
    response_model: type[ModelT],
    expected_status: int = 200,
) -> ModelT:
    """GET ``url`` and parse the JSON reply into ``response_model``."""
    response = await client.get(url)
    assert response.status_code == expected_status, response.text
    return response_model.model_validate(response.json())
