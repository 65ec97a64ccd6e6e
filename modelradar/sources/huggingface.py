"""Hugging Face Hub model listing fetcher.

API: https://huggingface.co/api/models (JSON array, newest activity first)
"""

import logging
from collections.abc import Collection

import httpx

from ..core import now_utc, parse_iso
from ..models import DEFAULT_DESCRIPTION, AIModel, APIResponse, ModelSource
from . import FETCH_ERRORS

logger = logging.getLogger(__name__)

SOURCE_NAME = ModelSource.HUGGINGFACE.value
ERROR_MESSAGE = "Failed to fetch Hugging Face models"
CATEGORY_COLOR = "bg-aiblue-dark"
MODEL_PAGE_BASE = "https://huggingface.co"


def parse_models(payload: list, subscriptions: Collection[str] = ()) -> list[AIModel]:
    """
    Map the Hub listing into AIModel records.

    Args:
        payload: Decoded JSON array from /api/models
        subscriptions: Subscribed model ids

    Returns:
        List of AIModel, in listing order

    Raises:
        TypeError: payload is not a list of objects
        KeyError: an entry has no id
    """
    if not isinstance(payload, list):
        raise TypeError(f"Expected a JSON array, got {type(payload).__name__}")

    models = []
    for entry in payload:
        model_id = str(entry["id"])
        pipeline_tag = entry.get("pipeline_tag")
        models.append(AIModel(
            id=model_id,
            name=entry.get("modelId") or model_id,
            description=pipeline_tag or DEFAULT_DESCRIPTION,
            source=ModelSource.HUGGINGFACE,
            source_url=f"{MODEL_PAGE_BASE}/{model_id}",
            category=pipeline_tag or "Other",
            category_color=CATEGORY_COLOR,
            tags=entry.get("tags") or [],
            stars=entry.get("likes") or 0,
            created_at=parse_iso(entry.get("createdAt"), default=now_utc()),
            is_subscribed=model_id in subscriptions,
        ))
    return models


async def fetch(
    client: httpx.AsyncClient,
    url: str,
    subscriptions: Collection[str] = (),
) -> APIResponse[list[AIModel]]:
    """Fetch and map the Hub listing. Never raises."""
    try:
        resp = await client.get(url)
        resp.raise_for_status()
        models = parse_models(resp.json(), subscriptions)
    except FETCH_ERRORS as e:
        logger.warning(f"[{SOURCE_NAME}] Fetch error: {e}")
        return APIResponse[list[AIModel]](data=[], error=ERROR_MESSAGE)

    logger.info(f"[{SOURCE_NAME}] {len(models)} models")
    return APIResponse[list[AIModel]](data=models)
