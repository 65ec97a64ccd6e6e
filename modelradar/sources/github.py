"""GitHub repository search fetcher.

API: https://api.github.com/search/repositories (unauthenticated, sorted by stars)
"""

import logging
from collections.abc import Collection

import httpx

from ..core import now_utc, parse_iso
from ..models import DEFAULT_DESCRIPTION, AIModel, APIResponse, ModelSource
from . import FETCH_ERRORS

logger = logging.getLogger(__name__)

SOURCE_NAME = ModelSource.GITHUB.value
ERROR_MESSAGE = "Failed to fetch GitHub models"
CATEGORY = "Code Models"
CATEGORY_COLOR = "bg-aiorange-dark"
TAGS = ["code-generation", "open-source"]


def parse_models(payload: dict, subscriptions: Collection[str] = ()) -> list[AIModel]:
    """Map a search response (``{"items": [...]}``) into AIModel records."""
    models = []
    for repo in payload["items"]:
        repo_id = str(repo["id"])
        models.append(AIModel(
            id=repo_id,
            name=repo["name"],
            description=repo.get("description") or DEFAULT_DESCRIPTION,
            source=ModelSource.GITHUB,
            source_url=repo.get("html_url") or "",
            category=CATEGORY,
            category_color=CATEGORY_COLOR,
            tags=list(TAGS),
            stars=repo.get("stargazers_count") or 0,
            created_at=parse_iso(repo.get("created_at"), default=now_utc()),
            is_subscribed=repo_id in subscriptions,
        ))
    return models


async def fetch(
    client: httpx.AsyncClient,
    url: str,
    subscriptions: Collection[str] = (),
) -> APIResponse[list[AIModel]]:
    """Fetch and map the search results. Never raises."""
    try:
        resp = await client.get(url, headers={"Accept": "application/vnd.github+json"})
        resp.raise_for_status()
        models = parse_models(resp.json(), subscriptions)
    except FETCH_ERRORS as e:
        logger.warning(f"[{SOURCE_NAME}] Fetch error: {e}")
        return APIResponse[list[AIModel]](data=[], error=ERROR_MESSAGE)

    logger.info(f"[{SOURCE_NAME}] {len(models)} models")
    return APIResponse[list[AIModel]](data=models)
