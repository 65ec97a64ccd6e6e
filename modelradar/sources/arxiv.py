"""arXiv API fetcher.

API documentation: https://info.arxiv.org/help/api/
The query endpoint returns an Atom feed; each <entry> is one paper.
"""

import logging
from collections.abc import Collection

import feedparser
import httpx

from ..core import now_utc
from ..models import AIModel, APIResponse, ModelSource
from . import FETCH_ERRORS

logger = logging.getLogger(__name__)

SOURCE_NAME = ModelSource.ARXIV.value
ERROR_MESSAGE = "Failed to fetch ArXiv models"
DESCRIPTION = "AI research paper on ArXiv"
CATEGORY = "Research"
CATEGORY_COLOR = "bg-aiteal-dark"
TAGS = ["AI", "research"]


def parse_feed(content: str, subscriptions: Collection[str] = ()) -> list[AIModel]:
    """
    Parse an arXiv Atom document into AIModel records.

    Only title and id are used; the entry id is the abstract page URL.

    Raises:
        ValueError: document is not a feed at all
    """
    feed = feedparser.parse(content)
    if feed.bozo and not feed.entries and not feed.feed:
        raise ValueError(f"Unparseable feed: {feed.get('bozo_exception')}")

    models = []
    for entry in feed.entries:
        title = " ".join((entry.get("title") or "").split()) or "Unknown"
        link = entry.get("id") or "#"
        models.append(AIModel(
            id=link,
            name=title,
            description=DESCRIPTION,
            source=ModelSource.ARXIV,
            source_url=link,
            category=CATEGORY,
            category_color=CATEGORY_COLOR,
            tags=list(TAGS),
            stars=0,
            created_at=now_utc(),
            is_subscribed=link in subscriptions,
        ))
    return models


async def fetch(
    client: httpx.AsyncClient,
    url: str,
    subscriptions: Collection[str] = (),
) -> APIResponse[list[AIModel]]:
    """Fetch and parse the arXiv feed. Never raises."""
    try:
        resp = await client.get(url)
        resp.raise_for_status()
        models = parse_feed(resp.text, subscriptions)
    except FETCH_ERRORS as e:
        logger.warning(f"[{SOURCE_NAME}] Fetch error: {e}")
        return APIResponse[list[AIModel]](data=[], error=ERROR_MESSAGE)

    logger.info(f"[{SOURCE_NAME}] {len(models)} papers")
    return APIResponse[list[AIModel]](data=models)
