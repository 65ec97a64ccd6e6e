"""Model aggregator - merge the three sources and serve derived views.

Usage:
    async with ModelAggregator() as radar:
        resp = await radar.get_all_models()
        resp.data   # [HuggingFace..., GitHub..., ArXiv...]
        resp.error  # first source error, or None
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta
from typing import Callable, Optional

import httpx

from .config import Settings, get_settings
from .core import DATE_FORMAT, as_utc, days_back, now_utc
from .models import AICategory, AIModel, APIResponse, TrendPoint
from .sources import arxiv, github, huggingface

logger = logging.getLogger(__name__)

LATEST_WINDOW_DAYS = 7
TREND_DAYS = 30          # 30 days back + today = 31 points
TREND_MIN_COUNT = 10
TREND_MAX_COUNT = 59
CATEGORY_COLOR = "bg-default"


class ModelAggregator:
    """
    Stateless-per-call aggregator over HuggingFace, GitHub and arXiv.

    The only state kept across calls is the in-memory subscription list,
    which feeds ``AIModel.is_subscribed`` and is never persisted.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self.settings.http.timeout,
            headers={"User-Agent": self.settings.http.user_agent},
            follow_redirects=True,
        )
        self._rng = rng or random.Random()
        self._subscriptions: list[str] = []

    async def aclose(self) -> None:
        """Close the HTTP client if this aggregator created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ModelAggregator":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    # ─────────────────────────────────────────────────────────────
    # Subscriptions
    # ─────────────────────────────────────────────────────────────

    @property
    def subscriptions(self) -> list[str]:
        return list(self._subscriptions)

    def subscribe(self, model_id: str) -> None:
        if model_id not in self._subscriptions:
            self._subscriptions.append(model_id)

    def unsubscribe(self, model_id: str) -> None:
        if model_id in self._subscriptions:
            self._subscriptions.remove(model_id)

    # ─────────────────────────────────────────────────────────────
    # Sources
    # ─────────────────────────────────────────────────────────────

    async def fetch_huggingface_models(self) -> APIResponse[list[AIModel]]:
        return await huggingface.fetch(
            self._client, self.settings.endpoints.huggingface, self._subscriptions
        )

    async def fetch_github_models(self) -> APIResponse[list[AIModel]]:
        return await github.fetch(
            self._client, self.settings.endpoints.github, self._subscriptions
        )

    async def fetch_arxiv_models(self) -> APIResponse[list[AIModel]]:
        return await arxiv.fetch(
            self._client, self.settings.endpoints.arxiv, self._subscriptions
        )

    async def get_all_models(self) -> APIResponse[list[AIModel]]:
        """
        Fetch all three sources, one after another.

        Returns:
            data: HuggingFace + GitHub + arXiv, in that order
            error: first non-empty source error in the same order, else None
        """
        results = [
            await self.fetch_huggingface_models(),
            await self.fetch_github_models(),
            await self.fetch_arxiv_models(),
        ]

        models: list[AIModel] = []
        for result in results:
            models.extend(result.data)
        error = next((r.error for r in results if r.error), None)

        logger.info(f"Aggregated {len(models)} models (error={error!r})")
        return APIResponse[list[AIModel]](data=models, error=error)

    # ─────────────────────────────────────────────────────────────
    # Derived views
    # ─────────────────────────────────────────────────────────────

    def _upstream_error(self, upstream: APIResponse) -> Optional[str]:
        if self.settings.propagate_upstream_errors:
            return upstream.error
        return None

    async def _filter_models(self, predicate: Callable[[AIModel], bool]) -> APIResponse[list[AIModel]]:
        all_models = await self.get_all_models()
        return APIResponse[list[AIModel]](
            data=[m for m in all_models.data if predicate(m)],
            error=self._upstream_error(all_models),
        )

    async def get_models_by_category(self, category: str) -> APIResponse[list[AIModel]]:
        return await self._filter_models(lambda m: m.category == category)

    async def get_models_by_source(self, source: str) -> APIResponse[list[AIModel]]:
        return await self._filter_models(lambda m: m.source == source)

    async def search_models(self, query: str) -> APIResponse[list[AIModel]]:
        """Case-sensitive substring match on name or description."""
        return await self._filter_models(lambda m: query in m.name or query in m.description)

    async def get_latest_models(self, now: Optional[datetime] = None) -> APIResponse[list[AIModel]]:
        """Models created within the last 7 days. A naive ``now`` is taken as UTC."""
        cutoff = as_utc(now or now_utc()) - timedelta(days=LATEST_WINDOW_DAYS)
        return await self._filter_models(lambda m: m.created_at >= cutoff)

    async def get_all_categories(self) -> APIResponse[list[str]]:
        """Distinct category labels, first-occurrence order."""
        all_models = await self.get_all_models()
        categories = list(dict.fromkeys(m.category for m in all_models.data))
        return APIResponse[list[str]](data=categories, error=self._upstream_error(all_models))

    async def get_categories(self) -> APIResponse[list[AICategory]]:
        names = await self.get_all_categories()
        categories = [
            AICategory(id=str(index), title=name, count=0, growth=0, color=CATEGORY_COLOR)
            for index, name in enumerate(names.data)
        ]
        return APIResponse[list[AICategory]](data=categories, error=names.error)

    async def get_trend_data(self) -> APIResponse[list[TrendPoint]]:
        """
        Synthetic daily series: 31 days ending today, random counts in [10, 59].

        Not derived from any source.
        """
        points = [
            TrendPoint(
                date=day.strftime(DATE_FORMAT),
                models=self._rng.randint(TREND_MIN_COUNT, TREND_MAX_COUNT),
            )
            for day in days_back(TREND_DAYS)
        ]
        return APIResponse[list[TrendPoint]](data=points)
