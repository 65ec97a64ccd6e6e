"""Data models for ModelRadar."""

from datetime import datetime, timezone
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

DEFAULT_DESCRIPTION = "No description available"
DISPLAY_DATE = "Recently"


class ModelSource(str, Enum):
    """上游数据源."""
    HUGGINGFACE = "HuggingFace"   # 模型仓库
    GITHUB = "GitHub"             # 代码托管搜索
    ARXIV = "ArXiv"               # 论文 feed


class AIModel(BaseModel):
    """
    一条 AI 模型记录 - 三个来源统一后的形状

    id 只在单个来源内唯一，跨来源不去重
    """

    # === 核心内容 ===
    id: str
    name: str
    description: str = DEFAULT_DESCRIPTION

    # === 溯源 ===
    source: ModelSource
    source_url: str = ""

    # === 展示 ===
    category: str = "Other"
    category_color: str = ""
    tags: list[str] = []
    stars: int = Field(default=0, ge=0)
    date: str = DISPLAY_DATE

    # === 时间戳 ===
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # === 用户状态 ===
    is_subscribed: bool = False

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("created_at")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class AICategory(BaseModel):
    """分类汇总 (count/growth 目前总是 0)"""
    id: str
    title: str
    count: int = 0
    growth: float = 0
    color: str = "bg-default"


class TrendPoint(BaseModel):
    """趋势点 - 随机生成，不来自真实数据"""
    date: str
    models: int


class APIResponse(BaseModel, Generic[T]):
    """Result-or-error envelope returned by every public operation."""
    data: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
