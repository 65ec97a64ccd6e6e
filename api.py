"""ModelRadar HTTP API - read-only views over the aggregated model listings."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from modelradar import ModelAggregator
from modelradar.models import AICategory, AIModel, APIResponse, TrendPoint

# ─────────────────────────────────────────────────────────────
# 日志配置
# ─────────────────────────────────────────────────────────────

def setup_api_logging():
    """Configure logging for API process."""
    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)

    log_file = log_dir / "api.log"

    # File handler
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(file_handler)

    return log_file

# 初始化日志
_log_file = setup_api_logging()
logger = logging.getLogger(__name__)


# 全局聚合器 (首次请求时创建)
_aggregator: Optional[ModelAggregator] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the shared aggregator on shutdown."""
    yield
    if _aggregator is not None:
        await _aggregator.aclose()


app = FastAPI(
    title="ModelRadar API",
    description="AI models from Hugging Face, GitHub and arXiv",
    version="0.1.0",
    lifespan=lifespan,
)

# 允许跨域 (前端直接调用)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_aggregator() -> ModelAggregator:
    """Process-wide aggregator dependency."""
    global _aggregator
    if _aggregator is None:
        _aggregator = ModelAggregator()
        logger.info("Aggregator created")
    return _aggregator


# ─────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/models", response_model=APIResponse[list[AIModel]])
async def all_models(radar: ModelAggregator = Depends(get_aggregator)):
    """全部模型: HuggingFace + GitHub + ArXiv"""
    return await radar.get_all_models()


@app.get("/api/models/latest", response_model=APIResponse[list[AIModel]])
async def latest_models(radar: ModelAggregator = Depends(get_aggregator)):
    """最近 7 天创建的模型"""
    return await radar.get_latest_models()


@app.get("/api/models/search", response_model=APIResponse[list[AIModel]])
async def search_models(
    q: str = Query("", description="名称或描述中的子串 (区分大小写, 空串匹配全部)"),
    radar: ModelAggregator = Depends(get_aggregator),
):
    return await radar.search_models(q)


@app.get("/api/models/category/{category}", response_model=APIResponse[list[AIModel]])
async def models_by_category(category: str, radar: ModelAggregator = Depends(get_aggregator)):
    return await radar.get_models_by_category(category)


@app.get("/api/models/source/{source}", response_model=APIResponse[list[AIModel]])
async def models_by_source(source: str, radar: ModelAggregator = Depends(get_aggregator)):
    """未知来源返回空列表"""
    return await radar.get_models_by_source(source)


@app.get("/api/categories", response_model=APIResponse[list[AICategory]])
async def categories(radar: ModelAggregator = Depends(get_aggregator)):
    return await radar.get_categories()


@app.get("/api/categories/names", response_model=APIResponse[list[str]])
async def category_names(radar: ModelAggregator = Depends(get_aggregator)):
    return await radar.get_all_categories()


@app.get("/api/trends", response_model=APIResponse[list[TrendPoint]])
async def trends(radar: ModelAggregator = Depends(get_aggregator)):
    """合成的 31 天趋势 (随机数据)"""
    return await radar.get_trend_data()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8080)
