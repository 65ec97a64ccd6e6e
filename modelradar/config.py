"""Settings - load from config/sources.yaml with env overrides.

All endpoint and HTTP parameters are externalized:
- config/sources.yaml: source URLs, HTTP timeout/user agent, aggregator flags
- MODELRADAR_* env vars (or .env) override single values
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
SOURCES_CONFIG_PATH = CONFIG_DIR / "sources.yaml"

DEFAULT_HF_URL = "https://huggingface.co/api/models"
DEFAULT_GITHUB_URL = "https://api.github.com/search/repositories?q=AI+model&sort=stars&order=desc"
DEFAULT_ARXIV_URL = "http://export.arxiv.org/api/query?search_query=cat:cs.AI&max_results=10"
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ModelRadar/1.0)"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class SourceEndpoints:
    """Upstream listing endpoints."""
    huggingface: str = DEFAULT_HF_URL
    github: str = DEFAULT_GITHUB_URL
    arxiv: str = DEFAULT_ARXIV_URL


@dataclass
class HttpConfig:
    """Outbound HTTP parameters."""
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class Settings:
    """Top-level ModelRadar settings."""
    endpoints: SourceEndpoints = field(default_factory=SourceEndpoints)
    http: HttpConfig = field(default_factory=HttpConfig)
    propagate_upstream_errors: bool = True


def _load_yaml(path: Path) -> dict:
    """Load settings YAML."""
    if not path.exists():
        raise FileNotFoundError(f"Sources config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Sources config must be a mapping: {path}")
    return data


def _parse_bool(value, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value!r}")


def _source_url(sources: dict, key: str, default: str) -> str:
    entry = sources.get(key) or {}
    return str(entry.get("url") or default)


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Build Settings from YAML, then apply env overrides.

    Args:
        path: Config file. Defaults to $MODELRADAR_CONFIG or config/sources.yaml

    Returns:
        Settings

    Raises:
        FileNotFoundError: config file missing
        ValueError: malformed config or env override
    """
    load_dotenv()

    if path is None:
        env_path = os.environ.get("MODELRADAR_CONFIG")
        path = Path(env_path) if env_path else SOURCES_CONFIG_PATH

    config = _load_yaml(Path(path))
    sources = config.get("sources", {}) or {}
    http_cfg = config.get("http", {}) or {}
    aggregator_cfg = config.get("aggregator", {}) or {}

    endpoints = SourceEndpoints(
        huggingface=os.environ.get("MODELRADAR_HF_URL") or _source_url(sources, "huggingface", DEFAULT_HF_URL),
        github=os.environ.get("MODELRADAR_GITHUB_URL") or _source_url(sources, "github", DEFAULT_GITHUB_URL),
        arxiv=os.environ.get("MODELRADAR_ARXIV_URL") or _source_url(sources, "arxiv", DEFAULT_ARXIV_URL),
    )

    timeout_raw = os.environ.get("MODELRADAR_HTTP_TIMEOUT") or http_cfg.get("timeout", 30)
    try:
        timeout = float(timeout_raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid HTTP timeout: {timeout_raw!r}")
    if timeout <= 0:
        raise ValueError(f"HTTP timeout must be positive: {timeout}")

    http = HttpConfig(
        timeout=timeout,
        user_agent=str(http_cfg.get("user_agent") or DEFAULT_USER_AGENT),
    )

    propagate_raw = os.environ.get("MODELRADAR_PROPAGATE_ERRORS")
    if propagate_raw is None:
        propagate_raw = aggregator_cfg.get("propagate_upstream_errors", True)

    return Settings(
        endpoints=endpoints,
        http=http,
        propagate_upstream_errors=_parse_bool(propagate_raw, "propagate_upstream_errors"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once."""
    return load_settings()
