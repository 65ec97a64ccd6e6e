"""Shared fixtures: canned upstream payloads and a mock-transport aggregator."""

import sys
from datetime import timedelta
from pathlib import Path

import httpx
import pytest

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from modelradar import ModelAggregator
from modelradar.config import Settings
from modelradar.core import now_utc

HF_HOST = "huggingface.co"
GITHUB_HOST = "api.github.com"
ARXIV_HOST = "export.arxiv.org"


def _iso(days_ago: int) -> str:
    return (now_utc() - timedelta(days=days_ago)).strftime("%Y-%m-%dT%H:%M:%S.000Z")


@pytest.fixture
def hf_payload():
    return [
        {
            "id": "meta-llama/Llama-3-8B",
            "modelId": "meta-llama/Llama-3-8B",
            "pipeline_tag": "text-generation",
            "tags": ["pytorch", "llama"],
            "likes": 120,
            "createdAt": _iso(2),
        },
        {
            "id": "acme/old-vision",
            "modelId": "acme/old-vision",
            "pipeline_tag": "image-classification",
            "likes": 3,
            "createdAt": _iso(40),
        },
        {
            "id": "acme/tiny",
            "modelId": "acme/tiny",
        },
    ]


@pytest.fixture
def github_payload():
    return {
        "total_count": 2,
        "items": [
            {
                "id": 101,
                "name": "awesome-ai-model",
                "description": None,
                "html_url": "https://github.com/acme/awesome-ai-model",
                "stargazers_count": 5000,
                "created_at": "2019-01-01T00:00:00Z",
            },
            {
                "id": 202,
                "name": "fresh-llm",
                "description": "A fresh text-generation model",
                "html_url": "https://github.com/acme/fresh-llm",
                "stargazers_count": 12,
                "created_at": _iso(1),
            },
        ],
    }


ARXIV_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title type="html">ArXiv Query: search_query=cat:cs.AI</title>
  <id>http://arxiv.org/api/query-id</id>
  <updated>2024-05-01T00:00:00-04:00</updated>
  <entry>
    <id>http://arxiv.org/abs/2405.00001v1</id>
    <updated>2024-05-01T17:59:59Z</updated>
    <published>2024-05-01T17:59:59Z</published>
    <title>Scaling Laws for
      Tool-Using Agents</title>
    <summary>We study agents.</summary>
    <author><name>Ada Lovelace</name></author>
  </entry>
  <entry>
    <id>http://arxiv.org/abs/2405.00002v2</id>
    <updated>2024-05-01T17:00:00Z</updated>
    <published>2024-05-01T17:00:00Z</published>
    <title>Planning with Language Models</title>
    <summary>We plan.</summary>
  </entry>
</feed>
"""


@pytest.fixture
def arxiv_feed():
    return ARXIV_FEED


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def make_client(hf_payload, github_payload, arxiv_feed):
    """
    Build an AsyncClient whose transport serves the canned payloads.

    make_client(fail={"huggingface.co"}) raises ConnectError for that host;
    make_client(status={"api.github.com": 503}) answers with that status.
    """
    def _make(fail=(), status=None, overrides=None):
        status = status or {}
        overrides = overrides or {}
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            host = request.url.host
            calls.append(host)
            if host in fail:
                raise httpx.ConnectError("connection refused", request=request)
            code = status.get(host, 200)
            if host in overrides:
                body = overrides[host]
            elif host == HF_HOST:
                body = hf_payload
            elif host == GITHUB_HOST:
                body = github_payload
            elif host == ARXIV_HOST:
                return httpx.Response(code, text=arxiv_feed)
            else:
                return httpx.Response(404, json={"message": "Not Found"})
            if isinstance(body, str):
                return httpx.Response(code, text=body)
            return httpx.Response(code, json=body)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.calls = calls
        return client

    return _make


@pytest.fixture
def make_radar(make_client, settings):
    """Aggregator over the mock transport; same keyword args as make_client."""
    def _make(rng=None, settings_override=None, **kwargs):
        client = make_client(**kwargs)
        radar = ModelAggregator(settings_override or settings, client=client, rng=rng)
        return radar

    return _make
