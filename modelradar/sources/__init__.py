"""Upstream source fetchers (Hugging Face, GitHub, arXiv)."""

import httpx

# Anything a fetch can hit between the socket and the mapped records.
# pydantic.ValidationError and json.JSONDecodeError are ValueErrors.
FETCH_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError)

from . import arxiv, github, huggingface  # noqa: E402

__all__ = ["FETCH_ERRORS", "arxiv", "github", "huggingface"]
