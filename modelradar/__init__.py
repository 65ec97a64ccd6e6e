"""ModelRadar - aggregate AI model listings from Hugging Face, GitHub and arXiv."""

from .aggregator import ModelAggregator
from .config import Settings, get_settings, load_settings
from .models import AICategory, AIModel, APIResponse, ModelSource, TrendPoint

__all__ = [
    "ModelAggregator",
    "Settings",
    "get_settings",
    "load_settings",
    "AIModel",
    "AICategory",
    "APIResponse",
    "ModelSource",
    "TrendPoint",
]
