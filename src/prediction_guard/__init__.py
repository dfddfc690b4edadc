"""Prediction Guard API client."""

from prediction_guard._version import __version__
from prediction_guard.client import Client
from prediction_guard.config import Settings, load_settings
from prediction_guard.errors import (
    APIError,
    ConfigurationError,
    DecodeError,
    PredictionGuardError,
    StreamDecodeError,
)
from prediction_guard.log_config import configure_logging
from prediction_guard.registry import Language, Model, Other
from prediction_guard.schemas.chat import Roles
from prediction_guard.streaming import STOP_SENTINEL, ChatChunk, TextChannel

__all__ = [
    "APIError",
    "ChatChunk",
    "Client",
    "ConfigurationError",
    "DecodeError",
    "Language",
    "Model",
    "Other",
    "PredictionGuardError",
    "Roles",
    "STOP_SENTINEL",
    "Settings",
    "StreamDecodeError",
    "TextChannel",
    "__version__",
    "configure_logging",
    "load_settings",
]
