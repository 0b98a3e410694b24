"""Public exports for the provider-agnostic parsing core."""

from .base import ToolCallParser
from .config import ParserConfig, DEFAULT_FALLBACK_ORDER
from .exceptions import (
    ToolCallParserError,
    UnsupportedProviderError,
    InvalidProviderError,
    ProviderNotSupportedError,
    ParserRegistrationError,
)
from .logger import get_logger, setup_logging
from .models import ToolCall, ToolCallResult
from .providers import Provider, ProviderFormat

__all__ = [
    "ToolCallParser",
    "ParserConfig",
    "DEFAULT_FALLBACK_ORDER",
    "ToolCallParserError",
    "UnsupportedProviderError",
    "InvalidProviderError",
    "ProviderNotSupportedError",
    "ParserRegistrationError",
    "get_logger",
    "setup_logging",
    "ToolCall",
    "ToolCallResult",
    "Provider",
    "ProviderFormat",
]
