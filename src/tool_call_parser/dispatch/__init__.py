"""Provider detection, the parser registry and the process-wide default instance."""

from .detection import detect_provider_tree
from .registry import ParserRegistry, ProviderKey
from .factory import (
    default_registry,
    reset_default_registry,
    get_parser,
    try_get_parser,
    register_parser,
    registered_providers,
    openai_compatible_providers,
    detect_provider,
    parse,
    has_tool_calls,
)

__all__ = [
    "detect_provider_tree",
    "ParserRegistry",
    "ProviderKey",
    "default_registry",
    "reset_default_registry",
    "get_parser",
    "try_get_parser",
    "register_parser",
    "registered_providers",
    "openai_compatible_providers",
    "detect_provider",
    "parse",
    "has_tool_calls",
]
