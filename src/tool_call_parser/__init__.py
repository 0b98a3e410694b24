"""Tool Call Parser - normalize LLM tool calls across providers and format results back."""

from .core import (
    ToolCall,
    ToolCallResult,
    ToolCallParser,
    Provider,
    ProviderFormat,
    ParserConfig,
    ToolCallParserError,
    UnsupportedProviderError,
    InvalidProviderError,
    ProviderNotSupportedError,
    ParserRegistrationError,
    get_logger,
    setup_logging,
)
from .parsers import (
    OpenAIToolCallParser,
    AnthropicToolCallParser,
    GoogleToolCallParser,
    BedrockToolCallParser,
    CohereToolCallParser,
)
from .dispatch import (
    ParserRegistry,
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
    "ToolCall",
    "ToolCallResult",
    "ToolCallParser",
    "Provider",
    "ProviderFormat",
    "ParserConfig",
    "ToolCallParserError",
    "UnsupportedProviderError",
    "InvalidProviderError",
    "ProviderNotSupportedError",
    "ParserRegistrationError",
    "get_logger",
    "setup_logging",
    "OpenAIToolCallParser",
    "AnthropicToolCallParser",
    "GoogleToolCallParser",
    "BedrockToolCallParser",
    "CohereToolCallParser",
    "ParserRegistry",
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
