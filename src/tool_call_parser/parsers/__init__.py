"""Collect the per-provider tool call parsers."""

from .openai import OpenAIToolCallParser
from .anthropic import AnthropicToolCallParser
from .google import GoogleToolCallParser
from .bedrock import BedrockToolCallParser
from .cohere import CohereToolCallParser

__all__ = [
    "OpenAIToolCallParser",
    "AnthropicToolCallParser",
    "GoogleToolCallParser",
    "BedrockToolCallParser",
    "CohereToolCallParser",
]
