"""Process-wide default registry and module-level shortcuts to it.

The default registry is created with the built-in parsers at import time. It is safe
to register custom parsers while other threads parse through these functions.
"""

from typing import Any, List, Optional

from ..core.base import ToolCallParser
from ..core.models import ToolCall
from ..core.providers import Provider
from .registry import ParserRegistry, ProviderKey

_default_registry = ParserRegistry()


def default_registry() -> ParserRegistry:
    """Return the process-wide registry used by the module-level functions."""
    return _default_registry


def reset_default_registry() -> None:
    """Restore the default registry to its built-in mappings."""
    _default_registry.reset()


def get_parser(provider: ProviderKey) -> ToolCallParser:
    """
    Look up the parser registered for a provider.

    Args:
        provider: A ``Provider`` or a custom identifier string.

    Returns:
        The registered parser.

    Raises:
        InvalidProviderError: If ``provider`` is ``Provider.AUTO`` or not an identifier.
        ProviderNotSupportedError: If nothing is registered for ``provider``.
    """
    return _default_registry.get(provider)


def try_get_parser(provider: ProviderKey) -> Optional[ToolCallParser]:
    """Like ``get_parser`` but returns ``None`` instead of raising."""
    return _default_registry.try_get(provider)


def register_parser(provider: ProviderKey, parser: ToolCallParser) -> None:
    """
    Register or replace the parser for a provider in the default registry.

    Args:
        provider: A ``Provider`` or a custom identifier string.
        parser: The parser instance to use for that identifier.

    Raises:
        ParserRegistrationError: If ``provider`` is ``Provider.AUTO`` or ``parser`` is not
            a ``ToolCallParser``.
    """
    _default_registry.register(provider, parser)


def registered_providers() -> List[ProviderKey]:
    """Return the registered identifiers in registration order."""
    return _default_registry.providers()


def openai_compatible_providers() -> List[Provider]:
    """Return the registered built-in identifiers that speak the OpenAI format."""
    return _default_registry.openai_compatible_providers()


def detect_provider(response: Any) -> Provider:
    """
    Guess which provider produced a response.

    Args:
        response: JSON text, a pydantic model or a decoded tree.

    Returns:
        The detected provider, or ``Provider.AUTO`` when unresolved or blank.

    Raises:
        json.JSONDecodeError: If text input is not valid JSON.
    """
    return _default_registry.detect_provider(response)


def parse(response: Any) -> List[ToolCall]:
    """Extract tool calls from a response, auto-detecting the provider."""
    return _default_registry.parse(response)


def has_tool_calls(response: Any) -> bool:
    """Check a response for tool calls, auto-detecting the provider."""
    return _default_registry.has_tool_calls(response)
