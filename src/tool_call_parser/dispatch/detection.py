"""Heuristic detection of the provider that produced a response.

Each predicate checks a provider family's most distinctive fields. Formats overlap, so
the predicates run in a fixed order and the first match wins: Anthropic, Google,
Bedrock, Cohere, OpenAI. Nothing here validates a whole document.
"""

from typing import Any, Callable, Tuple

from ..core.json_utils import get_dict, get_list, get_str, has_key
from ..core.logger import get_logger
from ..core.providers import Provider

logger = get_logger(__name__)

_ANTHROPIC_BLOCK_TYPES = ("tool_use", "tool_result")
_PERMISSIVE_ANTHROPIC_BLOCK_TYPES = _ANTHROPIC_BLOCK_TYPES + ("text",)


def looks_like_anthropic(tree: Any, permissive: bool = False) -> bool:
    """``stop_reason`` present, or a ``content`` array with a tool_use/tool_result block.

    With ``permissive`` a ``text`` block also counts.
    """
    if has_key(tree, "stop_reason"):
        return True
    block_types = _PERMISSIVE_ANTHROPIC_BLOCK_TYPES if permissive else _ANTHROPIC_BLOCK_TYPES
    return any(get_str(block, "type") in block_types for block in get_list(tree, "content"))


def looks_like_google(tree: Any) -> bool:
    if has_key(tree, "functionCall"):
        return True
    if any(has_key(part, "functionCall") for part in get_list(tree, "parts")):
        return True
    return any(
        has_key(part, "functionCall")
        for candidate in get_list(tree, "candidates")
        for part in get_list(get_dict(candidate, "content"), "parts")
    )


def looks_like_bedrock(tree: Any) -> bool:
    if get_str(tree, "stopReason") == "tool_use":
        return True
    content = get_list(get_dict(get_dict(tree, "output"), "message"), "content")
    return any(has_key(block, "toolUse") for block in content)


def looks_like_cohere(tree: Any) -> bool:
    if get_str(tree, "finish_reason") == "TOOL_CALL" or has_key(tree, "tool_plan"):
        return True
    return any(has_key(action, "tool_name") for action in get_list(tree, "actions"))


def looks_like_openai(tree: Any) -> bool:
    if has_key(tree, "choices") or has_key(tree, "tool_calls") or has_key(tree, "function_call"):
        return True
    message = get_dict(tree, "message")
    return message is not None and ("tool_calls" in message or "function_call" in message)


_DETECTORS: Tuple[Tuple[Provider, Callable[[Any], bool]], ...] = (
    (Provider.GOOGLE, looks_like_google),
    (Provider.BEDROCK, looks_like_bedrock),
    (Provider.COHERE, looks_like_cohere),
    (Provider.OPENAI, looks_like_openai),
)


def detect_provider_tree(tree: Any, permissive_anthropic: bool = False) -> Provider:
    """Guess which provider produced a decoded response.

    Args:
        tree: The decoded JSON response.
        permissive_anthropic: Treat ``text`` content blocks as Anthropic-indicative.

    Returns:
        The detected provider, or ``Provider.AUTO`` when no predicate matches.
    """
    if looks_like_anthropic(tree, permissive=permissive_anthropic):
        detected = Provider.ANTHROPIC
    else:
        detected = next((provider for provider, predicate in _DETECTORS if predicate(tree)), Provider.AUTO)

    logger.debug("Detected provider format: %s", detected.value)
    return detected
