"""Helpers for walking loosely structured provider JSON.

Every accessor here tolerates the wrong value kind: asking a list for a key, or a
string for its items, yields ``None`` / ``[]`` instead of raising. Parsers rely on
this to skip structurally unexpected candidates without special cases.
"""

import json
import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

ID_LENGTH = 29
CALL_ID_PREFIX = "call_"
TOOL_USE_ID_PREFIX = "tooluse_"
EMPTY_ARGUMENTS = "{}"


def is_blank(response: Any) -> bool:
    """Return True for ``None`` and for text that is empty or whitespace only.

    Bytes are decoded the way ``json.loads`` would decode them, so a UTF-16 payload
    holding only a BOM and whitespace counts as blank.
    """
    if response is None:
        return True
    if isinstance(response, (bytes, bytearray)):
        try:
            response = bytes(response).decode(json.detect_encoding(response))
        except UnicodeDecodeError:
            return False
    if isinstance(response, str):
        return not response.strip()
    return False


def load_response(response: Any) -> Any:
    """Turn any accepted response form into a plain JSON tree.

    Args:
        response: JSON text (``str``/``bytes``), a pydantic model such as an SDK response
            object, or an already decoded tree.

    Returns:
        The decoded tree.

    Raises:
        json.JSONDecodeError: If text input is not valid JSON.
    """
    if isinstance(response, (str, bytes, bytearray)):
        return json.loads(response)
    if isinstance(response, BaseModel):
        return response.model_dump(mode="json", by_alias=True, exclude_none=True)
    return response


def dump_json(value: Any) -> str:
    """Serialize ``value`` to compact JSON text."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def new_call_id(prefix: str = CALL_ID_PREFIX) -> str:
    """Synthesize an identifier for providers that do not send one.

    Uniqueness is probabilistic only.
    """
    return f"{prefix}{uuid.uuid4().hex}"[:ID_LENGTH]


def get_dict(node: Any, key: str) -> Optional[Dict[str, Any]]:
    if not isinstance(node, dict):
        return None
    value = node.get(key)
    return value if isinstance(value, dict) else None


def get_list(node: Any, key: str) -> List[Any]:
    if not isinstance(node, dict):
        return []
    value = node.get(key)
    return value if isinstance(value, list) else []


def get_str(node: Any, key: str) -> Optional[str]:
    if not isinstance(node, dict):
        return None
    value = node.get(key)
    return value if isinstance(value, str) else None


def get_name(node: Any, key: str = "name") -> Optional[str]:
    """Return a non-empty string name, or ``None``."""
    name = get_str(node, key)
    return name or None


def has_key(node: Any, key: str) -> bool:
    return isinstance(node, dict) and key in node


def arguments_text(value: Any, allow_string: bool = False) -> Optional[str]:
    """Normalize a provider's arguments value to JSON object text.

    Args:
        value: The raw ``arguments``/``input``/``args``/``parameters`` value.
        allow_string: Whether the provider encodes arguments as a JSON string. Such strings
            are passed through verbatim.

    Returns:
        The arguments text, ``"{}"`` when absent, or ``None`` when the value has a kind
        that cannot carry arguments (the candidate should be skipped).
    """
    if value is None:
        return EMPTY_ARGUMENTS
    if isinstance(value, dict):
        return dump_json(value)
    if allow_string and isinstance(value, str):
        return value if value.strip() else EMPTY_ARGUMENTS
    return None
