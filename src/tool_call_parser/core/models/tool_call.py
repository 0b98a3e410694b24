"""Normalized tool call models shared by every provider parser."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

T = TypeVar("T")

FAILURE_PREFIX = "Error: "


class ToolCall(BaseModel):
    """
    A single tool invocation requested by a model, independent of the provider.

    Attributes:
        id: Identifier of the call. Taken from the response where the provider supplies one,
            otherwise synthesized (``call_...`` / ``tooluse_...``).
        name: Name of the tool/function to invoke. Never empty.
        arguments: The call's parameters as JSON object text. ``"{}"`` when the
            response carries no parameters.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    arguments: str

    def arguments_json(self) -> Any:
        """Decode the arguments text.

        Returns:
            The decoded arguments, normally a dict.

        Raises:
            json.JSONDecodeError: If the provider sent arguments that are not valid JSON.
        """
        return json.loads(self.arguments)

    def get_arguments(self, model: Type[T]) -> T:
        """Validate the arguments into a caller-supplied type.

        Args:
            model: Any type pydantic can validate into (BaseModel, dataclass, TypedDict, dict, ...).

        Returns:
            The validated arguments.
        """
        return TypeAdapter(model).validate_json(self.arguments)

    def get_argument(self, name: str, type_: Optional[Type[T]] = None, default: Any = None) -> Any:
        """Return a single argument, optionally validated into ``type_``.

        Args:
            name: Argument name.
            type_: Optional type the raw value is validated into.
            default: Returned when the argument is absent.
        """
        arguments = self._arguments_dict()
        if name not in arguments:
            return default
        value = arguments[name]
        if type_ is None:
            return value
        return TypeAdapter(type_).validate_python(value)

    def has_argument(self, name: str) -> bool:
        """Check whether the arguments object contains ``name``."""
        return name in self._arguments_dict()

    def _arguments_dict(self) -> Dict[str, Any]:
        decoded = self.arguments_json()
        return decoded if isinstance(decoded, dict) else {}


class ToolCallResult(BaseModel):
    """
    The outcome of executing a tool call, ready to be formatted for a provider.

    Prefer the ``success`` and ``failure`` constructors; when building the model directly
    the caller is responsible for keeping ``content`` consistent with ``error_message``.

    Attributes:
        tool_call_id: ``ToolCall.id`` of the call this result answers.
        tool_name: Name of the tool. Required by Google and Cohere envelopes, ignored elsewhere.
        content: Text returned to the model.
        is_success: Whether the tool ran successfully.
        error_message: The failure reason, only set for failures.
    """

    model_config = ConfigDict(frozen=True)

    tool_call_id: str
    tool_name: Optional[str] = None
    content: str
    is_success: bool = True
    error_message: Optional[str] = None

    @classmethod
    def success(cls, tool_call_id: str, content: str, tool_name: Optional[str] = None) -> "ToolCallResult":
        """Create a successful result."""
        return cls(tool_call_id=tool_call_id, tool_name=tool_name, content=content, is_success=True)

    @classmethod
    def failure(cls, tool_call_id: str, error_message: str, tool_name: Optional[str] = None) -> "ToolCallResult":
        """Create a failed result whose content is derived from ``error_message``."""
        return cls(
            tool_call_id=tool_call_id,
            tool_name=tool_name,
            content=f"{FAILURE_PREFIX}{error_message}",
            is_success=False,
            error_message=error_message,
        )
