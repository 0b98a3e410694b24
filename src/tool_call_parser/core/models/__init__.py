"""Normalized tool call data models."""

from .tool_call import ToolCall, ToolCallResult, FAILURE_PREFIX

__all__ = ["ToolCall", "ToolCallResult", "FAILURE_PREFIX"]
