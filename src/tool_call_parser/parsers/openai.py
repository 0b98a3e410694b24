"""Parse OpenAI-compatible tool calls (``tool_calls`` and the legacy ``function_call``)."""

from typing import Any, Dict, Iterable, List, Optional

from ..core.base import ToolCallParser
from ..core.json_utils import arguments_text, dump_json, get_dict, get_list, get_name, get_str, new_call_id
from ..core.models import ToolCall, ToolCallResult
from ..core.providers import Provider


class OpenAIToolCallParser(ToolCallParser):
    """
    Parser for the OpenAI chat completions format and every provider that mirrors it
    (Azure OpenAI, Mistral, DeepSeek, Ollama, vLLM, ...).

    The first ``tool_calls`` array found is used, searched at the root, in
    ``choices[].message``, in ``choices[].delta`` (streaming chunks) and in ``message``.
    A legacy ``function_call`` object, at the root or in ``choices[].message``, is appended
    after it with a synthesized id.
    """

    @property
    def provider(self) -> Provider:
        return Provider.OPENAI

    def parse_tree(self, tree: Any) -> List[ToolCall]:
        """Collect the first ``tool_calls`` array found, then any legacy ``function_call``."""
        calls = self._collect(self._find_tool_calls(tree) or [], self._parse_tool_call)
        function_call = self._find_function_call(tree)
        if function_call is not None:
            calls.extend(self._collect([function_call], self._parse_function_call))
        return calls

    def has_tool_calls_tree(self, tree: Any) -> bool:
        return bool(self._find_tool_calls(tree)) or self._find_function_call(tree) is not None

    def format_results(self, results: Iterable[ToolCallResult]) -> str:
        """Build one ``tool`` role message per result."""
        messages = [
            {"role": "tool", "tool_call_id": result.tool_call_id, "content": result.content} for result in results
        ]
        return dump_json(messages)

    @staticmethod
    def _find_tool_calls(tree: Any) -> Optional[List[Any]]:
        if isinstance(tree, dict) and isinstance(tree.get("tool_calls"), list):
            return tree["tool_calls"]

        for choice in get_list(tree, "choices"):
            for container in ("message", "delta"):
                holder = get_dict(choice, container)
                if holder is not None and isinstance(holder.get("tool_calls"), list):
                    return holder["tool_calls"]

        message = get_dict(tree, "message")
        if message is not None and isinstance(message.get("tool_calls"), list):
            return message["tool_calls"]

        return None

    @staticmethod
    def _find_function_call(tree: Any) -> Optional[Dict[str, Any]]:
        function_call = get_dict(tree, "function_call")
        if function_call is not None:
            return function_call

        for choice in get_list(tree, "choices"):
            function_call = get_dict(get_dict(choice, "message"), "function_call")
            if function_call is not None:
                return function_call

        return None

    @staticmethod
    def _parse_tool_call(candidate: Any) -> Optional[ToolCall]:
        call_id = get_str(candidate, "id")
        function = get_dict(candidate, "function")
        name = get_name(function)
        if call_id is None or function is None or name is None:
            return None

        arguments = arguments_text(function.get("arguments"), allow_string=True)
        if arguments is None:
            return None
        return ToolCall(id=call_id, name=name, arguments=arguments)

    @staticmethod
    def _parse_function_call(candidate: Any) -> Optional[ToolCall]:
        name = get_name(candidate)
        if name is None:
            return None

        arguments = arguments_text(candidate.get("arguments"), allow_string=True)
        if arguments is None:
            return None
        return ToolCall(id=new_call_id(), name=name, arguments=arguments)
