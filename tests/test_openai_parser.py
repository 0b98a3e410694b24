import json
import re

import pytest

from tool_call_parser import OpenAIToolCallParser, Provider, ToolCallResult

SYNTHESIZED_ID = re.compile(r"^call_[0-9a-f]{24}$")


def test_provider(openai_parser: OpenAIToolCallParser) -> None:
    assert openai_parser.provider is Provider.OPENAI


def test_parse_choices_message_tool_calls(openai_parser: OpenAIToolCallParser) -> None:
    response = (
        '{"choices":[{"message":{"tool_calls":[{"id":"call_abc123","function":'
        '{"name":"get_weather","arguments":"{\\"location\\":\\"Tokyo\\"}"}}]}}]}'
    )

    calls = openai_parser.parse(response)

    assert len(calls) == 1
    assert calls[0].id == "call_abc123"
    assert calls[0].name == "get_weather"
    assert calls[0].arguments == '{"location":"Tokyo"}'


def test_parse_preserves_order(openai_parser: OpenAIToolCallParser, openai_response: dict) -> None:
    calls = openai_parser.parse(openai_response)
    assert [call.id for call in calls] == ["call_1", "call_2"]
    assert [call.name for call in calls] == ["get_weather", "get_time"]


def test_arguments_string_passed_through_verbatim(openai_parser: OpenAIToolCallParser) -> None:
    raw = '{ "location" :  "Tokyo" }'
    response = {"tool_calls": [{"id": "call_1", "function": {"name": "get_weather", "arguments": raw}}]}
    assert openai_parser.parse(response)[0].arguments == raw


def test_arguments_object_is_serialized(openai_parser: OpenAIToolCallParser) -> None:
    response = {"tool_calls": [{"id": "call_1", "function": {"name": "f", "arguments": {"a": 1}}}]}
    assert json.loads(openai_parser.parse(response)[0].arguments) == {"a": 1}


@pytest.mark.parametrize("arguments", [None, "", "   "])
def test_missing_or_blank_arguments_default_to_empty_object(
    openai_parser: OpenAIToolCallParser, arguments: object
) -> None:
    function = {"name": "ping"}
    if arguments is not None:
        function["arguments"] = arguments
    response = {"tool_calls": [{"id": "call_1", "function": function}]}
    assert openai_parser.parse(response)[0].arguments == "{}"


def test_parse_root_tool_calls(openai_parser: OpenAIToolCallParser) -> None:
    response = {"tool_calls": [{"id": "call_9", "function": {"name": "lookup", "arguments": "{}"}}]}
    assert [call.id for call in openai_parser.parse(response)] == ["call_9"]


def test_parse_streaming_delta(openai_parser: OpenAIToolCallParser) -> None:
    chunk = {
        "object": "chat.completion.chunk",
        "choices": [
            {
                "index": 0,
                "delta": {
                    "tool_calls": [
                        {"index": 0, "id": "call_s1", "type": "function", "function": {"name": "search", "arguments": ""}}
                    ]
                },
            }
        ],
    }
    calls = openai_parser.parse(chunk)
    assert len(calls) == 1
    assert calls[0].name == "search"
    assert calls[0].arguments == "{}"


def test_streaming_continuation_chunk_is_skipped(openai_parser: OpenAIToolCallParser) -> None:
    chunk = {"choices": [{"delta": {"tool_calls": [{"index": 0, "function": {"arguments": '{"q": "x"}'}}]}}]}
    assert openai_parser.parse(chunk) == []
    assert openai_parser.has_tool_calls(chunk)


def test_parse_message_tool_calls(openai_parser: OpenAIToolCallParser) -> None:
    response = {
        "model": "llama3.1",
        "message": {
            "role": "assistant",
            "tool_calls": [{"id": "call_o1", "function": {"name": "get_weather", "arguments": '{"city": "Rome"}'}}],
        },
    }
    calls = openai_parser.parse(response)
    assert calls[0].id == "call_o1"


def test_message_as_string_is_ignored(openai_parser: OpenAIToolCallParser) -> None:
    assert openai_parser.parse({"message": "plain text"}) == []
    assert not openai_parser.has_tool_calls({"message": "plain text"})


def test_legacy_function_call_root(openai_parser: OpenAIToolCallParser) -> None:
    calls = openai_parser.parse({"function_call": {"name": "get_weather", "arguments": '{"location": "Lima"}'}})
    assert len(calls) == 1
    assert SYNTHESIZED_ID.match(calls[0].id)
    assert calls[0].arguments == '{"location": "Lima"}'


def test_legacy_function_call_in_choices(openai_parser: OpenAIToolCallParser) -> None:
    response = {"choices": [{"message": {"role": "assistant", "function_call": {"name": "get_time"}}}]}
    calls = openai_parser.parse(response)
    assert [call.name for call in calls] == ["get_time"]
    assert calls[0].arguments == "{}"


def test_tool_calls_then_legacy_function_call(openai_parser: OpenAIToolCallParser) -> None:
    response = {
        "tool_calls": [{"id": "call_1", "function": {"name": "first", "arguments": "{}"}}],
        "function_call": {"name": "second", "arguments": "{}"},
    }
    assert [call.name for call in openai_parser.parse(response)] == ["first", "second"]


@pytest.mark.parametrize(
    "tool_call",
    [
        {"function": {"name": "no_id", "arguments": "{}"}},
        {"id": "call_1"},
        {"id": "call_1", "function": {"arguments": "{}"}},
        {"id": "call_1", "function": {"name": "", "arguments": "{}"}},
        {"id": "call_1", "function": {"name": 42, "arguments": "{}"}},
        {"id": "call_1", "function": "get_weather"},
        {"id": 7, "function": {"name": "f", "arguments": "{}"}},
        {"id": "call_1", "function": {"name": "f", "arguments": [1, 2]}},
        "not an object",
        None,
    ],
)
def test_malformed_candidates_are_skipped(openai_parser: OpenAIToolCallParser, tool_call: object) -> None:
    response = {
        "tool_calls": [tool_call, {"id": "call_ok", "function": {"name": "valid", "arguments": "{}"}}],
    }
    calls = openai_parser.parse(response)
    assert [call.id for call in calls] == ["call_ok"]


def test_no_tool_calls(openai_parser: OpenAIToolCallParser) -> None:
    response = {"choices": [{"message": {"role": "assistant", "content": "Hello!"}}]}
    assert openai_parser.parse(response) == []
    assert not openai_parser.has_tool_calls(response)


def test_empty_tool_calls_array(openai_parser: OpenAIToolCallParser) -> None:
    response = {"choices": [{"message": {"tool_calls": []}}]}
    assert openai_parser.parse(response) == []
    assert not openai_parser.has_tool_calls(response)


def test_has_tool_calls(openai_parser: OpenAIToolCallParser, openai_response: dict) -> None:
    assert openai_parser.has_tool_calls(openai_response)
    assert openai_parser.has_tool_calls(json.dumps(openai_response))
    assert openai_parser.has_tool_calls({"function_call": {"name": "x"}})


@pytest.mark.parametrize("blank", ["", "   ", "\n\t", None, b""])
def test_blank_input(openai_parser: OpenAIToolCallParser, blank: object) -> None:
    assert openai_parser.parse(blank) == []
    assert not openai_parser.has_tool_calls(blank)


def test_invalid_json_raises(openai_parser: OpenAIToolCallParser) -> None:
    with pytest.raises(json.JSONDecodeError):
        openai_parser.parse("not json")
    with pytest.raises(json.JSONDecodeError):
        openai_parser.has_tool_calls("{broken")


def test_non_object_root(openai_parser: OpenAIToolCallParser) -> None:
    assert openai_parser.parse("[1, 2, 3]") == []
    assert openai_parser.parse("42") == []


def test_bytes_input(openai_parser: OpenAIToolCallParser, openai_response: dict) -> None:
    assert len(openai_parser.parse(json.dumps(openai_response).encode("utf-16"))) == 2


@pytest.mark.parametrize("blank", ["".encode("utf-16"), "   ".encode("utf-16"), "\ufeff \n".encode("utf-8"), b" \t"])
def test_blank_bytes_input(openai_parser: OpenAIToolCallParser, blank: bytes) -> None:
    assert openai_parser.parse(blank) == []
    assert openai_parser.has_tool_calls(blank) is False


def test_format_results(openai_parser: OpenAIToolCallParser) -> None:
    formatted = openai_parser.format_results(
        [ToolCallResult.success("call_1", "Sunny", "get_weather"), ToolCallResult.failure("call_2", "timeout")]
    )
    assert json.loads(formatted) == [
        {"role": "tool", "tool_call_id": "call_1", "content": "Sunny"},
        {"role": "tool", "tool_call_id": "call_2", "content": "Error: timeout"},
    ]


def test_format_results_empty(openai_parser: OpenAIToolCallParser) -> None:
    assert openai_parser.format_results([]) == "[]"
