# tests/unit/api/test_params.py

from collections.abc import Callable

import httpx
import pytest

from xai_kit.api.client import XAIClient
from xai_kit.api.errors import ErrorKind, ValidationError
from xai_kit.api.params import (
    ChatCompletionParams,
    CompletionParams,
    Message,
    Role,
    build_params,
)

USER_MESSAGE = {"role": "user", "content": "hi"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("call", "field"),
    [
        (lambda c: c.create_chat_completion(model="grok-2"), "messages"),
        (lambda c: c.create_chat_completion(messages=[], model="grok-2"), "messages"),
        (lambda c: c.create_chat_completion(messages=[USER_MESSAGE]), "model"),
        (lambda c: c.create_completion(model="grok-2"), "prompt"),
        (lambda c: c.create_completion(prompt="hi"), "model"),
        (lambda c: c.create_completion(prompt="", model="grok-2"), "prompt"),
        (lambda c: c.create_embedding(model="v1"), "input"),
        (lambda c: c.create_embedding(input=[], model="v1"), "input"),
        (lambda c: c.create_embedding(input="text"), "model"),
        (lambda c: c.create_image(), "prompt"),
        (lambda c: c.create_image(prompt=None), "prompt"),
        (lambda c: c.edit_image(prompt="add a hat"), "image"),
        (lambda c: c.edit_image(image="cat.png"), "prompt"),
        (lambda c: c.get_model(""), "model_id"),
        (lambda c: c.get_model(), "model_id"),
        (lambda c: c.get_model(None), "model_id"),
        (lambda c: c.function_call(), "function_name"),
        (lambda c: c.function_call(""), "function_name"),
        (lambda c: c.code_edit(instructions="tidy"), "code"),
        (lambda c: c.code_edit(code="x = 1"), "instructions"),
        (lambda c: c.apply_edit(), "edit_id"),
        (lambda c: c.apply_edit(""), "edit_id"),
    ],
)
async def test_missing_field_raises_before_io(
    make_client: Callable[..., XAIClient],
    sent: list[httpx.Request],
    call: Callable,
    field: str,
) -> None:
    async with make_client() as client:
        with pytest.raises(ValidationError) as exc_info:
            await call(client)

    assert exc_info.value.field == field
    assert field in str(exc_info.value)
    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert sent == []


def test_missing_field_reason() -> None:
    with pytest.raises(ValidationError, match="'model' is required"):
        build_params(CompletionParams, {"prompt": "hi"}, {})


def test_params_model_passes_through() -> None:
    params = CompletionParams(prompt="hi", model="grok-2")

    assert build_params(CompletionParams, params, {}) is params


def test_params_model_merged_with_fields() -> None:
    params = CompletionParams(prompt="hi", model="grok-2", temperature=0.9)

    merged = build_params(CompletionParams, params, {"temperature": 0.1})

    assert merged.to_body() == {"prompt": "hi", "model": "grok-2", "temperature": 0.1}


def test_non_mapping_params_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        build_params(CompletionParams, ["prompt"], {})  # type: ignore[arg-type]

    assert exc_info.value.field == "params"


def test_out_of_range_temperature_rejected() -> None:
    with pytest.raises(ValidationError) as exc_info:
        build_params(
            ChatCompletionParams,
            {"messages": [USER_MESSAGE], "model": "grok-2", "temperature": 5},
            {},
        )

    assert exc_info.value.field == "temperature"


def test_to_body_drops_unset_optionals() -> None:
    params = ChatCompletionParams(
        messages=[Message(role=Role.USER, content="hi")], model="grok-2"
    )

    assert params.to_body() == {
        "messages": [{"role": "user", "content": "hi"}],
        "model": "grok-2",
    }


def test_message_keeps_tool_fields() -> None:
    message = Message(role=Role.TOOL, content="42", tool_call_id="call_1")

    assert message.model_dump(mode="json", exclude_none=True) == {
        "role": "tool",
        "content": "42",
        "tool_call_id": "call_1",
    }
