# src/xai_kit/api/params.py

"""Request parameter models, one per endpoint that takes a body.

Required fields have no default. Optional fields default to ``None`` and are
left out of the request body. Unknown fields are forwarded verbatim, so new
sampling options work without a client release.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from ._tool_schema import normalize_tools
from .errors import ValidationError

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class Message(BaseModel):
    """A single chat message. Plain dicts with the same keys are accepted too."""

    model_config = ConfigDict(extra="allow", frozen=True)

    role: Role
    content: str | list[dict[str, Any]] | None = None
    name: str | None = None
    tool_call_id: str | None = None  # Required when role=TOOL


class RequestParams(BaseModel):
    model_config = ConfigDict(extra="allow")

    def to_body(self) -> dict[str, Any]:
        """JSON-ready request body without unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class ChatCompletionParams(RequestParams):
    messages: list[Message] = Field(min_length=1)
    model: NonEmptyStr
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)
    stream: bool | None = None
    tools: list[dict[str, Any]] | None = None
    tool_choice: str | dict[str, Any] | None = None

    @field_validator("tools", mode="before")
    @classmethod
    def _convert_tools(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return normalize_tools(list(value))
        return value


class CompletionParams(RequestParams):
    prompt: NonEmptyStr
    model: NonEmptyStr
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)
    stream: bool | None = None


class EmbeddingParams(RequestParams):
    input: NonEmptyStr | list[NonEmptyStr]
    model: NonEmptyStr
    encoding_format: str | None = None
    dimensions: int | None = Field(default=None, gt=0)

    @field_validator("input")
    @classmethod
    def _non_empty_batch(cls, value: str | list[str]) -> str | list[str]:
        if isinstance(value, list) and not value:
            raise ValueError("must contain at least one text")
        return value


class ImageGenerationParams(RequestParams):
    prompt: NonEmptyStr
    model: str | None = None
    n: int | None = Field(default=None, ge=1)
    size: str | None = None
    style: str | None = None
    response_format: str | None = None


class ImageEditParams(RequestParams):
    image: NonEmptyStr  # URL or base64 data
    prompt: NonEmptyStr
    model: str | None = None
    mask: str | None = None
    n: int | None = Field(default=None, ge=1)
    size: str | None = None
    response_format: str | None = None


class CodeEditParams(RequestParams):
    code: NonEmptyStr
    instructions: NonEmptyStr
    model: str | None = None


P = TypeVar("P", bound=RequestParams)


def build_params(
    model_cls: type[P],
    params: P | Mapping[str, Any] | None,
    fields: Mapping[str, Any],
) -> P:
    """Merge ``params`` and keyword ``fields`` into a validated model.

    Keyword fields override entries of ``params``. Pydantic failures are
    reported as ``ValidationError`` naming the first offending field.
    """
    if isinstance(params, model_cls) and not fields:
        return params

    data: dict[str, Any] = {}
    if isinstance(params, BaseModel):
        data.update(params.model_dump(exclude_unset=True))
    elif isinstance(params, Mapping):
        data.update(params)
    elif params is not None:
        raise ValidationError("params", "must be a mapping or a params model")
    data.update(fields)

    try:
        return model_cls.model_validate(data)
    except pydantic.ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or model_cls.__name__
        if error["type"] == "missing" or error.get("input", ...) is None:
            raise ValidationError(field) from None
        raise ValidationError(field, error["msg"]) from None


def require(field: str, value: Any) -> str:
    """Check a positional string argument before it goes into a URL."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(field)
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string")
    return value
