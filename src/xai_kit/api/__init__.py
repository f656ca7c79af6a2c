# src/xai_kit/api/__init__.py

"""HTTP client layer for xai-kit.

A thin, stateless wrapper over the hosted model API.

Design principles:
- Stateless: nothing is retained between calls
- One request per call: no retries, no backoff
- Typed failures: every error carries an ErrorKind
- Pass-through: response JSON is returned unchanged

Example:
    >>> from xai_kit.api import ClientConfig, Message, Role, create_client
    >>>
    >>> client = create_client(ClientConfig(api_key="xai-..."))
    >>> response = await client.create_chat_completion(
    ...     messages=[Message(role=Role.USER, content="Hello!")],
    ...     model="grok-2-mini",
    ... )
    >>> print(response["choices"][0]["message"]["content"])
"""

from .client import XAIClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .errors import (
    ApiError,
    ConfigurationError,
    ErrorKind,
    NetworkError,
    ResponseFormatError,
    TimeoutError,
    ValidationError,
    XAIError,
)
from .factory import create_client
from .params import (
    ChatCompletionParams,
    CodeEditParams,
    CompletionParams,
    EmbeddingParams,
    ImageEditParams,
    ImageGenerationParams,
    Message,
    Role,
)

__all__ = [
    # Factory
    "create_client",
    # Client
    "XAIClient",
    # Config
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    # Errors
    "ApiError",
    "ConfigurationError",
    "ErrorKind",
    "NetworkError",
    "ResponseFormatError",
    "TimeoutError",
    "ValidationError",
    "XAIError",
    # Params
    "ChatCompletionParams",
    "CodeEditParams",
    "CompletionParams",
    "EmbeddingParams",
    "ImageEditParams",
    "ImageGenerationParams",
    "Message",
    "Role",
]
