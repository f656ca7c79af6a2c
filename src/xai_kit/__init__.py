# Client
from .api import (
    ApiError,
    ChatCompletionParams,
    ClientConfig,
    CodeEditParams,
    CompletionParams,
    ConfigurationError,
    EmbeddingParams,
    ErrorKind,
    ImageEditParams,
    ImageGenerationParams,
    Message,
    NetworkError,
    ResponseFormatError,
    Role,
    TimeoutError,
    ValidationError,
    XAIClient,
    XAIError,
    create_client,
)

# Assistant
from .assistant import CodeAnalysis, DevAssistant

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Prompts
from .prompts import Prompt, PromptsLibrary

# Tools
from .tools import Tool

__all__ = [
    # Client
    "XAIClient",
    "ClientConfig",
    "create_client",
    "ChatCompletionParams",
    "CodeEditParams",
    "CompletionParams",
    "EmbeddingParams",
    "ImageEditParams",
    "ImageGenerationParams",
    "Message",
    "Role",
    # Errors
    "ApiError",
    "ConfigurationError",
    "ErrorKind",
    "NetworkError",
    "ResponseFormatError",
    "TimeoutError",
    "ValidationError",
    "XAIError",
    # Assistant
    "CodeAnalysis",
    "DevAssistant",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Tools
    "Tool",
]
