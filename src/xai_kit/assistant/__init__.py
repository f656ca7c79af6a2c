from .assistant import DEFAULT_MODEL, CodeAnalysis, DevAssistant

__all__ = [
    "DEFAULT_MODEL",
    "CodeAnalysis",
    "DevAssistant",
]
