# src/xai_kit/api/_tool_schema.py

"""Internal module for converting Tool definitions to the wire schema.

Pure data transformation.
"""

from typing import Any

from xai_kit.tools.tool import Tool


def tool_to_function_schema(tool: Tool) -> dict[str, Any]:
    """Convert a Tool to the function-calling format.

    Args:
        tool: Tool with a Pydantic input schema.

    Returns:
        Dict in ``{"type": "function", "function": {...}}`` form.
    """
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.input_schema.model_json_schema(),
        },
    }


def normalize_tools(tools: list[Any]) -> list[dict[str, Any]]:
    """Convert Tool objects in a mixed list, leaving plain dicts untouched."""
    return [tool_to_function_schema(t) if isinstance(t, Tool) else t for t in tools]
