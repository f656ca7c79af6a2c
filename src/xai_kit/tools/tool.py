from typing import Any

from pydantic import BaseModel


class Tool:
    """A function the model may ask the caller to invoke.

    Only ``name``, ``description`` and the JSON schema of ``input_schema``
    go over the wire.
    """

    def __init__(
        self,
        *,
        name: str,
        description: str,
        input_schema: type[BaseModel],
    ) -> None:
        if not name:
            raise ValueError("Tool name must be non-empty")
        self.name = name
        self.description = description
        self.input_schema = input_schema

    def parse_arguments(self, arguments: dict[str, Any]) -> BaseModel:
        """Validate model-supplied arguments against the input schema."""
        return self.input_schema(**arguments)
