import re

from pydantic import BaseModel, ConfigDict, Field

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    """A versioned chat prompt loaded from YAML.

    ``template`` becomes the user message, ``system`` (when set) the system
    message. Placeholders use ``{{ name }}`` syntax.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str
    system: str | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)

    def render(self, **values: object) -> str:
        """Fill the template. Every declared input must be supplied."""
        missing = [name for name in self.inputs if name not in values]
        if missing:
            raise KeyError(
                f"Prompt '{self.name}' missing inputs: {', '.join(sorted(missing))}"
            )

        def substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            # unknown placeholders are left as written
            return str(values[key]) if key in values else match.group(0)

        return _PLACEHOLDER.sub(substitute, self.template)
