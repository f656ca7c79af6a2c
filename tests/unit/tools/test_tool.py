import pytest
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from xai_kit.api._tool_schema import normalize_tools, tool_to_function_schema
from xai_kit.tools.tool import Tool


class SearchInput(BaseModel):
    """Search for documents."""

    query: str = Field(description="The search query")
    limit: int = Field(default=10, description="Max results")


@pytest.fixture
def search_tool() -> Tool:
    return Tool(
        name="search",
        description="Search the knowledge base",
        input_schema=SearchInput,
    )


def test_tool_requires_name() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        Tool(name="", description="nameless", input_schema=SearchInput)


def test_parse_arguments_validates(search_tool: Tool) -> None:
    args = search_tool.parse_arguments({"query": "grok"})

    assert isinstance(args, SearchInput)
    assert args.limit == 10

    with pytest.raises(PydanticValidationError):
        search_tool.parse_arguments({"limit": "many"})


def test_function_schema(search_tool: Tool) -> None:
    schema = tool_to_function_schema(search_tool)

    assert schema["type"] == "function"
    assert schema["function"]["name"] == "search"
    assert schema["function"]["description"] == "Search the knowledge base"
    query_prop = schema["function"]["parameters"]["properties"]["query"]
    assert query_prop.get("description") == "The search query"


def test_normalize_tools_leaves_dicts(search_tool: Tool) -> None:
    raw = {"type": "function", "function": {"name": "raw"}}

    converted = normalize_tools([search_tool, raw])

    assert converted[0]["function"]["name"] == "search"
    assert converted[1] is raw


def test_normalize_empty_list() -> None:
    assert normalize_tools([]) == []
