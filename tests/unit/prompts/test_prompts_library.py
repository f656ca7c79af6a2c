from pathlib import Path

import pytest
from pydantic import ValidationError

from xai_kit.prompts.prompt import Prompt
from xai_kit.prompts.prompts_library import PromptsLibrary


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML prompt files."""
    (tmp_path / "review.yaml").write_text(
        """name: review
version: "1.0"
description: Review code
inputs:
  code: The code to review
temperature: 0.7
system: You are an expert code reviewer.
template: |
  Review this code:

  {{ code }}
"""
    )

    (tmp_path / "review_v2.yaml").write_text(
        """name: review
version: "1.10"
description: Review code with a focus
inputs:
  code: The code to review
  focus: What to concentrate on
template: |-
  Review this code for {{ focus }}:
  {{code}}
"""
    )

    (tmp_path / "review_v1_2.yaml").write_text(
        """name: review
version: "1.2"
description: Older review prompt
inputs:
  code: The code to review
template: "{{ code }}"
"""
    )

    (tmp_path / "bugs.yaml").write_text(
        """name: bugs
version: "1.0"
description: Find bugs
inputs:
  code: The code to analyze
template: |
  Find potential bugs in this code:

  {{ code }}
"""
    )

    return tmp_path


class TestPromptsLibrary:
    def test_loads_prompts_from_directory(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        assert len(library.list()) == 4

    def test_get_prompt_by_name_and_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        prompt = library.get("review", "1.0")

        assert prompt.description == "Review code"
        assert prompt.inputs == {"code": "The code to review"}
        assert prompt.system == "You are an expert code reviewer."
        assert prompt.temperature == 0.7

    def test_get_raises_keyerror_for_unknown_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        with pytest.raises(KeyError, match="Prompt 'review' version '9.9' not found"):
            library.get("review", "9.9")

    def test_latest_compares_versions_numerically(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        assert library.latest("review").version == "1.10"
        assert library.latest("bugs").version == "1.0"

    def test_latest_unknown_raises(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        with pytest.raises(KeyError, match="Prompt 'missing' not found"):
            library.latest("missing")

    def test_list_returns_sorted_name_version_tuples(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        assert library.list() == [
            ("bugs", "1.0"),
            ("review", "1.0"),
            ("review", "1.10"),
            ("review", "1.2"),
        ]

    def test_empty_directory_loads_no_prompts(self, tmp_path: Path) -> None:
        library = PromptsLibrary(tmp_path)

        assert library.list() == []

    def test_duplicate_prompt_raises(self, prompts_dir: Path) -> None:
        (prompts_dir / "zz_copy.yaml").write_text(
            (prompts_dir / "bugs.yaml").read_text()
        )

        with pytest.raises(ValueError, match="Duplicate prompt 'bugs'"):
            PromptsLibrary(prompts_dir)

    def test_unknown_keys_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "bad.yaml").write_text(
            "name: bad\nversion: '1'\ndescription: x\ninputs: {}\ntemplate: x\nextra: 1\n"
        )

        with pytest.raises(ValidationError):
            PromptsLibrary(tmp_path)


class TestPromptRender:
    def test_render_substitutes_placeholders(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("review", "1.10")

        text = prompt.render(code="x = 1", focus="naming")

        assert text == "Review this code for naming:\nx = 1"

    def test_render_missing_input_raises(self) -> None:
        prompt = Prompt(
            name="p",
            version="1",
            description="d",
            inputs={"code": "c", "focus": "f"},
            template="{{ focus }} {{ code }}",
        )

        with pytest.raises(KeyError, match="missing inputs: focus"):
            prompt.render(code="x")

    def test_render_leaves_unknown_placeholders(self) -> None:
        prompt = Prompt(
            name="p",
            version="1",
            description="d",
            inputs={},
            template="keep {{ other }}",
        )

        assert prompt.render() == "keep {{ other }}"

    def test_code_with_braces_is_not_reinterpreted(self) -> None:
        prompt = Prompt(
            name="p",
            version="1",
            description="d",
            inputs={"code": "c"},
            template="{{ code }}",
        )

        assert prompt.render(code="d = {'a': '{{ x }}'}") == "d = {'a': '{{ x }}'}"
