# src/xai_kit/demos/improve_project.py

"""Analyze a source file and write an improved copy plus generated tests."""

import asyncio
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from xai_kit.api import ConfigurationError
from xai_kit.assistant import DevAssistant

from . import build_parser, client_from_args, parse_args, run_step

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = Path(__file__).parent / "samples" / "user_management.py"

_FENCED = re.compile(r"```[\w+-]*\n(.*?)```", re.DOTALL)


@dataclass(frozen=True)
class ImprovementResult:
    improved_path: Path | None
    tests_path: Path | None


def extract_code_block(text: str) -> str:
    """Return the first fenced code block in ``text``, or ``text`` itself."""
    match = _FENCED.search(text)
    return match.group(1).strip() + "\n" if match else text.strip() + "\n"


def with_documentation_header(source: str, documentation: str) -> str:
    header = "\n".join(f"# {line}".rstrip() for line in documentation.strip().splitlines())
    return f"# Generated documentation:\n{header}\n\n{source}"


async def improve_file(
    assistant: DevAssistant,
    source_path: Path,
    output_dir: Path,
    tests_dir: Path,
) -> ImprovementResult:
    source = source_path.read_text(encoding="utf-8")
    logger.info("Improving %s (%d bytes)", source_path, len(source))

    documentation = await run_step(
        "Step 1: Generating Documentation",
        lambda: assistant.generate_documentation(source),
    )
    if documentation is not None:
        print(documentation)

    bugs = await run_step("Step 2: Finding Potential Bugs", lambda: assistant.find_bugs(source))
    if bugs is not None:
        print(bugs)

    refactoring = await run_step(
        "Step 3: Getting Refactoring Suggestions",
        lambda: assistant.suggest_refactoring(source),
    )
    if refactoring is not None:
        print(refactoring)

    tests = await run_step("Step 4: Generating Test Cases", lambda: assistant.generate_tests(source))
    if tests is not None:
        print(tests)

    improved_path = None
    if documentation is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        improved_path = output_dir / f"{source_path.stem}.improved{source_path.suffix}"
        improved_path.write_text(
            with_documentation_header(source, documentation), encoding="utf-8"
        )
        print(f"\nImproved code has been saved to: {improved_path}")

    tests_path = None
    if tests is not None:
        tests_dir.mkdir(parents=True, exist_ok=True)
        tests_path = tests_dir / f"test_{source_path.stem}{source_path.suffix}"
        tests_path.write_text(extract_code_block(tests), encoding="utf-8")
        print(f"Test file has been saved to: {tests_path}")

    return ImprovementResult(improved_path=improved_path, tests_path=tests_path)


async def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser(__doc__ or "")
    ap.add_argument("--source", type=Path, default=DEFAULT_SOURCE)
    ap.add_argument("--out", type=Path, default=Path("out"))
    ap.add_argument("--tests-dir", type=Path, default=Path("out") / "tests")
    args = parse_args(ap, argv)

    if not args.source.is_file():
        logger.error("Source file not found: %s", args.source)
        return 2
    try:
        client = client_from_args(args)
    except ConfigurationError as exc:
        logger.error("Cannot start: %s", exc)
        return 2

    print("Starting code improvement process...")
    async with client:
        await improve_file(
            DevAssistant(client, model=args.model), args.source, args.out, args.tests_dir
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
