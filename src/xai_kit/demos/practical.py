# src/xai_kit/demos/practical.py

"""Every assistant task on a sample function, then the editor-integration flow."""

import asyncio
import logging
from collections.abc import Sequence

from xai_kit.api import ConfigurationError
from xai_kit.assistant import CodeAnalysis, DevAssistant

from . import build_parser, client_from_args, parse_args, run_step

logger = logging.getLogger(__name__)

SAMPLE_CODE = '''
def calculate_total(items):
    total = 0
    for i in range(len(items)):
        total += items[i]["price"] * items[i]["quantity"]
    return total
'''

EDITOR_CODE = '''
def process_user_data(data):
    if data.get("name") is not None:
        user_info = {}
        user_info["name"] = data["name"]
        user_info["age"] = data["age"]
        return user_info
'''


async def demonstrate_practical_usage(assistant: DevAssistant, code: str = SAMPLE_CODE) -> None:
    steps = [
        ("Documentation Generation", "Generated Documentation", assistant.generate_documentation),
        ("Code Review", "Code Review Results", assistant.review_code),
        ("Test Case Generation", "Generated Test Cases", assistant.generate_tests),
        ("Refactoring Suggestions", "Refactoring Suggestions", assistant.suggest_refactoring),
        ("Bug Finding", "Potential Bugs Found", assistant.find_bugs),
    ]
    for title, label, task in steps:
        result = await run_step(title, lambda task=task: task(code))
        if result is not None:
            print(f"{label}:\n{result}")


async def editor_integration(
    assistant: DevAssistant, code: str = EDITOR_CODE
) -> CodeAnalysis | None:
    """Improve the code currently open in an editor: docs, issues, improvements."""
    analysis = await run_step("Editor Integration Example", lambda: assistant.analyze(code))
    if analysis is None:
        return None
    print("\nAnalysis Results:")
    print(f"Documentation: {analysis.documentation}")
    print(f"Issues Found: {analysis.issues}")
    print(f"Suggested Improvements: {analysis.improvements}")
    return analysis


async def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(build_parser(__doc__ or ""), argv)
    try:
        client = client_from_args(args)
    except ConfigurationError as exc:
        logger.error("Cannot start: %s", exc)
        return 2

    async with client:
        assistant = DevAssistant(client, model=args.model)
        await demonstrate_practical_usage(assistant)
        await editor_integration(assistant)
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
