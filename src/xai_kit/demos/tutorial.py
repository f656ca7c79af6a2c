# src/xai_kit/demos/tutorial.py

"""Beginner walkthrough: use the assistant to improve a tiny calculator."""

import asyncio
import logging
from collections.abc import Sequence

from xai_kit.api import ConfigurationError
from xai_kit.assistant import DevAssistant

from . import SEPARATOR, build_parser, client_from_args, parse_args, run_step

logger = logging.getLogger(__name__)

ORIGINAL_CODE = '''
def calculate(num1, num2, operation):
    if operation == "+": return num1 + num2
    if operation == "-": return num1 - num2
    if operation == "*": return num1 * num2
    if operation == "/": return num1 / num2
    return "Invalid operation"
'''

IMPROVED_CODE = '''
class Calculator:
    """Basic arithmetic with input validation."""

    OPERATIONS = ("+", "-", "*", "/")

    def calculate(self, num1: float, num2: float, operation: str) -> float:
        if not isinstance(num1, (int, float)) or not isinstance(num2, (int, float)):
            raise TypeError("Both inputs must be numbers")
        operation = str(operation).strip()
        if operation not in self.OPERATIONS:
            raise ValueError("Invalid operation. Use: +, -, *, /")
        if operation == "/" and num2 == 0:
            raise ZeroDivisionError("Division by zero is not allowed")
        if operation == "+":
            return num1 + num2
        if operation == "-":
            return num1 - num2
        if operation == "*":
            return num1 * num2
        return num1 / num2

    def format_result(self, result: float, decimals: int = 2) -> float:
        return round(result, decimals)
'''

USAGE_EXAMPLE = '''
calculator = Calculator()
print(calculator.calculate(5, 3, "+"))    # 8
print(calculator.calculate(10, 2, "/"))   # 5.0
print(calculator.format_result(calculator.calculate(10, 3, "/")))  # 3.33
'''


async def improve_calculator(assistant: DevAssistant, code: str = ORIGINAL_CODE) -> None:
    steps = [
        ("Step 1: Checking for potential issues", "Potential issues found", assistant.find_bugs),
        ("Step 2: Getting improvement suggestions", "Suggested improvements", assistant.suggest_refactoring),
        ("Step 3: Generating documentation", "Generated documentation", assistant.generate_documentation),
        ("Step 4: Creating test cases", "Generated test cases", assistant.generate_tests),
    ]
    for title, label, task in steps:
        result = await run_step(title, lambda task=task: task(code))
        if result is not None:
            print(f"\n{label}:\n{result}")
        print(f"\n{SEPARATOR}\n")

    print("Improved Calculator Code:")
    print(IMPROVED_CODE)
    print("\nExample Usage:")
    print(USAGE_EXAMPLE)


async def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(build_parser(__doc__ or ""), argv)
    try:
        client = client_from_args(args)
    except ConfigurationError as exc:
        logger.error("Cannot start: %s", exc)
        return 2

    print("Welcome to the AI-assisted code improvement tutorial!\n")
    async with client:
        await improve_calculator(DevAssistant(client, model=args.model))
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
