# src/xai_kit/assistant/assistant.py

import logging
from dataclasses import dataclass
from pathlib import Path
from time import monotonic
from typing import Any

from xai_kit.api.client import XAIClient
from xai_kit.api.errors import ResponseFormatError
from xai_kit.api.params import Message, Role
from xai_kit.observability import names
from xai_kit.observability.base import MetricsHook, NoOpMetricsHook
from xai_kit.prompts import PromptsLibrary

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "grok-2-mini"
PROMPTS_DIR = Path(__file__).parent / "prompts"


@dataclass(frozen=True)
class CodeAnalysis:
    """Result of ``DevAssistant.analyze``."""

    documentation: str
    issues: str
    improvements: str


class DevAssistant:
    """Developer tasks on top of chat completions.

    Each task is one chat completion built from a packaged prompt. Failures
    are logged and re-raised unchanged.
    """

    def __init__(
        self,
        client: XAIClient,
        model: str = DEFAULT_MODEL,
        prompts: PromptsLibrary | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._client = client
        self._model = model
        self._prompts = prompts if prompts is not None else PromptsLibrary(PROMPTS_DIR)
        self.metrics_hook = metrics_hook

    async def generate_documentation(self, code: str) -> str:
        return await self._run("documentation", code)

    async def review_code(self, code: str) -> str:
        return await self._run("code_review", code)

    async def generate_tests(self, code: str) -> str:
        return await self._run("test_generation", code)

    async def suggest_refactoring(self, code: str) -> str:
        return await self._run("refactoring", code)

    async def find_bugs(self, code: str) -> str:
        return await self._run("bug_finding", code)

    async def analyze(self, code: str) -> CodeAnalysis:
        """Documentation, bug finding and refactoring, in that order."""
        documentation = await self.generate_documentation(code)
        issues = await self.find_bugs(code)
        improvements = await self.suggest_refactoring(code)
        return CodeAnalysis(
            documentation=documentation,
            issues=issues,
            improvements=improvements,
        )

    async def _run(self, task: str, code: str) -> str:
        prompt = self._prompts.latest(task)
        messages = []
        if prompt.system:
            messages.append(Message(role=Role.SYSTEM, content=prompt.system))
        messages.append(Message(role=Role.USER, content=prompt.render(code=code)))

        start = monotonic()
        try:
            response = await self._client.create_chat_completion(
                messages=messages,
                model=self._model,
                temperature=prompt.temperature,
            )
            content = _message_content(response)
        except Exception:
            self.metrics_hook.increment(
                names.ASSISTANT_ERRORS_TOTAL, labels={"task": task}
            )
            logger.exception("Assistant task %s failed", task)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.ASSISTANT_TASK_DURATION, elapsed_ms, labels={"task": task}
        )
        self.metrics_hook.increment(names.ASSISTANT_TASKS_TOTAL, labels={"task": task})
        logger.info("Assistant task %s done in %.0fms", task, elapsed_ms)
        return content


def _message_content(response: Any) -> str:
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise ResponseFormatError(
            "Response has no choices[0].message.content"
        ) from None
    if not isinstance(content, str):
        raise ResponseFormatError("Completion content is not text")
    return content
