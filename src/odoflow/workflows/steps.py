"""Step chain executor.

A workflow is a list of ``Step`` objects run strictly in order. Each step
sees the answers committed so far and either commits a new answer or returns
None, which abandons the whole chain. There is no backtracking: an answer,
once committed, is final.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from odoflow.exceptions import DuplicateStepNameError
from odoflow.logging import get_logger
from odoflow.workflows.outcome import CANCELLED, Cancelled

__all__ = ["Step", "StepChain", "StepFn", "WorkflowAnswer"]

logger = get_logger(__name__)


class WorkflowAnswer:
    """Ordered, append-only record of the answers given so far.

    Answers are addressed by the name of the step that produced them.

    Example:
        >>> answer = WorkflowAnswer()
        >>> answer.record("name", "comp1")
        >>> answer["name"]
        'comp1'
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def record(self, step_name: str, value: Any) -> None:
        """Append an answer.

        Raises:
            DuplicateStepNameError: If ``step_name`` already answered.
        """
        if step_name in self._values:
            raise DuplicateStepNameError(step_name)
        self._values[step_name] = value

    def __getitem__(self, step_name: str) -> Any:
        return self._values[step_name]

    def get(self, step_name: str, default: Any = None) -> Any:
        return self._values.get(step_name, default)

    def __contains__(self, step_name: object) -> bool:
        return step_name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def values(self) -> list[Any]:
        """Answers in the order they were committed."""
        return list(self._values.values())

    def __repr__(self) -> str:
        return f"WorkflowAnswer({self._values!r})"


StepFn = Callable[[WorkflowAnswer], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class Step:
    """One interactive or live-state unit of a chain.

    Attributes:
        name: Key the answer is recorded under.
        fn: Async callable returning the answer, or None for "no answer".
    """

    name: str
    fn: StepFn


class StepChain:
    """Runs steps one at a time and stops at the first missing answer.

    Example:
        ```python
        chain = StepChain("component.create")
        answer = await chain.run([Step("kind", pick_kind)])
        if isinstance(answer, Cancelled):
            return CANCELLED
        answer = await chain.run(branch_steps, answer)
        ```
    """

    def __init__(self, workflow: str) -> None:
        self._workflow = workflow

    async def run(
        self,
        steps: Sequence[Step],
        answer: WorkflowAnswer | None = None,
    ) -> WorkflowAnswer | Cancelled:
        """Run ``steps`` in order.

        Args:
            steps: Steps to evaluate.
            answer: Answers from an earlier run to continue from. A new empty
                record is started when omitted.

        Returns:
            The accumulated answers, or CANCELLED if any step gave no answer.
        """
        answer = answer if answer is not None else WorkflowAnswer()
        for step in steps:
            value = await step.fn(answer)
            if value is None:
                logger.info(
                    "workflow_cancelled", workflow=self._workflow, step_name=step.name
                )
                return CANCELLED
            answer.record(step.name, value)
            logger.debug(
                "step_committed", workflow=self._workflow, step_name=step.name
            )
        return answer
