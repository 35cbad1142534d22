from __future__ import annotations

"""Task loop state types.

- ``CycleState`` is the explicit value threaded from one ``Worker.step`` call
  to the next. It replaces a hidden "last result" slot on the worker: the
  result a cycle produces travels inside the state it returns.
- ``_TaskGraphState`` is the mutable state passed between LangGraph nodes by
  ``TaskEngine``.
"""

from dataclasses import dataclass, replace
from typing import (
    Any,
    Callable,
    Dict,
    NotRequired,
    Optional,
    Required,
    TypedDict,
)

CancelCheck = Callable[[], bool]


@dataclass(frozen=True)
class CycleState:
    """State of one submission between two cycles.

    Attributes
    ----------
    submission_id:
        Handle returned by ``DecisionClient.create_submission``.
    last_result:
        Serialized result to report on the next decision request, or ``None``.
    environment:
        Snapshot composed for the previous cycle, or ``None`` before the first one.
    cycle:
        Number of decision requests issued so far.
    """

    submission_id: str
    last_result: Optional[Dict[str, Any]] = None
    environment: Optional[Dict[str, Any]] = None
    cycle: int = 0

    def consumed(self, *, environment: Dict[str, Any]) -> CycleState:
        """State right after a decision request: result cleared, counter advanced."""
        return replace(self, last_result=None, environment=environment, cycle=self.cycle + 1)

    def with_result(self, payload: Dict[str, Any]) -> CycleState:
        return replace(self, last_result=payload)


class _TaskGraphState(TypedDict):
    """Mutable LangGraph state for a single task run.

    Required keys:

    - ``task``: task description the submission is created for.
    - ``verbose``: whether progress is narrated to the worker's sink.

    Optional keys:

    - ``cycle_state``: set by the ``start`` node, replaced by every ``step``.
    - ``_finished``: set once a cycle signals termination.
    """

    task: Required[str]
    verbose: Required[bool]
    cycle_state: NotRequired[Optional[CycleState]]
    _finished: NotRequired[bool]
