from __future__ import annotations

"""Function protocol and execution result model.

A function is the concrete execution unit behind a ``call_function`` /
``continue_function`` action.

The worker resolves ``ActionArgs.fn_name`` through a ``FunctionRegistry``
and awaits ``execute(args, log)``. Functions should report failure through
``FunctionResult.status`` and ``feedback`` instead of raising; anything they
raise propagates out of the task loop.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Protocol

from ..schemas.domain import FunctionResultPayload, FunctionResultStatus

LogFn = Callable[[str], None]


@dataclass(frozen=True)
class FunctionResult:
    """Outcome of one function invocation."""

    status: FunctionResultStatus
    feedback: str = ""
    info: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def done(cls, feedback: str = "", **info: Any) -> FunctionResult:
        return cls(status=FunctionResultStatus.done, feedback=feedback, info=dict(info))

    @classmethod
    def failed(cls, feedback: str = "", **info: Any) -> FunctionResult:
        return cls(status=FunctionResultStatus.failed, feedback=feedback, info=dict(info))

    def to_payload(self, fn_id: str) -> Dict[str, Any]:
        """
        Serialize the result for the next decision request.

        Args:
            fn_id: The invocation id carried by the action that produced this result.

        Returns:
            ``{"action_id", "action_status", "feedback_message", "info"}`` as plain JSON types.
        """
        payload = FunctionResultPayload(
            action_id=fn_id,
            action_status=self.status,
            feedback_message=self.feedback,
            info=dict(self.info),
        )
        return payload.model_dump(mode="json")


class WorkerFunction(Protocol):
    """Protocol for function implementations a worker can dispatch to."""

    name: str

    async def execute(self, args: Dict[str, Any], log: LogFn) -> FunctionResult: ...
