from __future__ import annotations

"""Decision client contract.

The worker never decides what to do by itself: it asks a decision client.
This module only declares the interface the task loop consumes; reaching the
remote authority (transport, authentication, serialization) is the concern of
the concrete client implementation.

Contract guidelines
-------------------

- Both methods are async.
- ``create_submission`` is called exactly once per ``Worker.run_task``.
- ``get_next_action`` receives the serialized result of the function executed
  for the previous action, or ``None`` on the first request of a task.
- ``get_next_action`` may return an ``Action`` or its raw mapping form.
"""

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Protocol, Union

from .schemas.domain import Action

if TYPE_CHECKING:
    from .worker import Worker


class DecisionClient(Protocol):
    """External authority choosing the next action of a worker."""

    async def create_submission(self, agent_id: str, task: str) -> str:
        """
        Open a submission for a task.

        Args:
            agent_id: The agent identity assigned to the worker.
            task: Human-readable task description.

        Returns:
            An opaque submission handle threaded through every cycle of the task.
        """
        ...

    async def get_next_action(
        self,
        agent_id: str,
        submission_id: str,
        worker: "Worker",
        prior_result: Optional[Dict[str, Any]],
        environment: Dict[str, Any],
    ) -> Union[Action, Mapping[str, Any]]:
        """
        Request the next action for a submission.

        Args:
            agent_id: The agent identity assigned to the worker.
            submission_id: Handle returned by ``create_submission``.
            worker: The worker; ``worker.describe()`` lists its functions.
            prior_result: Serialized result of the previous cycle, or ``None``.
            environment: The environment snapshot composed for this cycle.
        """
        ...
