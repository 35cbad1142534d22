from __future__ import annotations

"""Worker: configuration and the single decision/execute cycle.

A ``Worker`` owns an ordered set of functions and asks a ``DecisionClient``
what to do with them. One cycle (``step``):

1. Composes the environment snapshot.
2. Requests the next action, reporting the previous cycle's result.
3. Clears that result, whatever the action turns out to be.
4. Stops if the action is not a function action; otherwise resolves and
   executes the named function and carries its serialized result into the
   returned ``CycleState``.

``run_task`` opens a submission and repeats ``step`` through ``TaskEngine``
until a cycle returns ``False``. Nothing is retried: every error reaches the
caller.
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..core.config import settings
from ..core.logging_config import LogSink, make_log_sink
from .client import DecisionClient
from .environment import EnvironmentHook, EnvironmentProvider, build_environment_provider
from .errors import AgentNotInitializedError, ClientNotInitializedError, InvalidActionError
from .functions import FunctionRegistry, WorkerFunction
from .runtime import CancelCheck, CycleState, TaskEngine
from .schemas.domain import Action, FunctionDescriptor, WorkerDescriptor

logger = logging.getLogger(__name__)


class Worker:
    """A set of functions driven by an external decision client."""

    def __init__(
        self,
        *,
        id: str,
        name: str,
        description: str,
        functions: Iterable[WorkerFunction],
        instructions: Optional[str] = None,
        get_environment: Optional[EnvironmentHook] = None,
    ) -> None:
        """
        Initialize the Worker.

        Args:
            id: Worker identity.
            name: Human-readable name.
            description: What the worker is for; shown to the decision client.
            functions: Functions the worker can be told to call; names must be unique.
            instructions: Static instructions included in every environment snapshot.
            get_environment: Optional hook contributing extra environment keys each cycle.

        Raises:
            DuplicateFunctionError: If two functions share a name.
        """
        self.id = id
        self.name = name
        self.description = description
        self.functions = FunctionRegistry(functions)
        self.instructions = instructions
        self._environment: EnvironmentProvider = build_environment_provider(instructions, get_environment)

        self._agent_id: Optional[str] = None
        self._log_sink: Optional[LogSink] = None
        self._client: Optional[DecisionClient] = None

    @property
    def agent_id(self) -> Optional[str]:
        return self._agent_id

    @property
    def decision_client(self) -> Optional[DecisionClient]:
        return self._client

    def set_agent_id(self, agent_id: str) -> None:
        self._agent_id = agent_id

    def set_logger(self, sink: Union[LogSink, logging.Logger, None]) -> None:
        """Set the progress sink. A ``logging.Logger`` is wrapped with ``make_log_sink``."""
        if isinstance(sink, logging.Logger):
            sink = make_log_sink(sink)
        self._log_sink = sink

    def set_decision_client(self, client: DecisionClient) -> None:
        self._client = client

    def describe(self) -> WorkerDescriptor:
        """Return the worker declaration sent to the decision client."""
        functions = []
        for fn in self.functions:
            describe = getattr(fn, "describe", None)
            functions.append(describe() if callable(describe) else FunctionDescriptor(fn_name=fn.name))
        return WorkerDescriptor(id=self.id, name=self.name, description=self.description, functions=functions)

    def _log(self, message: str) -> None:
        if self._log_sink is not None:
            self._log_sink(message)

    def _require_ready(self) -> Tuple[str, DecisionClient]:
        if not self._agent_id:
            raise AgentNotInitializedError()
        if self._client is None:
            raise ClientNotInitializedError()
        return self._agent_id, self._client

    async def compose_environment(
        self,
        prior_result: Optional[Dict[str, Any]] = None,
        prior_state: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Compose this cycle's environment snapshot (instructions plus hook output)."""
        return await self._environment.compose(prior_result, prior_state)

    async def begin_task(self, task: str) -> CycleState:
        """
        Open a submission for ``task``.

        Returns:
            The initial ``CycleState``: no result to report yet.

        Raises:
            WorkerConfigurationError: If the agent id or decision client is unset.
        """
        agent_id, client = self._require_ready()
        submission_id = await client.create_submission(agent_id, task)
        logger.debug(f"Submission {submission_id} created for worker {self.id}")
        return CycleState(submission_id=submission_id)

    async def step(self, state: CycleState, *, verbose: bool = False) -> Tuple[CycleState, bool]:
        """Perform one decision/execute cycle.

        Returns
        -------
        tuple[CycleState, bool]
            The next state and whether another cycle should follow. When the
            action is not a function action the flag is ``False`` and no
            function runs.

        Raises
        ------
        WorkerConfigurationError
            If the agent id or decision client is unset; no request is issued.
        InvalidActionError
            If a function action carries no ``action_args``.
        FunctionNotFoundError
            If the action names a function this worker does not have.
        """
        agent_id, client = self._require_ready()
        logger.debug(f"Step {state.cycle + 1} of submission {state.submission_id}")

        environment = await self.compose_environment(state.last_result, state.environment)
        if verbose:
            self._log(f"Environment State: {json.dumps(environment, default=str)}")

        raw = await client.get_next_action(agent_id, state.submission_id, self, state.last_result, environment)
        action = Action.coerce(raw)

        next_state = state.consumed(environment=environment)

        if not action.is_function_call:
            logger.debug(f"Submission {state.submission_id} stopped by action '{action.action_type}'")
            return next_state, False

        if action.action_args is None:
            raise InvalidActionError(str(action.action_type), "missing action_args")

        action_args = action.action_args
        fn = self.functions.get(action_args.fn_name)

        if verbose:
            self._log(f"Performing function {action_args.fn_name} with args {json.dumps(action_args.args, default=str)}.")

        result = await fn.execute(dict(action_args.args), self._log)

        if verbose:
            status = getattr(result.status, "value", result.status)
            self._log(f"Function status: {status} - {result.feedback}.")

        payload = result.to_payload(action_args.fn_id)
        logger.debug(f"Stored result for {action_args.fn_name} ({action_args.fn_id}): {payload}")
        return next_state.with_result(payload), True

    async def run_task(
        self,
        task: str,
        *,
        verbose: Optional[bool] = None,
        cancel_check: Optional[CancelCheck] = None,
    ) -> CycleState:
        """Run ``task`` to completion.

        Parameters
        ----------
        task:
            Task description the submission is created for.
        verbose:
            Narrate environments, calls and results to the sink; defaults to
            ``settings.verbose``.
        cancel_check:
            Consulted before every cycle; a truthy return raises
            ``TaskCancelledError``.
        """
        logger.debug(f"Run task for worker {self.id}: {task}")
        self._require_ready()
        engine = TaskEngine(worker=self, cancel_check=cancel_check)
        return await engine.run(task, verbose=settings.verbose if verbose is None else verbose)
