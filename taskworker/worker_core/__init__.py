"""Worker task loop: functions, environment, decision client contract and runtime.

Design overview
---------------

A worker never decides what to do by itself. For one task it:

1. Opens a submission with its ``DecisionClient``.
2. Asks the client for the next action, attaching an environment snapshot
   and the result of the previous cycle.
3. Executes the named function from its ``FunctionRegistry`` when the action
   is a function action, or stops otherwise.

The result of cycle *n* is reported on decision request *n+1* and nowhere
else. State between cycles is the explicit ``CycleState`` value.

Typical usage
-------------

.. code-block:: python

    worker = Worker(id="w1", name="Echo", description="Echoes text", functions=[echo])
    worker.set_agent_id(agent_id)
    worker.set_decision_client(client)
    await worker.run_task("say hi", verbose=True)
"""

from .client import DecisionClient
from .environment import (
    EnvironmentHook,
    HookedEnvironment,
    StaticEnvironment,
    build_environment_provider,
)
from .errors import (
    AgentNotInitializedError,
    ClientNotInitializedError,
    DuplicateFunctionError,
    FunctionNotFoundError,
    InvalidActionError,
    TaskCancelledError,
    WorkerConfigurationError,
    WorkerError,
)
from .functions import Function, FunctionRegistry, FunctionResult, WorkerFunction
from .runtime import CycleState, TaskEngine
from .schemas import Action, ActionArgs, ActionType, FunctionArgSpec, FunctionResultStatus
from .worker import Worker

__all__ = [
    "Action",
    "ActionArgs",
    "ActionType",
    "CycleState",
    "DecisionClient",
    "EnvironmentHook",
    "Function",
    "FunctionArgSpec",
    "FunctionRegistry",
    "FunctionResult",
    "FunctionResultStatus",
    "HookedEnvironment",
    "StaticEnvironment",
    "TaskEngine",
    "Worker",
    "WorkerFunction",
    "build_environment_provider",
    # Errors
    "AgentNotInitializedError",
    "ClientNotInitializedError",
    "DuplicateFunctionError",
    "FunctionNotFoundError",
    "InvalidActionError",
    "TaskCancelledError",
    "WorkerConfigurationError",
    "WorkerError",
]
