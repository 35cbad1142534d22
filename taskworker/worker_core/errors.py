from __future__ import annotations


class WorkerError(Exception):
    pass


class WorkerConfigurationError(WorkerError):
    """Raised when a worker is used before its late-bound dependencies are set."""


class AgentNotInitializedError(WorkerConfigurationError):
    def __init__(self) -> None:
        super().__init__("Agent not initialized")


class ClientNotInitializedError(WorkerConfigurationError):
    def __init__(self) -> None:
        super().__init__("Decision client not initialized")


class FunctionNotFoundError(WorkerError, LookupError):
    def __init__(self, fn_name: str) -> None:
        self.fn_name = fn_name
        super().__init__(f"Function not found: '{fn_name}'")


class DuplicateFunctionError(WorkerError, ValueError):
    def __init__(self, fn_name: str) -> None:
        self.fn_name = fn_name
        super().__init__(f"Function already registered: '{fn_name}'")


class InvalidActionError(WorkerError, ValueError):
    def __init__(self, action_type: str, message: str) -> None:
        self.action_type = action_type
        super().__init__(f"Invalid '{action_type}' action: {message}")


class TaskCancelledError(WorkerError):
    def __init__(self, submission_id: str, cycle: int) -> None:
        self.submission_id = submission_id
        self.cycle = cycle
        super().__init__(f"Task '{submission_id}' cancelled before cycle {cycle}")
