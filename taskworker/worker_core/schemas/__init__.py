"""Schemas exchanged between the worker, its functions and the decision client."""

from .domain import (
    FUNCTION_ACTION_TYPES,
    Action,
    ActionArgs,
    ActionType,
    FunctionArgSpec,
    FunctionDescriptor,
    FunctionResultPayload,
    FunctionResultStatus,
    WorkerDescriptor,
)

__all__ = [
    "FUNCTION_ACTION_TYPES",
    "Action",
    "ActionArgs",
    "ActionType",
    "FunctionArgSpec",
    "FunctionDescriptor",
    "FunctionResultPayload",
    "FunctionResultStatus",
    "WorkerDescriptor",
]
