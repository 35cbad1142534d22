from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import Field, field_validator

from .base import BaseSchema, WireSchema


class ActionType(str, Enum):
    call_function = "call_function"
    continue_function = "continue_function"
    wait = "wait"
    go_to = "go_to"


FUNCTION_ACTION_TYPES = frozenset({ActionType.call_function.value, ActionType.continue_function.value})


class FunctionResultStatus(str, Enum):
    done = "done"
    failed = "failed"


class ActionArgs(WireSchema):
    fn_name: str
    fn_id: str
    args: Dict[str, Any] = Field(default_factory=dict)


class Action(WireSchema):
    """Next action returned by the decision client.

    ``action_type`` is kept as a plain string: any value other than the two
    function variants means the task is finished.
    """

    action_type: str
    action_args: Optional[ActionArgs] = None

    @field_validator("action_type", mode="before")
    @classmethod
    def _enum_to_value(cls, v: Any) -> Any:
        return v.value if isinstance(v, Enum) else v

    @property
    def is_function_call(self) -> bool:
        return self.action_type in FUNCTION_ACTION_TYPES

    @classmethod
    def coerce(cls, value: Union["Action", Mapping[str, Any]]) -> "Action":
        """Accept either a validated ``Action`` or its raw mapping form."""
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)


class FunctionResultPayload(BaseSchema):
    """Wire shape of a function outcome reported on the next decision request."""

    action_id: str
    action_status: FunctionResultStatus
    feedback_message: str = ""
    info: Dict[str, Any] = Field(default_factory=dict)


class FunctionArgSpec(BaseSchema):
    name: str
    description: str = ""
    type: Optional[str] = None
    optional: bool = False


class FunctionDescriptor(BaseSchema):
    fn_name: str
    fn_description: str = ""
    args: List[FunctionArgSpec] = Field(default_factory=list)
    hint: Optional[str] = None


class WorkerDescriptor(BaseSchema):
    id: str
    name: str
    description: str
    functions: List[FunctionDescriptor] = Field(default_factory=list)
