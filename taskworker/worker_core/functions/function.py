from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Union

from ..schemas.domain import FunctionArgSpec, FunctionDescriptor
from .base import FunctionResult, LogFn, WorkerFunction

logger = logging.getLogger(__name__)

Executable = Callable[[Dict[str, Any], LogFn], Union[FunctionResult, Awaitable[FunctionResult]]]


class Function(WorkerFunction):
    """
    Function built from a declaration and a plain executable.

    The declaration (description, argument specs, hint) is what the worker
    advertises to the decision client; the executable does the work. It may be
    a coroutine function or a regular callable and is invoked as
    ``executable(args, log)``.

    Notes:
        - Missing required arguments are reported as a ``failed`` result
          without calling the executable.
        - Exceptions raised by the executable are reported as a ``failed``
          result carrying the error message.
    """

    def __init__(
        self,
        *,
        name: str,
        description: str,
        executable: Executable,
        args: Iterable[Union[FunctionArgSpec, Dict[str, Any]]] = (),
        hint: Optional[str] = None,
    ) -> None:
        self.name = name
        self.description = description
        self.args: List[FunctionArgSpec] = [
            a if isinstance(a, FunctionArgSpec) else FunctionArgSpec.model_validate(a) for a in args
        ]
        self.hint = hint
        self._executable = executable

    def describe(self) -> FunctionDescriptor:
        """Return the declaration advertised to the decision client."""
        return FunctionDescriptor(
            fn_name=self.name,
            fn_description=self.description,
            args=list(self.args),
            hint=self.hint,
        )

    def missing_args(self, args: Dict[str, Any]) -> List[str]:
        return [spec.name for spec in self.args if not spec.optional and spec.name not in args]

    async def execute(self, args: Dict[str, Any], log: LogFn) -> FunctionResult:
        """
        Run the executable with the decision's argument bundle.

        Args:
            args: Argument mapping from the action.
            log: Progress callback forwarding to the worker's sink.

        Returns:
            FunctionResult: the executable's own result, or a ``failed`` result
            when validation or execution fails.
        """
        missing = self.missing_args(args)
        if missing:
            return FunctionResult.failed(f"Missing required argument(s): {', '.join(missing)}")

        try:
            res = self._executable(dict(args), log)
            if inspect.isawaitable(res):
                res = await res
        except Exception as e:
            logger.warning(f"Function '{self.name}' raised: {e}", exc_info=True)
            return FunctionResult.failed(f"Function '{self.name}' failed: {e}")

        if not isinstance(res, FunctionResult):
            raise TypeError(f"function '{self.name}' returned {type(res).__name__}, expected FunctionResult")
        return res
