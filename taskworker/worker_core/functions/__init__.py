"""Function registry and function execution contract.

 A *function* is the execution unit behind a function action.

 - The decision client returns an ``Action`` naming a function.
 - The worker resolves that name through ``FunctionRegistry``.
 - The worker awaits ``execute(args, log)`` and reports the serialized
   ``FunctionResult`` on its next decision request.

 This package exports:

 - ``WorkerFunction``: protocol for async function execution.
 - ``Function``: a declaration plus executable implementation of it.
 - ``FunctionRegistry``: ordered name → function mapping.
 - ``FunctionResult``: execution outcome and its wire serialization.
 """

from .base import FunctionResult, LogFn, WorkerFunction
from .function import Function
from .registry import FunctionRegistry

__all__ = [
    "Function",
    "FunctionRegistry",
    "FunctionResult",
    "LogFn",
    "WorkerFunction",
]
