from __future__ import annotations

"""Function registry.

The registry maps a function name to an executable function implementation.

The worker uses this registry to resolve ``ActionArgs.fn_name`` values into
concrete implementations. Registration order is preserved so that the
functions are declared to the decision client in the order they were given.
"""

from typing import Dict, Iterable, Iterator, List

from ..errors import DuplicateFunctionError, FunctionNotFoundError
from .base import WorkerFunction


class FunctionRegistry:
    """
    Ordered, in-memory mapping of function names to implementations.

    Notes:
        - ``register`` rejects a second function with an already registered name.
        - ``get`` raises ``FunctionNotFoundError`` if the function is missing.
    """

    def __init__(self, functions: Iterable[WorkerFunction] = ()) -> None:
        """Initialize the registry, registering ``functions`` in order."""
        self._fns: Dict[str, WorkerFunction] = {}
        for fn in functions:
            self.register(fn)

    def register(self, fn: WorkerFunction) -> None:
        """
        Register a function implementation.

        Args:
            fn: The function instance to register. It must expose a ``name`` attribute.

        Raises:
            DuplicateFunctionError: If a function with the same name is already registered.
        """
        if fn.name in self._fns:
            raise DuplicateFunctionError(fn.name)
        self._fns[fn.name] = fn

    def get(self, name: str) -> WorkerFunction:
        """
        Retrieve a registered function by name.

        Raises:
            FunctionNotFoundError: If no function is registered with the given name.
        """
        try:
            return self._fns[name]
        except KeyError as e:
            raise FunctionNotFoundError(name) from e

    def has(self, name: str) -> bool:
        return name in self._fns

    def names(self) -> List[str]:
        return list(self._fns)

    def __iter__(self) -> Iterator[WorkerFunction]:
        return iter(list(self._fns.values()))

    def __len__(self) -> int:
        return len(self._fns)
