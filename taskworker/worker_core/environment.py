from __future__ import annotations

"""Environment snapshot composition.

Every cycle the worker attaches an environment snapshot to its decision
request. The snapshot always carries the worker's static ``instructions``;
when an environment hook is configured its output is merged on top, so hook
keys win on collision.

Whether a hook is present is modelled as two provider variants rather than a
nullable field:

- ``StaticEnvironment``: instructions only.
- ``HookedEnvironment``: instructions plus the hook's output.

``build_environment_provider`` selects the variant.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

EnvironmentHook = Callable[
    [Optional[Dict[str, Any]], Optional[Dict[str, Any]]],
    Union[Mapping[str, Any], Awaitable[Mapping[str, Any]]],
]


@dataclass(frozen=True)
class StaticEnvironment:
    """Provider used when the worker has no environment hook."""

    instructions: Optional[str] = None

    async def compose(
        self,
        prior_result: Optional[Dict[str, Any]] = None,
        prior_state: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return {"instructions": self.instructions}


@dataclass(frozen=True)
class HookedEnvironment:
    """Provider merging a hook's output over the static instructions."""

    hook: EnvironmentHook
    instructions: Optional[str] = None

    async def compose(
        self,
        prior_result: Optional[Dict[str, Any]] = None,
        prior_state: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Build the snapshot for one cycle.

        Args:
            prior_result: Serialized result of the previous cycle's function, if any.
            prior_state: Snapshot produced for the previous cycle, if any.

        Raises:
            TypeError: If the hook does not produce a mapping.
        """
        produced = self.hook(prior_result, prior_state)
        if inspect.isawaitable(produced):
            produced = await produced
        if not isinstance(produced, Mapping):
            raise TypeError(f"environment hook returned {type(produced).__name__}, expected a mapping")
        return {"instructions": self.instructions, **produced}


EnvironmentProvider = Union[StaticEnvironment, HookedEnvironment]


def build_environment_provider(
    instructions: Optional[str] = None,
    hook: Optional[EnvironmentHook] = None,
) -> EnvironmentProvider:
    """Select the provider variant for the given worker configuration."""
    if hook is None:
        return StaticEnvironment(instructions=instructions)
    return HookedEnvironment(hook=hook, instructions=instructions)
