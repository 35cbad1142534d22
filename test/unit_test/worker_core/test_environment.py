from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from taskworker.worker_core.environment import (
    HookedEnvironment,
    StaticEnvironment,
    build_environment_provider,
)


def test_build_without_hook_is_static() -> None:
    provider = build_environment_provider("be brief")
    assert isinstance(provider, StaticEnvironment)


def test_build_with_hook_is_hooked() -> None:
    provider = build_environment_provider("be brief", lambda result, state: {})
    assert isinstance(provider, HookedEnvironment)


@pytest.mark.asyncio
async def test_static_snapshot_is_only_instructions() -> None:
    assert await StaticEnvironment("be brief").compose() == {"instructions": "be brief"}
    assert await StaticEnvironment().compose() == {"instructions": None}


@pytest.mark.asyncio
async def test_hook_output_merged_over_instructions() -> None:
    async def _hook(result, state) -> Dict[str, Any]:
        return {"balance": 10, "instructions": "from hook"}

    snapshot = await HookedEnvironment(hook=_hook, instructions="static").compose()

    assert snapshot == {"instructions": "from hook", "balance": 10}


@pytest.mark.asyncio
async def test_sync_hook_receives_prior_result_and_state() -> None:
    calls: List[tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]] = []

    def _hook(result, state) -> Dict[str, Any]:
        calls.append((result, state))
        return {"tick": len(calls)}

    provider = HookedEnvironment(hook=_hook, instructions="x")
    prior = {"action_id": "fn-1", "action_status": "done", "feedback_message": "", "info": {}}
    snapshot = await provider.compose(prior, {"instructions": "x", "tick": 0})

    assert snapshot == {"instructions": "x", "tick": 1}
    assert calls == [(prior, {"instructions": "x", "tick": 0})]


@pytest.mark.asyncio
async def test_hook_returning_non_mapping_is_type_error() -> None:
    provider = HookedEnvironment(hook=lambda result, state: ["not", "a", "mapping"])
    with pytest.raises(TypeError):
        await provider.compose()


@pytest.mark.asyncio
async def test_hook_failure_propagates() -> None:
    async def _hook(result, state) -> Dict[str, Any]:
        raise RuntimeError("state unavailable")

    with pytest.raises(RuntimeError, match="state unavailable"):
        await HookedEnvironment(hook=_hook).compose()
