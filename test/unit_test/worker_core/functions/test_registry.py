from __future__ import annotations

from dataclasses import dataclass

import pytest

from taskworker.worker_core.errors import DuplicateFunctionError, FunctionNotFoundError
from taskworker.worker_core.functions.registry import FunctionRegistry


@dataclass(frozen=True)
class _DummyFunction:
    name: str


def test_registry_empty_has_false() -> None:
    reg = FunctionRegistry()
    assert reg.has("echo") is False
    assert len(reg) == 0


def test_registry_get_missing_raises_function_not_found() -> None:
    reg = FunctionRegistry()
    with pytest.raises(FunctionNotFoundError) as exc:
        reg.get("ghost")

    assert exc.value.fn_name == "ghost"
    assert isinstance(exc.value, LookupError)


def test_registry_register_then_get_returns_same_instance() -> None:
    reg = FunctionRegistry()
    fn = _DummyFunction(name="echo")
    reg.register(fn)

    assert reg.has("echo") is True
    assert reg.get("echo") is fn


def test_registry_rejects_duplicate_name() -> None:
    reg = FunctionRegistry()
    first = _DummyFunction(name="echo")
    reg.register(first)

    with pytest.raises(DuplicateFunctionError):
        reg.register(_DummyFunction(name="echo"))
    assert reg.get("echo") is first


def test_registry_constructor_rejects_duplicates() -> None:
    with pytest.raises(DuplicateFunctionError) as exc:
        FunctionRegistry([_DummyFunction(name="a"), _DummyFunction(name="a")])
    assert isinstance(exc.value, ValueError)


def test_registry_preserves_registration_order() -> None:
    fns = [_DummyFunction(name=n) for n in ("zeta", "alpha", "mid")]
    reg = FunctionRegistry(fns)

    assert reg.names() == ["zeta", "alpha", "mid"]
    assert list(reg) == fns
