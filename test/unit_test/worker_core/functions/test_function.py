from __future__ import annotations

from typing import Any, Dict, List

import pytest

from taskworker.worker_core.functions.base import FunctionResult
from taskworker.worker_core.functions.function import Function
from taskworker.worker_core.schemas.domain import FunctionArgSpec, FunctionResultStatus


def _noop_log(message: str) -> None:
    return None


class TestFunctionResult:
    def test_done_and_failed_constructors(self) -> None:
        ok = FunctionResult.done("ok", count=2)
        bad = FunctionResult.failed("nope")

        assert ok.status == FunctionResultStatus.done
        assert ok.info == {"count": 2}
        assert bad.status == FunctionResultStatus.failed
        assert bad.info == {}

    def test_to_payload_wire_shape(self) -> None:
        res = FunctionResult.done("ok", value="hi")
        assert res.to_payload("fn-1") == {
            "action_id": "fn-1",
            "action_status": "done",
            "feedback_message": "ok",
            "info": {"value": "hi"},
        }


class TestFunction:
    @pytest.mark.asyncio
    async def test_async_executable_receives_args_and_log(self) -> None:
        seen: List[Dict[str, Any]] = []
        messages: List[str] = []

        async def _exec(args: Dict[str, Any], log) -> FunctionResult:
            seen.append(args)
            log(f"echoing {args['text']}")
            return FunctionResult.done(args["text"])

        fn = Function(name="echo", description="Echo text", args=[{"name": "text"}], executable=_exec)
        res = await fn.execute({"text": "hi"}, messages.append)

        assert res.status == FunctionResultStatus.done
        assert res.feedback == "hi"
        assert seen == [{"text": "hi"}]
        assert messages == ["echoing hi"]

    @pytest.mark.asyncio
    async def test_sync_executable_is_supported(self) -> None:
        fn = Function(name="ping", description="", executable=lambda args, log: FunctionResult.done("pong"))
        res = await fn.execute({}, _noop_log)
        assert res.feedback == "pong"

    @pytest.mark.asyncio
    async def test_missing_required_args_fail_without_calling(self) -> None:
        calls: List[Dict[str, Any]] = []

        def _exec(args: Dict[str, Any], log) -> FunctionResult:
            calls.append(args)
            return FunctionResult.done()

        fn = Function(
            name="search",
            description="",
            args=[
                FunctionArgSpec(name="query"),
                FunctionArgSpec(name="limit", optional=True),
            ],
            executable=_exec,
        )
        res = await fn.execute({"limit": 3}, _noop_log)

        assert res.status == FunctionResultStatus.failed
        assert "query" in res.feedback
        assert calls == []

    @pytest.mark.asyncio
    async def test_executable_exception_reported_as_failed(self) -> None:
        async def _exec(args: Dict[str, Any], log) -> FunctionResult:
            raise RuntimeError("boom")

        fn = Function(name="explode", description="", executable=_exec)
        res = await fn.execute({}, _noop_log)

        assert res.status == FunctionResultStatus.failed
        assert "boom" in res.feedback

    @pytest.mark.asyncio
    async def test_non_result_return_is_type_error(self) -> None:
        fn = Function(name="bad", description="", executable=lambda args, log: {"status": "done"})
        with pytest.raises(TypeError):
            await fn.execute({}, _noop_log)

    def test_describe(self) -> None:
        fn = Function(
            name="echo",
            description="Echo text",
            args=[{"name": "text", "description": "what to say", "type": "string"}],
            hint="Use for greetings",
            executable=lambda args, log: FunctionResult.done(),
        )
        desc = fn.describe()

        assert desc.fn_name == "echo"
        assert desc.fn_description == "Echo text"
        assert desc.hint == "Use for greetings"
        assert [a.name for a in desc.args] == ["text"]
        assert desc.args[0].optional is False
