from __future__ import annotations

"""LangGraph task driver.

``TaskEngine`` runs one task of a ``Worker`` to completion.

Execution model
--------------

- The engine runs a LangGraph state machine over a mutable ``_TaskGraphState``.
- ``start`` opens the submission through the worker's decision client.
- Each ``step`` iteration performs exactly one ``Worker.step`` cycle and
  replaces the threaded ``CycleState``.
- The graph loops on ``step`` until a cycle signals termination, then
  transitions through ``finish`` to END.

Bounding execution
------------------

No iteration cap is imposed by default; termination is driven entirely by
the decision client. Callers bound a run with ``cancel_check``, which is
consulted before every cycle, or with ``Settings.recursion_limit``.
"""

import logging
from typing import TYPE_CHECKING, Optional

from langgraph.graph import END, StateGraph

from ...core.config import settings
from ..errors import TaskCancelledError
from .models import CancelCheck, CycleState, _TaskGraphState

if TYPE_CHECKING:
    from ..worker import Worker

logger = logging.getLogger(__name__)


class TaskEngine:
    """Drive a worker's decision/execute cycles for one task.

    The engine is orchestration only: configuration checks, decision requests
    and function dispatch all happen in ``Worker``.
    """

    def __init__(
        self,
        *,
        worker: "Worker",
        cancel_check: Optional[CancelCheck] = None,
        recursion_limit: Optional[int] = None,
    ) -> None:
        """
        Initialize the TaskEngine.

        Args:
            worker: The configured worker whose cycles are driven.
            cancel_check: Optional callable; a truthy return aborts the run before the next cycle.
            recursion_limit: LangGraph recursion limit; defaults to ``settings.recursion_limit``.
        """
        self._worker = worker
        self._cancel_check = cancel_check
        self._recursion_limit = recursion_limit if recursion_limit is not None else settings.recursion_limit
        self._graph = self._build_graph()

    def _build_graph(self):
        """Build and compile the LangGraph state machine."""
        g: StateGraph = StateGraph(_TaskGraphState)
        g.add_node("start", self._node_start)
        g.add_node("step", self._node_step)
        g.add_node("finish", self._node_finish)

        g.set_entry_point("start")
        g.add_edge("start", "step")

        g.add_conditional_edges(
            "step",
            self._route_after_step,
            {
                "continue": "step",
                "finish": "finish",
            },
        )
        g.add_edge("finish", END)
        return g.compile()

    async def run(self, task: str, *, verbose: bool = False) -> CycleState:
        """Run ``task`` until the decision client stops it.

        Returns
        -------
        CycleState
            The final state; its ``last_result`` is always ``None``.
        """
        state: _TaskGraphState = {"task": task, "verbose": verbose}
        final = await self._graph.ainvoke(state, config={"recursion_limit": self._recursion_limit})
        return final["cycle_state"]

    async def _node_start(self, state: _TaskGraphState) -> _TaskGraphState:
        """Open the submission and seed the cycle state."""
        state["cycle_state"] = await self._worker.begin_task(state["task"])
        state["_finished"] = False
        return state

    async def _node_step(self, state: _TaskGraphState) -> _TaskGraphState:
        """Run one cycle, unless the run has been cancelled."""
        cycle_state = state["cycle_state"]
        if cycle_state is None:
            raise ValueError("task not started")

        if self._cancel_check is not None and self._cancel_check():
            logger.info(f"Task {cycle_state.submission_id} cancelled after {cycle_state.cycle} cycle(s)")
            raise TaskCancelledError(cycle_state.submission_id, cycle_state.cycle + 1)

        next_state, proceed = await self._worker.step(cycle_state, verbose=state["verbose"])
        state["cycle_state"] = next_state
        state["_finished"] = not proceed
        return state

    async def _node_finish(self, state: _TaskGraphState) -> _TaskGraphState:
        """Finish node. Only records the completion."""
        cycle_state = state["cycle_state"]
        if cycle_state is not None:
            logger.debug(f"Task {cycle_state.submission_id} finished after {cycle_state.cycle} cycle(s)")
        return state

    def _route_after_step(self, state: _TaskGraphState) -> str:
        """Route to finish/continue after a cycle."""
        if state.get("_finished"):
            return "finish"
        return "continue"
