"""LangGraph-based task runtime.

 The runtime takes a configured ``Worker`` and a task description and drives
 the worker's decision/execute cycles until the decision client signals that
 no further action is needed:

 - ``CycleState`` is the explicit state threaded between cycles; the result
   of cycle *n* is reported on decision request *n+1* and nowhere else.
 - ``TaskEngine`` is the state machine running those cycles.

 Most callers use ``Worker.run_task``, which builds a ``TaskEngine`` per run.
 """

from .engine import TaskEngine
from .models import CancelCheck, CycleState

__all__ = [
    "CancelCheck",
    "CycleState",
    "TaskEngine",
]
