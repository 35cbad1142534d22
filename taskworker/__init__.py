"""taskworker.

This package contains the task loop that drives an autonomous worker: given a
task description it repeatedly asks an external decision client what to do
next, executes the requested local function, reports the outcome on the next
request, and stops when the client signals that no further action is needed.

Core subpackages
----------------

- ``taskworker.worker_core``:

  - ``Worker`` configuration and the single decision/execute cycle.
  - Function registry, function contract and result serialization.
  - Environment snapshot providers.
  - A LangGraph-based task driver with cancellation.

- ``taskworker.core``:

  - Settings loaded from the environment and ``.env``.
  - Logging configuration helpers.
"""
