"""
Task - lazy, cancellable async computations.

    from fnbox.task import Task, task, wait_all

    fetch_all = wait_all([request_a, request_b, request_c]).map(R.merge_all)
    execution = fetch_all.run()
    merged = await execution.promise()
"""

from .combinators import parallel, wait_all, wait_any
from .execution import TaskExecution
from .monad import Task, delay, from_promised, task
from .resolver import Resolver

__all__ = (
    "Resolver",
    "Task",
    "TaskExecution",
    "delay",
    "from_promised",
    "parallel",
    "task",
    "wait_all",
    "wait_any",
)
