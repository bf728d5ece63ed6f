"""
Non-critical task runner.

Side effects that must never block or alter the outcome of a request
(goal sync, achievement checks, ...) are described as ``NonCriticalTask``
objects and executed after the critical path, each inside its own error
boundary.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence

logger = logging.getLogger(__name__)


@dataclass
class NonCriticalTask:
    """A named callable whose failure is logged and swallowed."""

    name: str
    func: Callable[[], Any]


def run_non_critical(tasks: Sequence[NonCriticalTask]) -> List[str]:
    """
    Run tasks sequentially, isolating failures.

    Args:
        tasks: Tasks to execute, in order

    Returns:
        Names of the tasks that raised
    """
    failed: List[str] = []
    for task in tasks:
        try:
            task.func()
        except Exception as e:
            logger.error(f"Failed to {task.name} (non-blocking): {e}", exc_info=True)
            failed.append(task.name)
    return failed
