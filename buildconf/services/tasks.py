"""Execution-time resolution of registered tasks.

Gated tasks always exist; whether they do anything is decided here, when the
task is run, by calling the gate attached at configuration time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from buildconf.core.manifest import Project
from buildconf.core.model import ReleaseDecision
from buildconf.core.result import Err, Ok, Result

__all__ = ["TaskError", "TaskExecution", "split_task_path", "execute_task"]


@dataclass(frozen=True, slots=True)
class TaskError:
    kind: Literal["invalid_path", "unknown_module", "unknown_task"]
    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class TaskExecution:
    """Result of running one task.

    Attributes:
        path: Fully qualified task path (``:module:task``)
        active: False when the task is disabled or its gate said no
        decision: Gate outcome for gated tasks, None otherwise
        triggers: Task paths this run hands over to the host
    """

    path: str
    active: bool
    decision: ReleaseDecision | None
    triggers: tuple[str, ...]


def split_task_path(path: str) -> tuple[str, str] | None:
    """Split ``:module:task`` (or ``:task`` for the root) into module path and task."""
    if not path.startswith(":") or path.endswith(":"):
        return None
    module_path, _, task = path.rpartition(":")
    return (module_path or ":", task)


def _qualify(module_path: str, dependency: str) -> str:
    if dependency.startswith(":"):
        return dependency
    if module_path == ":":
        return f":{dependency}"
    return f"{module_path}:{dependency}"


def execute_task(project: Project, path: str) -> Result[TaskExecution, TaskError]:
    parts = split_task_path(path)
    if parts is None:
        return Err(
            TaskError(
                kind="invalid_path",
                message=f"invalid task path: {path}",
                hint="Use :module:task",
            )
        )

    module_path, task_name = parts
    module = project.find(module_path)
    if module is None:
        return Err(TaskError(kind="unknown_module", message=f"unknown module: {module_path}"))

    task = module.find_task(task_name)
    if task is None:
        available = ", ".join(sorted(module.tasks)) or "none"
        return Err(
            TaskError(
                kind="unknown_task",
                message=f"unknown task: {path}",
                hint=f"Available: {available}",
            )
        )

    decision = task.gate() if task.gate is not None else None
    active = task.enabled and (decision is None or decision.should_publish)
    triggers = tuple(_qualify(module.path, d) for d in task.depends_on) if active else ()
    return Ok(TaskExecution(path=path, active=active, decision=decision, triggers=triggers))
