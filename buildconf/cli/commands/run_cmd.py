from __future__ import annotations

import typer

from buildconf.cli.commands._helpers import configure_or_exit, exit_on_error
from buildconf.cli.context import build_context
from buildconf.core.errors import ErrorCode
from buildconf.output.console import Style
from buildconf.services.tasks import execute_task


def run(
    task: str = typer.Argument(..., help="Task path, e.g. :wire-runtime:publishIfRelease"),
) -> None:
    """Configure the project, then run one task's gate."""
    ctx = build_context()
    configure_or_exit(ctx)

    execution = exit_on_error(execute_task(ctx.project, task), ctx, ErrorCode.USER_ERROR)
    if execution.decision is not None:
        ctx.console.field("release", str(execution.decision), Style.DIM)
    if not execution.active:
        ctx.console.warning(f"{execution.path}: skipped")
        return
    ctx.console.success(execution.path)
    for path in execution.triggers:
        ctx.console.field("triggers", path)
