"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from buildconf.core.errors import ErrorCode
from buildconf.core.result import Err, Ok, Result
from buildconf.output.console import Style
from buildconf.services.orchestrator import ProjectReport, configure_project

if TYPE_CHECKING:
    from buildconf.cli.context import CLIContext

T = TypeVar("T")
E = TypeVar("E")


def exit_on_error(
    result: Result[T, E],
    ctx: CLIContext,
    error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
) -> T:
    """Return the Ok value, or print the error and exit.

    Error payloads are expected to expose ``message`` and optionally ``hint``.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        ctx.console.error(message)
        if hint:
            ctx.console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))
    assert isinstance(result, Ok)
    return result.value


def configure_or_exit(ctx: CLIContext) -> ProjectReport:
    return exit_on_error(configure_project(ctx.project, ctx.environment), ctx)
