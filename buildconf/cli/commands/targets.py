from __future__ import annotations

import typer

from buildconf.cli.commands._helpers import configure_or_exit
from buildconf.cli.context import build_context
from buildconf.core.errors import ErrorCode
from buildconf.output.console import Style
from buildconf.services.format_targets import resolve_targets


def targets(
    module: str = typer.Argument(..., help="Module name or path"),
    rule_set: str = typer.Argument("kotlin", help="Rule set: java, kotlin or swift"),
) -> None:
    """List the files a formatting rule set selects."""
    ctx = build_context()
    configure_or_exit(ctx)

    found = ctx.project.find(module)
    if found is None:
        ctx.console.error(f"unknown module: {module}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    rules = found.config.formatting.get(rule_set)
    if rules is None:
        ctx.console.error(f"{found.name}: no '{rule_set}' rule set")
        available = ", ".join(sorted(found.config.formatting)) or "none"
        ctx.console.print(f"Available: {available}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    for path in resolve_targets(rules, found.directory):
        ctx.console.print(str(path.relative_to(found.directory)))
