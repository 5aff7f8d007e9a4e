from __future__ import annotations

import typer

from buildconf.cli.context import build_context
from buildconf.core.errors import ErrorCode
from buildconf.core.result import Err
from buildconf.output.console import Style
from buildconf.services.orchestrator import validate_allow_list


def check() -> None:
    """Validate the manifest and the publish allow-list."""
    ctx = build_context()
    project = ctx.project

    root = project.root
    ctx.console.print(f"project: {root.name if root else '?'} ({project.root_dir})", Style.DIM)
    ctx.console.print(f"modules: {len(project.modules)}", Style.DIM)

    result = validate_allow_list(project)
    if isinstance(result, Err):
        ctx.console.error(result.error.message)
        ctx.console.print(f"hint: {result.error.hint}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    ctx.console.success(f"allow-list: {len(project.settings.publish_allow_list)} module(s)")
