from __future__ import annotations

from buildconf.cli.commands._helpers import configure_or_exit
from buildconf.cli.context import CLIContext, build_context
from buildconf.core.model import ReleaseDecision
from buildconf.output.console import Style
from buildconf.services.orchestrator import ModuleReport


def configure() -> None:
    """Configure every module and show what was applied."""
    ctx = build_context()
    report = configure_or_exit(ctx)

    for module in report.modules:
        _print_module(ctx, module)

    ctx.console.print("")
    ctx.console.success(
        f"{len(report.modules)} module(s) configured, {len(report.published)} publishable"
    )


def _print_module(ctx: CLIContext, report: ModuleReport) -> None:
    console = ctx.console
    console.header(f"{report.module} ({report.path})")
    caps = ", ".join(sorted(str(c) for c in report.capabilities)) or "none"
    console.field("capabilities", caps, Style.DIM)
    for outcome in report.concerns:
        style = Style.SUCCESS if outcome.applied else Style.DIM
        console.field(outcome.concern, outcome.detail, style)

    published = report.publishing
    if published is None:
        return
    console.field("repositories", ", ".join(published.repositories))
    console.field("signing", "enabled" if published.signing_enabled else "disabled")
    console.field("tasks", ", ".join(published.tasks))
    style = Style.SUCCESS if published.decision is ReleaseDecision.PUBLISH else Style.WARNING
    console.field("release", str(published.decision), style)
