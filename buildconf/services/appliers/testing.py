from __future__ import annotations

from buildconf.core.model import Capability, Module, ReportEvent, ReportLogging

from .base import ApplyContext, ConcernOutcome

__all__ = ["TestReportingApplier"]

_CI_EVENTS = frozenset({ReportEvent.FAILED, ReportEvent.SKIPPED, ReportEvent.PASSED})


class TestReportingApplier:
    """Verbose test events on CI, minimal output elsewhere.

    Full exception traces are kept in both cases.
    """

    __test__ = False  # not a pytest class
    name = "test-reporting"

    def apply(
        self,
        module: Module,
        capabilities: frozenset[Capability],
        ctx: ApplyContext,
    ) -> ConcernOutcome:
        events = _CI_EVENTS if ctx.environment.is_ci else frozenset[ReportEvent]()
        module.config.test_logging = ReportLogging(
            events=events,
            exception_format="FULL",
            show_standard_streams=False,
        )
        mode = "verbose (CI)" if events else "minimal"
        return ConcernOutcome.done(self.name, mode)
