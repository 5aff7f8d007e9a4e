"""Concern appliers, in the order they run on a module."""

from .base import ApplyContext, ConcernApplier, ConcernOutcome
from .compiler import CompilerFlagsApplier
from .distribution import DistributionApplier
from .formatting import FormattingApplier
from .manifest import JarManifestApplier
from .platform import PlatformApplier
from .testing import TestReportingApplier

__all__ = [
    "ApplyContext",
    "ConcernApplier",
    "ConcernOutcome",
    "CompilerFlagsApplier",
    "DistributionApplier",
    "FormattingApplier",
    "JarManifestApplier",
    "PlatformApplier",
    "TestReportingApplier",
    "DEFAULT_APPLIERS",
]

DEFAULT_APPLIERS: tuple[ConcernApplier, ...] = (
    FormattingApplier(),
    TestReportingApplier(),
    PlatformApplier(),
    CompilerFlagsApplier(),
    DistributionApplier(),
    JarManifestApplier(),
)
