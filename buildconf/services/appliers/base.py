"""Shared types for concern appliers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from buildconf.core.config import GlobalSettings
from buildconf.core.environment import Environment
from buildconf.core.model import Capability, Module

__all__ = ["ApplyContext", "ConcernOutcome", "ConcernApplier"]


@dataclass(frozen=True, slots=True)
class ApplyContext:
    settings: GlobalSettings
    environment: Environment


@dataclass(frozen=True, slots=True)
class ConcernOutcome:
    """What one applier did to one module.

    Attributes:
        concern: Applier name (e.g. "formatting")
        applied: False when the concern did not apply to the module
        detail: Short human-readable summary
    """

    concern: str
    applied: bool
    detail: str

    @classmethod
    def done(cls, concern: str, detail: str) -> ConcernOutcome:
        return cls(concern=concern, applied=True, detail=detail)

    @classmethod
    def skipped(cls, concern: str, reason: str) -> ConcernOutcome:
        return cls(concern=concern, applied=False, detail=reason)


class ConcernApplier(Protocol):
    """A stateless unit of configuration for one cross-cutting concern.

    Implementations must be idempotent and must write their mutation in one
    step, after everything it needs has been computed.
    """

    name: str

    def apply(
        self,
        module: Module,
        capabilities: frozenset[Capability],
        ctx: ApplyContext,
    ) -> ConcernOutcome: ...
