"""Release decision and execution-time release gates.

Rules, checked in order:
1. version ends with the snapshot suffix      -> SKIP_SNAPSHOT
2. version contains the internal marker, or
   the invocation is an internal build        -> SKIP_INTERNAL
3. otherwise                                  -> PUBLISH
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from buildconf.core.config import VersionMarkers
from buildconf.core.model import ReleaseDecision

__all__ = [
    "is_snapshot",
    "is_internal_version",
    "decide",
    "ReleaseGate",
    "PluginPortalGate",
]

_DEFAULT_MARKERS = VersionMarkers()


def is_snapshot(version: str, markers: VersionMarkers = _DEFAULT_MARKERS) -> bool:
    return version.endswith(markers.snapshot_suffix)


def is_internal_version(version: str, markers: VersionMarkers = _DEFAULT_MARKERS) -> bool:
    return markers.internal_marker in version


def decide(
    version: str,
    is_internal_build: bool,
    markers: VersionMarkers = _DEFAULT_MARKERS,
) -> ReleaseDecision:
    if is_snapshot(version, markers):
        return ReleaseDecision.SKIP_SNAPSHOT
    if is_internal_version(version, markers) or is_internal_build:
        return ReleaseDecision.SKIP_INTERNAL
    return ReleaseDecision.PUBLISH


@dataclass(frozen=True, slots=True)
class ReleaseGate:
    """Decision attached to an always-present publish task.

    The version is read through ``version`` when the gate is called, so a
    version set after configuration is still honoured.
    """

    version: Callable[[], str]
    is_internal_build: bool
    markers: VersionMarkers = _DEFAULT_MARKERS

    def __call__(self) -> ReleaseDecision:
        return decide(self.version(), self.is_internal_build, self.markers)


@dataclass(frozen=True, slots=True)
class PluginPortalGate:
    """Gate for publishing the build plugin to the plugin portal.

    The portal rejects snapshots, and internal builds must never reach it. The
    internal marker is checked here on its own rather than trusting the
    result of ``decide``.
    """

    release: ReleaseGate

    def __call__(self) -> ReleaseDecision:
        decision = self.release()
        if not decision.should_publish:
            return decision
        if is_internal_version(self.release.version(), self.release.markers):
            return ReleaseDecision.SKIP_INTERNAL
        return decision
