"""Drop the tar/zip archives the distribution plugin produces by default."""

from __future__ import annotations

from buildconf.core.model import Artifact, Capability, Module

from .base import ApplyContext, ConcernOutcome

__all__ = ["DistributionApplier", "ARCHIVE_TASKS", "is_archive"]

ARCHIVE_TASKS = ("distTar", "distZip")


def is_archive(artifact: Artifact) -> bool:
    # Plain substring match on the file name, kept from the original build
    # logic: "wire-starter.jar" counts as an archive too.
    name = artifact.file_name
    return "tar" in name or "zip" in name


class DistributionApplier:
    name = "distribution"

    def apply(
        self,
        module: Module,
        capabilities: frozenset[Capability],
        ctx: ApplyContext,
    ) -> ConcernOutcome:
        if Capability.PRODUCES_DISTRIBUTION not in capabilities:
            return ConcernOutcome.skipped(self.name, "no distribution")

        tasks = [t for name in ARCHIVE_TASKS if (t := module.find_task(name)) is not None]
        kept = [a for a in module.archives if not is_archive(a)]
        removed = len(module.archives) - len(kept)

        for task in tasks:
            task.enabled = False
        module.archives[:] = kept
        return ConcernOutcome.done(
            self.name, f"disabled {len(tasks)} task(s), removed {removed} archive(s)"
        )
