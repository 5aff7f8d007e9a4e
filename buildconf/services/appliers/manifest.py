from __future__ import annotations

from buildconf.core.model import Capability, Module

from .base import ApplyContext, ConcernOutcome

__all__ = ["JarManifestApplier", "MODULE_NAME_ATTRIBUTE"]

MODULE_NAME_ATTRIBUTE = "Automatic-Module-Name"


class JarManifestApplier:
    """Tag the primary ``jar`` task's manifest with the module name."""

    name = "jar-manifest"

    def apply(
        self,
        module: Module,
        capabilities: frozenset[Capability],
        ctx: ApplyContext,
    ) -> ConcernOutcome:
        jar = module.find_task("jar")
        if jar is None or jar.kind != "jar":
            return ConcernOutcome.skipped(self.name, "no primary jar")

        jar.manifest_attributes[MODULE_NAME_ATTRIBUTE] = module.name
        return ConcernOutcome.done(self.name, f"{MODULE_NAME_ATTRIBUTE}={module.name}")
