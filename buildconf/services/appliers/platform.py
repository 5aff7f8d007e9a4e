"""Android settings for modules carrying the mobile capability."""

from __future__ import annotations

from buildconf.core.model import AndroidConfig, Capability, LintOptions, Module

from .base import ApplyContext, ConcernOutcome

__all__ = ["PlatformApplier", "application_id_for"]


def application_id_for(module: Module, marker: str) -> str | None:
    """Derive ``group.name`` (dashes become dots) for application modules.

    Without a group the id is the module name alone.
    """
    if marker not in module.name:
        return None
    qualified = f"{module.group}.{module.name}" if module.group else module.name
    return qualified.replace("-", ".")


class PlatformApplier:
    name = "platform"

    def apply(
        self,
        module: Module,
        capabilities: frozenset[Capability],
        ctx: ApplyContext,
    ) -> ConcernOutcome:
        if Capability.MOBILE not in capabilities:
            return ConcernOutcome.skipped(self.name, "not a mobile module")

        android = ctx.settings.android
        java_version = ctx.settings.compiler.jvm_target
        module.config.android = AndroidConfig(
            compile_sdk=android.compile_sdk,
            min_sdk=android.min_sdk,
            target_sdk=android.target_sdk,
            version_code=android.version_code,
            version_name=android.version_name,
            source_compatibility=java_version,
            target_compatibility=java_version,
            application_id=application_id_for(module, android.application_marker),
            # Full lint runs as part of the aggregate build.
            lint=LintOptions(check_dependencies=True, check_release_builds=False),
        )
        return ConcernOutcome.done(
            self.name, f"compileSdk {android.compile_sdk}, targetSdk {android.target_sdk}"
        )
