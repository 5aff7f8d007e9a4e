"""Kotlin and Java compiler flags.

The Kotlin JVM target and the Java source/target compatibility are all taken
from ``CompilerSettings.jvm_target``; the host refuses to compile when they
disagree. They are only set for modules that compile for the JVM. Common
compiler flags apply to every module.
"""

from __future__ import annotations

from buildconf.core.model import Capability, CompilerConfig, Module

from .base import ApplyContext, ConcernOutcome

__all__ = ["CompilerFlagsApplier", "merge_flags", "compiles_for_jvm"]

_JVM_SOURCE_SET_PREFIXES = ("jvm", "android")


def merge_flags(existing: tuple[str, ...], extra: tuple[str, ...]) -> tuple[str, ...]:
    """Append flags that are not already present, keeping order."""
    merged = list(existing)
    for flag in extra:
        if flag not in merged:
            merged.append(flag)
    return tuple(merged)


def compiles_for_jvm(module: Module, capabilities: frozenset[Capability]) -> bool:
    """JVM and Android modules, or multi-target modules with a JVM source set."""
    if Capability.JVM in capabilities or Capability.MOBILE in capabilities:
        return True
    if Capability.MULTI_TARGET in capabilities:
        return any(s.startswith(_JVM_SOURCE_SET_PREFIXES) for s in module.source_sets)
    return False


class CompilerFlagsApplier:
    name = "compiler"

    def apply(
        self,
        module: Module,
        capabilities: frozenset[Capability],
        ctx: ApplyContext,
    ) -> ConcernOutcome:
        compiler = ctx.settings.compiler
        current = module.config.compiler

        opt_ins: dict[str, tuple[str, ...]] = dict(current.opt_ins) if current else {}
        if Capability.MULTI_TARGET in capabilities:
            # Opt-in everything.
            for source_set in module.source_sets:
                opt_ins[source_set] = merge_flags(
                    opt_ins.get(source_set, ()), compiler.multiplatform_opt_ins
                )
        free_args = merge_flags(current.free_args if current else (), compiler.free_args)

        if not compiles_for_jvm(module, capabilities):
            module.config.compiler = CompilerConfig(
                free_args=free_args,
                jvm_free_args=current.jvm_free_args if current else (),
                jvm_target=current.jvm_target if current else None,
                java_source=current.java_source if current else None,
                java_target=current.java_target if current else None,
                opt_ins=opt_ins,
            )
            return ConcernOutcome.done(self.name, "common flags only")

        java_version = compiler.jvm_target
        module.config.compiler = CompilerConfig(
            free_args=free_args,
            jvm_free_args=merge_flags(
                current.jvm_free_args if current else (), compiler.jvm_free_args
            ),
            jvm_target=java_version,
            java_source=java_version,
            java_target=java_version,
            opt_ins=opt_ins,
        )
        return ConcernOutcome.done(self.name, f"jvmTarget {java_version}")
