"""Formatting and lint rule sets.

Three named rule sets are attached: ``java``, ``kotlin`` and, outside the root
project, ``swift``. The root project formats the nested build-support sources
instead of its own ``src`` tree.
"""

from __future__ import annotations

from buildconf.core.model import Capability, FormatRuleSet, Module

from .base import ApplyContext, ConcernOutcome

__all__ = ["FormattingApplier", "build_rule_sets"]

_COMMON_STEPS = ("trimTrailingWhitespace", "endWithNewline", "toggleOffOn")


def build_rule_sets(module: Module, ctx: ApplyContext) -> dict[str, FormatRuleSet]:
    fmt = ctx.settings.formatting
    license_header = module.root_dir / fmt.license_header
    marker = fmt.generated_marker

    if module.is_root:
        java = FormatRuleSet(
            name="java",
            targets=("build-support/settings/src/**/*.java",),
            exclude_if_content_contains=marker,
            steps=(f"googleJavaFormat:{fmt.google_java_format_version}", *_COMMON_STEPS),
            license_header=license_header,
        )
        kotlin = FormatRuleSet(
            name="kotlin",
            targets=("build-support/src/**/*.kt",),
            steps=(*_COMMON_STEPS, f"ktlint:{fmt.ktlint_version}"),
            license_header=license_header,
        )
        return {"java": java, "kotlin": kotlin}

    java = FormatRuleSet(
        name="java",
        targets=("src/**/*.java",),
        target_excludes=(fmt.test_fixture_exclude,),
        exclude_if_content_contains=marker,
        steps=(f"googleJavaFormat:{fmt.google_java_format_version}", *_COMMON_STEPS),
        license_header=license_header,
    )
    kotlin = FormatRuleSet(
        name="kotlin",
        targets=("src/**/*.kt",),
        target_excludes=(fmt.test_fixture_exclude,),
        exclude_if_content_contains=marker,
        steps=(*_COMMON_STEPS, f"ktlint:{fmt.ktlint_version}"),
        license_header=license_header,
    )
    swift = FormatRuleSet(
        name="swift",
        targets=("**/*.swift",),
        exclude_if_content_contains=marker,
        license_header=license_header,
        license_delimiter=fmt.swift_license_delimiter,
    )
    return {"java": java, "kotlin": kotlin, "swift": swift}


class FormattingApplier:
    name = "formatting"

    def apply(
        self,
        module: Module,
        capabilities: frozenset[Capability],
        ctx: ApplyContext,
    ) -> ConcernOutcome:
        rule_sets = build_rule_sets(module, ctx)
        # Keyed by name: re-applying replaces the previous sets.
        module.config.formatting = {**module.config.formatting, **rule_sets}
        return ConcernOutcome.done(self.name, ", ".join(sorted(rule_sets)))
