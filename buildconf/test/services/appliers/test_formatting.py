"""Tests for the formatting applier."""

from __future__ import annotations

import copy

from buildconf.core.config import GENERATED_CODE_MARKER
from buildconf.core.model import FormatRuleSet
from buildconf.services.appliers import ApplyContext, FormattingApplier
from buildconf.test.conftest import ModuleFactory


class TestFormattingApplier:
    def test_module_rule_sets(self, make_module: ModuleFactory, ctx: ApplyContext) -> None:
        module = make_module()

        outcome = FormattingApplier().apply(module, frozenset(), ctx)

        assert outcome.applied
        rules = module.config.formatting
        assert set(rules) == {"java", "kotlin", "swift"}
        assert rules["kotlin"].targets == ("src/**/*.kt",)
        assert rules["kotlin"].target_excludes == ("src/test/projects/**",)
        assert rules["java"].exclude_if_content_contains == GENERATED_CODE_MARKER
        assert rules["swift"].license_delimiter == "(@propertyWrapper|public |import |enum )"
        assert all(r.line_endings == "UNIX" for r in rules.values())
        assert rules["java"].license_header == module.root_dir / "gradle/license-header.txt"

    def test_root_project_targets_build_support(
        self, make_module: ModuleFactory, ctx: ApplyContext
    ) -> None:
        root = make_module("wire", root=True)

        FormattingApplier().apply(root, frozenset(), ctx)

        rules = root.config.formatting
        assert set(rules) == {"java", "kotlin"}
        assert rules["java"].targets == ("build-support/settings/src/**/*.java",)
        assert rules["kotlin"].targets == ("build-support/src/**/*.kt",)
        assert rules["kotlin"].exclude_if_content_contains is None

    def test_steps_use_formatter_versions(
        self, make_module: ModuleFactory, ctx: ApplyContext
    ) -> None:
        module = make_module()
        FormattingApplier().apply(module, frozenset(), ctx)
        assert "googleJavaFormat:1.27.0" in module.config.formatting["java"].steps
        assert "ktlint:0.48.2" in module.config.formatting["kotlin"].steps

    def test_idempotent(self, make_module: ModuleFactory, ctx: ApplyContext) -> None:
        module = make_module()
        applier = FormattingApplier()

        applier.apply(module, frozenset(), ctx)
        once = copy.deepcopy(module.config)
        applier.apply(module, frozenset(), ctx)

        assert module.config == once
        assert len(module.config.formatting) == 3

    def test_replaces_same_name(self, make_module: ModuleFactory, ctx: ApplyContext) -> None:
        module = make_module()
        module.config.formatting["java"] = FormatRuleSet(name="java", targets=("old/**",))
        module.config.formatting["markdown"] = FormatRuleSet(name="markdown", targets=("*.md",))

        FormattingApplier().apply(module, frozenset(), ctx)

        assert module.config.formatting["java"].targets == ("src/**/*.java",)
        assert "markdown" in module.config.formatting
