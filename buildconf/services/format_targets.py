"""Resolve the files a formatting rule set applies to.

Generated sources are recognised by their content, not their path: any file
containing the rule set's marker is left out.
"""

from __future__ import annotations

import fnmatch
from pathlib import Path

from buildconf.core.model import FormatRuleSet

__all__ = ["resolve_targets", "contains_marker"]


def contains_marker(path: Path, marker: str) -> bool:
    try:
        return marker in path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False


def _matches_any(rel: Path, patterns: tuple[str, ...]) -> bool:
    # fnmatch lets `*` cross directory separators, so `dir/**` covers the subtree.
    posix = rel.as_posix()
    return any(fnmatch.fnmatchcase(posix, pattern) for pattern in patterns)


def resolve_targets(rule_set: FormatRuleSet, base_dir: Path) -> list[Path]:
    """List files under ``base_dir`` selected by ``rule_set``, sorted."""
    selected: set[Path] = set()
    for pattern in rule_set.targets:
        for path in base_dir.glob(pattern):
            if not path.is_file():
                continue
            rel = path.relative_to(base_dir)
            if _matches_any(rel, rule_set.target_excludes):
                continue
            marker = rule_set.exclude_if_content_contains
            if marker is not None and contains_marker(path, marker):
                continue
            selected.add(path)
    return sorted(selected)
