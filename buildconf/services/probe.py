"""Capability probe.

Capabilities are derived from the plugin ids the host applied to a module plus
any tags the manifest declares explicitly. The result is a frozenset computed
from frozen module fields, so probing twice always yields the same answer.
"""

from __future__ import annotations

from buildconf.core.model import Capability, Module

__all__ = ["probe", "PLUGIN_CAPABILITIES", "parse_capability"]

PLUGIN_CAPABILITIES: dict[str, frozenset[Capability]] = {
    "com.android.base": frozenset({Capability.MOBILE}),
    "com.android.application": frozenset({Capability.MOBILE}),
    "com.android.library": frozenset({Capability.MOBILE}),
    "org.jetbrains.kotlin.multiplatform": frozenset({Capability.MULTI_TARGET}),
    # `application` applies `distribution` under the hood.
    "application": frozenset({Capability.PRODUCES_DISTRIBUTION, Capability.JVM}),
    "distribution": frozenset({Capability.PRODUCES_DISTRIBUTION}),
    "java": frozenset({Capability.JVM}),
    "java-library": frozenset({Capability.JVM}),
    "org.jetbrains.kotlin.jvm": frozenset({Capability.JVM}),
}


def parse_capability(tag: str) -> Capability | None:
    """Parse a manifest tag such as ``"multi-target"``. Unknown tags yield None."""
    normalized = tag.strip().lower().replace("-", "_").upper()
    try:
        return Capability[normalized]
    except KeyError:
        return None


def probe(module: Module) -> frozenset[Capability]:
    """Return the capabilities of ``module``; an empty set is a valid answer."""
    found: set[Capability] = set()
    for plugin in module.plugins:
        found |= PLUGIN_CAPABILITIES.get(plugin, frozenset())
    for tag in module.declared_capabilities:
        capability = parse_capability(tag)
        if capability is not None:
            found.add(capability)
    return frozenset(found)
