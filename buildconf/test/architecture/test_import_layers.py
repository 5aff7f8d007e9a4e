from __future__ import annotations

from ._utils import offenders, package_root


def test_core_depends_on_nothing_above_it() -> None:
    found = offenders(
        package_root() / "core",
        ("buildconf.services", "buildconf.cli", "buildconf.output", "typer", "rich"),
    )
    assert not found, "core dependency violations:\n" + "\n".join(found)


def test_services_do_not_import_cli_or_output() -> None:
    found = offenders(
        package_root() / "services",
        ("buildconf.cli", "buildconf.output", "typer", "rich"),
    )
    assert not found, "services dependency violations:\n" + "\n".join(found)


def test_rich_only_in_output_layer() -> None:
    root = package_root()
    found = [
        line
        for sub in ("core", "services", "cli")
        for line in offenders(root / sub, ("rich",))
    ]
    assert not found, "rich used outside buildconf.output:\n" + "\n".join(found)
