"""Console output abstraction.

Services return reports; commands render them through ``ConsoleProtocol``.
``RichConsole`` is used at runtime, ``MockConsole`` captures output in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()  # concern applied, decision publish
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DIM = auto()  # skipped concerns, hints
    HEADER = auto()  # module section

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Styled console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def field(self, key: str, value: str, style: Style = Style.DEFAULT) -> None:
        """Print an indented ``key: value`` line."""
        ...


class RichConsole:
    """Console implementation backed by Rich."""

    _STYLES = {
        Style.DEFAULT: "",
        Style.SUCCESS: "green",
        Style.ERROR: "red bold",
        Style.WARNING: "yellow",
        Style.INFO: "cyan",
        Style.DIM: "dim",
        Style.HEADER: "blue bold",
    }

    def __init__(self, *, stderr: bool = False) -> None:
        # Rich is only needed once something is rendered.
        from rich.console import Console

        self._console = Console(stderr=stderr, highlight=False)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._STYLES.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def success(self, message: str) -> None:
        self._console.print(f"[green]OK[/green] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {message}")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[cyan]info:[/cyan] {message}")

    def header(self, message: str) -> None:
        from rich.rule import Rule

        self._console.print(Rule(f"[blue bold]{message}[/blue bold]", align="left"))

    def field(self, key: str, value: str, style: Style = Style.DEFAULT) -> None:
        from rich.text import Text

        line = Text("  ")
        line.append(f"{key}: ", style="bold")
        line.append(value, style=self._STYLES.get(style, ""))
        self._console.print(line)


@dataclass(frozen=True, slots=True)
class OutputRecord:
    message: str
    style: Style


@dataclass
class MockConsole:
    """Console that records output instead of printing it."""

    outputs: list[OutputRecord] = field(default_factory=list[OutputRecord])

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def field(self, key: str, value: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(f"  {key}: {value}", style))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
