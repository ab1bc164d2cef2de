"""Console output abstraction.

The release cache never prints anything. Callers that present release data
(the CLI) go through ConsoleProtocol, so commands can be tested with
MockConsole and rendered with Rich in production.
"""

from __future__ import annotations

from collections.abc import Sequence
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
    ERROR = auto()
    DIM = auto()
    HEADER = auto()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def fields(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        """Print a two-column name/value table.

        Args:
            title: Table title (e.g. "Node.js 4.9.1")
            rows: (name, value) pairs, printed in order
        """
        ...


class RichConsole:
    """Console implementation using Rich library."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
            Style.HEADER: "blue bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def error(self, message: str) -> None:
        from rich.text import Text

        self._console.print(Text.assemble(("error: ", "red bold"), message))

    def fields(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        from rich.table import Table

        table = Table(title=title, show_header=False, title_justify="left")
        table.add_column("field", style="cyan", no_wrap=True)
        table.add_column("value")
        for name, value in rows:
            table.add_row(name, value)
        self._console.print(table)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def fields(self, title: str, rows: Sequence[tuple[str, str]]) -> None:
        self.outputs.append(OutputRecord(title, Style.HEADER))
        for name, value in rows:
            self.outputs.append(OutputRecord(f"{name}: {value}", Style.DEFAULT))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
