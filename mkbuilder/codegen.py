from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass
class CodeBuilder:
    """
    Line accumulator for Objective-C previews.
    Method bodies arrive as ready-made lines; ``braced`` wraps them in ``{``/``}``
    and shifts them one level right. Blank lines never carry indentation.
    """
    indent: str = "  "
    lines: list[str] = field(default_factory=list)
    depth: int = 0

    def write(self, line: str = "") -> None:
        self.lines.append(self.indent * self.depth + line if line else "")

    def extend(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    @contextmanager
    def block(self) -> Iterator[None]:
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    @contextmanager
    def braced(self, opener: str | None = None) -> Iterator[None]:
        """``opener`` on its own line, then a ``{ ... }`` body one level in."""
        if opener is not None:
            self.write(opener)
        self.write("{")
        with self.block():
            yield
        self.write("}")

    def render(self) -> str:
        return "\n".join(self.lines) + "\n"
