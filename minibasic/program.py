"""Jump-addressable program structure.

A `Program` keeps its lines in file order in an immutable tuple and
indexes them by line number, so "resume from line N" is a dictionary
lookup followed by walking forward from that position.

Line numbers are not checked for uniqueness or order. When a number
appears more than once, the first occurrence is the one jumps land on;
program order is always file order, whatever the numbers say.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .ast import Line


class Program:
    def __init__(self, lines: Iterable[Line] = ()):
        self.lines: Tuple[Line, ...] = tuple(lines)
        self.positions: Dict[int, int] = {}
        for pos, line in enumerate(self.lines):
            self.positions.setdefault(line.number, pos)

    @classmethod
    def build(cls, lines: Iterable[Line]) -> 'Program':
        return cls(lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, pos: int) -> Line:
        return self.lines[pos]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return self.lines == other.lines

    def __repr__(self) -> str:
        return f"Program({list(self.lines)!r})"

    @property
    def line_numbers(self) -> List[int]:
        return [line.number for line in self.lines]

    def find_line(self, number: int) -> Optional[int]:
        """Position of the line numbered `number`, or None."""
        return self.positions.get(number)

    def from_line(self, number: int) -> Tuple[Line, ...]:
        """The line numbered `number` and everything after it."""
        pos = self.find_line(number)
        if pos is None:
            return ()
        return self.lines[pos:]
