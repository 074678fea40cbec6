from __future__ import annotations

import bisect
from dataclasses import dataclass, field


@dataclass(slots=True)
class SourceText:
    """Source text with a precomputed line index.

    Lines are identified by their 0-based index. ``get_line`` returns the
    line without its terminator.
    """

    text: str
    line_starts: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.line_starts = [0]
        for i, ch in enumerate(self.text):
            if ch == "\n":
                self.line_starts.append(i + 1)

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def line_index(self, offset: int) -> int:
        offset = max(0, min(offset, len(self.text)))
        return bisect.bisect_right(self.line_starts, offset) - 1

    def line_start(self, index: int) -> int:
        return self.line_starts[index]

    def line_end(self, index: int) -> int:
        if index + 1 < len(self.line_starts):
            return self.line_starts[index + 1] - 1
        return len(self.text)

    def get_line(self, index: int) -> str:
        line = self.text[self.line_start(index) : self.line_end(index)]
        return line.removesuffix("\r")
