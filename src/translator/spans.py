from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) into the source text.

    ``literal`` is the text of the span captured when the span was built, so a
    diagnostic stays renderable even if the buffer it came from changes.
    """

    start: int
    end: int
    literal: str = ""

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is after end {self.end}")

    @classmethod
    def of(cls, src: str, start: int, end: int) -> "Span":
        return cls(start=start, end=end, literal=src[start:end])

    def __len__(self) -> int:
        return self.end - self.start

    def format(self) -> str:
        return f"{self.start}..{self.end}"
