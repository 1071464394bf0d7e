from dataclasses import dataclass


@dataclass(frozen=True)
class LineSpan:
    """Half-open range of 0-based buffer line indices: [start, end)."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid line span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start
