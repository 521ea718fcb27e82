"""Splitting a list of strings into fixed-size chunks."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["SplitResult", "Splitter"]


@dataclass
class SplitResult:
    """One chunk of the split data."""

    item: list[str] = field(default_factory=list)


@dataclass
class Splitter:
    """Splits data into chunks of split_count items, the last one possibly shorter."""

    split_count: int
    data: list[str]

    def get_split_result(self) -> list[SplitResult]:
        if self.split_count <= 0:
            raise ValueError("split_count must be positive")
        return [
            SplitResult(list(self.data[start : start + self.split_count]))
            for start in range(0, len(self.data), self.split_count)
        ]