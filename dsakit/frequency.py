"""Element frequency analysis."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FrequencyReport:
    """Counts of each element and the elements seen most and least often."""

    counts: dict[Hashable, int]
    max_count: int
    most_frequent: list[Hashable] = field(default_factory=list)
    min_count: int = 0
    least_frequent: list[Hashable] = field(default_factory=list)

    def __str__(self) -> str:
        lines = ["Element - Frequency"]
        lines.extend(f"{item} - {count}" for item, count in self.counts.items())
        lines.append("")
        most = " ".join(str(x) for x in self.most_frequent)
        least = " ".join(str(x) for x in self.least_frequent)
        lines.append(f"Highest Frequency Element(s) (Count: {self.max_count}): {most}")
        lines.append(f"Lowest Frequency Element(s) (Count: {self.min_count}): {least}")
        return "\n".join(lines)


def analyze_frequencies(items: Iterable[Hashable]) -> FrequencyReport:
    """Count ``items`` and find the elements with the highest and lowest counts.

    Elements are reported in order of first appearance.
    """
    counts = dict(Counter(items))
    if not counts:
        raise ValueError("cannot analyse frequencies of an empty collection")
    max_count = max(counts.values())
    min_count = min(counts.values())
    return FrequencyReport(
        counts=counts,
        max_count=max_count,
        most_frequent=[x for x, c in counts.items() if c == max_count],
        min_count=min_count,
        least_frequent=[x for x, c in counts.items() if c == min_count],
    )