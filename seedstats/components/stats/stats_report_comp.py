"""
Stats report - aggregated counts of one analyzer chain.

Rows are ordered naturally per label position: labels made of ASCII digits
compare by numeric value and come before every other label, which compare as
text. "2" < "10" < "apple".
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from seedstats.components.analyzers.analyzer_comp import CHAIN_TITLE_SEPARATOR, StatsKey

CSV_SEPARATOR = ", "
COUNT_HEADER = "Count"


def _label_sort_key(label: str) -> tuple[int, int, int, str]:
    if label.isascii() and label.isdigit():
        return (0, int(label), len(label), label)
    return (1, 0, 0, label)


def natural_sort_key(labels: Sequence[str]) -> tuple[tuple[int, int, int, str], ...]:
    """Sort key for a stats key; equal numbers with leading zeros sort after the short form ("1" < "01")."""
    return tuple(_label_sort_key(label) for label in labels)


@dataclass
class StatsReport:
    """Counts per stats key for one chain, plus the chain's analyzer titles."""

    analyzer_titles: list[str]
    data: Counter[StatsKey] = field(default_factory=Counter)

    @classmethod
    def from_counts(cls, analyzer_titles: Sequence[str], counts: Mapping[StatsKey, int]) -> StatsReport:
        return cls(list(analyzer_titles), Counter(counts))

    def add(self, key: StatsKey) -> None:
        """Count one occurrence of a stats key."""
        if len(key) != len(self.analyzer_titles):
            raise ValueError(f"Stats key {key!r} does not match {len(self.analyzer_titles)} analyzers")
        self.data[key] += 1

    def title(self) -> str:
        return CHAIN_TITLE_SEPARATOR.join(self.analyzer_titles)

    def total(self) -> int:
        return sum(self.data.values())

    def rows(self) -> list[tuple[StatsKey, int]]:
        """(labels, count) pairs in natural order."""
        return sorted(self.data.items(), key=lambda item: natural_sort_key(item[0]))

    def csv(self) -> str:
        """Header of titles and 'Count', then one line per stats key."""
        lines = [CSV_SEPARATOR.join([*self.analyzer_titles, COUNT_HEADER])]
        lines.extend(CSV_SEPARATOR.join([*labels, str(count)]) for labels, count in self.rows())
        return "\n".join(lines)
