"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations

from collections.abc import Sequence


class SeedStatsError(Exception):
    """Base class for every error surfaced to seedstats callers."""


class SeedGenerationError(SeedStatsError):
    """Raised by a generator when a single generation attempt fails."""


class CorpusExhaustedError(SeedStatsError):
    """Raised when seed generation failed more often than tolerated."""

    def __init__(self, messages: Sequence[str], failure_count: int, tolerated_errors: int) -> None:
        self.messages = list(messages)
        self.failure_count = failure_count
        self.tolerated_errors = tolerated_errors
        super().__init__(self._format())

    def _format(self) -> str:
        lines = [
            f"Aborting: seed generation failed {self.failure_count} times "
            f"(tolerated: {self.tolerated_errors})"
        ]
        lines.extend(f"- {message}" for message in self.messages)
        omitted = self.failure_count - len(self.messages)
        if omitted > 0:
            lines.append(f"... and {omitted} more")
        return "\n".join(lines)


class SeedStorageError(SeedStatsError):
    """Raised when the persistent seed storage cannot be read, written or cleaned."""


class InvalidConfigurationError(SeedStatsError):
    """Raised when a stats request is malformed, before any seed is generated."""


class AnalyzerError(SeedStatsError):
    """Raised when an analyzer breaks its contract (e.g. returns no labels)."""


class ReportExportError(SeedStatsError):
    """Raised when stats reports cannot be written to disk."""
