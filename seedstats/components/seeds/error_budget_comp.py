"""
Error budget for seed generation.

Counts failed generation attempts, keeps a bounded number of their messages,
and decides when sampling must abort.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from seedstats.helpers.exceptions import CorpusExhaustedError

DEFAULT_ERROR_MESSAGE_LIMIT = 10
DEFAULT_TOLERATED_ERRORS_FLOOR = 10
DEFAULT_TOLERATED_ERRORS_RATIO = 0.1


def default_tolerated_errors(
    sample_size: int,
    floor: int = DEFAULT_TOLERATED_ERRORS_FLOOR,
    ratio: float = DEFAULT_TOLERATED_ERRORS_RATIO,
) -> int:
    """
    Tolerated failures when the caller gave none: proportional to sample_size with a floor.

    Example:
        >>> default_tolerated_errors(50)
        10
        >>> default_tolerated_errors(1000)
        100
    """
    return max(floor, int(sample_size * ratio))


@dataclass
class ErrorBudget:
    """Mutable failure accounting owned by one seed corpus."""

    tolerated_errors: int
    message_limit: int = DEFAULT_ERROR_MESSAGE_LIMIT
    failure_count: int = 0
    messages: list[str] = field(default_factory=list)

    @property
    def exceeded(self) -> bool:
        return self.failure_count > self.tolerated_errors

    def record(self, message: str) -> None:
        """Count one failure; keep its message while under the limit."""
        if len(self.messages) < self.message_limit:
            self.messages.append(message)
        self.failure_count += 1

    def check(self) -> None:
        """
        Raise once the failure count exceeds the tolerated amount.

        Raises:
            CorpusExhaustedError: With the retained messages and the total count
        """
        if self.exceeded:
            raise CorpusExhaustedError(self.messages, self.failure_count, self.tolerated_errors)
