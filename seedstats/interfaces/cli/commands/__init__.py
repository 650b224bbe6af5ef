"""CLI command handlers."""

from .analyzers_cli import cmd_analyzers
from .clean_cli import cmd_clean
from .stats_cli import cmd_stats

__all__ = ["cmd_analyzers", "cmd_clean", "cmd_stats"]
