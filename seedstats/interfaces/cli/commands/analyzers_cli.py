"""
Analyzers command: list the analyzers usable in job files.
"""

from __future__ import annotations

import argparse
import inspect

from seedstats.components.analyzers.registry_comp import ANALYZERS
from seedstats.interfaces.cli.ui import TableDisplay


def cmd_analyzers(args: argparse.Namespace) -> int:
    """Show every registered analyzer with its constructor arguments."""
    rows = {}
    for name, factory in sorted(ANALYZERS.items()):
        params = [p for p in inspect.signature(factory).parameters if p != "self"]
        rows[name] = ", ".join(params) if params else "-"
    TableDisplay.show_summary("Analyzers (name: arguments)", rows)
    return 0
