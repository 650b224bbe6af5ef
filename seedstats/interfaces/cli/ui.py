#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent output across all commands.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from seedstats.components.stats.stats_report_comp import COUNT_HEADER, StatsReport

console = Console()
err_console = Console(stderr=True)

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_INFO = "cyan"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure the root logger once; records go to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def build_report_table(report: StatsReport) -> Table:
    """One column per analyzer, then Count and share of the total."""
    table = Table(title=report.title(), box=box.ROUNDED, show_header=True, header_style="bold")
    for title in report.analyzer_titles:
        table.add_column(title, style=COLOR_INFO, overflow="fold")
    table.add_column(COUNT_HEADER, justify="right")
    table.add_column("%", justify="right", style="dim")

    total = report.total()
    for labels, count in report.rows():
        share = f"{100 * count / total:.1f}" if total else "-"
        table.add_row(*(escape(label) for label in labels), str(count), share)
    return table


class TableDisplay:
    """
    Formatted tables for reports and summaries.
    """

    @staticmethod
    def show_report(report: StatsReport):
        """Display one stats report."""
        console.print(build_report_table(report))

    @staticmethod
    def show_summary(title: str, data: dict[str, Any], border_style: str = COLOR_INFO):
        """Display a summary table."""
        table = Table(title=title, box=box.ROUNDED, show_header=False, border_style=border_style)
        table.add_column("Metric", style="bold")
        table.add_column("Value")

        for key, value in data.items():
            table.add_row(key, str(value))

        console.print(table)


def show_spinner(message: str, task_fn: Callable, *args, **kwargs):
    """
    Show a spinner while executing a task.
    Returns the result of task_fn.
    """
    with err_console.status(f"[bold {COLOR_INFO}]{message}[/bold {COLOR_INFO}]"):
        return task_fn(*args, **kwargs)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {escape(message)}")


def print_error(message: str):
    """Print an error message."""
    err_console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}", highlight=False)


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]\\[i][/{COLOR_INFO}] {escape(message)}")
