"""Matplotlib pie charts for the monthly summary and the category breakdown.

Figures are built with ``matplotlib.figure.Figure`` directly so they can be
embedded in Tk (``FigureCanvasTkAgg``) or saved headless.
"""

from __future__ import annotations

from typing import Mapping

from matplotlib.figure import Figure

from .reports import MonthlySummary

INCOME_COLOR = "#32cd32"
EXPENSE_COLOR = "#dc143c"


def _empty(fig: Figure, message: str) -> Figure:
    ax = fig.add_subplot(111)
    ax.axis("off")
    ax.text(0.5, 0.5, message, ha="center", va="center")
    return fig


def _plottable(values) -> bool:
    # Wedge sizes must be non-negative with a positive sum.
    return all(value >= 0 for value in values) and sum(values) > 0


def monthly_pie(summary: MonthlySummary, figsize=(4, 4)) -> Figure:
    fig = Figure(figsize=figsize)
    if summary.is_empty:
        return _empty(fig, "No data available for selected month")
    if not _plottable([summary.income, summary.expense]):
        return _empty(fig, "Cannot chart negative amounts")
    total = summary.income + summary.expense
    labels = [
        f"Income ({summary.income / total * 100:.1f}%)",
        f"Expenses ({summary.expense / total * 100:.1f}%)",
    ]
    ax = fig.add_subplot(111)
    ax.pie(
        [summary.income, summary.expense],
        labels=labels,
        colors=[INCOME_COLOR, EXPENSE_COLOR],
        startangle=90,
    )
    ax.set_aspect("equal")
    return fig


def category_pie(breakdown: Mapping[str, float], title: str = "", figsize=(5, 5)) -> Figure:
    fig = Figure(figsize=figsize)
    if not breakdown:
        return _empty(fig, "No expense data available")
    if not _plottable(list(breakdown.values())):
        return _empty(fig, "Cannot chart negative amounts")
    ax = fig.add_subplot(111)
    ax.pie(list(breakdown.values()), labels=list(breakdown.keys()), autopct="%1.1f%%", startangle=90)
    ax.set_aspect("equal")
    if title:
        ax.set_title(title)
    return fig
