"""
Plain-text report helpers shared by the analyses.
"""
from __future__ import annotations

import math
from typing import Iterable, List, Optional


def money(amount: float) -> str:
    return f"${amount:.2f}"


def round_half_up(amount: float) -> int:
    return int(math.floor(amount + 0.5))


def units(amount: float) -> str:
    """Total rendered as a rounded unit count with thousands separators."""
    return f"{round_half_up(amount):,}"


def ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def percent(numerator: float, denominator: float) -> float:
    return ratio(numerator, denominator) * 100


def growth(current: float, previous: Optional[float]) -> str:
    if previous is None or previous == 0:
        return "N/A"
    change = (current - previous) / previous * 100
    return f"{'+' if change >= 0 else ''}{change:.1f}%"


class Report:
    """Collects report lines; `render()` joins them for printing."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def line(self, text: str = "") -> "Report":
        self.lines.append(text)
        return self

    def section(self, title: str) -> "Report":
        self.lines.append("")
        self.lines.append(f"=== {title} ===")
        return self

    def table(self, header: str, rows: Iterable[str]) -> "Report":
        self.lines.append(header)
        self.lines.append("|".join("-" * len(cell) for cell in header.split("|")))
        self.lines.extend(rows)
        return self

    def render(self) -> str:
        return "\n".join(self.lines).lstrip("\n")
