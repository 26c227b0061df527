"""links_finder.report: вывод результатов обхода в консоль и в JSON."""

from __future__ import annotations

from links_finder.report.console_report import print_report, render_lines
from links_finder.report.json_report import render_json

__all__ = ["print_report", "render_lines", "render_json"]
