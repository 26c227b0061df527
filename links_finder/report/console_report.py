"""Plain-text report: one URL per line, then the summary line."""

from __future__ import annotations

from typing import List

import click

from links_finder.crawler.models import CrawlReport


def render_lines(report: CrawlReport) -> List[str]:
    return [*report.links, report.summary()]


def print_report(report: CrawlReport) -> None:
    for line in render_lines(report):
        click.echo(line)
