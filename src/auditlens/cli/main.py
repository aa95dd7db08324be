"""AsyncClick CLI for exploring audit report findings.

Provides user-facing commands:
- show: Render the findings view as markdown
- counts: Print per-severity counts
- json: Print visible findings as JSON
- export: Write the findings view as an HTML document
"""

import json
import logging
import sys

import asyncclick as click
import structlog

from auditlens.core.output import format_counts, format_finding_brief
from auditlens.core.reporting import NO_FINDINGS_HEADING, ResultsRenderer, export_html
from auditlens.core.severity import FILTER_LEVELS
from auditlens.core.view import ResultsView

logger = structlog.get_logger()

FILTER_CHOICE = click.Choice([level.value for level in FILTER_LEVELS], case_sensitive=False)


def _stderr_logger(*args) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(verbose: bool = False) -> None:
    """Send structlog output to stderr, WARNING and above unless verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
    )


def read_report(source: str) -> str:
    """Read a report payload from a file path, or stdin for "-"."""
    if source == "-":
        return click.get_text_stream("stdin").read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def build_view(
    ctx: click.Context,
    source: str,
    level: str = "All",
    expand: tuple[str, ...] = (),
    expand_all: bool = False,
) -> ResultsView:
    """Load a report into a ResultsView and apply CLI selections.

    Exits with status 1 if the report cannot be read.
    """
    try:
        report = read_report(source)
    except OSError as e:
        logger.warning("report_read_failed", source=source, error=str(e))
        click.echo(f"[-] Could not read report {source}: {e}")
        ctx.exit(1)

    view = ResultsView(report)
    view.set_filter(level)
    if expand_all:
        view.expand_all()
    for finding_id in expand:
        if not view.is_expanded(finding_id):
            view.toggle(finding_id)
    return view


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debug events to stderr.")
@click.pass_context
async def cli(ctx, verbose: bool):
    """auditlens - Explore findings in security audit reports"""
    ctx.ensure_object(dict)
    configure_logging(verbose)


@cli.command()
@click.argument("report")
@click.option("--filter", "-f", "level", type=FILTER_CHOICE, default="All",
              help="Only show findings of this severity.")
@click.option("--expand", "-e", multiple=True, help="Finding id to expand (repeatable).")
@click.option("--expand-all", is_flag=True, help="Expand every visible finding.")
@click.pass_context
async def show(ctx, report: str, level: str, expand: tuple[str, ...], expand_all: bool):
    """Render the findings in REPORT (a path, or - for stdin).

    Examples:
        auditlens show audit.txt
        auditlens show audit.txt -f critical --expand-all
        cat audit.txt | auditlens show - -e high-0
    """
    view = build_view(ctx, report, level, expand, expand_all)
    click.echo(ResultsRenderer().render(view))


@cli.command()
@click.argument("report")
@click.pass_context
async def counts(ctx, report: str):
    """Print finding counts for every severity filter."""
    view = build_view(ctx, report)

    if view.is_empty:
        click.echo(f"[+] {NO_FINDINGS_HEADING}")
        return

    click.echo(f"[*] {format_counts(view.counts)}")
    for finding in view.findings:
        click.echo(f"  {format_finding_brief(finding)}")


@cli.command("json")
@click.argument("report")
@click.option("--filter", "-f", "level", type=FILTER_CHOICE, default="All",
              help="Only include findings of this severity.")
@click.pass_context
async def json_command(ctx, report: str, level: str):
    """Print the visible findings in REPORT as JSON."""
    view = build_view(ctx, report, level)
    payload = {
        "filter": view.selection.active_filter.value,
        "no_vulnerabilities": view.is_empty,
        "counts": {lvl.value: count for lvl, count in view.counts.items()},
        "findings": [f.model_dump(mode="json") for f in view.visible],
    }
    click.echo(json.dumps(payload, indent=2))


@cli.command()
@click.argument("report")
@click.argument("output")
@click.option("--filter", "-f", "level", type=FILTER_CHOICE, default="All",
              help="Only include findings of this severity.")
@click.option("--expand-all", is_flag=True, help="Include detail panels for every finding.")
@click.pass_context
async def export(ctx, report: str, output: str, level: str, expand_all: bool):
    """Write the findings in REPORT to OUTPUT as HTML."""
    view = build_view(ctx, report, level, expand_all=expand_all)

    try:
        path = export_html(ResultsRenderer().render(view), output)
    except OSError as e:
        click.echo(f"[-] Could not write {output}: {e}")
        ctx.exit(1)

    click.echo(f"[+] Exported {len(view.visible)} finding(s) to {path}")


def main():
    cli()
