"""daygrid CLI - per-day calendar index."""

import json
import logging
import sys
from datetime import date

import click

from .adapters.json_file import JsonFileSource, SourceError
from .config import load_config
from .core.daykey import month_days
from .core.display import format_calendar_date, format_date, format_item_line
from .core.index import unique_for_display
from .core.indicators import indicators_for
from .workflows import agenda as build_agenda
from .workflows import day_summary, load_index, month_summary


def _load(ctx: click.Context):
    """Build the index from the files chosen on the command line or in config."""
    opts = ctx.obj
    config = opts["config"]
    source = JsonFileSource(opts["posts"] or config.posts_file, opts["events"] or config.events_file)
    try:
        return load_index(source, config, list(opts["categories"]))
    except SourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _parse_month(value: str) -> tuple[int, int]:
    try:
        year_str, month_str = value.split("-")
        year, month = int(year_str), int(month_str)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM, got {value!r}")
    if not 1 <= month <= 12:
        raise click.BadParameter(f"month out of range in {value!r}")
    return year, month


def _echo_items(items) -> None:
    for item in unique_for_display(items):
        click.echo(f"  {format_item_line(item)}")


@click.group()
@click.version_option(package_name="daygrid")
@click.option("--posts", type=click.Path(dir_okay=False), help="Posts JSON file")
@click.option("--events", type=click.Path(dir_okay=False), help="Calendar events JSON file")
@click.option("--category", "categories", multiple=True, help="Include category (repeatable)")
@click.option("-v", "--verbose", is_flag=True, help="Log dropped and duplicate records")
@click.pass_context
def main(ctx, posts, events, categories, verbose):
    """daygrid - per-day calendar index for posts and events."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {
        "config": load_config(),
        "posts": posts,
        "events": events,
        "categories": [c.lower() for c in categories],
    }


@main.command()
@click.argument("day", required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def day(ctx, day: str | None, as_json: bool):
    """Show items for DAY (YYYY-MM-DD, default today)."""
    if day:
        try:
            target = date.fromisoformat(day)
        except ValueError:
            raise click.BadParameter(f"expected YYYY-MM-DD, got {day!r}", param_hint="DAY")
    else:
        target = ctx.obj["config"].day_keys().today()
    index = _load(ctx)

    if as_json:
        click.echo(json.dumps(day_summary(index, target), indent=2))
        return

    items = list(index.events_for_date(target))
    click.echo(f"### {format_date(target)}")
    if not items:
        click.echo("No events.")
        return
    indicators = indicators_for(items)
    click.echo(f"Indicators: {' '.join(indicators.colors)}")
    _echo_items(items)


@main.command()
@click.argument("month")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def month(ctx, month: str, as_json: bool):
    """Show the month counter and day grid for MONTH (YYYY-MM)."""
    year, month_num = _parse_month(month)
    index = _load(ctx)

    if as_json:
        click.echo(json.dumps(month_summary(index, year, month_num), indent=2))
        return

    click.echo(f"### {date(year, month_num, 1).strftime('%B %Y')}: {index.month_count(date(year, month_num, 1))} events")
    for d in month_days(year, month_num):
        items = index.events_for_date(d)
        if not items:
            continue
        dots = " ".join(indicators_for(items).colors)
        click.echo(f"  {format_calendar_date(d)}  {len(items):3}  {dots}")


@main.command()
@click.option("--oldest-first", is_flag=True, help="Sort ascending by date")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def agenda(ctx, oldest_first: bool, as_json: bool):
    """Show every day that has items."""
    index = _load(ctx)

    if as_json:
        click.echo(json.dumps(build_agenda(index, descending=not oldest_first), indent=2))
        return

    groups = index.grouped_by_day(descending=not oldest_first)
    if not groups:
        click.echo("No events.")
        return

    for i, (key, items) in enumerate(groups):
        if i:
            click.echo()
        click.echo(f"### {format_date(key)}")
        _echo_items(items)


if __name__ == "__main__":
    main()
