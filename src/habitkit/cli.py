"""habitkit CLI - recurring checklist."""

import json
import logging
import sys
from dataclasses import replace
from datetime import date

import click

from .checklist import Checklist, get_checklist
from .config import Config, load_config
from .core.days import DAY_NAMES, day_key, parse_day
from .core.recurrence import ChecklistItem, ItemDraft, Recurrence
from .core.schedule import Occurrence
from .errors import HabitkitError

RECURRENCE_CHOICES = [r.value for r in Recurrence]
FULL_DAY_NAMES = [
    "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
]


def _parse_date_option(value: str | None) -> date | None:
    if value is None:
        return None
    try:
        return parse_day(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}") from None


def _parse_days_option(value: str) -> list[int]:
    """Parse "Mon,Wed" or "1,3" into Sun=0 weekday indices."""
    lookup = {name.lower(): i for i, name in enumerate(DAY_NAMES)}
    lookup.update({name: i for i, name in enumerate(FULL_DAY_NAMES)})
    days = []
    for part in value.split(","):
        part = part.strip().lower()
        if not part:
            continue
        if part.isdigit():
            days.append(int(part))
        elif part in lookup:
            days.append(lookup[part])
        else:
            raise click.BadParameter(f"Unknown weekday: {part}")
    return days


def _resolve_recurrence(repeat: str | None, days: str | None, every: int | None) -> Recurrence | None:
    """Pick the recurrence from explicit --repeat or from --days / --every."""
    if repeat:
        return Recurrence(repeat)
    if days is not None:
        return Recurrence.SPECIFIC_DAYS
    if every is not None:
        return Recurrence.EVERY_N_DAYS
    return None


def _open() -> tuple[Config, Checklist]:
    config = load_config()
    return config, get_checklist(config)


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _item_json(item: ChecklistItem) -> dict:
    data = item.to_dict()
    data["description"] = item.describe()
    return data


def _show_occurrences(
    occurrences: list[Occurrence],
    checklist: Checklist,
    config: Config,
    as_json: bool,
    empty_msg: str,
) -> None:
    """Shared display for day-grouped views."""
    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "date": day_key(o.day),
                        "id": o.item.id,
                        "title": o.item.title,
                        "completed": checklist.is_completed(o.item.id, o.day),
                    }
                    for o in occurrences
                ],
                indent=2,
            )
        )
        return

    if not occurrences:
        click.echo(empty_msg)
        return

    current_day = None
    for o in occurrences:
        if o.day != current_day:
            if current_day is not None:
                click.echo()
            click.echo(f"### {o.day.strftime(config.date_format)}")
            current_day = o.day
        click.echo(f"  {o.item.title}  ({o.item.id})")


@click.group()
@click.version_option(package_name="habitkit")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """habitkit - recurring checklist."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("title")
@click.option("--repeat", "-r", type=click.Choice(RECURRENCE_CHOICES), default=None,
              help="Recurrence kind (default: daily, or inferred from --days/--every)")
@click.option("--days", default=None,
              help="Weekdays for specific-days, e.g. Mon,Wednesday (empty for none)")
@click.option("--every", type=int, default=None, help="Interval for every-n-days (2-30)")
@click.option("--on", "on_date", default=None, help="Start date (YYYY-MM-DD), defaults to today")
def add(title: str, repeat: str | None, days: str | None, every: int | None, on_date: str | None):
    """Add a checklist item."""
    _, checklist = _open()
    recurrence = _resolve_recurrence(repeat, days, every) or Recurrence.DAILY
    draft = ItemDraft(
        title=title,
        recurrence=recurrence,
        specific_days=_parse_days_option(days) if days is not None else [],
        every_n_days=every if every is not None else 2,
        start_date=_parse_date_option(on_date),
    )
    try:
        item = checklist.add_item(draft)
    except HabitkitError as e:
        _fail(e)
    click.echo(f"Added {item.id}: {item.title} ({item.describe()})")


@main.command()
@click.argument("item_id")
@click.option("--title", default=None, help="New title")
@click.option("--repeat", "-r", type=click.Choice(RECURRENCE_CHOICES), default=None,
              help="New recurrence kind")
@click.option("--days", default=None,
              help="Weekdays for specific-days, e.g. Mon,Wednesday (empty for none)")
@click.option("--every", type=int, default=None, help="Interval for every-n-days (2-30)")
@click.option("--on", "on_date", default=None, help="New start date (YYYY-MM-DD)")
def edit(item_id: str, title: str | None, repeat: str | None, days: str | None,
         every: int | None, on_date: str | None):
    """Edit a checklist item."""
    _, checklist = _open()
    try:
        item = checklist.get_item(item_id)
        recurrence = _resolve_recurrence(repeat, days, every)
        start = _parse_date_option(on_date) or item.start_date
        if recurrence is None:
            recurrence = Recurrence(item.recurrence)
        draft = ItemDraft(
            title=title if title is not None else item.title,
            recurrence=recurrence,
            specific_days=(
                _parse_days_option(days) if days is not None else list(item.specific_days or [])
            ),
            every_n_days=every if every is not None else (item.every_n_days or 2),
            start_date=start,
        )
        draft.validate()
        updated = replace(item, title=draft.title.strip(), start_date=start).with_recurrence(
            recurrence, draft.specific_days, draft.every_n_days
        )
        updated = checklist.update_item(updated)
    except (HabitkitError, ValueError) as e:
        _fail(e)
    click.echo(f"Updated {updated.id}: {updated.title} ({updated.describe()})")


@main.command()
@click.argument("item_id")
def rm(item_id: str):
    """Delete a checklist item and its completions."""
    _, checklist = _open()
    try:
        item = checklist.get_item(item_id)
        checklist.delete_item(item.id)
    except HabitkitError as e:
        _fail(e)
    click.echo(f"Deleted {item.id}: {item.title}")


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_items(as_json: bool):
    """List all checklist items."""
    _, checklist = _open()
    items = checklist.items

    if as_json:
        click.echo(json.dumps([_item_json(item) for item in items], indent=2))
        return

    if not items:
        click.echo("No checklist items. Add one with 'habitkit add'.")
        return

    for item in items:
        click.echo(f"{item.id}  {item.title}  [{item.describe()}]")


def _show_day(
    items: list[ChecklistItem],
    target: date,
    checklist: Checklist,
    config: Config,
    as_json: bool,
) -> None:
    """Checklist for one day with live completion state."""
    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "id": item.id,
                        "title": item.title,
                        "completed": checklist.is_completed(item.id, target),
                    }
                    for item in items
                ],
                indent=2,
            )
        )
        return

    click.echo(f"### {target.strftime(config.date_format)}")
    if not items:
        click.echo("No items for this day.")
        return

    for item in items:
        completed = checklist.is_completed(item.id, target)
        if completed and not config.show_completed:
            continue
        mark = "x" if completed else " "
        click.echo(f"  [{mark}] {item.title}  ({item.id})")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to show (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def day(target_date: str | None, as_json: bool):
    """Show items due on a date with their completion state."""
    config, checklist = _open()
    target = _parse_date_option(target_date) or checklist.today_date()
    _show_day(checklist.get_items_for_date(target), target, checklist, config, as_json)


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Reference day (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def today(target_date: str | None, as_json: bool):
    """Show today's items."""
    config, checklist = _open()
    target = _parse_date_option(target_date) or checklist.today_date()
    items = [o.item for o in checklist.today(target)]
    _show_day(items, target, checklist, config, as_json)


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Reference day (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def upcoming(target_date: str | None, as_json: bool):
    """Show the next occurrence of each item through the end of the year."""
    config, checklist = _open()
    occurrences = checklist.upcoming(_parse_date_option(target_date))
    _show_occurrences(occurrences, checklist, config, as_json, "Nothing upcoming this year.")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Reference day (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def overdue(target_date: str | None, as_json: bool):
    """Show the latest missed occurrence of each item in the last 30 days."""
    config, checklist = _open()
    occurrences = checklist.overdue(_parse_date_option(target_date))
    _show_occurrences(occurrences, checklist, config, as_json, "Nothing overdue.")


@main.command()
@click.argument("item_id")
@click.option("--date", "-d", "target_date", default=None,
              help="Day of the occurrence (YYYY-MM-DD), defaults to today")
def done(item_id: str, target_date: str | None):
    """Toggle completion of an item on a day."""
    _, checklist = _open()
    target = _parse_date_option(target_date) or checklist.today_date()
    try:
        item = checklist.get_item(item_id)
    except HabitkitError as e:
        _fail(e)
    completed = checklist.toggle_completion(item.id, target)
    state = "done" if completed else "not done"
    click.echo(f"{item.title} marked {state} for {day_key(target)}")


if __name__ == "__main__":
    main()
