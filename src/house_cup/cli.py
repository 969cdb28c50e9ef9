"""CLI entry point for the scoring engine.

A thin host around the engine: it reads a JSON snapshot exported from the
competition's storage and prints scoreboards.  Nothing is written back.
"""

from __future__ import annotations

import click

from .core.config import Settings, load_settings
from .core.enums import ALL_SCOPE, EventType
from .core.errors import HouseCupError
from .core.models import CompetitionSnapshot
from .observability.logger import get_logger, new_run_id, setup_logging

log = get_logger(__name__)


def _bootstrap(config: str | None) -> Settings:
    settings = load_settings(config_path=config)
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    new_run_id()
    return settings


def _load(path: str) -> CompetitionSnapshot:
    try:
        return CompetitionSnapshot.from_json_file(path)
    except HouseCupError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("--config", default=None, help="Config file path (TOML)")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """House Cup scoring engine."""
    try:
        ctx.obj = _bootstrap(config)
    except HouseCupError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--scope", default=ALL_SCOPE, help="'all' or a category id")
def scoreboard(snapshot: str, scope: str) -> None:
    """Print the house ranking."""
    from .scoring.scoreboard import Scoreboard

    board = Scoreboard.build(_load(snapshot))
    log.info(
        "scoreboard_built",
        scope=scope,
        houses=len(board.houses),
        skipped_entries=board.scores.skipped_entries,
        fingerprint=board.fingerprint,
    )
    for entry in board.house_ranking(scope):
        click.echo(f"{entry.position:>3}. {entry.name:<24} {entry.points:>6}")
    if board.scores.skipped_entries:
        click.echo(
            f"({board.scores.skipped_entries} result entries skipped: "
            "stale references)",
            err=True,
        )


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.option("--scope", default=ALL_SCOPE, help="'all' or a category id")
def players(snapshot: str, scope: str) -> None:
    """Print the individual standings."""
    from .scoring.scoreboard import Scoreboard

    board = Scoreboard.build(_load(snapshot))
    for entry in board.player_ranking(scope):
        click.echo(f"{entry.position:>3}. {entry.name:<24} {entry.points:>6}")


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def events(settings: Settings, snapshot: str) -> None:
    """List recent and upcoming events."""
    from .competition.timeline import recent_events, upcoming_events

    data = _load(snapshot)
    click.echo("Recent:")
    for event in recent_events(data.events, settings.scoring.recent_events_limit):
        click.echo(f"  {event.name} [{event.category_id}]")
    click.echo("Upcoming:")
    for event in upcoming_events(data.events):
        click.echo(f"  {event.name} [{event.category_id}] {event.status.value}")


@main.command()
@click.argument("category_id")
@click.option(
    "--type",
    "event_type",
    type=click.Choice([t.value for t in EventType]),
    default=EventType.INDIVIDUAL.value,
    help="Event type",
)
@click.pass_obj
def schedule(settings: Settings, category_id: str, event_type: str) -> None:
    """Print the placement points new events in a category start with."""
    points = settings.scoring.schedule_for(category_id, event_type)
    for placement in sorted(points):
        click.echo(f"{placement:>3}. {points[placement]:>6}")


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@click.argument("event_id")
@click.pass_obj
def validate(settings: Settings, snapshot: str, event_id: str) -> None:
    """Validate an event's recorded results as a provisional sheet."""
    from .competition.participants import prepare_provisional
    from .validation.results import ResultValidator

    event = _load(snapshot).event(event_id)
    if event is None:
        raise click.ClickException(f"Unknown event: {event_id}")

    validator = ResultValidator(strict_placements=settings.scoring.strict_placements)
    outcome = validator.validate(event.scoring, prepare_provisional(event))
    if not outcome.ok:
        click.echo(f"REJECTED {outcome.issue.code.value}: {outcome.issue.message}")
        click.get_current_context().exit(1)
    click.echo(f"OK {len(outcome.results)} placements")
