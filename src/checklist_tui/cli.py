"""CLI entry point using Click."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from checklist_tui.config import (
    LOG_FILE,
    config_dir,
    load_config,
    resolve_db_path,
    save_config,
)
from checklist_tui.errors import ChecklistError
from checklist_tui.logs import configure_logging
from checklist_tui.models import (
    DisplayFilter,
    Layout,
    Settings,
    Status,
    Task,
    Urgency,
    format_datetime,
)
from checklist_tui.store import MEMORY, TaskStore
from checklist_tui.view import filter_tasks, sort_tasks

_DISPLAY_CHOICES = {
    "all": DisplayFilter.ALL,
    "completed": DisplayFilter.COMPLETED,
    "not-completed": DisplayFilter.NOT_COMPLETED,
}


class _DefaultGroup(click.Group):
    """Insert 'display' when the first arg is not a registered subcommand."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.no_args_is_help = False

    def invoke(self, ctx):
        if not ctx._protected_args and not ctx.args:
            ctx._protected_args = ["display"]
        return super().invoke(ctx)

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else None
        if cmd_name and cmd_name in self.commands:
            return super().resolve_command(ctx, args)
        return super().resolve_command(ctx, ["display"] + list(args))


def _open(ctx: click.Context) -> tuple[TaskStore, Settings]:
    """Open the configured task store, or an in-memory one with --memory."""
    directory: Path = ctx.obj["config_dir"]
    settings = load_config(directory)
    path = MEMORY if ctx.obj["memory"] else resolve_db_path(directory, settings)
    try:
        store = TaskStore(path)
    except ChecklistError as e:
        raise click.ClickException(str(e)) from e
    return store, settings


@click.group(cls=_DefaultGroup)
@click.option("--memory", is_flag=True, help="Use a throwaway in-memory database")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Level written to the log file",
)
@click.version_option(package_name="checklist-tui")
@click.pass_context
def main(ctx, memory: bool, log_level: str) -> None:
    """Checklist - a terminal task tracker."""
    ctx.ensure_object(dict)
    directory = config_dir()
    ctx.obj["config_dir"] = directory
    ctx.obj["memory"] = memory
    try:
        configure_logging(directory / LOG_FILE, log_level)
    except OSError as e:
        click.echo(f"Logging disabled: {e}", err=True)


@main.command()
@click.option(
    "--layout",
    type=click.Choice([layout.value for layout in Layout]),
    default=None,
    help="Override the saved pane layout",
)
@click.pass_context
def display(ctx, layout: str | None) -> None:
    """Open the interactive task list."""
    from checklist_tui.app import ChecklistApp
    from checklist_tui.session import SessionState

    store, settings = _open(ctx)
    if layout:
        settings.layout = Layout(layout)
    try:
        session = SessionState.open(store, settings)
        app = ChecklistApp(
            session, config_dir=None if ctx.obj["memory"] else ctx.obj["config_dir"]
        )
        app.run()
    except ChecklistError as e:
        raise click.ClickException(str(e)) from e
    finally:
        store.close()


@main.command("init")
@click.option(
    "--set",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Keep the database at this path instead of the config directory",
)
@click.pass_context
def init_cmd(ctx, db_path: Path | None) -> None:
    """Create the config file and database."""
    directory: Path = ctx.obj["config_dir"]
    settings = load_config(directory)
    if db_path is not None:
        settings.db_path = db_path.expanduser().resolve()
    target = resolve_db_path(directory, settings)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        TaskStore(target).close()
        config_path = save_config(directory, settings)
    except (ChecklistError, OSError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Created {config_path}")
    click.echo(f"Database at {target}")


@main.command()
@click.argument("name")
@click.option("--description", "-d", default="", help="Longer description")
@click.option("--latest", "-l", default="", help="Latest update")
@click.option(
    "--urgency", "-u",
    default=Urgency.LOW.value,
    type=click.Choice([u.value for u in Urgency], case_sensitive=False),
)
@click.option(
    "--status", "-s",
    default=Status.OPEN.value,
    type=click.Choice([s.value for s in Status], case_sensitive=False),
)
@click.option("--tag", "-t", "tags", multiple=True, help="Tag (repeatable)")
@click.pass_context
def add(ctx, name: str, description: str, latest: str, urgency: str, status: str, tags: tuple[str, ...]) -> None:
    """Add a task without opening the interface."""
    if not name.strip():
        raise click.BadParameter("Name cannot be empty", param_hint="NAME")
    task = Task.new(
        name=name.strip(),
        description=description,
        latest=latest,
        urgency=Urgency(urgency),
        status=Status(status),
        tags={t.strip() for t in tags if t.strip()},
    )
    store, _ = _open(ctx)
    try:
        store.create(task)
    except ChecklistError as e:
        raise click.ClickException(str(e)) from e
    finally:
        store.close()
    click.echo(f"Added {task.name} ({task.id})")


@main.command("list")
@click.option(
    "--display",
    "display_name",
    type=click.Choice(list(_DISPLAY_CHOICES)),
    default="not-completed",
    help="Which tasks to show",
)
@click.option("--tag", "-t", "tags", multiple=True, help="Only tasks with this tag (repeatable)")
@click.pass_context
def list_cmd(ctx, display_name: str, tags: tuple[str, ...]) -> None:
    """Print tasks, most urgent first."""
    store, _ = _open(ctx)
    try:
        tasks = store.fetch_all()
    except ChecklistError as e:
        raise click.ClickException(str(e)) from e
    finally:
        store.close()
    visible = sort_tasks(
        filter_tasks(tasks, _DISPLAY_CHOICES[display_name], required_tags=tags),
        descending=True,
    )

    table = Table(title=f"{len(visible)} task(s)", title_justify="left")
    table.add_column("Name")
    table.add_column("Urgency")
    table.add_column("Status")
    table.add_column("Tags")
    table.add_column("Added")
    for task in visible:
        table.add_row(
            task.name,
            task.urgency.value,
            task.status.value,
            ", ".join(task.sorted_tags),
            format_datetime(task.created_at),
        )
    Console().print(table)


@main.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.option("--hard", is_flag=True, help="Drop and recreate the table")
@click.pass_context
def wipe(ctx, yes: bool, hard: bool) -> None:
    """Delete every task."""
    if not yes and not click.confirm("Delete ALL tasks?"):
        raise SystemExit(0)
    store, _ = _open(ctx)
    try:
        store.wipe(hard=hard)
    except ChecklistError as e:
        raise click.ClickException(str(e)) from e
    finally:
        store.close()
    click.echo("All tasks deleted.")


@main.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def import_cmd(ctx, path: Path) -> None:
    """Copy tasks from another checklist database."""
    store, _ = _open(ctx)
    try:
        result = store.import_from(path)
    except ChecklistError as e:
        raise click.ClickException(str(e)) from e
    finally:
        store.close()
    click.echo(f"Imported {len(result.imported)} task(s).")
    if result.skipped:
        click.echo(f"Skipped {len(result.skipped)} existing id(s):", err=True)
        for task_id in result.skipped:
            click.echo(f"  {task_id}", err=True)


@main.command("init-theme")
@click.pass_context
def init_theme_cmd(ctx) -> None:
    """Copy the default theme to the config directory for customization."""
    from checklist_tui.theme import init_theme

    try:
        dest = init_theme(ctx.obj["config_dir"])
    except FileExistsError as e:
        click.echo(f"Already exists: {e}", err=True)
        raise SystemExit(1)
    click.echo(f"Created {dest}")
