"""Main entry point for TaskTrack CLI."""

import typer

from tasktrack_cli.adapters import JsonTaskRepository
from tasktrack_cli.commands.decorators import command_wrapper
from tasktrack_cli.commands.menu import MenuController
from tasktrack_cli.config import get_config_manager
from tasktrack_cli.services import TaskStore
from tasktrack_cli.utils.ui.console import get_console
from tasktrack_cli.utils.ui.display import ConsoleDisplay

app = typer.Typer(
    name="tasktrack",
    help="A single-user terminal task tracker",
    add_completion=False,
)


@app.command()
@command_wrapper
def run() -> None:
    """Start the interactive task manager."""
    manager = get_config_manager()
    manager.seed_config()
    config = manager.config
    store = TaskStore.open(JsonTaskRepository(config.task_file))
    display = ConsoleDisplay(
        console=get_console(config.output.color),
        clear_screen=config.output.clear_screen,
    )
    MenuController(store, display, recent_count=config.output.recent_count).run()


if __name__ == "__main__":
    app()
