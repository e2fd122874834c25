"""Interactive menu - the state machine behind the ``tasktrack`` session.

Each state has a handler that renders its screen, reads input through the
display and returns the next state. The session ends in ``QUITTING``.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from rich.markup import escape

from tasktrack_cli.exceptions import StorageError, TaskNotFoundError, TaskValidationError
from tasktrack_cli.models import DUE_DATE_HINT
from tasktrack_cli.services import TaskStore
from tasktrack_cli.utils.logger import get_logger
from tasktrack_cli.utils.ui.display import Display

RULE = "[green]------------------[/green]"


class MenuState(Enum):
    MAIN_MENU = "main_menu"
    ADDING_TASK = "adding_task"
    LISTING_TASKS = "listing_tasks"
    DELETING_TASK = "deleting_task"
    QUITTING = "quitting"


class MenuController:
    """Drives a TaskStore from user commands.

    Args:
        store: Store the session mutates
        display: Where screens are rendered and input is read
        recent_count: How many of the newest tasks the main menu previews
    """

    def __init__(self, store: TaskStore, display: Display, recent_count: int = 5):
        self.store = store
        self.display = display
        self.recent_count = recent_count
        self.state = MenuState.MAIN_MENU
        # Messages raised just before a screen clear, shown on the next screen.
        self._pending: list[tuple[Callable[[str], None], str]] = []
        self._handlers: dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MAIN_MENU: self._main_menu,
            MenuState.ADDING_TASK: self._add_task,
            MenuState.LISTING_TASKS: self._list_tasks,
            MenuState.DELETING_TASK: self._delete_task,
        }

    def run(self) -> None:
        """Run the session until the user quits or input ends."""
        try:
            while self.state is not MenuState.QUITTING:
                self.state = self._handlers[self.state]()
        except (EOFError, KeyboardInterrupt):
            get_logger().info("input ended in state %s", self.state.value)
            self.state = MenuState.QUITTING
            self.display.print()
        self._quit()

    # -------------------- state handlers --------------------

    def _main_menu(self) -> MenuState:
        self._new_screen()
        self._render_main_menu()
        choice = self.display.read_line("> ").upper()

        if choice == "A":
            return MenuState.ADDING_TASK
        if choice == "V":
            return MenuState.LISTING_TASKS
        if choice == "D" and not self.store.is_empty():
            return MenuState.DELETING_TASK
        if choice == "Q":
            return MenuState.QUITTING

        self._notify(self.display.error, "Wrong input.")
        return MenuState.MAIN_MENU

    def _add_task(self) -> MenuState:
        while True:
            self._new_screen()
            self.display.print("[bold yellow]---Task Manager | Add a Task---[/bold yellow]\n")
            title = self.display.read_line("Task title: ")
            assigned_to = self.display.read_line("Assigned to: ")
            due_date = self.display.read_line(f"Due date (Format: {DUE_DATE_HINT}): ")

            try:
                task = self.store.create(title, assigned_to, due_date)
            except TaskValidationError as e:
                self._notify(self.display.error, f"{e}. Try again.")
                continue
            except StorageError as e:
                # create() appends before it flushes, so the task is the last one
                task = self.store.list()[-1]
                self.display.warning(f"{e}. The task is kept in memory and will be saved with your next change.")

            self.display.success("Task added successfully!")
            self.display.show_task(task)
            if not self._ask_add_another():
                return MenuState.MAIN_MENU

    def _list_tasks(self) -> MenuState:
        self._new_screen()
        self.display.print("[bold yellow]---Task Manager | All Tasks---[/bold yellow]\n")
        self.display.show_tasks(self.store.list())
        self.display.read_line("Press Enter to return to the main menu...")
        return MenuState.MAIN_MENU

    def _delete_task(self) -> MenuState:
        while True:
            self._new_screen()
            self.display.print("[bold yellow]---Task Manager | Delete a Task---[/bold yellow]\n")
            self.display.show_tasks(self.store.list())
            answer = self.display.read_line("Enter the ID to delete (or 'Q' to go back): ")

            if answer.upper() == "Q":
                return MenuState.MAIN_MENU

            try:
                task_id = int(answer)
            except ValueError:
                self._notify(self.display.error, "Invalid! Enter a number.")
                continue

            try:
                task = self.store.delete_by_id(task_id)
                self._notify(self.display.success, f"Task deleted! {task.render()}")
            except TaskNotFoundError as e:
                self._notify(self.display.error, f"{e}.")
                continue
            except StorageError as e:
                self._notify(self.display.success, "Task deleted!")
                self._notify(
                    self.display.warning,
                    f"{e}. The change is kept in memory and will be saved with your next change.",
                )

            if self.store.is_empty():
                return MenuState.MAIN_MENU

    # -------------------- helpers --------------------

    def _render_main_menu(self) -> None:
        self.display.print("[bold yellow]---Task Manager---[/bold yellow]\n")
        tasks = self.store.list()
        if tasks:
            for task in tasks[-self.recent_count:]:
                self.display.print(f"[yellow]{task.id}. {escape(task.title)}[/yellow]")
        else:
            self.display.print("[red]No tasks yet![/red]")
        self.display.print(RULE)
        self.display.print("[green]Add a new task -> Press 'A'[/green]")
        self.display.print("[green]View all tasks -> Press 'V'[/green]")
        if tasks:
            self.display.print("[green]Delete a task -> Press 'D'[/green]")
        self.display.print("[green]Quit the application -> Press 'Q'[/green]\n")

    def _ask_add_another(self) -> bool:
        while True:
            answer = self.display.read_line("\nDo you want to add another task? (Y/N): ").upper()
            if answer == "Y":
                return True
            if answer == "N":
                return False
            self.display.error("Respond with Y or N only!")

    def _notify(self, show: Callable[[str], None], message: str) -> None:
        self._pending.append((show, message))

    def _flush_pending(self) -> None:
        for show, message in self._pending:
            show(message)
        self._pending.clear()

    def _new_screen(self) -> None:
        self.display.clear()
        self._flush_pending()

    def _quit(self) -> None:
        self._flush_pending()
        if self.store.dirty:
            try:
                self.store.flush()
            except StorageError as e:
                self.display.error(f"{e}. Changes from this session were not saved.")
            else:
                self.display.info("Unsaved changes were written to the task file.")
        self.display.print("[blue]Goodbye![/blue]")
