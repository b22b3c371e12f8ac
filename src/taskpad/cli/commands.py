# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from datetime import datetime
from typing import cast

from ..auth.validation import validate_login, validate_sign_up, validate_title
from ..core.state import KEY_THEME_MODE, KEY_TWO_PANE, AppState
from ..tasks.task_actions import (
    AddTask,
    DeleteTask,
    EditTask,
    MarkDone,
    OpenTask,
    context_menu,
    handle_action,
)
from ..tasks.task_models import PRIORITIES, DEFAULT_PRIORITY, SortOrder, Task
from ..ui.theme import THEME_MODES, theme_for

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

FIELD_KEYS = ("title", "priority", "due", "desc")

LOGIN_REQUIRED = "Please /login or /signup first."

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._needs_login: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        requires_login: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in [key, *(a.lower() for a in aliases)]:
            self._handlers[alias] = handler
            if requires_login:
                self._needs_login.add(alias)

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if name in self._needs_login and not state.session.is_logged_in():
            return LOGIN_REQUIRED

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def parse_due_date(raw: str) -> int:
    """YYYY-MM-DD (local midnight) -> ms since epoch; "none" or "" -> 0."""
    raw = raw.strip()
    if raw.lower() in ("", "none", "0"):
        return 0
    return int(datetime.strptime(raw, "%Y-%m-%d").timestamp() * 1000)


def normalize_priority(raw: str) -> str:
    """Canonical casing for known priorities; blank means the default."""
    raw = raw.strip()
    if not raw:
        return DEFAULT_PRIORITY
    for p in PRIORITIES:
        if raw.lower() == p.lower():
            return p
    return raw


def _split_fields(args: list[str]) -> tuple[list[str], dict[str, str]]:
    words: list[str] = []
    fields: dict[str, str] = {}
    for tok in args:
        key, sep, value = tok.partition("=")
        if sep and key.lower() in FIELD_KEYS:
            fields[key.lower()] = value
        else:
            words.append(tok)
    return words, fields


def _task_at(state: AppState, raw: str | None) -> tuple[int, Task] | str:
    if raw is None:
        return "Missing task number."
    try:
        n = int(raw)
    except ValueError:
        return f"Not a task number: {raw}"
    tasks = state.store.current
    if not 1 <= n <= len(tasks):
        return f"No task #{n}. Use /list to see task numbers."
    return n - 1, tasks[n - 1]


def _format_errors(errors: dict[str, str]) -> str:
    return "\n".join(errors.values())


# ---- session commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    who = state.session.email if state.session.is_logged_in() else "(not logged in)"
    order = state.store.sort_order
    return (
        "Status:\n"
        f"  User: {who}\n"
        f"  Tasks: {len(state.store)}\n"
        f"  Sort: {order.value if order else 'none'}\n"
        f"  Theme: {state.view.theme.mode}\n"
        f"  Layout: {'two-pane' if state.two_pane else 'single'}"
    )


def cmd_signup(state: AppState, args: list[str]) -> str:
    if len(args) != 3:
        return "Usage: /signup EMAIL PASSWORD CONFIRM_PASSWORD"
    email, password, confirm = args
    errors = validate_sign_up(email, password, confirm)
    if errors:
        return _format_errors(errors)
    state.session.sign_up(email.strip(), password.strip())
    return "Account created successfully!"


def cmd_login(state: AppState, args: list[str]) -> str:
    email = args[0] if args else ""
    password = args[1] if len(args) > 1 else ""
    errors = validate_login(email, password)
    if errors:
        return _format_errors(errors)
    if not state.session.login(email.strip(), password.strip()):
        return "Invalid credentials or account not registered."
    return "Logged in."


def cmd_logout(state: AppState, args: list[str]) -> str:
    state.session.logout()
    state.selected_task_id = None
    return "Logged out."


# ---- task commands ----


def cmd_list(state: AppState, args: list[str]) -> str:
    return "\n".join(state.view.render(two_pane=state.two_pane, selected=state.selected_task()))


def cmd_add(state: AppState, args: list[str]) -> str:
    words, fields = _split_fields(args)
    title = fields.get("title") or " ".join(words)
    errors = validate_title(title)
    if errors:
        return _format_errors(errors)
    try:
        due_date = parse_due_date(fields.get("due", ""))
    except ValueError:
        return "Due date must look like YYYY-MM-DD."

    task = Task(
        title=title.strip(),
        description=fields.get("desc", "").strip(),
        priority=normalize_priority(fields.get("priority", "")),
        due_date=due_date,
    )
    return handle_action(state, AddTask(task))


def cmd_edit(state: AppState, args: list[str]) -> str:
    found = _task_at(state, args[0] if args else None)
    if isinstance(found, str):
        return found
    _, task = found
    _, fields = _split_fields(args[1:])
    if not fields:
        return "Usage: /edit N [title=...] [priority=...] [due=YYYY-MM-DD|none] [desc=...]"

    changes: dict[str, object] = {}
    if "title" in fields:
        errors = validate_title(fields["title"])
        if errors:
            return _format_errors(errors)
        changes["title"] = fields["title"].strip()
    if "priority" in fields:
        changes["priority"] = normalize_priority(fields["priority"])
    if "desc" in fields:
        changes["description"] = fields["desc"].strip()
    if "due" in fields:
        try:
            changes["due_date"] = parse_due_date(fields["due"])
        except ValueError:
            return "Due date must look like YYYY-MM-DD or none."

    return handle_action(state, EditTask(task.edited(**changes)))


def cmd_done(state: AppState, args: list[str]) -> str:
    found = _task_at(state, args[0] if args else None)
    if isinstance(found, str):
        return found
    return handle_action(state, MarkDone(found[1]))


def cmd_delete(state: AppState, args: list[str]) -> str:
    found = _task_at(state, args[0] if args else None)
    if isinstance(found, str):
        return found
    return handle_action(state, DeleteTask(found[1]))


def cmd_open(state: AppState, args: list[str]) -> str:
    found = _task_at(state, args[0] if args else None)
    if isinstance(found, str):
        return found
    detail = handle_action(state, OpenTask(found[1]))
    if state.two_pane:
        return cmd_list(state, [])
    return detail


def cmd_menu(state: AppState, args: list[str]) -> str:
    found = _task_at(state, args[0] if args else None)
    if isinstance(found, str):
        return found
    menu = context_menu(found[1], found[0])

    if len(args) > 1:
        # /menu N K runs entry K
        try:
            choice = int(args[1])
        except ValueError:
            return f"Not a menu entry: {args[1]}"
        if not 1 <= choice <= len(menu.entries):
            return f"No menu entry #{choice}."
        entry = menu.entries[choice - 1]
        if isinstance(entry.action, EditTask):
            # Edits need field values.
            return f"Use: {entry.command}"
        return handle_action(state, entry.action)

    lines = [f"#{menu.position + 1} {menu.task.title}:"]
    for k, entry in enumerate(menu.entries, start=1):
        lines.append(f"  {k}. {entry.label:<16} {entry.command}")
    lines.append(f"Run one with /menu {menu.position + 1} K.")
    return "\n".join(lines)


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /sort priority | due | name"
    try:
        order = SortOrder.parse(args[0])
    except ValueError:
        return f"Unknown sort order: {args[0]}. Use priority, due or name."
    if not len(state.store):
        return "Nothing to sort."
    state.store.sort_by(order)
    return f"Sorted by {order.value.replace('_', ' ')}."


def cmd_theme(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return f"Theme is {state.view.theme.mode}. Use /theme light | dark | system."
    mode = args[0].lower()
    if mode not in THEME_MODES:
        return "Usage: /theme light | dark | system"
    state.ui_prefs.put_str(KEY_THEME_MODE, mode)
    state.view.theme = theme_for(mode)
    if emit is not None:
        emit(f"[THEME] {mode} palette applied.")
    return f"Theme set to {mode}."


def cmd_pane(state: AppState, args: list[str]) -> str:
    if not args or args[0].lower() not in ("single", "two", "1", "2"):
        return "Usage: /pane single | two"
    two_pane = args[0].lower() in ("two", "2")
    state.two_pane = two_pane
    state.ui_prefs.put_bool(KEY_TWO_PANE, two_pane)
    return f"Layout: {'two-pane' if two_pane else 'single'}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show user, sort order, theme and layout.")
registry.register("signup", cmd_signup, help_text="Create the local account: /signup EMAIL PASSWORD CONFIRM.")
registry.register("login", cmd_login, help_text="Log in: /login EMAIL PASSWORD.")
registry.register("logout", cmd_logout, help_text="Log out.", requires_login=True)
registry.register("list", cmd_list, help_text="Show tasks.", aliases=["ls"], requires_login=True)
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add TITLE [priority=High|Medium|Low] [due=YYYY-MM-DD] [desc=TEXT].",
    requires_login=True,
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit task N: /edit N [title=..] [priority=..] [due=..|none] [desc=..].",
    requires_login=True,
)
registry.register("done", cmd_done, help_text="Toggle done/pending for task N.", requires_login=True)
registry.register("del", cmd_delete, help_text="Delete task N.", aliases=["rm", "delete"], requires_login=True)
registry.register("open", cmd_open, help_text="Show details of task N.", requires_login=True)
registry.register("menu", cmd_menu, help_text="Show actions for task N, or run one: /menu N K.", requires_login=True)
registry.register("sort", cmd_sort, help_text="Sort tasks: /sort priority | due | name.", requires_login=True)
registry.register("theme", cmd_theme, help_text="Theme: /theme light | dark | system.")
registry.register("pane", cmd_pane, help_text="Layout: /pane single | two.", requires_login=True)
