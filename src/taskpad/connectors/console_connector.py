# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _print_rows(state: AppState) -> None:
    lines = state.view.render(two_pane=state.two_pane, selected=state.selected_task())
    print("\n".join(lines))


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskpad"))
    logger.info("Console connector started.")
    print(f"[{app_name}] Use /help for commands. Use /exit to quit.")

    if state.session.is_logged_in():
        _print_rows(state)
    else:
        hint = "Use /login EMAIL PASSWORD." if state.session.email else "Create an account with /signup."
        print(f"[{app_name}] {hint}")

    def emit(text: str) -> None:
        print(text, flush=True)

    while True:
        try:
            user_input = input("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        was_logged_in = state.session.is_logged_in()
        try:
            response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            print("Commands start with '/'. Use /help to list them.")
            continue

        print(response)

        # Re-render only when the store published a real change, or right after login.
        logged_in = state.session.is_logged_in()
        if logged_in and (state.view.consume_dirty() or not was_logged_in):
            _print_rows(state)

    logger.info("Console connector finished.")
