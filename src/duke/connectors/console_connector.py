# src/duke/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.errors import DukeCommandError, StorageWriteError
from ..core.state import AppState

logger = logging.getLogger(__name__)

HORIZONTAL_RULE = "\t" + "_" * 60

MESSAGE_GREETING = "Hello! I'm {app_name}\nWhat can I do for you?"
MESSAGE_BYE = "Bye. Hope to see you again soon!"
MESSAGE_INTERNAL_ERROR = "Internal error while handling a command."


def format_block(text: str) -> str:
    """Frame a (multi-line) reply between two horizontal rules."""
    lines = [HORIZONTAL_RULE]
    lines.extend(f"\t {line}" for line in text.split("\n"))
    lines.append(HORIZONTAL_RULE)
    return "\n".join(lines) + "\n"


def run_console_loop(
    state: AppState,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read one command per line until `bye` or end of input.

    After every mutating command the whole list is saved; a failed save is
    reported and the in-memory change stands.
    """
    app_name = str(getattr(state.settings, "app_name", "Duke"))
    logger.info("Console loop started (tasks=%d).", state.tasks.size())

    def emit(text: str) -> None:
        write(format_block(text))

    for notice in state.notices:
        emit(notice)
    emit(MESSAGE_GREETING.format(app_name=app_name))

    while True:
        try:
            line = read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        if not line:
            continue

        save_error: StorageWriteError | None = None
        try:
            with state.lock:
                result = command_registry.handle(state, line)
                if result.mutated:
                    try:
                        state.store.save(state.tasks)
                    except StorageWriteError as e:
                        save_error = e
        except DukeCommandError as e:
            logger.debug("Rejected %r: %s", line, type(e).__name__)
            emit(e.message)
            continue
        except Exception:
            logger.exception("Command handler crashed on %r.", line)
            emit(MESSAGE_INTERNAL_ERROR)
            continue

        if result.text is not None:
            emit(result.text)
        if save_error is not None:
            emit(save_error.message)

        if result.exit:
            break

    emit(MESSAGE_BYE)
    logger.info("Console loop finished (tasks=%d).", state.tasks.size())
