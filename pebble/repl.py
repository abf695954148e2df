"""Interactive read-eval-print loop.

Line editing and history come from the readline module where the platform
provides it. Ctrl-D and Ctrl-C both leave the loop cleanly.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from pebble import config
from pebble.interpreter import Interpreter

logger = logging.getLogger("pebble.repl")


def _setup_history(path: Optional[Path]) -> Callable[[], None]:
    """Load readline history and return a callback that saves it."""
    try:
        import readline
    except ImportError:
        return lambda: None

    if path is None:
        return lambda: None

    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not read history file %s: %s", path, e)

    def save() -> None:
        try:
            readline.write_history_file(path)
        except OSError as e:
            logger.warning("Could not write history file %s: %s", path, e)

    return save


def run(
    interp: Interpreter,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    prompt: str = config.DEFAULT_PROMPT,
) -> None:
    """Loop until end of input or interrupt, printing each result or error."""
    while True:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            write("")
            return
        write(interp.rep(line))


def main() -> int:
    logging.basicConfig(level=config.get_log_level(), stream=sys.stderr)
    save_history = _setup_history(config.get_history_file())
    try:
        run(Interpreter(), prompt=config.get_prompt())
    finally:
        save_history()
    return 0


if __name__ == "__main__":
    sys.exit(main())
