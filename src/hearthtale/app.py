from __future__ import annotations

import logging
from typing import Iterable, Optional

from .commands.interpreter import CommandInterpreter
from .config.loader import EngineConfig
from .exceptions import HearthtaleError
from .narration.console import Console
from .narration.narrator import Narrator
from .world import World

logger = logging.getLogger(__name__)


def run_commands(lines: Iterable[str], interpreter: CommandInterpreter) -> int:
    """Execute each line in order until the input is exhausted.

    A hard failure aborts only the command that raised it; it is narrated to
    the event log and the loop moves on. Returns the number of lines read.
    """
    narrator = interpreter.world.narrator
    count = 0
    for raw in lines:
        count += 1
        line = raw.rstrip("\r\n")
        try:
            interpreter.execute(line)
        except HearthtaleError as exc:
            narrator.log_event(f"Error caught: {exc}")
            logger.warning("Command %d failed (%s): %s", count, type(exc).__name__, exc)
    logger.info("Processed %d command lines", count)
    return count


def run_session(
    lines: Iterable[str],
    config: EngineConfig,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> int:
    """Open the narration sink, run every command, close the sink.

    Raises NarrationSinkError when the event log cannot be opened.
    """
    path = log_file or config.log_file
    with Narrator.open(path) as narrator:
        world = World(narrator, config)
        interpreter = CommandInterpreter(world, console or Console())
        run_commands(lines, interpreter)
    return 0
