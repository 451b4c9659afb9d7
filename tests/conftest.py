import io
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from hearthtale.commands.interpreter import CommandInterpreter  # noqa: E402
from hearthtale.narration.console import Console  # noqa: E402
from hearthtale.narration.narrator import Narrator  # noqa: E402
from hearthtale.world import World  # noqa: E402


@pytest.fixture()
def narrator():
    n = Narrator(io.StringIO())
    yield n
    n.close()


@pytest.fixture()
def console_stream():
    return io.StringIO()


@pytest.fixture()
def world(narrator):
    return World(narrator)


@pytest.fixture()
def interpreter(world, console_stream):
    return CommandInterpreter(world, Console(console_stream))
