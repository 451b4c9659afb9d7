"""
Hearthtale package root.

A small cast of fighters, wizards and archers who carry weapons, potions and
spells, driven by a line-oriented command stream. The domain model lives in
``items``, ``inventory`` and ``characters``; ``commands`` turns text into
operations against a ``World``.
"""

__version__ = "0.1.0"

__all__ = [
    "characters",
    "commands",
    "config",
    "inventory",
    "items",
    "narration",
    "world",
]
