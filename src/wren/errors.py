"""Wren exception hierarchy.

Shared across the parsing helpers, the host slot, and the registration
shim so every module raises and catches the same types.
"""

from typing import Any


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when a handler factory cannot be attached.

    Typically the host slot is already held by a factory this process
    did not install and the slot offers no way to read it back.
    """


class SlotOccupiedError(WrenError):
    """A second raw install into a single-assignment slot.

    The slot keeps its current occupant, available as ``occupant``.
    """

    def __init__(self, occupant: Any, detail: str = "") -> None:
        self.occupant = occupant
        super().__init__(detail or f"Handler slot already holds {occupant!r}")
