"""The process-wide handler factory slot.

The host keeps exactly one handler factory per process. Installing one
is a single-assignment operation: once the slot is occupied, a second
raw install fails. The only replacement the slot accepts is a
``CompositeHandlerFactory`` that already contains the current occupant,
so nothing installed earlier is ever dropped.

``HostSlot`` is the capability the registration shim relies on. Any
object offering ``try_set`` (and, ideally, ``try_get``) can stand in for
the host, which keeps the merge logic independent of where the slot
actually lives.

Free-threading safety:
    - ``HandlerSlot`` serialises installs with a Lock
    - Reads return the occupant reference without locking
"""

import logging
import threading
from typing import Protocol

from wren.errors import SlotOccupiedError
from wren.handlers.composite import CompositeHandlerFactory
from wren.handlers.protocol import HandlerFactory

logger = logging.getLogger("wren.handlers")


class HostSlot(Protocol):
    """Capability pair over a single-assignment factory slot."""

    def try_set(self, factory: HandlerFactory) -> bool:
        """Install *factory*. Returns ``False`` if the slot refuses it."""
        ...

    def try_get(self) -> HandlerFactory | None:
        """Return the occupant.

        Raises ``NotImplementedError`` when the slot cannot be read back.
        """
        ...


class HandlerSlot:
    """Single-assignment slot holding the process's handler factory."""

    __slots__ = ("_factory", "_lock")

    def __init__(self) -> None:
        self._factory: HandlerFactory | None = None
        self._lock = threading.Lock()

    @property
    def factory(self) -> HandlerFactory | None:
        """The installed factory, or ``None`` while the slot is empty."""
        return self._factory

    def set(self, factory: HandlerFactory) -> None:
        """Install *factory*.

        Raises ``SlotOccupiedError`` if another factory is installed,
        unless *factory* is a composite that includes it.
        """
        with self._lock:
            occupant = self._factory
            if occupant is not None and not _supersedes(factory, occupant):
                raise SlotOccupiedError(occupant)
            self._factory = factory
        logger.debug("Installed handler factory %r", factory)

    def try_set(self, factory: HandlerFactory) -> bool:
        try:
            self.set(factory)
        except SlotOccupiedError:
            return False
        return True

    def try_get(self) -> HandlerFactory | None:
        return self._factory

    def __repr__(self) -> str:
        return f"HandlerSlot({self._factory!r})"


def _supersedes(factory: HandlerFactory, occupant: HandlerFactory) -> bool:
    if factory is occupant:
        return True
    return isinstance(factory, CompositeHandlerFactory) and occupant in factory


HOST_SLOT = HandlerSlot()
"""The slot consulted by ``wren.handlers.opener`` when opening URLs."""
