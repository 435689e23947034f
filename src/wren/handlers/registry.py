"""Global handler factory registration.

The host slot accepts one raw install per process, yet several
libraries may each want to contribute a factory. ``attach()`` mediates:
the first factory goes in directly, and every later one is merged into a
``CompositeHandlerFactory`` instead of attempting a second raw install::

    from wren.handlers.registry import attach_handler_factory

    attach_handler_factory(MemoryFactory())   # installed as-is
    attach_handler_factory(S3Factory())       # both now behind one composite

State machine::

    Empty --attach--> Single --attach--> Composite(2) --attach--> Composite(n+1)

``clear()`` returns to Empty, but only for the registry's own
bookkeeping: the host slot keeps whatever it holds.

Free-threading safety:
    - ``attach()`` and ``clear()`` hold a Lock for the read-modify-write
    - ``get_factory()`` reads one attribute that only ever points at a
      fully built factory
"""

import logging
import threading

from wren.errors import ConfigurationError
from wren.handlers.composite import CompositeHandlerFactory
from wren.handlers.protocol import HandlerFactory
from wren.handlers.slot import HOST_SLOT, HostSlot

logger = logging.getLogger("wren.handlers")


class HandlerRegistry:
    """Mediates every factory registration for one host slot."""

    __slots__ = ("_current", "_lock", "_slot")

    def __init__(self, slot: HostSlot) -> None:
        self._slot = slot
        self._current: HandlerFactory | None = None
        self._lock = threading.Lock()

    @property
    def slot(self) -> HostSlot:
        return self._slot

    def get_factory(self) -> HandlerFactory | None:
        """Return the attached factory or composite, ``None`` if empty."""
        return self._current

    def attach(self, factory: HandlerFactory) -> None:
        """Register *factory* without displacing earlier registrations.

        Raises ``TypeError`` when *factory* has no ``resolve`` method and
        ``ConfigurationError`` when the host slot is held by an unknown
        factory that cannot be read back.
        """
        if not callable(getattr(factory, "resolve", None)):
            msg = f"Handler factory must define resolve(scheme), got {factory!r}"
            raise TypeError(msg)

        with self._lock:
            current = self._current
            if current is None:
                self._current = self._attach_first(factory)
            elif isinstance(current, CompositeHandlerFactory):
                current.add(factory)
                logger.debug("Added %r to %r", factory, current)
            else:
                composite = CompositeHandlerFactory(current, factory)
                self._install(composite)
                self._current = composite

    def clear(self) -> None:
        """Forget the attached factory. The host slot is left untouched."""
        with self._lock:
            self._current = None
        logger.debug("Cleared handler registry for %r", self._slot)

    def _attach_first(self, factory: HandlerFactory) -> HandlerFactory:
        if self._slot.try_set(factory):
            return factory

        try:
            occupant = self._slot.try_get()
        except NotImplementedError as exc:
            msg = "Host handler slot is occupied and cannot be read back"
            raise ConfigurationError(msg) from exc

        if occupant is None:
            # Emptied between the two calls; nothing to fold in
            self._install(factory)
            return factory

        logger.warning("Host handler slot already holds %r; merging %r into it", occupant, factory)
        if isinstance(occupant, CompositeHandlerFactory):
            occupant.add(factory)
            return occupant
        composite = CompositeHandlerFactory(occupant, factory)
        self._install(composite)
        return composite

    def _install(self, factory: HandlerFactory) -> None:
        if not self._slot.try_set(factory):
            msg = f"Host handler slot refused {factory!r}"
            raise ConfigurationError(msg)


_registry = HandlerRegistry(HOST_SLOT)


def attach_handler_factory(factory: HandlerFactory) -> None:
    """Attach *factory* to the process-wide registry."""
    _registry.attach(factory)


def get_handler_factory() -> HandlerFactory | None:
    """Return the factory attached to the process-wide registry."""
    return _registry.get_factory()


def clear_handler_factory() -> None:
    """Reset the process-wide registry's bookkeeping."""
    _registry.clear()
