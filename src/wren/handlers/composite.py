"""Composite handler factory — first answer wins.

Fans every ``resolve()`` out to an ordered list of delegate factories
and returns the first handler any of them produces.

Free-threading safety:
    - Delegates are published as an immutable tuple
    - ``add()`` swaps in a new tuple under a Lock (copy-on-write)
    - ``resolve()`` iterates a snapshot and never takes the lock
"""

import threading
from collections.abc import Iterator

from wren.handlers.protocol import Handler, HandlerFactory


class CompositeHandlerFactory:
    """Delegate resolution to several factories, in registration order.

    Delegates are never reordered and never deduplicated. Nothing is
    cached: each call queries the delegates afresh::

        composite = CompositeHandlerFactory(StandardHandlerFactory(), MemoryFactory())
        composite.resolve("mem")  # MemoryFactory's handler
        composite.resolve("gopher")  # None: urllib falls back to its defaults
    """

    __slots__ = ("_factories", "_lock")

    def __init__(self, *factories: HandlerFactory) -> None:
        self._factories: tuple[HandlerFactory, ...] = factories
        self._lock = threading.Lock()

    @property
    def factories(self) -> tuple[HandlerFactory, ...]:
        """Current delegates, oldest first."""
        return self._factories

    def add(self, factory: HandlerFactory) -> None:
        """Append *factory* after every existing delegate."""
        with self._lock:
            self._factories = (*self._factories, factory)

    def resolve(self, scheme: str) -> Handler | None:
        for factory in self._factories:
            handler = factory.resolve(scheme)
            if handler is not None:
                return handler
        return None

    def __contains__(self, factory: object) -> bool:
        return any(f is factory for f in self._factories)

    def __iter__(self) -> Iterator[HandlerFactory]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        inner = ", ".join(repr(f) for f in self._factories)
        return f"CompositeHandlerFactory({inner})"
