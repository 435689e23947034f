"""Handler factory protocol and Handler type alias.

A handler factory is any object matching::

    class MyFactory:
        def resolve(self, scheme: str) -> Handler | None: ...

No base class required. The registry checks the shape, not the lineage.

A handler is a ``urllib.request.BaseHandler`` exposing ``<scheme>_open``,
so whatever a factory returns plugs straight into ``urllib``'s opener
machinery. Returning ``None`` means "no opinion" and lets the next
factory, or urllib's defaults, take over.
"""

from typing import Protocol, runtime_checkable
from urllib.request import BaseHandler

# Anything that can open URLs of one scheme
type Handler = BaseHandler


@runtime_checkable
class HandlerFactory(Protocol):
    """Protocol for handler factories.

    Factories may build a fresh handler on every call; nothing caches
    the result::

        class MemoryFactory:
            def resolve(self, scheme: str) -> Handler | None:
                if scheme == "mem":
                    return MemoryHandler(store)
                return None
    """

    def resolve(self, scheme: str) -> Handler | None: ...
