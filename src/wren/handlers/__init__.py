"""Handler factories — one host slot, many contributors.

Usage::

    from wren.handlers import attach_handler_factory, open_url

    attach_handler_factory(MemoryFactory())
    with open_url("mem://bucket/key") as response:
        body = response.read()
"""

from wren.handlers.composite import CompositeHandlerFactory
from wren.handlers.opener import build_opener, open_url, resolve_handler
from wren.handlers.protocol import Handler, HandlerFactory
from wren.handlers.registry import (
    HandlerRegistry,
    attach_handler_factory,
    clear_handler_factory,
    get_handler_factory,
)
from wren.handlers.slot import HOST_SLOT, HandlerSlot, HostSlot
from wren.handlers.standard import StandardHandlerFactory

__all__ = [
    "HOST_SLOT",
    "CompositeHandlerFactory",
    "Handler",
    "HandlerFactory",
    "HandlerRegistry",
    "HandlerSlot",
    "HostSlot",
    "StandardHandlerFactory",
    "attach_handler_factory",
    "build_opener",
    "clear_handler_factory",
    "get_handler_factory",
    "open_url",
    "resolve_handler",
]
