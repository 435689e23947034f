"""Open URLs through the installed handler factory.

This is the host side of the slot: when a URL is opened, the factory in
the slot is asked for a handler for the URL's scheme. A resolved handler
is layered over urllib's defaults; with no factory installed, or no
opinion from it, urllib's defaults handle the URL on their own.
"""

from typing import Any
from urllib.parse import urlsplit
from urllib.request import OpenerDirector
from urllib.request import build_opener as _build_urllib_opener

from wren.config import DEFAULT_CONFIG, URLConfig
from wren.handlers.protocol import Handler
from wren.handlers.slot import HOST_SLOT, HostSlot


def resolve_handler(scheme: str, slot: HostSlot | None = None) -> Handler | None:
    """Ask the slot's factory for a *scheme* handler."""
    factory = (HOST_SLOT if slot is None else slot).try_get()
    if factory is None:
        return None
    return factory.resolve(scheme)


def build_opener(url: str, slot: HostSlot | None = None) -> OpenerDirector:
    """Return an opener able to open *url*."""
    handler = resolve_handler(urlsplit(url).scheme, slot)
    if handler is None:
        return _build_urllib_opener()
    return _build_urllib_opener(handler)


def open_url(
    url: str,
    data: bytes | None = None,
    timeout: float | None = None,
    slot: HostSlot | None = None,
    config: URLConfig = DEFAULT_CONFIG,
) -> Any:
    """Open *url* and return urllib's response object.

    Errors from the handler (``URLError``, ``OSError``) propagate unchanged.
    """
    opener = build_opener(url, slot)
    return opener.open(url, data, timeout=config.open_timeout if timeout is None else timeout)
