"""Factory for the schemes urllib already understands."""

from urllib.request import DataHandler, FileHandler, FTPHandler, HTTPHandler, HTTPSHandler

from wren.handlers.protocol import Handler

_STANDARD_HANDLERS: dict[str, type[Handler]] = {
    "http": HTTPHandler,
    "https": HTTPSHandler,
    "ftp": FTPHandler,
    "file": FileHandler,
    "data": DataHandler,
}


class StandardHandlerFactory:
    """Resolve ``http``, ``https``, ``ftp``, ``file`` and ``data``.

    Returns a fresh urllib handler per call and ``None`` for any other
    scheme. Useful as the first delegate of a composite so custom
    factories only need to care about their own schemes.
    """

    __slots__ = ()

    def resolve(self, scheme: str) -> Handler | None:
        handler_cls = _STANDARD_HANDLERS.get(scheme.lower())
        if handler_cls is None:
            return None
        return handler_cls()

    def __repr__(self) -> str:
        return "StandardHandlerFactory()"
