import io
from email.message import Message
from urllib.request import BaseHandler
from urllib.response import addinfourl

import pytest

from wren.handlers import registry
from wren.handlers.registry import HandlerRegistry
from wren.handlers.slot import HandlerSlot


class MemoryHandler(BaseHandler):
    """Serve ``mem://`` URLs from a dict of bytes."""

    def __init__(self, store: dict[str, bytes]) -> None:
        self.store = store

    def mem_open(self, req):  # noqa: ANN001
        url = req.full_url
        body = self.store[url]
        return addinfourl(io.BytesIO(body), Message(), url, 200)


class SchemeFactory:
    """Resolve one scheme to a fixed handler, nothing else."""

    def __init__(self, scheme: str, handler: BaseHandler | None = None) -> None:
        self.scheme = scheme
        self.handler = handler if handler is not None else BaseHandler()
        self.calls: list[str] = []

    def resolve(self, scheme: str) -> BaseHandler | None:
        self.calls.append(scheme)
        if scheme == self.scheme:
            return self.handler
        return None

    def __repr__(self) -> str:
        return f"SchemeFactory({self.scheme!r})"


@pytest.fixture
def slot() -> HandlerSlot:
    return HandlerSlot()


@pytest.fixture
def fresh_registry(monkeypatch: pytest.MonkeyPatch) -> HandlerRegistry:
    """Replace the process-wide registry with one bound to an empty slot."""
    fresh = HandlerRegistry(HandlerSlot())
    monkeypatch.setattr(registry, "_registry", fresh)
    return fresh


@pytest.fixture
def scheme_factory() -> type[SchemeFactory]:
    return SchemeFactory


@pytest.fixture
def memory_handler() -> type[MemoryHandler]:
    return MemoryHandler
