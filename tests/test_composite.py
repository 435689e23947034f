"""Tests for wren.handlers.composite — first-answer-wins delegation."""

import threading

import pytest

from wren.handlers.composite import CompositeHandlerFactory
from wren.handlers.protocol import HandlerFactory


class TestResolve:
    def test_first_non_none_wins(self, scheme_factory) -> None:
        first = scheme_factory("mem")
        second = scheme_factory("mem")
        composite = CompositeHandlerFactory(first, second)

        assert composite.resolve("mem") is first.handler
        assert second.calls == []

    def test_falls_through_to_later_delegate(self, scheme_factory) -> None:
        mem = scheme_factory("mem")
        s3 = scheme_factory("s3")
        composite = CompositeHandlerFactory(mem, s3)

        assert composite.resolve("s3") is s3.handler
        assert mem.calls == ["s3"]

    def test_no_opinion(self, scheme_factory) -> None:
        composite = CompositeHandlerFactory(scheme_factory("mem"), scheme_factory("s3"))
        assert composite.resolve("gopher") is None

    def test_empty_composite(self) -> None:
        assert CompositeHandlerFactory().resolve("mem") is None

    def test_queries_delegates_every_call(self, scheme_factory) -> None:
        mem = scheme_factory("mem")
        composite = CompositeHandlerFactory(mem)
        composite.resolve("mem")
        composite.resolve("mem")
        assert mem.calls == ["mem", "mem"]


class TestDelegates:
    def test_order_preserved(self, scheme_factory) -> None:
        a, b, c = scheme_factory("a"), scheme_factory("b"), scheme_factory("c")
        composite = CompositeHandlerFactory(a, b)
        composite.add(c)
        assert composite.factories == (a, b, c)
        assert list(composite) == [a, b, c]
        assert len(composite) == 3

    def test_duplicates_kept(self, scheme_factory) -> None:
        a = scheme_factory("a")
        composite = CompositeHandlerFactory(a)
        composite.add(a)
        assert composite.factories == (a, a)

    def test_view_is_read_only(self, scheme_factory) -> None:
        composite = CompositeHandlerFactory(scheme_factory("a"))
        with pytest.raises(AttributeError):
            composite.factories.append(scheme_factory("b"))  # type: ignore[attr-defined]

    def test_contains_by_identity(self, scheme_factory) -> None:
        a = scheme_factory("a")
        composite = CompositeHandlerFactory(a)
        assert a in composite
        assert scheme_factory("a") not in composite

    def test_satisfies_protocol(self) -> None:
        assert isinstance(CompositeHandlerFactory(), HandlerFactory)

    def test_repr(self, scheme_factory) -> None:
        composite = CompositeHandlerFactory(scheme_factory("a"))
        assert repr(composite) == "CompositeHandlerFactory(SchemeFactory('a'))"

    def test_concurrent_add(self, scheme_factory) -> None:
        composite = CompositeHandlerFactory()
        factories = [scheme_factory(str(i)) for i in range(64)]
        threads = [threading.Thread(target=composite.add, args=(f,)) for f in factories]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(composite) == 64
        assert {id(f) for f in composite} == {id(f) for f in factories}
