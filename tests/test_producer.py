"""Tests for the Producer abstraction and its adapters."""

from dataclasses import FrozenInstanceError
from itertools import islice

import pytest

from fakes import CountingProducer, static1, static2
from inflater import FuncProducer, ListProducer, Producer, from_list, producer, with_prefixes, with_suffixes


class TestFuncProducer:
    """Tests for the function adapter."""

    def test_wraps_generator_function(self):
        def double(seed: str):
            yield seed
            yield seed * 2

        assert list(FuncProducer(double).produce("ab")) == ["ab", "abab"]

    def test_accepts_plain_iterables(self):
        p = FuncProducer(lambda seed: [seed.upper(), seed.lower()])
        assert list(p.produce("Mix")) == ["MIX", "mix"]

    def test_decorator(self):
        @producer
        def hyphenate(seed: str):
            yield seed.replace(" ", "-")

        assert isinstance(hyphenate, Producer)
        assert list(hyphenate("a b c")) == ["a-b-c"]

    def test_is_immutable(self):
        p = FuncProducer(lambda seed: [seed])
        with pytest.raises(FrozenInstanceError):
            p._produce = lambda seed: []  # type: ignore[misc]


class TestListProducer:
    """Tests for the static list producer."""

    def test_ignores_seed(self):
        p = ListProducer(("foo", "bar", "baz"))
        assert list(p.produce("IGNORED")) == ["foo", "bar", "baz"]
        assert list(p.produce("")) == ["foo", "bar", "baz"]

    def test_empty_list_yields_nothing(self):
        assert list(ListProducer().produce("seed")) == []

    def test_from_list_copies_input(self):
        items = ["a", "b"]
        p = from_list(items)
        items.append("c")
        assert list(p("seed")) == ["a", "b"]


class TestRepeatability:
    """Producers hold no state between calls."""

    def test_same_seed_same_output(self):
        p = with_suffixes(["1", "2"], with_prefixes(["x", "y"]))
        first = list(p("seed"))
        second = list(p("seed"))
        assert first == second == ["xseed1", "xseed2", "yseed1", "yseed2"]

    def test_different_seeds_are_independent(self):
        p = with_prefixes(["<"])
        assert list(p("a")) == ["<a"]
        assert list(p("b")) == ["<b"]
        assert list(p("a")) == ["<a"]

    def test_interleaved_iterators(self):
        p = static1.plus(static2)
        left = p("x")
        right = p("y")
        assert [next(left), next(right), next(left)] == ["aaa", "aaa", "bbb"]


class TestFluentComposition:
    """Tests for the then/plus/map/filter methods."""

    def test_then(self):
        assert list(static1.then(with_suffixes(["1", "2"]))("")) == [
            "aaa1", "aaa2", "bbb1", "bbb2", "ccc1", "ccc2",
        ]

    def test_plus(self):
        assert list(static2.plus(static1)("")) == ["111", "222", "333", "aaa", "bbb", "ccc"]

    def test_map(self):
        assert list(static1.map(str.upper)("")) == ["AAA", "BBB", "CCC"]

    def test_map_none_returns_self(self):
        assert static1.map(None) is static1

    def test_filter(self):
        assert list(static1.filter(lambda s: s != "bbb")("")) == ["aaa", "ccc"]

    def test_filter_none_returns_self(self):
        assert static1.filter(None) is static1


class TestEarlyTermination:
    """Consumers may stop pulling at any point."""

    def test_stops_pulling_source(self):
        source = CountingProducer(size=100)
        values = list(islice(source.map(str.upper)("s"), 3))
        assert values == ["S:0", "S:1", "S:2"]
        assert source.pulled == 3

    def test_close_unwinds_nested_chain(self):
        inner = CountingProducer(size=10)
        it = static1.then(inner)("")
        assert next(it) == "aaa:0"
        it.close()
        assert inner.pulled == 1
        with pytest.raises(StopIteration):
            next(it)

    def test_close_before_start_is_harmless(self):
        source = CountingProducer(size=5)
        it = source.plus(source)("s")
        it.close()
        assert source.pulled == 0
