"""Tests for production tracing."""

from dataclasses import FrozenInstanceError
from itertools import islice

import pytest

from fakes import static1
from inflater import Evidence, Trace, chain, traced, with_suffixes


def test_evidence_is_immutable():
    evidence = Evidence("produce_begin")
    with pytest.raises(FrozenInstanceError):
        evidence.action = "mutated"  # type: ignore[misc]


def test_record_assigns_sequential_ids(trace):
    assert trace.record("a") == 0
    assert trace.record("b", parent_id=0) == 1
    assert len(trace) == 2
    assert trace.as_tree() == {None: [0], 0: [1]}


def test_disabled_trace_records_nothing():
    trace = Trace(enabled=False)
    assert trace.record("a") is None
    assert list(traced(static1, trace, "static")("")) == ["aaa", "bbb", "ccc"]
    assert len(trace) == 0


def test_traced_output_unchanged(trace):
    p = traced(with_suffixes(["1", "2"]), trace, "suffix")
    assert list(p("x")) == ["x1", "x2"]


def test_traced_records_full_production(trace):
    p = traced(with_suffixes(["1", "2"]), trace, "suffix")
    list(p("x"))

    actions = [e.action for e in trace.get_events()]
    assert actions == ["produce_begin", "yield", "yield", "produce_end"]

    begin = trace.find_all(action="produce_begin")[0]
    assert begin.info == {"name": "suffix", "seed": "x"}
    assert [e.info["value"] for e in trace.find_all(action="yield")] == ["x1", "x2"]

    end = trace.find_all(action="produce_end")[0]
    assert end.parent_id == begin.id
    assert end.info["count"] == 2
    assert end.duration_ms is not None


def test_traced_records_early_stop(trace):
    p = traced(static1, trace, "static")
    it = p("")
    assert list(islice(it, 1)) == ["aaa"]
    it.close()

    stop = trace.find_all(action="produce_stop")
    assert len(stop) == 1
    assert stop[0].info["count"] == 1
    assert trace.find_all(action="produce_end") == []


def test_traced_inside_chain(trace):
    inner = traced(with_suffixes(["!"]), trace, "inner")
    p = chain(traced(static1, trace, "outer"), inner)

    assert list(p("")) == ["aaa!", "bbb!", "ccc!"]
    assert len(trace.find_all(action="produce_begin", name="inner")) == 3
    assert [e.info["seed"] for e in trace.find_all(action="produce_begin", name="inner")] == ["aaa", "bbb", "ccc"]
    assert len(trace.find_all(action="produce_end", name="outer")) == 1


def test_clear_resets_ids(trace):
    trace.record("a")
    trace.clear()
    assert len(trace) == 0
    assert trace.record("b") == 0


def test_traced_records_source_error(trace):
    def boom(value: str) -> str:
        if value == "bbb":
            raise RuntimeError("bad value")
        return value

    p = traced(static1.map(boom), trace, "mapped")
    with pytest.raises(RuntimeError, match="bad value"):
        list(p(""))

    actions = [e.action for e in trace.get_events()]
    assert actions == ["produce_begin", "yield", "produce_error"]
    error = trace.find_all(action="produce_error")[0]
    assert error.info["error"] == "RuntimeError"
    assert error.info["message"] == "bad value"
    assert error.info["count"] == 1
    assert trace.find_all(action="produce_stop") == []
