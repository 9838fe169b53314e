import pytest

from dlx import StopSearch, build, search
from sinks import CallbackSink, CollectSink, CountSink, LimitSink, PrintSink
from wiki_sample import build_problem, main as wiki_main

PAIRS = [("a", [0, 1]), ("b", [2, 3]), ("c", [0]), ("d", [1]), ("e", [2]), ("f", [3])]


def test_count_sink():
    sink = CountSink()
    result = search(build(4, PAIRS), sink)
    assert sink.count == result.solutions == 4


def test_collect_sink_keeps_order():
    sink = CollectSink()
    search(build(4, PAIRS), sink)
    assert len(sink.solutions) == 4
    assert all(isinstance(sol, tuple) for sol in sink.solutions)


def test_callback_sink_wraps_function():
    seen = []
    search(build_problem(), CallbackSink(seen.append))
    assert [sorted(s) for s in seen] == [["B", "D", "F"]]


def test_print_sink_sorts_names(capsys):
    PrintSink()(("F", "B", "D"))
    PrintSink(sort=False)(("F", "B", "D"))
    out = capsys.readouterr().out.splitlines()
    assert out == ["['B', 'D', 'F']", "['F', 'B', 'D']"]


def test_limit_sink_raises_after_limit():
    sink = LimitSink(2)
    sink(("a",))
    with pytest.raises(StopSearch):
        sink(("b",))
    assert sink.seen == 2


def test_limit_sink_forwards_before_stopping():
    inner = CountSink()
    result = search(build(4, PAIRS), LimitSink(3, inner))
    assert inner.count == 3
    assert result.cancelled is True


def test_limit_larger_than_solution_count_does_not_cancel():
    result = search(build(4, PAIRS), LimitSink(10))
    assert result.solutions == 4
    assert result.cancelled is False


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        LimitSink(0)


def test_wiki_sample_prints_single_cover(capsys):
    assert wiki_main() == 1
    assert capsys.readouterr().out.strip() == "['B', 'D', 'F']"
