"""
Unit tests for lazily constructed pairs.
"""
import threading

import pytest

from nested_pairs.structures.deferred import DeferredPair, deferred_construct
from nested_pairs.structures.pairing import Pair


def _counting_thunk(result):
    """Returns a thunk and a list recording how often it ran."""
    calls = []

    def thunk():
        calls.append(1)
        return result

    return thunk, calls


def test_thunk_not_called_on_construction():
    thunk, calls = _counting_thunk(Pair(1, 2))
    deferred = deferred_construct(thunk)
    assert calls == []
    assert not deferred.is_evaluated
    assert repr(deferred) == "DeferredPair(<unevaluated>)"


def test_thunk_runs_once_on_first_access():
    """
    Reading either component forces the thunk exactly once.
    """
    thunk, calls = _counting_thunk(Pair("a", "b"))
    deferred = deferred_construct(thunk)

    assert deferred.second == "b"
    assert deferred.first == "a"
    assert deferred.extract() == "b"
    assert len(calls) == 1
    assert deferred.is_evaluated


def test_components_resolve_independently():
    """
    A thunk returning another deferred pair is read through, and each thunk
    in the chain runs at most once.
    """
    inner_thunk, inner_calls = _counting_thunk(Pair("left", "right"))
    outer_thunk, outer_calls = _counting_thunk(DeferredPair(inner_thunk))
    layered = deferred_construct(outer_thunk)
    assert outer_calls == [] and inner_calls == []

    assert layered.first == "left"
    assert len(outer_calls) == 1
    assert len(inner_calls) == 1
    assert layered.force() == Pair("left", "right")
    assert len(inner_calls) == 1


def test_force_and_equality_with_pair():
    deferred = deferred_construct(lambda: Pair(1, (2, 3)))
    assert deferred.force() == Pair(1, (2, 3))
    assert deferred == Pair(1, (2, 3))
    assert Pair(1, (2, 3)) == deferred
    assert deferred != Pair(1, (2, 4))
    assert hash(deferred) == hash(Pair(1, (2, 3)))
    assert repr(deferred) == "DeferredPair(1, (2, 3))"


def test_thunk_must_return_pair():
    deferred = deferred_construct(lambda: (1, 2))
    with pytest.raises(TypeError):
        _ = deferred.first


def test_concurrent_access_runs_thunk_once():
    """
    Many threads reading at once still evaluate the thunk a single time.
    """
    barrier = threading.Barrier(8)
    thunk, calls = _counting_thunk(Pair(0, 1))
    deferred = deferred_construct(thunk)
    results = []

    def reader():
        barrier.wait()
        results.append(deferred.second)

    threads = [threading.Thread(target=reader) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == [1] * 8
    assert len(calls) == 1
