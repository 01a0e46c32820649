"""
Tests for tools/overlap.py

Half-open interval semantics: touching endpoints never overlap.
"""

from study_scheduler.tools.overlap import overlaps, has_overlap

from .conftest import at, busy


def test_disjoint_intervals_do_not_overlap():
    a = busy(at(7, 9), at(7, 10))
    b = busy(at(7, 11), at(7, 12))
    assert not overlaps(a, b)
    assert not overlaps(b, a)


def test_touching_intervals_do_not_overlap():
    a = busy(at(7, 9), at(7, 10))
    b = busy(at(7, 10), at(7, 11))
    assert not overlaps(a, b)
    assert not overlaps(b, a)


def test_partial_overlap():
    a = busy(at(7, 9), at(7, 10, 30))
    b = busy(at(7, 10), at(7, 11))
    assert overlaps(a, b)
    assert overlaps(b, a)


def test_containment_overlaps():
    outer = busy(at(7, 9), at(7, 17))
    inner = busy(at(7, 12), at(7, 13))
    assert overlaps(outer, inner)
    assert overlaps(inner, outer)


def test_identical_intervals_overlap():
    a = busy(at(7, 9), at(7, 10))
    assert overlaps(a, a)


def test_has_overlap_against_collection():
    intervals = [busy(at(7, 9), at(7, 10)), busy(at(7, 13), at(7, 14))]

    assert has_overlap(at(7, 9, 30), at(7, 10, 30), intervals)
    assert has_overlap(at(7, 12), at(7, 15), intervals)
    assert not has_overlap(at(7, 10), at(7, 13), intervals)
    assert not has_overlap(at(7, 14), at(7, 15), intervals)


def test_has_overlap_empty_collection():
    assert not has_overlap(at(7, 9), at(7, 10), [])
