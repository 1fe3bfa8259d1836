"""Tests for the search fringe priority queue."""

import math

from waypoint.core.search.fringe import Fringe


def test_pop_lowest_priority():
    fringe = Fringe()
    fringe.add_or_update(5, 3.0)
    fringe.add_or_update(7, 1.0)
    fringe.add_or_update(2, 2.0)
    assert fringe.pop() == (1.0, 7)
    assert fringe.pop() == (2.0, 2)
    assert fringe.pop() == (3.0, 5)
    assert fringe.pop() is None
    assert fringe.empty()


def test_ties_go_to_lowest_vertex():
    """Test that equal priorities are popped in vertex order."""
    fringe = Fringe()
    for vertex in (9, 4, 6, 1):
        fringe.add_or_update(vertex, 1.0)
    assert [fringe.pop()[1] for _ in range(4)] == [1, 4, 6, 9]


def test_decrease_key():
    """Test that lowering a priority reorders the vertex and drops the old entry."""
    fringe = Fringe()
    fringe.add_or_update(1, 5.0)
    fringe.add_or_update(2, 3.0)
    assert fringe.add_or_update(1, 1.0)
    assert len(fringe) == 2
    assert fringe.priority(1) == 1.0
    assert fringe.pop() == (1.0, 1)
    assert fringe.pop() == (3.0, 2)
    assert fringe.pop() is None


def test_increase_is_ignored():
    """Test that a higher or equal priority does not replace the current one."""
    fringe = Fringe()
    fringe.add_or_update(1, 2.0)
    assert not fringe.add_or_update(1, 4.0)
    assert not fringe.add_or_update(1, 2.0)
    assert fringe.priority(1) == 2.0
    assert len(fringe) == 1


def test_infinite_priority():
    """Test that vertices with unknown distance can wait in the fringe."""
    fringe = Fringe()
    fringe.add_or_update(3, math.inf)
    fringe.add_or_update(8, 0.0)
    assert 3 in fringe
    assert fringe.pop() == (0.0, 8)
    assert fringe.pop() == (math.inf, 3)
    assert 3 not in fringe
