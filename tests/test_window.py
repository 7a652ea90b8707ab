import logging

import numpy as np

from streamreducer.core import Point, ReducerWindow


def test_window_fills_up():
    w = ReducerWindow(3)
    assert w.isEmpty()
    assert not w.isFull()
    for i in range(3):
        assert w.append(Point(i, i))
    assert w.isFull()
    assert w.count == 3
    assert len(w) == 3


def test_append_to_full_window_drops_point(caplog):
    w = ReducerWindow(2)
    p0, p1, p2 = Point(0, 0), Point(1, 1), Point(2, 2)
    w.append(p0)
    w.append(p1)
    with caplog.at_level(logging.WARNING, logger='streamreducer.window'):
        assert not w.append(p2)
    assert 'window full' in caplog.text
    assert w.snapshot() == (p0, p1)


def test_snapshot_survives_clear():
    w = ReducerWindow(4)
    pts = [Point(i, 2 * i) for i in range(3)]
    for p in pts:
        w.append(p)
    snap = w.snapshot()
    w.clear()
    assert w.count == 0
    assert snap == tuple(pts)
    assert snap[1] is pts[1]


def test_arrays():
    w = ReducerWindow(4)
    w.append(Point(1.5, 10))
    w.append(Point(2.5, 11))
    values, timestamps = w.arrays()
    assert np.array_equal(values, [1.5, 2.5])
    assert np.array_equal(timestamps, [10., 11.])
