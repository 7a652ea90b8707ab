import numpy as np

from streamreducer.core import DouglasPeuckerSimplifier, simplify, maxDistance


def test_collinear_points_are_not_retained():
    values = np.zeros(8)
    timestamps = np.arange(8.)
    markers = simplify(values, timestamps, 2.0)
    assert markers.dtype == bool
    assert not markers.any()


def test_spike_is_retained():
    values = np.array([0., 0., 0., 10., 0., 0., 0.])
    timestamps = np.arange(7.)
    markers = simplify(values, timestamps, 2.0)
    assert list(np.where(markers)[0]) == [3]


def test_smaller_tolerance_retains_more():
    values = np.array([0., 0., 0., 10., 0., 0., 0.])
    timestamps = np.arange(7.)
    markers = simplify(values, timestamps, 0.5)
    # the points next to the spike are about 1.9 and 1.0 away from the
    # lines through the spike
    assert markers[3]
    assert markers.sum() > 1
    assert not markers[0] and not markers[-1]


def test_ties_keep_first_point():
    values = np.array([0., 5., 5., 0.])
    timestamps = np.arange(4.)
    markers = simplify(values, timestamps, 2.0)
    assert list(markers) == [False, True, False, False]


def test_simplify_sub_range():
    values = np.array([0., 0., 10., 0., 0., 10., 0.])
    timestamps = np.arange(7.)
    s = DouglasPeuckerSimplifier(values, timestamps, 2.0)
    markers = s.simplifyDouglasPeucker(0, 4)
    assert list(np.where(markers)[0]) == [2]
    assert not markers[5]


def test_short_ranges_are_left_alone():
    values = np.array([0., 10.])
    markers = simplify(values, np.arange(2.), 0.)
    assert not markers.any()


def test_max_distance():
    assert maxDistance(np.array([0., 1., 3., 3.])) == (2, 3.0)
    assert maxDistance(np.zeros(4)) == (0, 0.0)
    # NaN never wins
    assert maxDistance(np.array([0., np.nan, 2.])) == (2, 2.0)


def test_end_points_are_never_selected():
    # the planar distance of the last point can round to 2.2e-16
    values = np.array([3.767, -5.6, -0.268])
    timestamps = np.array([1., 3., 3.])
    s = DouglasPeuckerSimplifier(values, timestamps, 0.)
    markers = s.simplifyDouglasPeucker()
    assert list(markers) == [False, True, False]

    markers = simplify(np.array([3.767, 3.767, -0.268]), np.array([1., 1., 3.]), 0.)
    assert not markers.any()
