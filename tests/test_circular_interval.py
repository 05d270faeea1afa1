"""Tests for sphere_tools.types.circular."""

from __future__ import annotations

import itertools
import math

import pytest

from sphere_tools.types.circular import CircularInterval, positive_distance

PI = math.pi
HALF_PI = math.pi / 2

EMPTY = CircularInterval.empty()
FULL = CircularInterval.full()


def ci(lo: float, hi: float) -> CircularInterval:
    return CircularInterval.from_endpoints(lo, hi)


# Quadrants and their unions, named by the quadrants they cover.
# Built with from_endpoints so that -pi endpoints are normalized.
QUADRANTS = {
    "empty": EMPTY,
    "full": FULL,
    "zero": ci(0.0, 0.0),
    "pi2": ci(HALF_PI, HALF_PI),
    "pi": ci(PI, PI),
    "mipi2": ci(-HALF_PI, -HALF_PI),
    "quad1": ci(0.0, HALF_PI),
    "quad2": ci(HALF_PI, -PI),
    "quad3": ci(PI, -HALF_PI),
    "quad4": ci(-HALF_PI, 0.0),
    "quad12": ci(0.0, -PI),
    "quad23": ci(HALF_PI, -HALF_PI),
    "quad34": ci(-PI, 0.0),
    "quad41": ci(-HALF_PI, HALF_PI),
    "quad123": ci(0.0, -HALF_PI),
    "quad234": ci(HALF_PI, 0.0),
    "quad341": ci(PI, HALF_PI),
    "quad412": ci(-HALF_PI, -PI),
    "seam": ci(3.0, -3.0),
}

ALL_NAMES = sorted(QUADRANTS)
PAIRS = list(itertools.product(ALL_NAMES, repeat=2))


@pytest.fixture
def quadrants():
    return QUADRANTS


# ------------------------------------------------------------------
# positive_distance
# ------------------------------------------------------------------


class TestPositiveDistance:
    def test_forward(self):
        assert positive_distance(0.0, 1.0) == 1.0

    def test_wraps_through_seam(self):
        assert positive_distance(3.0, -3.0) == pytest.approx(2 * PI - 6.0)
        assert positive_distance(1.0, 0.0) == pytest.approx(2 * PI - 1.0)

    def test_same_point_is_zero(self):
        assert positive_distance(2.0, 2.0) == 0.0

    def test_half_turn(self):
        assert positive_distance(PI, 0.0) == pytest.approx(PI)


# ------------------------------------------------------------------
# Construction and normalization
# ------------------------------------------------------------------


class TestConstruction:
    def test_sentinels(self):
        assert EMPTY.bounds() == (PI, -PI)
        assert FULL.bounds() == (-PI, PI)
        assert EMPTY.is_empty() and not EMPTY.is_full()
        assert FULL.is_full() and not FULL.is_empty()

    def test_from_endpoints_keeps_sentinels(self):
        assert ci(PI, -PI).is_empty()
        assert ci(-PI, PI).is_full()

    def test_from_endpoints_rewrites_minus_pi(self):
        assert ci(-PI, 0.0).bounds() == (PI, 0.0)
        assert ci(0.0, -PI).bounds() == (0.0, PI)
        assert ci(-PI, -PI).bounds() == (PI, PI)

    def test_from_endpoints_minus_pi_lo(self):
        assert ci(-PI, 0.5).lo == PI

    def test_from_endpoints_allows_inverted(self):
        iv = ci(3.0, -3.0)
        assert iv.is_inverted()
        assert not iv.is_empty()

    def test_from_endpoints_rejects_out_of_range(self):
        with pytest.raises(AssertionError):
            ci(4.0, 0.0)

    def test_direct_constructor_stores_fields_verbatim(self):
        iv = CircularInterval(-PI, 0.0)
        assert iv.lo == -PI
        assert not iv.is_valid()

    def test_from_point(self):
        assert CircularInterval.from_point(1.0).bounds() == (1.0, 1.0)
        assert CircularInterval.from_point(-PI).bounds() == (PI, PI)

    def test_from_point_pair_chooses_shorter_arc(self):
        assert CircularInterval.from_point_pair(2.0, 0.5) == ci(0.5, 2.0)
        assert CircularInterval.from_point_pair(0.5, 2.0) == ci(0.5, 2.0)
        assert CircularInterval.from_point_pair(3.0, -3.0) == ci(3.0, -3.0)
        assert CircularInterval.from_point_pair(-3.0, 3.0) == ci(3.0, -3.0)

    def test_from_point_pair_same_point(self):
        assert CircularInterval.from_point_pair(-PI, -PI).bounds() == (PI, PI)


# ------------------------------------------------------------------
# Validity and classification
# ------------------------------------------------------------------


class TestValidity:
    @pytest.mark.parametrize(
        "lo, hi",
        [(0.0, 0.0), (PI, -PI), (-PI, PI), (PI, PI), (3.0, -3.0), (-1.0, 1.0), (PI, 0.0)],
    )
    def test_valid(self, lo, hi):
        assert CircularInterval(lo, hi).is_valid()

    @pytest.mark.parametrize(
        "lo, hi",
        [(-PI, 0.0), (0.0, -PI), (-PI, -PI), (4.0, 0.0), (0.0, -4.0), (math.inf, 0.0)],
    )
    def test_invalid(self, lo, hi):
        assert not CircularInterval(lo, hi).is_valid()

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_named_intervals_are_valid(self, name):
        assert QUADRANTS[name].is_valid()

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_exactly_one_classification(self, name):
        iv = QUADRANTS[name]
        kinds = [
            iv.is_empty(),
            iv.is_full(),
            iv.lo <= iv.hi and not iv.is_full(),
            iv.is_inverted() and not iv.is_empty(),
        ]
        assert sum(kinds) == 1

    def test_empty_is_also_inverted(self):
        assert EMPTY.is_inverted()
        assert not FULL.is_inverted()


# ------------------------------------------------------------------
# Equality
# ------------------------------------------------------------------


class TestEquality:
    def test_fieldwise(self, quadrants):
        assert quadrants["quad12"] == CircularInterval(0.0, PI)
        assert quadrants["quad12"] != quadrants["quad34"]

    def test_empty_equals_empty(self):
        assert EMPTY == ci(PI, -PI)
        assert hash(EMPTY) == hash(ci(PI, -PI))

    def test_full_is_not_empty(self):
        assert FULL != EMPTY

    def test_usable_in_sets(self, quadrants):
        assert len({quadrants["quad1"], ci(0.0, HALF_PI), EMPTY}) == 2


class TestApproxEquals:
    def test_short_interval_matches_empty(self):
        assert EMPTY.approx_equals(CircularInterval(0.0, 1e-14))
        assert CircularInterval(0.0, 1e-14).approx_equals(EMPTY)
        assert EMPTY.approx_equals(CircularInterval(1.0, 1.0))

    def test_long_interval_does_not_match_empty(self):
        assert not EMPTY.approx_equals(CircularInterval(0.0, 1e-13))
        assert not CircularInterval(0.0, 1e-13).approx_equals(EMPTY)

    def test_nearly_full_matches_full(self):
        nearly_full = CircularInterval(1e-15, 0.0)
        assert FULL.approx_equals(nearly_full)
        assert nearly_full.approx_equals(FULL)

    def test_half_circle_does_not_match_full(self, quadrants):
        assert not FULL.approx_equals(quadrants["quad12"])
        assert not quadrants["quad12"].approx_equals(FULL)

    def test_endpoint_tolerance(self, quadrants):
        quad1 = quadrants["quad1"]
        assert quad1.approx_equals(CircularInterval(1e-15, HALF_PI + 1e-15))
        assert not quad1.approx_equals(CircularInterval(0.0, HALF_PI + 1e-13))

    def test_endpoint_distance_measured_around_the_seam(self):
        a = CircularInterval(PI - 1e-15, 1.0)
        b = CircularInterval(-PI + 1e-15, 1.0)
        assert a.approx_equals(b)

    def test_point_does_not_match_full_circle_around_it(self):
        # Both endpoints are within tolerance but the lengths differ by 2*pi.
        point = CircularInterval(1.0, 1.0)
        nearly_full = CircularInterval(1.0, 1.0 - 1e-15)
        assert not point.approx_equals(nearly_full)

    def test_custom_max_error(self, quadrants):
        quad1 = quadrants["quad1"]
        assert quad1.approx_equals(CircularInterval(0.05, HALF_PI), 0.1)
        assert not quad1.approx_equals(CircularInterval(0.05, HALF_PI), 0.01)


# ------------------------------------------------------------------
# Point containment
# ------------------------------------------------------------------


class TestContainsPoint:
    def test_normal_interval(self, quadrants):
        quad1 = quadrants["quad1"]
        assert quad1.contains(0.0)
        assert quad1.contains(HALF_PI)
        assert quad1.contains(1.0)
        assert not quad1.contains(-0.1)
        assert quad1.interior_contains(1.0)
        assert not quad1.interior_contains(0.0)
        assert not quad1.interior_contains(HALF_PI)

    def test_minus_pi_is_pi(self, quadrants):
        assert quadrants["quad12"].contains(-PI)
        assert quadrants["quad34"].contains(-PI)
        assert quadrants["pi"].contains(-PI)
        assert not quadrants["quad12"].interior_contains(-PI)

    def test_inverted_interval(self):
        seam = ci(3.0, -3.0)
        assert seam.contains(PI)
        assert seam.contains(-PI)
        assert seam.contains(3.0)
        assert seam.contains(-3.0)
        assert not seam.contains(0.0)
        assert seam.interior_contains(PI)
        assert not seam.interior_contains(3.0)

    def test_full_contains_everything(self):
        for angle in (-PI, -1.0, 0.0, 1.0, PI):
            assert FULL.contains(angle)
            assert FULL.interior_contains(angle)

    def test_empty_contains_nothing(self):
        for angle in (-PI, -1.0, 0.0, 1.0, PI):
            assert not EMPTY.contains(angle)
            assert not EMPTY.interior_contains(angle)

    def test_point_has_no_interior(self, quadrants):
        assert quadrants["pi"].contains(PI)
        assert not quadrants["pi"].interior_contains(PI)

    def test_fast_contains_matches_contains(self, quadrants):
        for iv in quadrants.values():
            for angle in (-3.0, -HALF_PI, 0.0, 0.5, HALF_PI, 3.0, PI):
                assert iv.fast_contains(angle) == iv.contains(angle)

    def test_rejects_out_of_range_angle(self, quadrants):
        with pytest.raises(AssertionError):
            quadrants["quad1"].contains(4.0)


# ------------------------------------------------------------------
# Interval containment and intersection
# ------------------------------------------------------------------


class TestIntervalRelations:
    @pytest.mark.parametrize(
        "outer, inner",
        [
            ("quad12", "quad1"),
            ("quad12", "quad2"),
            ("quad23", "quad2"),
            ("quad23", "quad3"),
            ("quad341", "quad4"),
            ("quad341", "quad1"),
            ("full", "quad23"),
            ("quad1", "empty"),
            ("empty", "empty"),
            ("quad12", "pi"),
        ],
    )
    def test_contains(self, quadrants, outer, inner):
        assert quadrants[outer].contains_interval(quadrants[inner])

    @pytest.mark.parametrize(
        "outer, inner",
        [
            ("quad12", "quad23"),
            ("quad23", "quad1"),
            ("quad23", "quad4"),
            ("quad1", "quad12"),
            ("quad12", "full"),
            ("empty", "pi"),
            ("quad1", "quad41"),
        ],
    )
    def test_does_not_contain(self, quadrants, outer, inner):
        assert not quadrants[outer].contains_interval(quadrants[inner])

    def test_interior_contains_interval(self, quadrants):
        assert quadrants["quad12"].interior_contains_interval(ci(0.5, 1.0))
        assert not quadrants["quad12"].interior_contains_interval(quadrants["quad1"])
        assert FULL.interior_contains_interval(quadrants["quad12"])
        assert FULL.interior_contains_interval(quadrants["quad23"])
        assert quadrants["quad23"].interior_contains_interval(ci(2.0, -2.0))
        assert not quadrants["quad23"].interior_contains_interval(quadrants["quad3"])

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_everything_contains_empty(self, quadrants, name):
        iv = quadrants[name]
        assert iv.contains_interval(EMPTY)
        assert iv.interior_contains_interval(EMPTY)
        assert iv.contains_interval(iv)
        assert FULL.contains_interval(iv)

    def test_touching_intervals(self, quadrants):
        quad1, quad2 = quadrants["quad1"], quadrants["quad2"]
        assert quad1.intersects(quad2)
        assert not quad1.interior_intersects(quad2)
        assert quadrants["quad12"].intersects(quadrants["quad34"])
        assert not quadrants["quad12"].interior_intersects(quadrants["quad34"])
        assert quadrants["quad23"].intersects(quadrants["quad41"])
        assert not quadrants["quad23"].interior_intersects(quadrants["quad41"])

    def test_disjoint_intervals(self, quadrants):
        assert not quadrants["quad1"].intersects(quadrants["quad3"])
        assert not quadrants["quad3"].intersects(quadrants["quad1"])

    def test_overlapping_intervals(self, quadrants):
        assert quadrants["quad12"].interior_intersects(quadrants["quad23"])
        assert quadrants["quad23"].interior_intersects(quadrants["quad34"])

    def test_inverted_intervals_always_meet_at_pi(self):
        assert ci(3.0, -3.0).intersects(ci(2.0, -2.5))

    def test_point_has_no_interior_to_intersect(self, quadrants):
        assert not quadrants["pi"].interior_intersects(FULL)
        assert FULL.interior_intersects(quadrants["pi"])

    def test_empty_intersects_nothing(self, quadrants):
        for iv in quadrants.values():
            assert not EMPTY.intersects(iv)
            assert not iv.intersects(EMPTY)
            assert not EMPTY.interior_intersects(iv)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_intersects_is_symmetric(self, quadrants, a, b):
        assert quadrants[a].intersects(quadrants[b]) == quadrants[b].intersects(quadrants[a])


# ------------------------------------------------------------------
# Measures
# ------------------------------------------------------------------


class TestMeasures:
    def test_length(self, quadrants):
        assert quadrants["quad1"].length() == HALF_PI
        assert quadrants["quad12"].length() == PI
        assert quadrants["quad23"].length() == pytest.approx(PI)
        assert quadrants["quad123"].length() == pytest.approx(3 * HALF_PI)
        assert quadrants["seam"].length() == pytest.approx(2 * PI - 6.0)
        assert quadrants["pi"].length() == 0.0
        assert FULL.length() == 2 * PI

    def test_empty_length_is_negative(self):
        assert EMPTY.length() < 0

    def test_center(self, quadrants):
        assert quadrants["quad1"].center() == pytest.approx(PI / 4)
        assert quadrants["quad12"].center() == pytest.approx(HALF_PI)
        assert quadrants["quad3"].center() == pytest.approx(-3 * PI / 4)
        assert quadrants["seam"].center() == pytest.approx(PI)
        assert quadrants["quad23"].center() == pytest.approx(PI)

    def test_complement(self, quadrants):
        assert quadrants["quad1"].complement() == CircularInterval(HALF_PI, 0.0)
        assert quadrants["quad12"].complement() == quadrants["quad34"]
        assert FULL.complement().is_empty()
        assert EMPTY.complement().is_full()

    def test_complement_of_point_is_full(self, quadrants):
        assert quadrants["zero"].complement().is_full()
        assert quadrants["pi"].complement().is_full()

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_complement_is_valid(self, quadrants, name):
        assert quadrants[name].complement().is_valid()

    def test_complement_center(self, quadrants):
        assert quadrants["quad1"].complement_center() == pytest.approx(-3 * PI / 4)
        assert quadrants["zero"].complement_center() == pytest.approx(PI)
        assert quadrants["pi2"].complement_center() == pytest.approx(-HALF_PI)
        assert quadrants["mipi2"].complement_center() == pytest.approx(HALF_PI)

    def test_directed_hausdorff_distance(self, quadrants):
        quad1, quad12 = quadrants["quad1"], quadrants["quad12"]
        assert quad1.directed_hausdorff_distance(quad12) == 0.0
        assert quad12.directed_hausdorff_distance(quad1) == pytest.approx(HALF_PI)
        assert FULL.directed_hausdorff_distance(quad1) == pytest.approx(3 * PI / 4)

    def test_directed_hausdorff_distance_with_empty(self, quadrants):
        assert EMPTY.directed_hausdorff_distance(quadrants["quad1"]) == 0.0
        assert quadrants["quad1"].directed_hausdorff_distance(EMPTY) == PI
        assert EMPTY.directed_hausdorff_distance(EMPTY) == 0.0


# ------------------------------------------------------------------
# Union and intersection
# ------------------------------------------------------------------


class TestUnion:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("quad1", "quad2", "quad12"),
            ("quad2", "quad1", "quad12"),
            ("quad12", "quad34", "full"),
            ("quad23", "quad41", "full"),
            ("quad12", "quad1", "quad12"),
            ("quad1", "empty", "quad1"),
            ("empty", "quad3", "quad3"),
            ("full", "quad23", "full"),
            ("quad23", "full", "full"),
            ("empty", "empty", "empty"),
        ],
    )
    def test_named_cases(self, quadrants, a, b, expected):
        assert quadrants[a].union(quadrants[b]) == quadrants[expected]

    def test_disjoint_joins_across_smaller_gap(self):
        assert ci(0.5, 1.0).union(ci(2.5, 3.0)) == ci(0.5, 3.0)
        assert ci(2.5, 3.0).union(ci(-3.0, -2.5)) == ci(2.5, -2.5)
        assert ci(-3.0, -2.5).union(ci(2.5, 3.0)) == ci(2.5, -2.5)

    def test_point_and_quadrant(self, quadrants):
        assert quadrants["pi"].union(quadrants["quad1"]) == quadrants["quad12"]

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_result_is_valid_and_contains_both(self, quadrants, a, b):
        result = quadrants[a].union(quadrants[b])
        assert result.is_valid()
        assert result.contains_interval(quadrants[a])
        assert result.contains_interval(quadrants[b])


class TestIntersection:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("quad12", "quad23", "quad2"),
            ("quad23", "quad12", "quad2"),
            ("quad1", "quad2", "pi2"),
            ("quad1", "quad3", "empty"),
            ("quad12", "quad1", "quad1"),
            ("full", "quad23", "quad23"),
            ("quad23", "empty", "empty"),
            ("empty", "quad23", "empty"),
        ],
    )
    def test_named_cases(self, quadrants, a, b, expected):
        assert quadrants[a].intersection(quadrants[b]) == quadrants[expected]

    def test_double_overlap_keeps_self_on_tie(self, quadrants):
        quad12, quad34 = quadrants["quad12"], quadrants["quad34"]
        assert quad12.intersection(quad34) == quad12
        assert quad34.intersection(quad12) == quad34

    def test_double_overlap_returns_shorter(self):
        a = ci(-2.0, 2.0)
        b = ci(1.0, -1.0)
        assert a.intersection(b) == a
        assert b.intersection(a) == a

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_result_is_valid_and_agrees_with_intersects(self, quadrants, a, b):
        result = quadrants[a].intersection(quadrants[b])
        assert result.is_valid()
        assert result.is_empty() != quadrants[a].intersects(quadrants[b])


# ------------------------------------------------------------------
# add_point and expanded
# ------------------------------------------------------------------


class TestAddPoint:
    def test_empty_becomes_point(self):
        assert EMPTY.add_point(1.0) == CircularInterval(1.0, 1.0)
        assert EMPTY.add_point(-PI) == CircularInterval(PI, PI)

    def test_extends_toward_nearer_end(self, quadrants):
        assert quadrants["zero"].add_point(-HALF_PI) == quadrants["quad4"]
        assert quadrants["quad1"].add_point(3.0) == ci(0.0, 3.0)
        assert quadrants["quad1"].add_point(-3.0) == ci(0.0, -3.0)

    def test_contained_point_is_noop(self, quadrants):
        assert quadrants["quad12"].add_point(1.0) is quadrants["quad12"]
        assert FULL.add_point(0.0) is FULL

    def test_out_of_range_angle_is_ignored(self, quadrants):
        assert quadrants["quad1"].add_point(4.0) is quadrants["quad1"]

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_result_contains_point(self, quadrants, name):
        for angle in (-3.0, -HALF_PI, 0.0, 1.0, PI):
            result = quadrants[name].add_point(angle)
            assert result.is_valid()
            assert result.contains(angle)
            assert result.contains_interval(quadrants[name])


class TestExpanded:
    def test_grow(self, quadrants):
        result = quadrants["quad1"].expanded(0.1)
        assert result.lo == pytest.approx(-0.1)
        assert result.hi == pytest.approx(HALF_PI + 0.1)

    def test_grow_across_seam(self, quadrants):
        result = quadrants["quad2"].expanded(0.5)
        assert result.is_inverted()
        assert result.lo == pytest.approx(HALF_PI - 0.5)
        assert result.hi == pytest.approx(-PI + 0.5)

    def test_point_at_pi_grows_both_ways(self, quadrants):
        result = quadrants["pi"].expanded(0.1)
        assert result.lo == pytest.approx(PI - 0.1)
        assert result.hi == pytest.approx(-PI + 0.1)
        assert result.contains(PI)

    def test_grow_to_full(self, quadrants):
        assert quadrants["quad12"].expanded(PI).is_full()
        assert quadrants["quad123"].expanded(HALF_PI / 2).is_full()

    def test_shrink(self, quadrants):
        result = quadrants["quad12"].expanded(-0.5)
        assert result.lo == pytest.approx(0.5)
        assert result.hi == pytest.approx(PI - 0.5)

    def test_shrink_to_empty(self, quadrants):
        assert quadrants["zero"].expanded(-0.1).is_empty()
        assert quadrants["quad1"].expanded(-HALF_PI).is_empty()

    def test_expand_then_shrink_restores(self, quadrants):
        for name in ("quad1", "quad23", "quad123", "seam"):
            iv = quadrants[name]
            assert iv.expanded(0.1).expanded(-0.1).approx_equals(iv, 1e-12)

    def test_sentinels_are_stable(self):
        assert FULL.expanded(-1.0).is_full()
        assert FULL.expanded(1.0).is_full()
        assert EMPTY.expanded(1.0).is_empty()
        assert EMPTY.expanded(-1.0).is_empty()

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_result_is_valid(self, quadrants, name):
        for margin in (-2.0, -0.5, 0.0, 0.5, 2.0):
            assert quadrants[name].expanded(margin).is_valid()


# ------------------------------------------------------------------
# Display
# ------------------------------------------------------------------


class TestDisplay:
    def test_str(self, quadrants):
        assert str(quadrants["quad1"]) == "[0.0000000, 1.5707963]"

    def test_str_of_empty_shows_sentinel(self):
        assert str(EMPTY) == "[3.1415927, -3.1415927]"

    def test_repr(self):
        assert repr(CircularInterval(0.0, 1.0)) == "CircularInterval(0.0, 1.0)"
