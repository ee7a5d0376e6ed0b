"""Validate the fixed region geometry table."""

import dataclasses

import numpy as np
import pytest

from flenley.chemistry.regions import (
    Boundary,
    Region,
    all_regions,
    display_domain,
    get_region,
    h_plus_range,
    segments_for,
)

EXPECTED_LABELS = [
    "Normal",
    "Metabolic Acidosis",
    "Acute Respiratory Acidosis",
    "Chronic Respiratory Acidosis",
    "Metabolic Alkalosis",
    "Acute Respiratory Alkalosis",
    "Chronic Respiratory Alkalosis",
    "Mixed Metabolic + Respiratory Acidosis",
    "Mixed Acute + Chronic Respiratory Acidosis",
    "Mixed Metabolic Alkalosis + Respiratory Acidosis",
    "Mixed Metabolic + Respiratory Alkalosis",
    "Mixed Acute + Chronic Respiratory Alkalosis",
    "Mixed Metabolic Acidosis + Respiratory Alkalosis",
]

# Segments whose fitted upper line drops below the fitted lower line.
KNOWN_INVERTED = {
    ("metabolic_acidosis", 2),
    ("mixed_acute_chronic_respiratory_acidosis", 0),
    ("mixed_metabolic_alkalosis_respiratory_acidosis", 0),
    ("mixed_metabolic_acidosis_respiratory_alkalosis", 1),
}

GAP_TOL = 0.02


def _all_segments():
    for region in all_regions():
        for idx, seg in enumerate(region.segments):
            yield region, idx, seg


def _shoelace(verts):
    x, y = verts[:, 0], verts[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


class TestTableShape:
    """Check the enumeration order and table size."""

    def test_thirteen_regions_in_fixed_order(self):
        assert [region.label for region in all_regions()] == EXPECTED_LABELS

    def test_twenty_five_segments(self):
        assert sum(len(region.segments) for region in all_regions()) == 25

    def test_colors_are_distinct_rgb_triples(self):
        colors = [region.color for region in all_regions()]
        assert len(set(colors)) == 13
        for color in colors:
            assert len(color) == 3
            assert all(0.0 <= c <= 1.0 for c in color)

    def test_keys_are_unique(self):
        keys = [region.key for region in all_regions()]
        assert len(set(keys)) == len(keys)

    def test_axis_domains(self):
        assert display_domain() == (9.0, 100.0)
        assert h_plus_range() == (0.0, 100.0)

    def test_regions_are_immutable(self):
        region = all_regions()[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            region.label = "Changed"
        with pytest.raises(dataclasses.FrozenInstanceError):
            region.segments[0].x_lo = 0.0


class TestLookup:
    def test_segments_for_accepts_region_key_and_label(self):
        region = all_regions()[1]
        assert segments_for(region) is region.segments
        assert segments_for("metabolic_acidosis") == region.segments
        assert segments_for("Metabolic Acidosis") == region.segments

    def test_get_region_is_case_insensitive(self):
        assert get_region("NORMAL").key == "normal"
        assert isinstance(get_region("metabolic alkalosis"), Region)

    def test_unknown_region_raises_key_error(self):
        with pytest.raises(KeyError):
            segments_for("respiratory confusion")


class TestIntervals:
    def test_intervals_are_ordered(self):
        for _, _, seg in _all_segments():
            assert seg.x_lo < seg.x_hi
            assert 9.0 <= seg.x_lo and seg.x_hi <= 100.0

    def test_segments_within_region_are_contiguous(self):
        """Consecutive segments of a region meet within 0.02 mmHg."""
        for region in all_regions():
            for prev, nxt in zip(region.segments, region.segments[1:]):
                gap = nxt.x_lo - prev.x_hi
                assert -1e-9 <= gap <= GAP_TOL, (region.key, prev.x_hi, nxt.x_lo)

    def test_metabolic_acidosis_spans_9_to_37(self):
        segs = segments_for("metabolic_acidosis")
        assert segs[0].x_lo == 9.0
        assert segs[-1].x_hi == 36.99

    def test_union_covers_display_domain(self):
        intervals = sorted((seg.x_lo, seg.x_hi) for _, _, seg in _all_segments())
        start, end = intervals[0]
        for lo, hi in intervals[1:]:
            assert lo - end <= GAP_TOL, f"gap between {end} and {lo}"
            end = max(end, hi)
        assert start == 9.0
        assert end == 100.0


class TestBoundaries:
    def test_boundary_evaluation(self):
        line = Boundary(-1.98855, 93.11307)
        assert isinstance(line(10.0), float)
        assert np.isclose(line(10.0), 73.22757)
        np.testing.assert_allclose(
            line(np.array([0.0, 10.0])), [93.11307, 73.22757]
        )
        assert Boundary(0.0, 35.5).is_constant
        assert not line.is_constant

    def test_upper_not_below_lower_for_random_x(self):
        """Property check over random pCO2 values in each segment."""
        rng = np.random.default_rng(0)
        for region, idx, seg in _all_segments():
            if (region.key, idx) in KNOWN_INVERTED:
                continue
            x = rng.uniform(seg.x_lo, seg.x_hi, size=200)
            x = np.concatenate([x, [seg.x_lo, seg.x_hi]])
            assert np.all(seg.upper(x) >= seg.lower(x)), (region.key, idx)

    def test_only_known_segments_have_inverted_bounds(self):
        inverted = {
            (region.key, idx)
            for region, idx, seg in _all_segments()
            if seg.has_inverted_bounds()
        }
        assert inverted == KNOWN_INVERTED

    def test_envelope_is_ordered_everywhere(self):
        rng = np.random.default_rng(1)
        for _, _, seg in _all_segments():
            x = rng.uniform(seg.x_lo, seg.x_hi, size=100)
            low, high = seg.bounds_at(x)
            assert np.all(high >= low)


class TestVertices:
    def test_normal_region_vertices(self):
        verts = segments_for("normal")[0].vertices()
        np.testing.assert_allclose(
            verts, [[37.0, 35.5], [44.0, 35.5], [44.0, 44.7], [37.0, 44.7]]
        )

    def test_vertices_follow_winding_order(self):
        for _, _, seg in _all_segments():
            verts = seg.vertices()
            assert verts.shape == (4, 2)
            np.testing.assert_array_equal(
                verts[:, 0], [seg.x_lo, seg.x_hi, seg.x_hi, seg.x_lo]
            )
            np.testing.assert_allclose(
                verts[:, 1],
                [
                    seg.lower(seg.x_lo),
                    seg.lower(seg.x_hi),
                    seg.upper(seg.x_hi),
                    seg.upper(seg.x_lo),
                ],
            )

    def test_crossing_segment_keeps_fitted_line_order(self):
        seg = segments_for("mixed_acute_chronic_respiratory_acidosis")[0]
        np.testing.assert_allclose(
            seg.vertices(),
            [
                [seg.x_lo, seg.lower(seg.x_lo)],
                [100.0, 80.98],
                [100.0, 65.03],
                [seg.x_lo, seg.upper(seg.x_lo)],
            ],
            atol=0.01,
        )

    def test_ordered_segments_wind_counter_clockwise(self):
        for region, idx, seg in _all_segments():
            if (region.key, idx) in KNOWN_INVERTED:
                continue
            assert _shoelace(seg.vertices()) > 0.0, (region.key, idx)

    def test_vertices_are_deterministic(self):
        first = [seg.vertices() for _, _, seg in _all_segments()]
        second = [seg.vertices() for _, _, seg in _all_segments()]
        for a, b in zip(first, second):
            np.testing.assert_array_equal(a, b)

    def test_metabolic_alkalosis_bounds_at_45(self):
        seg = segments_for("metabolic_alkalosis")[1]
        assert seg.covers(45.0)
        low, high = seg.bounds_at(45.0)
        assert abs(low - 26.15) < 0.02
        assert abs(high - 36.58) < 0.05
