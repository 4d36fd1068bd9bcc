"""Tests for stroke extraction."""

import numpy as np
import pytest

from handfont.config import ExtractionConfig
from handfont.core.extractor import StrokeExtractor
from handfont.domain import Point, RasterBitmap


def white(width: int, height: int) -> np.ndarray:
    return np.full((height, width, 4), 255, dtype=np.uint8)


@pytest.fixture
def extractor() -> StrokeExtractor:
    return StrokeExtractor()


class TestSampling:
    """Tests for grid sampling of ink pixels."""

    def test_blank_bitmap_has_no_samples(self, extractor: StrokeExtractor) -> None:
        """Test a white bitmap yields no points."""
        assert extractor.sample_points(RasterBitmap(white(40, 40))) == []

    def test_only_grid_pixels_are_sampled(self, extractor: StrokeExtractor) -> None:
        """Test ink between grid positions is not seen."""
        pixels = white(20, 20)
        pixels[3, 3] = (0, 0, 0, 255)
        pixels[5, 10] = (0, 0, 0, 255)

        points = extractor.sample_points(RasterBitmap(pixels))

        assert points == [Point(10, 5)]

    def test_scan_order(self, extractor: StrokeExtractor) -> None:
        """Test samples come row by row with x ascending."""
        pixels = white(20, 20)
        pixels[5, 0] = (0, 0, 0, 255)
        pixels[0, 10] = (0, 0, 0, 255)
        pixels[0, 5] = (0, 0, 0, 255)

        points = extractor.sample_points(RasterBitmap(pixels))

        assert points == [Point(5, 0), Point(10, 0), Point(0, 5)]

    @pytest.mark.parametrize(
        ("rgba", "is_ink"),
        [
            ((0, 0, 0, 255), True),
            ((127, 255, 255, 255), True),
            ((128, 0, 0, 255), False),
            ((0, 0, 0, 129), True),
            ((0, 0, 0, 128), False),
            ((0, 0, 0, 0), False),
        ],
    )
    def test_foreground_rule(self, extractor: StrokeExtractor, rgba, is_ink) -> None:
        """Test ink means red below 128 and alpha above 128."""
        pixels = white(5, 5)
        pixels[0, 0] = rgba

        points = extractor.sample_points(RasterBitmap(pixels))

        assert (points == [Point(0, 0)]) is is_ink

    def test_custom_step(self) -> None:
        """Test the sampling stride is configurable."""
        pixels = white(10, 10)
        pixels[:, 3] = (0, 0, 0, 255)
        extractor = StrokeExtractor(ExtractionConfig(step=3))

        points = extractor.sample_points(RasterBitmap(pixels))

        assert points == [Point(3, 0), Point(3, 3), Point(3, 6), Point(3, 9)]


class TestClustering:
    """Tests for nearest-neighbour stroke chaining."""

    def test_no_points(self, extractor: StrokeExtractor) -> None:
        """Test empty input gives no strokes."""
        assert extractor.cluster([]) == []

    def test_chains_nearest_first(self, extractor: StrokeExtractor) -> None:
        """Test each step appends the nearest unvisited point."""
        points = [Point(0, 0), Point(10, 0), Point(3, 0)]

        strokes = extractor.cluster(points)

        assert strokes == [(Point(0, 0), Point(3, 0), Point(10, 0))]

    def test_distance_equal_to_threshold_splits(self, extractor: StrokeExtractor) -> None:
        """Test points exactly threshold apart are not chained."""
        assert extractor.cluster([Point(0, 0), Point(50, 0)]) == []
        assert extractor.cluster([Point(0, 0), Point(30, 40)]) == []

    def test_distance_below_threshold_joins(self, extractor: StrokeExtractor) -> None:
        """Test points just under threshold apart are chained."""
        strokes = extractor.cluster([Point(0, 0), Point(49.99, 0)])
        assert strokes == [(Point(0, 0), Point(49.99, 0))]

    def test_isolated_points_dropped(self, extractor: StrokeExtractor) -> None:
        """Test single-point strokes are discarded."""
        points = [Point(0, 0), Point(100, 100), Point(105, 100), Point(300, 300)]

        strokes = extractor.cluster(points)

        assert strokes == [(Point(100, 100), Point(105, 100))]

    def test_separate_groups(self, extractor: StrokeExtractor) -> None:
        """Test far-apart groups become separate strokes in seed order."""
        points = [Point(0, 0), Point(5, 0), Point(80, 0), Point(85, 0)]
        extractor = StrokeExtractor(ExtractionConfig(threshold=50))

        strokes = extractor.cluster(points)

        assert strokes == [
            (Point(0, 0), Point(5, 0)),
            (Point(80, 0), Point(85, 0)),
        ]

    def test_cap_limits_stroke_length(self) -> None:
        """Test strokes stop growing at the cap and the rest reseeds."""
        extractor = StrokeExtractor(ExtractionConfig(max_stroke_length=4))
        points = [Point(float(i), 0) for i in range(10)]

        strokes = extractor.cluster(points)

        assert [len(s) for s in strokes] == [4, 4, 2]
        assert strokes[1][0] == Point(4, 0)

    def test_tie_goes_to_lowest_index(self, extractor: StrokeExtractor) -> None:
        """Test equidistant candidates are taken in input order."""
        points = [Point(0, 0), Point(1, 0), Point(-1, 0)]

        strokes = extractor.cluster(points)

        assert strokes == [(Point(0, 0), Point(1, 0), Point(-1, 0))]

    def test_deterministic(self, extractor: StrokeExtractor) -> None:
        """Test repeated runs produce identical partitions."""
        rng = np.random.default_rng(7)
        points = [Point(float(x), float(y)) for x, y in rng.integers(0, 400, size=(150, 2))]

        assert extractor.cluster(points) == extractor.cluster(points)

    def test_invariants_on_random_input(self) -> None:
        """Test no stroke has one point or exceeds the cap."""
        extractor = StrokeExtractor(ExtractionConfig(max_stroke_length=7, threshold=30))
        rng = np.random.default_rng(3)
        points = [Point(float(x), float(y)) for x, y in rng.integers(0, 200, size=(200, 2))]

        strokes = extractor.cluster(points)

        assert all(2 <= len(stroke) <= 7 for stroke in strokes)
        assert sum(len(stroke) for stroke in strokes) <= len(points)


class TestExtract:
    """Tests for the full bitmap to strokes path."""

    def test_vertical_line(self, extractor: StrokeExtractor) -> None:
        """Test a drawn line becomes one stroke from top to bottom."""
        pixels = white(40, 40)
        pixels[5:35, 10:13] = (0, 0, 0, 255)

        strokes = extractor.extract(RasterBitmap(pixels))

        assert strokes == [tuple(Point(10, y) for y in (5, 10, 15, 20, 25, 30))]

    def test_blank_bitmap(self, extractor: StrokeExtractor) -> None:
        """Test a blank bitmap gives no strokes."""
        assert extractor.extract(RasterBitmap(white(40, 40))) == []
