"""Stroke extraction from raster drawings.

A bitmap is sampled on a regular grid and the ink samples are chained into
strokes by greedy nearest-neighbour search:

1. Seed a stroke with the lowest-index unvisited sample
2. Repeatedly append the nearest unvisited sample while it is closer than
   the threshold and the stroke is shorter than the cap
3. Drop strokes made of a single sample

Ties on the nearest distance go to the lowest sample index, so the result
only depends on the sample order (raster scan order).
"""

import numpy as np
import structlog

from handfont.config import ExtractionConfig
from handfont.domain import Point, RasterBitmap, Stroke

logger = structlog.get_logger(__name__)


class StrokeExtractor:
    """Turns a bitmap into strokes of raster-space points.

    Clustering costs O(k^2) for k ink samples; the sampling stride keeps k
    small enough for hand-drawn glyphs but full-resolution tracing would not
    scale.

    Example:
        extractor = StrokeExtractor(ExtractionConfig(step=5))
        strokes = extractor.extract(bitmap)
    """

    def __init__(self, config: ExtractionConfig | None = None) -> None:
        self.config = config or ExtractionConfig()

    def sample_points(self, bitmap: RasterBitmap) -> list[Point]:
        """Collect ink samples on the sampling grid.

        Args:
            bitmap: Bitmap to sample

        Returns:
            Points in raster scan order (row by row, x ascending)
        """
        step = self.config.step
        grid = bitmap.pixels[::step, ::step]
        red = grid[:, :, 0].astype(np.int32)
        alpha = grid[:, :, 3].astype(np.int32)
        mask = (red < self.config.red_cutoff) & (alpha > self.config.alpha_cutoff)

        rows, cols = np.nonzero(mask)
        return [Point(float(c * step), float(r * step)) for r, c in zip(rows, cols, strict=True)]

    def cluster(self, points: list[Point]) -> list[Stroke]:
        """Chain points into strokes.

        Args:
            points: Samples in a fixed order

        Returns:
            Strokes of at least two points and at most the configured cap
        """
        if not points:
            return []

        threshold = self.config.threshold
        cap = self.config.max_stroke_length

        coords = np.array([p.to_tuple() for p in points], dtype=np.float64)
        visited = np.zeros(len(points), dtype=bool)
        strokes: list[Stroke] = []

        for seed in range(len(points)):
            if visited[seed]:
                continue

            visited[seed] = True
            chain = [seed]
            current = seed

            while len(chain) < cap:
                distances = np.hypot(
                    coords[:, 0] - coords[current, 0],
                    coords[:, 1] - coords[current, 1],
                )
                distances[visited] = np.inf
                nearest = int(np.argmin(distances))
                if not distances[nearest] < threshold:
                    break
                visited[nearest] = True
                chain.append(nearest)
                current = nearest

            if len(chain) > 1:
                strokes.append(tuple(points[i] for i in chain))

        return strokes

    def extract(self, bitmap: RasterBitmap) -> list[Stroke]:
        """Sample a bitmap and cluster its ink into strokes."""
        points = self.sample_points(bitmap)
        strokes = self.cluster(points)
        logger.debug("Strokes extracted", samples=len(points), strokes=len(strokes))
        return strokes
