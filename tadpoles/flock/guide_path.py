"""
Guide Path - Polyline the flock follows in group mode

Pure Python + NumPy, no Qt knowledge. Points are stored as an (N, 2)
float array; arc-length lookups interpolate along the cumulative
segment lengths.

Lifecycle:
    begin drawing  -> clear()
    mouse drag     -> add(point)
    mouse release  -> simplify(PATH_SIMPLIFY_TOLERANCE)
    view resize    -> fit_bounds(w, h); scale(PATH_FIT_SCALE)
"""

import math
from typing import List, Optional, Tuple

import numpy as np

from tadpoles.config import PATH_FIT_SCALE, PATH_SIMPLIFY_TOLERANCE
from tadpoles.flock.vector import Vector2


class GuidePath:
    """Open or closed polyline with arc-length sampling."""

    def __init__(self, points=None):
        self._points = np.zeros((0, 2), dtype=np.float64)
        self._cumulative = np.zeros(0, dtype=np.float64)
        if points is not None:
            for p in points:
                self.add(p)

    # === Construction ===

    @classmethod
    def heart(cls, width: float, height: float, samples: int = 96) -> "GuidePath":
        """Closed heart outline fitted to the view."""
        t = np.linspace(0.0, 2 * math.pi, samples)
        xs = 16 * np.sin(t) ** 3
        # Screen space: y grows downward, so flip the classic curve
        ys = -(13 * np.cos(t) - 5 * np.cos(2 * t) - 2 * np.cos(3 * t) - np.cos(4 * t))
        path = cls(zip(xs.tolist(), ys.tolist()))
        path.fit_bounds(width, height)
        path.scale(PATH_FIT_SCALE)
        return path

    def add(self, point) -> None:
        """Append a point; consecutive duplicates are dropped."""
        x, y = _xy(point)
        if len(self._points) and self._points[-1, 0] == x and self._points[-1, 1] == y:
            return
        self._points = np.vstack([self._points, [x, y]])
        self._rebuild()

    def clear(self) -> None:
        self._points = np.zeros((0, 2), dtype=np.float64)
        self._rebuild()

    def copy(self) -> "GuidePath":
        clone = GuidePath()
        clone._points = self._points.copy()
        clone._rebuild()
        return clone

    # === Queries ===

    @property
    def points(self) -> List[Tuple[float, float]]:
        return [(float(x), float(y)) for x, y in self._points]

    def __len__(self) -> int:
        return len(self._points)

    @property
    def is_empty(self) -> bool:
        return len(self._points) == 0

    @property
    def length(self) -> float:
        """Total arc length."""
        if len(self._cumulative) == 0:
            return 0.0
        return float(self._cumulative[-1])

    def point_at(self, offset: float) -> Optional[Vector2]:
        """
        Point at the given arc length from the start.

        Returns None when the path is empty or offset is off the path.
        """
        if self.is_empty or offset < 0 or offset > self.length:
            return None
        x = np.interp(offset, self._cumulative, self._points[:, 0])
        y = np.interp(offset, self._cumulative, self._points[:, 1])
        return Vector2(float(x), float(y))

    def point_at_fraction(self, fraction: float) -> Optional[Vector2]:
        """Point at fraction (0-1) of the total arc length."""
        return self.point_at(fraction * self.length)

    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """(min_x, min_y, max_x, max_y) or None if empty."""
        if self.is_empty:
            return None
        mins = self._points.min(axis=0)
        maxs = self._points.max(axis=0)
        return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])

    # === Transforms ===

    def simplify(self, tolerance: float = PATH_SIMPLIFY_TOLERANCE) -> None:
        """Drop vertices closer than tolerance to the simplified line."""
        if len(self._points) < 3:
            return
        keep = _douglas_peucker(self._points, tolerance)
        self._points = self._points[keep]
        self._rebuild()

    def fit_bounds(self, width: float, height: float) -> None:
        """Uniformly scale and centre the path inside a width x height view."""
        box = self.bounds()
        if box is None:
            return
        min_x, min_y, max_x, max_y = box
        path_w = max_x - min_x
        path_h = max_y - min_y
        if path_w == 0 and path_h == 0:
            self._points = np.tile([width / 2, height / 2], (len(self._points), 1))
            self._rebuild()
            return

        factors = []
        if path_w > 0:
            factors.append(width / path_w)
        if path_h > 0:
            factors.append(height / path_h)
        factor = min(factors)

        center = np.array([(min_x + max_x) / 2, (min_y + max_y) / 2])
        self._points = (self._points - center) * factor + np.array([width / 2, height / 2])
        self._rebuild()

    def scale(self, factor: float) -> None:
        """Scale about the bounding-box centre."""
        box = self.bounds()
        if box is None:
            return
        min_x, min_y, max_x, max_y = box
        center = np.array([(min_x + max_x) / 2, (min_y + max_y) / 2])
        self._points = (self._points - center) * factor + center
        self._rebuild()

    def _rebuild(self) -> None:
        if len(self._points) == 0:
            self._cumulative = np.zeros(0, dtype=np.float64)
            return
        segments = np.linalg.norm(np.diff(self._points, axis=0), axis=1)
        self._cumulative = np.concatenate([[0.0], np.cumsum(segments)])


def _xy(point) -> Tuple[float, float]:
    if isinstance(point, Vector2):
        return float(point.x), float(point.y)
    x, y = point
    return float(x), float(y)


def _douglas_peucker(points: np.ndarray, tolerance: float) -> np.ndarray:
    """Indices of the vertices kept by Ramer-Douglas-Peucker."""
    keep = np.zeros(len(points), dtype=bool)
    keep[0] = keep[-1] = True
    stack = [(0, len(points) - 1)]

    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue
        a = points[start]
        b = points[end]
        inner = points[start + 1:end]
        ab = b - a
        ab_len = np.hypot(ab[0], ab[1])
        if ab_len == 0:
            distances = np.linalg.norm(inner - a, axis=1)
        else:
            # Perpendicular distance via 2D cross product
            rel = inner - a
            distances = np.abs(ab[0] * rel[:, 1] - ab[1] * rel[:, 0]) / ab_len
        idx = int(np.argmax(distances))
        if distances[idx] > tolerance:
            split = start + 1 + idx
            keep[split] = True
            stack.append((start, split))
            stack.append((split, end))

    return np.flatnonzero(keep)
