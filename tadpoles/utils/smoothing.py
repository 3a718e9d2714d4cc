"""
Smoothing - Cosmetic curve fit for drawing chains

Catmull-Rom through every input point, so the drawn tail passes through
the simulated links. Only the renderer uses this; the simulation never
sees smoothed points.
"""

from typing import Sequence, Tuple

import numpy as np


def smooth_points(points: Sequence[Tuple[float, float]], subdivisions: int = 4) -> np.ndarray:
    """
    Densify a polyline with a uniform Catmull-Rom spline.

    Returns an (M, 2) array that starts at points[0] and ends at
    points[-1]. Fewer than three points are returned unchanged.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(pts) < 3 or subdivisions < 1:
        return pts.copy()

    # Mirror the end points so the first and last segments have neighbours
    padded = np.vstack([2 * pts[0] - pts[1], pts, 2 * pts[-1] - pts[-2]])
    t = np.linspace(0.0, 1.0, subdivisions, endpoint=False)[:, None]
    t2 = t * t
    t3 = t2 * t

    out = []
    for i in range(1, len(padded) - 2):
        p0, p1, p2, p3 = padded[i - 1], padded[i], padded[i + 1], padded[i + 2]
        seg = 0.5 * (
            2 * p1
            + (-p0 + p2) * t
            + (2 * p0 - 5 * p1 + 4 * p2 - p3) * t2
            + (-p0 + 3 * p1 - 3 * p2 + p3) * t3
        )
        out.append(seg)
    out.append(pts[-1][None, :])
    return np.vstack(out)
