from __future__ import annotations

from typing import Dict, Sequence, Tuple

import numpy as np

from .graph import Neighbor


def radial_layout(
    origin: str,
    neighbors: Sequence[Neighbor],
    radius: float = 250.0,
    min_radius: float = 60.0,
) -> Dict[str, Tuple[float, float]]:
    """
    Canvas positions for the nearby view.
    - origin sits at (0, 0);
    - neighbors are spread evenly by angle, in the given order,
      starting straight up and going clockwise;
    - the distance from the centre is proportional to the road length,
      scaled so the farthest neighbor lands on radius, but never closer
      than min_radius (otherwise labels overlap the origin).
    If the same city appears twice (parallel roads), the first record wins.
    """
    positions: Dict[str, Tuple[float, float]] = {origin: (0.0, 0.0)}

    unique = []
    seen = {origin}
    for n in neighbors:
        if n.city in seen:
            continue
        seen.add(n.city)
        unique.append(n)

    if not unique:
        return positions

    distances = np.array([n.distance for n in unique], dtype=float)
    longest = distances.max()
    if longest > 0:
        scaled = distances / longest * radius
    else:
        scaled = np.zeros_like(distances)
    rings = np.clip(scaled, min_radius, max(radius, min_radius))

    # -pi/2 is "up" in screen coordinates (y grows downwards)
    angles = np.linspace(0.0, 2 * np.pi, num=len(unique), endpoint=False) - np.pi / 2
    xs = rings * np.cos(angles)
    ys = rings * np.sin(angles)

    for n, x, y in zip(unique, xs, ys):
        positions[n.city] = (float(x), float(y))

    return positions
