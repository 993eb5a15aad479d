# quantizer_wsmeans.py – weighted k-means in L*a*b*
#   - every distinct pixel is one point weighted by its population
#   - seeded with caller clusters (usually Wu's output) or random L*a*b* points
#   - the triangle inequality on inter-cluster distances prunes candidates

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from .point_provider_lab import LabPointProvider

log = logging.getLogger(__name__)

# --- constants ---
MAX_ITERATIONS = 10
MIN_MOVEMENT_DISTANCE = 3.0


def quantize(
    input_pixels: Sequence[int],
    starting_clusters: Sequence[int],
    max_colors: int,
    rng: Optional[np.random.Generator] = None,
) -> dict[int, int]:
    """
    Cluster `input_pixels` into at most `max_colors` colours.

    Returns ARGB -> population for each non-empty cluster. Initial cluster
    assignment is random; pass `rng` for a reproducible run.
    """
    if rng is None:
        rng = np.random.default_rng()
    provider = LabPointProvider()

    # --- 1) distinct pixels as weighted points ---
    pixel_to_count: dict[int, int] = {}
    for pixel in input_pixels:
        pixel_to_count[pixel] = pixel_to_count.get(pixel, 0) + 1
    pixels = list(pixel_to_count)
    point_count = len(pixels)
    if point_count == 0:
        return {}
    points = np.array([provider.from_int(p) for p in pixels], dtype=np.float64)
    counts = np.array([pixel_to_count[p] for p in pixels], dtype=np.float64)

    # --- 2) starting clusters ---
    cluster_count = min(max_colors, point_count)
    if len(starting_clusters) > 0:
        cluster_count = min(cluster_count, len(starting_clusters))
    if cluster_count <= 0:
        return {}

    clusters = [provider.from_int(c) for c in starting_clusters]
    additional_clusters_needed = cluster_count - len(clusters)
    if len(starting_clusters) == 0 and additional_clusters_needed > 0:
        for _ in range(additional_clusters_needed):
            l = rng.random() * 100.0
            a = rng.random() * 201.0 - 100.0
            b = rng.random() * 201.0 - 100.0
            clusters.append([l, a, b])
    clusters_arr = np.array(clusters[:cluster_count], dtype=np.float64)

    cluster_indices = rng.integers(0, cluster_count, size=point_count)
    pixel_count_sums = np.zeros(cluster_count, dtype=np.float64)
    rows = np.arange(point_count)

    # --- 3) iterate ---
    for iteration in range(MAX_ITERATIONS):
        inter = np.zeros((cluster_count, cluster_count), dtype=np.float64)
        for i in range(cluster_count):
            for j in range(i + 1, cluster_count):
                d = provider.distance(clusters_arr[i], clusters_arr[j])
                inter[i, j] = d
                inter[j, i] = d

        to_cluster = np.empty((point_count, cluster_count), dtype=np.float64)
        for j in range(cluster_count):
            delta = points - clusters_arr[j]
            to_cluster[:, j] = (
                delta[:, 0] * delta[:, 0] + delta[:, 1] * delta[:, 1] + delta[:, 2] * delta[:, 2]
            )

        previous_distance = to_cluster[rows, cluster_indices]
        # a cluster at least twice as far from the current one cannot be closer
        reachable = inter[cluster_indices] < 4.0 * previous_distance[:, None]
        candidates = np.where(reachable, to_cluster, np.inf)
        best_index = np.argmin(candidates, axis=1)
        best_distance = candidates[rows, best_index]

        improved = best_distance < previous_distance
        change = np.abs(np.sqrt(np.where(improved, best_distance, 0.0)) - np.sqrt(previous_distance))
        moved = improved & (change > MIN_MOVEMENT_DISTANCE)
        points_moved = int(moved.sum())
        cluster_indices = np.where(moved, best_index, cluster_indices)

        if points_moved == 0 and iteration != 0:
            break

        pixel_count_sums = np.bincount(cluster_indices, weights=counts, minlength=cluster_count)
        for c in range(3):
            sums = np.bincount(
                cluster_indices, weights=points[:, c] * counts, minlength=cluster_count
            )
            with np.errstate(invalid="ignore", divide="ignore"):
                clusters_arr[:, c] = np.where(pixel_count_sums > 0, sums / pixel_count_sums, 0.0)
        log.debug("wsmeans: iteration %d moved %d points", iteration, points_moved)

    # --- 4) collect ---
    argb_to_population: dict[int, int] = {}
    for i in range(cluster_count):
        count = pixel_count_sums[i]
        if count == 0:
            continue
        possible_new_cluster = provider.to_int(clusters_arr[i])
        if possible_new_cluster in argb_to_population:
            continue
        argb_to_population[possible_new_cluster] = int(count)
    return argb_to_population


__all__ = ["quantize", "MAX_ITERATIONS", "MIN_MOVEMENT_DISTANCE"]
