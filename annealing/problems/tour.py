from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from annealing.problems.base import Problem

Tour = Tuple[int, ...]


def compute_cycle_cost(dist_matrix: np.ndarray, cycle: Sequence[int]) -> float:
    """Compute tour cost (including return leg)."""
    if not cycle:
        return float("inf")
    cost = 0.0
    for i in range(len(cycle)):
        a = cycle[i]
        b = cycle[(i + 1) % len(cycle)]
        cost += float(dist_matrix[a, b])
    return cost


def distance_matrix(coordinates: np.ndarray, metric: str = "euclidean") -> np.ndarray:
    coords = np.asarray(coordinates, dtype=float)
    if coords.ndim != 2:
        raise ValueError("Coordinates must be a 2-D array of shape (n, d).")
    diff = coords[:, None, :] - coords[None, :, :]
    if metric.lower() == "manhattan":
        return np.abs(diff).sum(axis=-1)
    return np.linalg.norm(diff, axis=-1)


class TourProblem(Problem[Tour]):
    """Travelling-salesman tours over a distance matrix.

    States are permutations of ``range(n)`` stored as tuples; the energy is the
    closed cycle length divided by ``scale``. Neighbours reverse one random
    segment of the tour (a 2-opt move), keeping city ``0`` in front.
    """

    def __init__(
        self,
        graph: np.ndarray,
        scale: Optional[float] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        dist_matrix = np.asarray(graph, dtype=float)
        if dist_matrix.ndim != 2 or dist_matrix.shape[0] != dist_matrix.shape[1]:
            raise ValueError("Distance matrix must be square.")
        if scale is not None and scale <= 0:
            raise ValueError("scale must be positive.")
        self.dist_matrix = dist_matrix
        self.n = dist_matrix.shape[0]
        self.scale = float(scale) if scale is not None else 1.0
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @classmethod
    def from_coordinates(cls, coordinates: np.ndarray, metric: str = "euclidean", **kwargs) -> "TourProblem":
        return cls(distance_matrix(coordinates, metric=metric), **kwargs)

    def initial_state(self) -> Tour:
        return tuple(range(self.n))

    def random_state(self) -> Tour:
        rest = self.rng.permutation(np.arange(1, self.n))
        return (0, *(int(c) for c in rest)) if self.n else ()

    def energy(self, state: Tour) -> float:
        return compute_cycle_cost(self.dist_matrix, state) / self.scale

    def new_state(self, state: Tour) -> Tour:
        if len(state) < 4:
            return tuple(state)
        i, j = sorted(int(k) for k in self.rng.choice(np.arange(1, len(state)), size=2, replace=False))
        path = list(state)
        path[i : j + 1] = reversed(path[i : j + 1])
        return tuple(path)


__all__ = ["Tour", "TourProblem", "compute_cycle_cost", "distance_matrix"]
