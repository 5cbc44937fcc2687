from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np

from annealing.problems.base import Problem


class BoxProblem(Problem[np.ndarray]):
    """Minimise a real function over a box ``lower <= x <= upper``.

    Each neighbour moves every coordinate by a uniform step of at most
    ``neighbor_scale`` times the span of its bounds, then clips back into the
    box.
    """

    def __init__(
        self,
        objective: Callable[[np.ndarray], float],
        lower_bounds: Sequence[float],
        upper_bounds: Sequence[float],
        neighbor_scale: float = 0.1,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        lower = np.asarray(lower_bounds, dtype=float)
        upper = np.asarray(upper_bounds, dtype=float)
        if lower.ndim != 1 or lower.shape != upper.shape:
            raise ValueError("lower_bounds and upper_bounds must be 1-D and of equal length.")
        if np.any(lower > upper):
            raise ValueError("lower_bounds must not exceed upper_bounds.")
        if neighbor_scale <= 0:
            raise ValueError("neighbor_scale must be positive.")
        self.objective = objective
        self.lower_bounds = lower
        self.upper_bounds = upper
        self.neighbor_scale = float(neighbor_scale)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @property
    def dim(self) -> int:
        return int(self.lower_bounds.shape[0])

    def clip(self, x: np.ndarray) -> np.ndarray:
        return np.clip(np.asarray(x, dtype=float), self.lower_bounds, self.upper_bounds)

    def random_state(self) -> np.ndarray:
        return self.rng.uniform(self.lower_bounds, self.upper_bounds)

    def energy(self, state: np.ndarray) -> float:
        return float(self.objective(state))

    def new_state(self, state: np.ndarray) -> np.ndarray:
        step = self.neighbor_scale * (self.upper_bounds - self.lower_bounds)
        return self.clip(state + self.rng.uniform(-step, step))


__all__ = ["BoxProblem"]
