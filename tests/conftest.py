from __future__ import annotations

import numpy as np
import pytest

from annealing.problems import Problem


class FixedRandom:
    """Uniform source that always returns the same sample and counts calls."""

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class ImprovingProblem(Problem[int]):
    """Every step lowers the energy by one."""

    def energy(self, state: int) -> float:
        return -float(state)

    def new_state(self, state: int) -> int:
        return state + 1


class WorseningProblem(Problem[int]):
    """Every step raises the energy by ``step``."""

    def __init__(self, step: float = 1.0) -> None:
        self.step = step

    def energy(self, state: int) -> float:
        return self.step * state

    def new_state(self, state: int) -> int:
        return state + 1


class FlatProblem(Problem[int]):
    def energy(self, state: int) -> float:
        return 0.5

    def new_state(self, state: int) -> int:
        return state + 1


@pytest.fixture
def improving_problem() -> ImprovingProblem:
    return ImprovingProblem()


@pytest.fixture
def worsening_problem() -> WorseningProblem:
    return WorseningProblem()


@pytest.fixture
def flat_problem() -> FlatProblem:
    return FlatProblem()


@pytest.fixture
def never_accept() -> FixedRandom:
    return FixedRandom(1.0)


@pytest.fixture
def always_zero() -> FixedRandom:
    return FixedRandom(0.0)


@pytest.fixture
def square_coords() -> np.ndarray:
    return np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
