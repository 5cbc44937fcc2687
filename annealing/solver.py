from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Generic, Optional

import numpy as np

from annealing.problems.base import Problem, StateT
from annealing.schedules import CoolingSchedule, MultiplicativeCooling, Temperature
from annealing.utils.taxonomy import StopReason

logger = logging.getLogger("annealing.solver")


class TimeLimitExpired(Exception):
    """Raised when a run exceeds the allotted wall clock budget."""


def current_time() -> float:
    return time.perf_counter()


def remaining_budget(start_time: float, time_limit: float) -> float:
    return time_limit - (current_time() - start_time)


def enforce_time_budget(start_time: float, time_limit: float) -> None:
    if remaining_budget(start_time, time_limit) <= 0:
        raise TimeLimitExpired("Time budget exhausted")


def acceptance_threshold(delta: float, temperature: float) -> float:
    """Threshold a uniform sample must not exceed for a move to be accepted.

    The raw ratio ``-delta / temperature`` is used, not ``exp(-delta / T)``.
    A zero temperature yields ``-inf`` (or ``nan`` when ``delta == 0``), both
    of which reject every sample.
    """
    if temperature == 0:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(-delta) / np.float64(temperature))
    return -delta / temperature


@dataclass
class AnnealingResult(Generic[StateT]):
    """Outcome of a single annealing run."""

    state: StateT
    energy: float
    best_state: StateT
    best_energy: float
    temperature: float
    iterations: int
    stages: int
    accepted: int
    elapsed: float
    status: StopReason
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SolverSettings:
    """Mutable draft handed to ``Solver.build`` builders.

    Slotted, so assigning a misspelled field raises ``AttributeError``.
    """

    iterations: int
    initial_temperature: float
    temperature_reduction: float
    max_attempts: int
    max_accepts: int
    max_rejects: int


@dataclass(frozen=True)
class Solver:
    """Simulated annealing with staged multiplicative cooling.

    A stage ends once ``max_attempts`` candidates were evaluated or
    ``max_accepts`` of them were accepted, whichever comes first; the
    temperature is then multiplied by ``temperature_reduction``. The search
    stops after ``iterations`` candidates or after ``max_rejects`` consecutive
    stages without a single accepted move.

    The parameters are not validated: a ``temperature_reduction`` above one
    heats the system instead of cooling it.
    """

    iterations: int = 1_000_000
    initial_temperature: float = 100.0
    temperature_reduction: float = 0.95
    max_attempts: int = 50
    max_accepts: int = 10
    max_rejects: int = 4

    @classmethod
    def build(cls, builder: Callable[[SolverSettings], Any]) -> "Solver":
        """Apply ``builder`` once to a default draft and freeze the result."""
        settings = cls().settings()
        builder(settings)
        return cls(**asdict(settings))

    def settings(self) -> SolverSettings:
        return SolverSettings(**asdict(self))

    def cooling_schedule(self) -> CoolingSchedule:
        return MultiplicativeCooling(self.temperature_reduction)

    def solve(
        self,
        problem: Problem[StateT],
        initial: StateT,
        rng: Optional[Any] = None,
        seed: Optional[int] = None,
        schedule: Optional[CoolingSchedule] = None,
        time_limit: Optional[float] = None,
    ) -> StateT:
        """Anneal from ``initial`` and return the state the search ended in."""
        return self.run(problem, initial, rng=rng, seed=seed, schedule=schedule, time_limit=time_limit).state

    def run(
        self,
        problem: Problem[StateT],
        initial: StateT,
        rng: Optional[Any] = None,
        seed: Optional[int] = None,
        schedule: Optional[CoolingSchedule] = None,
        time_limit: Optional[float] = None,
    ) -> AnnealingResult[StateT]:
        """Anneal from ``initial`` and report how the run went.

        ``rng`` is any object whose ``random()`` returns uniform samples in
        ``[0, 1)``; by default a ``numpy`` generator seeded with ``seed``. It is
        sampled once per non-improving candidate and never otherwise.

        Exceptions raised by ``problem`` propagate unchanged.
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        if schedule is None:
            schedule = self.cooling_schedule()
        start_time = current_time()

        state = initial
        energy = problem.energy(initial)
        best_state, best_energy = state, energy
        temperature = Temperature(self.initial_temperature)

        attempted = 0
        accepted = 0
        rejected = 0
        iterations = 0
        total_accepted = 0
        status = StopReason.ITERATIONS

        logger.debug(
            "Annealing start: energy=%s, T=%s, iterations=%d, schedule=%r",
            energy,
            temperature.current,
            self.iterations,
            schedule,
        )

        try:
            for _ in range(self.iterations):
                if time_limit is not None:
                    enforce_time_budget(start_time, time_limit)

                candidate = problem.new_state(state)
                candidate_energy = problem.energy(candidate)
                iterations += 1
                attempted += 1

                delta = candidate_energy - energy
                if delta < 0 or rng.random() <= acceptance_threshold(delta, temperature.current):
                    accepted += 1
                    total_accepted += 1
                    energy = candidate_energy
                    state = candidate
                    if energy < best_energy:
                        best_state, best_energy = state, energy

                if attempted >= self.max_attempts or accepted >= self.max_accepts:
                    if accepted == 0:
                        rejected += 1
                    else:
                        rejected = 0

                    attempted = 0
                    accepted = 0
                    temperature.cool(schedule)
                    logger.debug(
                        "Stage %d done at iteration %d: energy=%s, T=%s, rejected_stages=%d",
                        temperature.step,
                        iterations,
                        energy,
                        temperature.current,
                        rejected,
                    )

                    if rejected >= self.max_rejects:
                        status = StopReason.REJECTS
                        break
        except TimeLimitExpired:
            status = StopReason.TIMEOUT

        elapsed = current_time() - start_time
        logger.debug(
            "Annealing stopped (%s) after %d iterations, %d stages: energy=%s, best=%s",
            status.value,
            iterations,
            temperature.step,
            energy,
            best_energy,
        )
        return AnnealingResult(
            state=state,
            energy=energy,
            best_state=best_state,
            best_energy=best_energy,
            temperature=temperature.current,
            iterations=iterations,
            stages=temperature.step,
            accepted=total_accepted,
            elapsed=elapsed,
            status=status,
            metadata={
                "initial_temperature": self.initial_temperature,
                "rejected_stages": rejected,
                "schedule": getattr(schedule, "name", type(schedule).__name__),
            },
        )


__all__ = [
    "AnnealingResult",
    "Solver",
    "SolverSettings",
    "TimeLimitExpired",
    "acceptance_threshold",
    "current_time",
    "enforce_time_budget",
    "remaining_budget",
]
