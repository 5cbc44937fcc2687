from __future__ import annotations

from dataclasses import dataclass, field

from annealing.utils.taxonomy import CoolingFamily


class CoolingSchedule:
    """Interface for cooling policies applied at each stage boundary."""

    name: str
    family: CoolingFamily

    def cool(self, temperature: float) -> float:
        """Return the temperature that follows ``temperature``."""
        raise NotImplementedError

    def __call__(self, temperature: float) -> float:
        return self.cool(temperature)


@dataclass
class Temperature:
    """Tracks the temperature of one run and how many times it was cooled."""

    initial: float
    current: float = field(init=False)
    step: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.current = self.initial

    def cool(self, schedule: CoolingSchedule) -> float:
        self.current = schedule.cool(self.current)
        self.step += 1
        return self.current

    def reset(self) -> None:
        self.current = self.initial
        self.step = 0


__all__ = ["CoolingSchedule", "Temperature"]
