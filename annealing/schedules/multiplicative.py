from __future__ import annotations

from annealing.schedules.base import CoolingSchedule
from annealing.utils.taxonomy import CoolingFamily


class MultiplicativeCooling(CoolingSchedule):
    """Scale the temperature by a constant factor at every stage.

    Factors in ``(0, 1]`` cool monotonically. Larger factors are accepted and
    heat the system instead.
    """

    name = "multiplicative"
    family = CoolingFamily.MULTIPLICATIVE

    def __init__(self, reduction: float = 0.95) -> None:
        self.reduction = float(reduction)

    def cool(self, temperature: float) -> float:
        return temperature * self.reduction

    def __repr__(self) -> str:
        return f"MultiplicativeCooling(reduction={self.reduction!r})"


__all__ = ["MultiplicativeCooling"]
