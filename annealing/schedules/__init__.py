from __future__ import annotations

from annealing.schedules.base import CoolingSchedule, Temperature
from annealing.schedules.multiplicative import MultiplicativeCooling
from annealing.utils.taxonomy import CoolingFamily

SCHEDULE_REGISTRY: dict[str, type[CoolingSchedule]] = {
    MultiplicativeCooling.name: MultiplicativeCooling,
}
SCHEDULE_FAMILIES: dict[str, CoolingFamily] = {name: cls.family for name, cls in SCHEDULE_REGISTRY.items()}


def get_schedule(name: str, **kwargs) -> CoolingSchedule:
    schedule_cls = SCHEDULE_REGISTRY.get(name)
    if schedule_cls is None:
        raise KeyError(f"Unknown cooling schedule: {name}")
    return schedule_cls(**kwargs)


__all__ = [
    "CoolingFamily",
    "CoolingSchedule",
    "MultiplicativeCooling",
    "SCHEDULE_FAMILIES",
    "SCHEDULE_REGISTRY",
    "Temperature",
    "get_schedule",
]
