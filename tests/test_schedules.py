import pytest

from annealing.schedules import (
    SCHEDULE_FAMILIES,
    CoolingFamily,
    CoolingSchedule,
    MultiplicativeCooling,
    Temperature,
    get_schedule,
)


def test_multiplicative_cooling_scales_temperature() -> None:
    schedule = MultiplicativeCooling(0.5)
    assert schedule.cool(8.0) == 4.0
    assert schedule(4.0) == 2.0


def test_get_schedule_builds_registered_schedule() -> None:
    schedule = get_schedule("multiplicative", reduction=0.9)
    assert isinstance(schedule, MultiplicativeCooling)
    assert schedule.reduction == 0.9
    assert SCHEDULE_FAMILIES["multiplicative"] is CoolingFamily.MULTIPLICATIVE


def test_get_schedule_rejects_unknown_name() -> None:
    with pytest.raises(KeyError):
        get_schedule("exponential")


def test_base_schedule_is_abstract() -> None:
    with pytest.raises(NotImplementedError):
        CoolingSchedule().cool(1.0)


def test_temperature_tracks_steps_and_resets() -> None:
    temperature = Temperature(100.0)
    schedule = MultiplicativeCooling(0.95)
    for _ in range(3):
        temperature.cool(schedule)

    assert temperature.step == 3
    assert temperature.current == pytest.approx(100.0 * 0.95**3)

    temperature.reset()
    assert temperature.step == 0
    assert temperature.current == 100.0
