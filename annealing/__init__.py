from annealing.problems import BoxProblem, Problem, TourProblem
from annealing.schedules import CoolingSchedule, MultiplicativeCooling, Temperature, get_schedule
from annealing.solver import AnnealingResult, Solver, SolverSettings, acceptance_threshold
from annealing.utils.taxonomy import CoolingFamily, StopReason

__all__ = [
    "AnnealingResult",
    "BoxProblem",
    "CoolingFamily",
    "CoolingSchedule",
    "MultiplicativeCooling",
    "Problem",
    "Solver",
    "SolverSettings",
    "StopReason",
    "Temperature",
    "TourProblem",
    "acceptance_threshold",
    "get_schedule",
]
