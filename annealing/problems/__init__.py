from annealing.problems.base import Problem, StateT
from annealing.problems.box import BoxProblem
from annealing.problems.tour import Tour, TourProblem, compute_cycle_cost, distance_matrix

__all__ = [
    "BoxProblem",
    "Problem",
    "StateT",
    "Tour",
    "TourProblem",
    "compute_cycle_cost",
    "distance_matrix",
]
