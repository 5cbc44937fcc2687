from __future__ import annotations

from typing import Generic, TypeVar

StateT = TypeVar("StateT")


class Problem(Generic[StateT]):
    """Something to be solved by annealing.

    Subclasses compute the energy of a state and propose neighbouring states.
    Lower energy is better; by convention energies lie in ``[0.0, 1.0]`` but
    only their ordering and differences matter to the solver.

    Neither method has an error channel: whatever a subclass raises reaches
    the caller of ``Solver.solve`` unchanged.
    """

    def energy(self, state: StateT) -> float:
        """Return the energy of ``state``."""
        raise NotImplementedError

    def new_state(self, state: StateT) -> StateT:
        """Return a candidate neighbour of ``state``."""
        raise NotImplementedError

    def __call__(self, state: StateT) -> float:
        return self.energy(state)


__all__ = ["Problem", "StateT"]
