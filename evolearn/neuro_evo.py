"""Neuro-evolution agents: populations of networks improved by mutation and selection."""

from __future__ import annotations

import copy as _copy
import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from evolearn.fileio import read2, write_vector
from evolearn.neural_net import NeuralNet, TypeNeuralNet

Vector = list[float]
Matrix = list[Vector]

# Step size used when folding a reward into a member's running evaluation.
_EVALUATION_RATE = 0.1


class Agent(ABC):
    """Something that maps states to actions and learns from rewards."""

    @abstractmethod
    def get_action(self, state: Sequence[float]) -> Vector:
        """Return an action for a flat state."""

    @abstractmethod
    def get_action_types(self, state: Sequence[Sequence[float]]) -> Vector:
        """Return an action for a state given per type, ``state[type][element]``."""

    @abstractmethod
    def update_policy_values(self, reward: float) -> None:
        """Credit the current policy with ``reward``."""


@dataclass
class NeuroEvoParameters:
    """Sizes and settings shared by a neuro-evolution population."""

    n_input: int
    n_output: int
    epsilon: float = 0.1
    n_hidden: int = 50
    pop_size: int = 10


class NeuroEvo(Agent):
    """A population of networks, one of which is active at a time."""

    def __init__(self, params: NeuroEvoParameters, rng: random.Random | None = None) -> None:
        self.params = params
        self.rng = rng if rng is not None else random.Random()
        self.population: list[NeuralNet] = [self._new_member() for _ in range(params.pop_size)]
        self._active = 0

    def _new_member(self) -> NeuralNet:
        p = self.params
        return NeuralNet([p.n_input, p.n_hidden, p.n_output], rng=self.rng)

    def active_member(self) -> NeuralNet:
        """Return the network currently being evaluated."""
        return self.population[self._active]

    def update_policy_values(self, reward: float) -> None:
        """Move the active member's evaluation a tenth of the way towards ``reward``."""
        member = self.active_member()
        member.evaluation += _EVALUATION_RATE * (reward - member.evaluation)

    def get_action(self, state: Sequence[float]) -> Vector:
        """Return the active member's output for ``state``."""
        return self.active_member().predict_continuous(state)

    def get_action_types(self, state: Sequence[Sequence[float]]) -> Vector:
        """Sum the per-type states element-wise and act on the sum."""
        if not state:
            raise ValueError("state must hold at least one type")
        summed = [0.0] * len(state[0])
        for row in state:
            for j, value in enumerate(row):
                summed[j] += value
        return self.get_action(summed)

    def generate_new_members(self) -> None:
        """Append a mutated copy of each of the first ``pop_size`` members."""
        parents = self.population[: self.params.pop_size]
        if len(parents) < self.params.pop_size:
            raise ValueError(
                f"population of {len(self.population)} is smaller than {self.params.pop_size}"
            )
        for parent in parents:
            child = parent.copy()
            child.mutate()
            self.population.append(child)

    def select_new_member(self) -> bool:
        """Advance to the next member; return False when wrapping back to the first."""
        self._active += 1
        if self._active >= len(self.population):
            self._active = 0
            return False
        return True

    def best_member_value(self) -> float:
        """Return the highest evaluation in the population."""
        return max(member.evaluation for member in self.population)

    def select_survivors(self) -> None:
        """Keep the ``pop_size`` fittest members, in shuffled order."""
        self.population.sort(key=lambda member: member.evaluation, reverse=True)
        del self.population[self.params.pop_size:]
        self.rng.shuffle(self.population)
        self._active = 0

    def copy(self) -> NeuroEvo:
        """Return a copy with independent networks, its first member active."""
        clone = _copy.copy(self)
        clone.population = [member.copy() for member in self.population]
        clone._active = 0
        return clone

    def save(self, path: str) -> None:
        """Write two rows per member: its topology, then its weights."""
        rows: Matrix = []
        for member in self.population:
            node_info, weight_info = member.to_vectors()
            rows.append(node_info)
            rows.append(weight_info)
        write_vector(rows, path)

    def load(self, path: str) -> None:
        """Load networks written by :meth:`save` into the existing members."""
        rows = read2(path)
        if len(rows) < 2 * len(self.population):
            raise ValueError(
                f"{path} holds {len(rows)} rows, {2 * len(self.population)} are needed"
            )
        for index, member in enumerate(self.population):
            member.load_vectors(rows[2 * index], rows[2 * index + 1])


class NeuroEvoTypeWeighted(NeuroEvo):
    """Collapses per-type states into one with a learned weight per type and element."""

    def __init__(self, params: NeuroEvoParameters, n_types: int, n_state_elements: int,
                 rng: random.Random | None = None) -> None:
        self.n_types = n_types
        self.n_state_elements = n_state_elements
        params.n_input = n_state_elements
        super().__init__(params, rng)

    def _new_member(self) -> NeuralNet:
        p = self.params
        return TypeNeuralNet(
            [self.n_state_elements, p.n_hidden, p.n_output],
            (self.n_types, self.n_state_elements, 1),
            rng=self.rng,
        )

    def get_action_types(self, state: Sequence[Sequence[float]]) -> Vector:
        """Weight each type's state elements, sum over types, and act on the result."""
        weights = self.active_member().preprocess_weights
        preprocessed = [
            sum(state[t][s] * weights[t][s][0] for t in range(self.n_types))
            for s in range(self.n_state_elements)
        ]
        return self.get_action(preprocessed)


class NeuroEvoTypeCrossweighted(NeuroEvo):
    """Mixes per-type states into one input per element and output type."""

    def __init__(self, params: NeuroEvoParameters, n_types: int, n_state_elements: int,
                 rng: random.Random | None = None) -> None:
        self.n_types = n_types
        self.n_state_elements = n_state_elements
        params.n_input = n_types * n_state_elements
        super().__init__(params, rng)

    def _new_member(self) -> NeuralNet:
        p = self.params
        return TypeNeuralNet(
            [self.n_types * self.n_state_elements, p.n_hidden, p.n_output],
            (self.n_types, self.n_state_elements, self.n_types),
            rng=self.rng,
        )

    def get_action_types(self, state: Sequence[Sequence[float]]) -> Vector:
        """Build input ``(s, t')`` as the weighted sum over types of ``state[t][s]``."""
        weights = self.active_member().preprocess_weights
        targets = len(weights[0][0])
        preprocessed = [
            sum(state[t][s] * weights[t][s][t_prime] for t in range(self.n_types))
            for s in range(self.n_state_elements)
            for t_prime in range(targets)
        ]
        return self.get_action(preprocessed)


class TypeNeuroEvo(Agent):
    """One neuro-evolution population per type; actions are voted among types."""

    def __init__(self, params: NeuroEvoParameters, n_types: int,
                 rng: random.Random | None = None) -> None:
        shared = rng if rng is not None else random.Random()
        self.types: list[NeuroEvo] = [NeuroEvo(params, shared) for _ in range(n_types)]
        self.xi: Vector = [0.0] * n_types

    def copy_types(self, types: Sequence[NeuroEvo]) -> None:
        """Replace the populations with independent copies of ``types``."""
        self.types = [ne.copy() for ne in types]
        if len(self.xi) != len(self.types):
            self.xi = [0.0] * len(self.types)

    def generate_new_members(self) -> None:
        """Grow every type's population by mutation."""
        for ne in self.types:
            ne.generate_new_members()

    def select_new_member_all(self) -> bool:
        """Advance every type; return what the last type reported."""
        selected = False
        for ne in self.types:
            selected = ne.select_new_member()
        return selected

    def best_member_values(self) -> Vector:
        """Return each type's highest evaluation."""
        return [ne.best_member_value() for ne in self.types]

    def select_survivors_all(self) -> None:
        """Select survivors in every type."""
        for ne in self.types:
            ne.select_survivors()

    def get_action(self, state: Sequence[float]) -> Vector:
        """Refuse: a flat state does not say which type should act."""
        raise RuntimeError(
            "get_action needs a neighbor type in a multi-type setting; "
            "use get_action_for_type or get_action_types"
        )

    def get_action_for_type(self, state: Sequence[float], neighbor_type: int) -> Vector:
        """Act with the given type's population and count its use."""
        self.xi[neighbor_type] += 1
        return self.types[neighbor_type].get_action(state)

    def get_action_types(self, state: Sequence[Sequence[float]]) -> Vector:
        """Average the actions of each type on its own row of ``state``."""
        if not state:
            raise ValueError("state must hold at least one type")
        action_sum = self.get_action_for_type(state[0], 0)
        for j in range(1, len(state)):
            action = self.get_action_for_type(state[j], j)
            action_sum = [a + b for a, b in zip(action_sum, action)]
        return [a / len(state) for a in action_sum]

    def update_policy_values(self, reward: float) -> None:
        """Credit each type's active member in proportion to its use, then reset counts."""
        total = sum(self.xi)
        if total == 0:
            raise ValueError("no type has acted since the last update")
        for ne, count in zip(self.types, self.xi):
            share = count / total
            member = ne.active_member()
            member.evaluation += share * (reward - member.evaluation)
        self.xi = [0.0] * len(self.types)