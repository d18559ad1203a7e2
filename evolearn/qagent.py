"""Tabular Q-learning with epsilon-greedy and softmax action selection."""

from __future__ import annotations

import math
import random
from collections.abc import Hashable

Action = int

DEFAULT_ACTIONS = 9


class QTable:
    """Action values per state, learned by one-step Q-learning.

    Actions are visited in ascending order, so ties go to the smallest action.
    An action value that has never been updated starts at 0.0.
    """

    def __init__(self, init: float, alpha: float, gamma: float,
                 rng: random.Random | None = None) -> None:
        self.init = init
        self.alpha = alpha
        self.gamma = gamma
        self.rng = rng if rng is not None else random.Random()
        self.table: dict[Hashable, dict[Action, float]] = {}

    def _ordered(self, state: Hashable) -> list[tuple[Action, float]]:
        return sorted(self.table.get(state, {}).items())

    def soft_max(self, state: Hashable, tau: float) -> Action:
        """Draw an action with probability proportional to ``exp(Q / tau)``."""
        if tau <= 0:
            raise ValueError("tau must be positive")
        entries = self._ordered(state)
        if not entries:
            raise LookupError(f"state {state!r} has no known actions")
        top = max(value for _, value in entries)
        weights = [math.exp((value - top) / tau) for _, value in entries]
        total = sum(weights)
        coin = self.rng.random()
        cumulative = 0.0
        for (action, _), weight in zip(entries, weights):
            cumulative += weight / total
            if cumulative >= coin:
                return action
        return entries[-1][0]

    def update(self, state: Hashable, action: Action, reward: float,
               new_state: Hashable) -> None:
        """Move ``Q(state, action)`` towards ``reward + gamma * max Q(new_state)``."""
        q_max = self.init if not self.table else self.max_q(new_state)
        values = self.table.setdefault(state, {})
        current = values.get(action, 0.0)
        values[action] = current + self.alpha * (reward + self.gamma * q_max - current)

    def state_exists(self, state: Hashable) -> bool:
        """Return whether ``state`` has been updated."""
        return state in self.table

    def max_q(self, state: Hashable) -> float:
        """Return the best value of ``state``, or ``init`` if none exceeds it."""
        values = self.table.get(state)
        if values:
            best = max(values.values())
            if best > self.init:
                return best
        return self.init

    def max_action(self, state: Hashable) -> Action:
        """Return the action with the highest value in ``state``."""
        entries = self._ordered(state)
        if not entries:
            raise KeyError(state)
        return max(entries, key=lambda entry: entry[1])[0]


class QAgent:
    """An agent acting on a :class:`QTable`."""

    def __init__(self, init: float, alpha: float, gamma: float, epsilon: float = 0.1,
                 n_actions: int = DEFAULT_ACTIONS, rng: random.Random | None = None) -> None:
        if n_actions < 1:
            raise ValueError("n_actions must be positive")
        self.epsilon = epsilon
        self.n_actions = n_actions
        self.rng = rng if rng is not None else random.Random()
        self.q = QTable(init, alpha, gamma, self.rng)

    def update(self, state: Hashable, action: Action, reward: float,
               new_state: Hashable) -> None:
        """Learn from one transition."""
        self.q.update(state, action, reward, new_state)

    def e_greedy(self, state: Hashable) -> Action:
        """Explore with probability ``epsilon`` or in unseen states, else act greedily."""
        coin = self.rng.random()
        if coin < self.epsilon or not self.q.state_exists(state):
            return self.rng.randrange(self.n_actions)
        return self.q.max_action(state)

    def soft_max(self, state: Hashable, tau: float = 1.0) -> Action:
        """Choose an action by softmax over the state's values."""
        return self.q.soft_max(state, tau)