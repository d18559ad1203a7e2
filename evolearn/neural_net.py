"""Feed-forward sigmoid networks trained by back-propagation or evolved by mutation."""

from __future__ import annotations

import copy as _copy
import math
import random
from collections.abc import Sequence

from evolearn.fileio import read2, write_vector

Vector = list[float]
Matrix = list[Vector]


def sigmoid(values: Sequence[float]) -> Vector:
    """Apply the logistic function to every value."""
    result = []
    for x in values:
        if x >= 0:
            result.append(1.0 / (1.0 + math.exp(-x)))
        else:
            e = math.exp(x)
            result.append(e / (1.0 + e))
    return result


def sum_squared_error(values: Sequence[float]) -> float:
    """Return the sum of the squares of ``values``."""
    return sum(x * x for x in values)


def _row_times_matrix(vector: Sequence[float], matrix: Matrix) -> Vector:
    """Multiply a row vector by a matrix whose row count equals the vector length."""
    if len(vector) != len(matrix):
        raise ValueError(
            f"size mismatch: vector of {len(vector)} against {len(matrix)} weight rows"
        )
    return [sum(a * w for a, w in zip(vector, column)) for column in zip(*matrix)]


class NeuralNet:
    """A fully connected network with one bias weight row per layer.

    ``weights[c]`` maps layer ``c`` (plus a bias input of 1.0, its last row)
    to layer ``c + 1``.
    """

    def __init__(self, nodes: Sequence[int], gamma: float = 0.9,
                 rng: random.Random | None = None) -> None:
        self.nodes = [int(n) for n in nodes]
        if len(self.nodes) < 2 or any(n < 1 for n in self.nodes):
            raise ValueError(f"invalid topology {self.nodes!r}")
        self.gamma = gamma
        self.rng = rng if rng is not None else random.Random()
        self.evaluation = 0.0
        self.mutation_rate = 0.5
        self.mut_std = 1.0
        self.weights: list[Matrix] = []
        self._set_random_weights()

    @property
    def weights_without_bias(self) -> list[Matrix]:
        """Each layer's weights with its last (bias) row removed."""
        return [[list(row) for row in layer[:-1]] for layer in self.weights]

    def connections(self) -> int:
        """Return the number of weight layers."""
        return len(self.nodes) - 1

    def _random_set(self, fan_in: float) -> float:
        return 100.0 * (self.rng.uniform(-1.0, 1.0) * 0.1) / math.sqrt(fan_in)

    def _random_add(self, fan_in: float) -> float:
        if self.rng.random() > self.mutation_rate:
            return 0.0
        return self.rng.gauss(0.0, self.mut_std)

    def _set_random_weights(self) -> None:
        self.weights = [
            [
                [self._random_set(above + 1.0) for _ in range(below)]
                for _ in range(above + 1)
            ]
            for above, below in zip(self.nodes, self.nodes[1:])
        ]

    def mutate(self) -> None:
        """Add Gaussian noise to each weight with probability ``mutation_rate``."""
        for layer in self.weights:
            fan_in = float(len(layer))
            for row in layer:
                row[:] = [w + self._random_add(fan_in) for w in row]

    def add_inputs(self, count: int) -> None:
        """Grow the input layer by ``count`` nodes with zero weights.

        The new weight rows are appended after the existing bias row.
        """
        self.nodes[0] += count
        self.weights[0].extend([0.0] * self.nodes[1] for _ in range(count))

    def _feed_forward(self, observation: Sequence[float]) -> list[Vector]:
        """Return every layer's output, each with a trailing bias of 1.0."""
        outputs = [list(observation) + [1.0]]
        for layer in self.weights:
            outputs.append(sigmoid(_row_times_matrix(outputs[-1], layer)) + [1.0])
        return outputs

    def _back_prop(self, observation: Sequence[float], target: Sequence[float]) -> float:
        outputs = self._feed_forward(observation)
        final = outputs[-1][:-1]
        if len(target) < len(final):
            raise ValueError(f"target has {len(target)} values, network has {len(final)} outputs")
        errors = [o - t for o, t in zip(final, target)]
        derivatives = [[o * (1.0 - o) for o in layer[:-1]] for layer in outputs[1:]]

        deltas: list[Vector] = [[] for _ in self.weights]
        deltas[-1] = [d * e for d, e in zip(derivatives[-1], errors)]
        for c in range(self.connections() - 2, -1, -1):
            below = self.weights[c + 1][:-1]
            deltas[c] = [
                d * sum(w * nd for w, nd in zip(row, deltas[c + 1]))
                for d, row in zip(derivatives[c], below)
            ]

        self.weights = [
            [
                [w - self.gamma * d * x for w, d in zip(row, delta)]
                for row, x in zip(layer, inputs)
            ]
            for layer, delta, inputs in zip(self.weights, deltas, outputs)
        ]
        return sum_squared_error(errors)

    def _epoch(self, observations: Sequence[Sequence[float]],
               targets: Sequence[Sequence[float]]) -> float:
        err = sum(
            self._back_prop(o, t) for o, t in zip(observations, targets, strict=True)
        )
        print(f"Err={err:f}")
        return err

    def train(self, observations: Sequence[Sequence[float]], targets: Sequence[Sequence[float]],
              epsilon: float = 0.0, iterations: int = 0) -> float:
        """Run back-propagation passes until the summed error drops below ``epsilon``.

        With ``iterations`` of 0 there is no pass limit; otherwise at most
        ``iterations + 1`` passes run.  Returns the last pass's error.
        """
        err = 2 * epsilon + 1.0
        step = 0
        while err >= epsilon and (iterations == 0 or iterations >= step):
            err = self._epoch(observations, targets)
            step += 1
        return err

    def predict_binary(self, observation: Sequence[float]) -> Vector:
        """Return the network's outputs for ``observation``."""
        return self._feed_forward(observation)[-1][:-1]

    def predict_continuous(self, observation: Sequence[float]) -> Vector:
        """Return the network's outputs for ``observation``."""
        return self._feed_forward(observation)[-1][:-1]

    def batch_predict_binary(self, observations: Sequence[Sequence[float]]) -> Matrix:
        """Predict each observation in turn."""
        return [self.predict_binary(o) for o in observations]

    def batch_predict_continuous(self, observations: Sequence[Sequence[float]]) -> Matrix:
        """Predict each observation in turn."""
        return [self.predict_continuous(o) for o in observations]

    def to_vectors(self) -> tuple[Vector, Vector]:
        """Return the topology and all weights (bias rows included) as flat lists."""
        node_info = [float(n) for n in self.nodes]
        weight_info = [w for layer in self.weights for row in layer for w in row]
        return node_info, weight_info

    def load_vectors(self, node_info: Sequence[float], weight_info: Sequence[float]) -> None:
        """Replace topology and weights with those produced by :meth:`to_vectors`."""
        nodes = [int(n) for n in node_info]
        if len(nodes) < 2 or any(n < 1 for n in nodes):
            raise ValueError(f"invalid topology {nodes!r}")
        needed = sum((above + 1) * below for above, below in zip(nodes, nodes[1:]))
        if len(weight_info) < needed:
            raise ValueError(f"need {needed} weights, got {len(weight_info)}")
        values = iter(weight_info)
        self.nodes = nodes
        self.weights = [
            [[float(next(values)) for _ in range(below)] for _ in range(above + 1)]
            for above, below in zip(nodes, nodes[1:])
        ]

    def save(self, path: str) -> None:
        """Write the topology on one line and the weights on the next."""
        node_info, weight_info = self.to_vectors()
        write_vector([node_info, weight_info], path)

    def load(self, path: str) -> None:
        """Read a network written by :meth:`save`."""
        rows = read2(path)
        if len(rows) < 2:
            raise ValueError(f"{path} does not hold a topology row and a weight row")
        self.load_vectors(rows[0], rows[1])

    def copy(self) -> NeuralNet:
        """Return an independent copy sharing only the random generator."""
        clone = _copy.copy(self)
        clone.nodes = list(self.nodes)
        clone.weights = [[list(row) for row in layer] for layer in self.weights]
        return clone


class TypeNeuralNet(NeuralNet):
    """A network carrying an extra 3-D block of preprocessing weights.

    The preprocessing weights start at zero and change only by mutation.
    """

    def __init__(self, nodes: Sequence[int], preprocess_shape: Sequence[int],
                 gamma: float = 0.9, rng: random.Random | None = None) -> None:
        super().__init__(nodes, gamma, rng)
        d1, d2, d3 = preprocess_shape
        self.preprocess_weights: list[Matrix] = [
            [[0.0] * d3 for _ in range(d2)] for _ in range(d1)
        ]

    def mutate(self) -> None:
        """Mutate the network weights, then the preprocessing weights."""
        super().mutate()
        fan_in = float(len(self.preprocess_weights))
        for block in self.preprocess_weights:
            for row in block:
                row[:] = [w + self._random_add(fan_in) for w in row]

    def copy(self) -> TypeNeuralNet:
        """Return an independent copy, preprocessing weights included."""
        clone = super().copy()
        clone.preprocess_weights = [
            [list(row) for row in block] for block in self.preprocess_weights
        ]
        return clone