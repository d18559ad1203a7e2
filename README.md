# evolearn

A small pure-Python toolkit for learning agents and the data files that go
with them. It has no third-party dependencies.

## Modules

- `evolearn.neural_net`: `NeuralNet`, a fully connected sigmoid network built
  from a topology such as `[2, 4, 1]`. It supports back-propagation
  (`train`), prediction (`predict_continuous`, `predict_binary`, which give
  the same outputs, and their `batch_` forms), Gaussian `mutate`, `add_inputs`,
  `copy`, and saving to and loading from a CSV file (`save`, `load`) or flat
  lists (`to_vectors`, `load_vectors`). `TypeNeuralNet` adds a 3-D block of
  preprocessing weights that start at zero and change only by mutation. There
  are also the helpers `sigmoid` and `sum_squared_error`.
- `evolearn.neuro_evo`: population-based agents set up from
  `NeuroEvoParameters(n_input, n_output)` (hidden size 50 and population 10
  by default). `NeuroEvo` keeps one active member and offers
  `generate_new_members`, `select_new_member`, `select_survivors`,
  `best_member_value`, `update_policy_values`, `copy`, `save` and `load`.
  `NeuroEvoTypeWeighted` and `NeuroEvoTypeCrossweighted` combine per-type
  states with evolved preprocessing weights. `TypeNeuroEvo` keeps one
  population per type and averages the types' actions in `get_action_types`.
  Its `get_action` on a flat state raises `RuntimeError`.
  All agents derive from the abstract `Agent`.
- `evolearn.qagent`: a tabular `QTable` with one-step updates, `max_q`,
  `max_action` and `soft_max`, and a `QAgent` with `e_greedy` and `soft_max`
  selection over `n_actions` actions (9 by default).
- `evolearn.reward_analysis`: `factoredness(gi, gi_prime, g, g_prime)` and
  its `step` function.
- `evolearn.search`: Dijkstra shortest paths over a dense distance matrix
  (`dijkstra_paths`, `dijkstra_path`). Use `math.inf` for a missing edge.
- `evolearn.matrix`: list-of-lists helpers. These are `subtract`, `scale`,
  `multiply_vector`, `identity`, `append`, `separate`, `rref`, `inverse`,
  `from_flat`, `uniform` and `transpose`.
- `evolearn.fileio`: reads delimited files with `read2`, `read_pairs` and
  `read_variable_file`. The separator is inferred from a `.csv` or `.xls`
  extension, and any other extension raises `UnrecognizedExtensionError`.
  It writes files with `write_vector` and `write_pairs`. It also has path
  helpers (`strip_file_path`, `strip_extension`), screen output
  (`format_vector`, `print_vector`) and `get_yes_no`.
- `evolearn.legacy_io`: older readers and writers.
  - Readers: `import_list`, `import_xls`, `import_csv` (with optional start
    and end phrases) and `import_config_file`.
  - Writers: `export_list`, `export_csv`, `write_pairs`, `write_file_1d` and
    `write_file_2d`.
  - Other helpers: `scrape_variable`, formatting helpers, `wait_for_key`, and
    `fatal`, which raises `FatalError`.
- `evolearn.shortcuts`: `bounded_rand`, `sort_with_reference`,
  `vector_less_than`, `vector_greater_than`, `max_value_key`, `discretized`,
  `all_pairs`, `is_integer` and `remove_erase_if`.

Several functions print progress to standard output. `read2` and
`write_vector` report each file they read or write, `train` prints the
error of every pass, and `export_csv` echoes the rows it writes.

Classes that use randomness take an optional `rng` (a `random.Random`), so
runs can be made repeatable.

## Install

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
import random

from evolearn.neural_net import NeuralNet
from evolearn.neuro_evo import NeuroEvo, NeuroEvoParameters

net = NeuralNet([2, 4, 1], gamma=0.9, rng=random.Random(1))
net.train([[0, 0], [1, 1]], [[0.1], [0.9]], epsilon=0.01, iterations=100)
print(net.predict_continuous([1, 1]))

agent = NeuroEvo(NeuroEvoParameters(2, 1), rng=random.Random(2))
agent.generate_new_members()
while True:
    action = agent.get_action([0.5, 0.5])
    agent.update_policy_values(reward=1.0 - action[0])
    if not agent.select_new_member():
        break
agent.select_survivors()
print(agent.best_member_value())
```

Q-learning on hashable states:

```python
import random
from evolearn.qagent import QAgent

q = QAgent(init=0.0, alpha=0.5, gamma=0.9, rng=random.Random(0))
q.update("start", 3, 1.0, "end")
print(q.e_greedy("start"))
```

Shortest paths over a distance matrix:

```python
from math import inf
from evolearn.search import dijkstra_path

graph = [[0, 1, inf], [1, 0, 2], [inf, 2, 0]]
print(dijkstra_path(graph, 0, 2))  # [1, 2]
```

## What it does not do

This is a library only. It has no command-line program, and it includes no
environment or simulation to train agents in. The agents return actions and
take rewards, so you must supply the loop that connects them to a task.