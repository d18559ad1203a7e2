"""Neuro-evolution agents, neural networks, Q-learning, shortest paths and data-file helpers."""

__version__ = "0.1.0"

__all__ = [
    "fileio",
    "legacy_io",
    "matrix",
    "neural_net",
    "neuro_evo",
    "qagent",
    "reward_analysis",
    "search",
    "shortcuts",
]