import pytest

from evolearn.reward_analysis import factoredness, step


def test_step_positive_is_one():
    assert step(2.0) == 1.0


def test_step_zero_and_negative_are_zero():
    assert step(0.0) == 0.0
    assert step(-3.5) == 0.0


def test_perfectly_aligned_rewards_score_sample_count():
    gi = [1.0, 2.0, 3.0]
    gi_prime = [5.0, 6.0, 7.0]
    assert factoredness(gi, gi_prime, gi, gi_prime) == len(gi)


def test_opposed_rewards_score_zero():
    gi = [1.0, 2.0]
    gi_prime = [5.0, 6.0]
    g = [-x for x in gi]
    g_prime = [-x for x in gi_prime]
    assert factoredness(gi, gi_prime, g, g_prime) == 0.0


def test_factoredness_is_bounded():
    gi = [0.3, -1.2, 4.0, 2.2]
    gi_prime = [1.0, 0.0, -2.0, 3.3]
    g = [2.0, 1.5, -0.5, 0.7]
    g_prime = [0.1, 2.4, 1.1, -3.0]
    result = factoredness(gi, gi_prime, g, g_prime)
    assert 0.0 <= result <= len(gi)


def test_factoredness_is_symmetric_in_agent_and_system():
    gi = [0.3, -1.2, 4.0]
    gi_prime = [1.0, 0.0, -2.0]
    g = [2.0, 1.5, -0.5]
    g_prime = [0.1, 2.4, 1.1]
    assert factoredness(gi, gi_prime, g, g_prime) == factoredness(g, g_prime, gi, gi_prime)


def test_factoredness_rejects_empty():
    with pytest.raises(ValueError):
        factoredness([], [], [], [])


def test_factoredness_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        factoredness([1.0, 2.0], [1.0], [1.0, 2.0], [1.0, 2.0])