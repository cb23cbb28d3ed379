"""Tests for the Alea PRNG helpers."""

import pytest

from py_rmg.core.alea_prng import AleaPRNG


class TestAleaPRNG:
    """Test the random stream used by generation runs."""

    def test_same_seed_same_sequence(self):
        """Test that the same seed reproduces the same numbers."""
        a = AleaPRNG("seed")
        b = AleaPRNG("seed")
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds_differ(self):
        """Test that different seeds give different numbers."""
        a = AleaPRNG("seed1")
        b = AleaPRNG("seed2")
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_random_range(self):
        prng = AleaPRNG("range")
        for _ in range(1000):
            value = prng.random()
            assert 0.0 <= value < 1.0

    def test_next_int_bounds(self):
        """Test that next_int stays in [low, high)."""
        prng = AleaPRNG("ints")
        values = [prng.next_int(-3, 4) for _ in range(2000)]
        assert min(values) == -3
        assert max(values) == 3

    def test_next_int_empty_range(self):
        prng = AleaPRNG("empty")
        assert prng.next_int(5, 5) == 5
        assert prng.next_int(7, 2) == 7

    def test_call_count(self):
        """Test that every helper draws exactly one number."""
        prng = AleaPRNG("count")
        prng.next_float()
        prng.next_int(0, 10)
        prng.chance(0.5)
        prng.choice([1, 2, 3])
        prng.pop_random([1, 2])
        assert prng.call_count == 5

    def test_chance_extremes(self):
        prng = AleaPRNG("chance")
        assert not any(prng.chance(0.0) for _ in range(100))
        assert all(prng.chance(1.0) for _ in range(100))

    def test_choice_empty(self):
        with pytest.raises(IndexError):
            AleaPRNG("x").choice([])

    def test_pop_random_removes(self):
        prng = AleaPRNG("pop")
        items = list(range(10))
        popped = [prng.pop_random(items) for _ in range(10)]
        assert items == []
        assert sorted(popped) == list(range(10))
