# ==============================================================================
# Файл: tests/test_rng.py
# Назначение: Детерминированный RNG и производные сиды регионов.
# ==============================================================================
import random
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from scatter_engine.core.utils.rng import (
    RNG,
    PyRandomSource,
    hash64,
    seed_from_any,
    split_chunk_seed,
)


class TestRNG(unittest.TestCase):

    def test_same_seed_same_sequence(self):
        a, b = RNG(1234), RNG(1234)
        self.assertEqual([a.u64() for _ in range(10)], [b.u64() for _ in range(10)])

    def test_uniform_range(self):
        rng = RNG(1)
        values = [rng.uniform() for _ in range(2000)]
        self.assertTrue(all(0.0 <= v < 1.0 for v in values))
        self.assertGreater(max(values) - min(values), 0.9)

    def test_randint_inclusive(self):
        rng = RNG(2)
        seen = {rng.randint(0, 3) for _ in range(500)}
        self.assertEqual(seen, {0, 1, 2, 3})
        self.assertEqual(rng.randint(5, 5), 5)
        self.assertTrue(2 <= rng.randint(4, 2) <= 4)

    def test_python_random_adapter(self):
        src = PyRandomSource(random.Random(0))
        self.assertTrue(0.0 <= src.uniform() < 1.0)
        self.assertTrue(1 <= src.randint(3, 1) <= 3)


class TestSeeds(unittest.TestCase):

    def test_seed_from_any(self):
        self.assertEqual(seed_from_any(5), 5)
        self.assertEqual(seed_from_any("forest"), seed_from_any(b"forest"))
        with self.assertRaises(TypeError):
            seed_from_any(1.5)

    def test_region_seeds_are_distinct(self):
        seeds = {split_chunk_seed(42, x, z) for x in range(-3, 4) for z in range(-3, 4)}
        self.assertEqual(len(seeds), 49)
        self.assertEqual(split_chunk_seed(42, 1, 2), hash64(42, 1, 2))
        self.assertNotEqual(split_chunk_seed(42, 1, 2), split_chunk_seed(42, 2, 1))


if __name__ == '__main__':
    unittest.main()
