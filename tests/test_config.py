# ==============================================================================
# Файл: tests/test_config.py
# Назначение: Загрузка и валидация конфигурации сэмплера.
# ==============================================================================
import json
import os
import tempfile
import unittest

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from scatter_engine.core.config import (
    DEFAULT_SAMPLER_CONFIG,
    SamplerConfig,
    deep_merge,
    load_sampler_config,
)
from scatter_engine.core.errors import NotFoundError, ValidationError


class TestSamplerConfig(unittest.TestCase):

    def test_derived_grid_dimensions(self):
        cfg = SamplerConfig(width=100, height=50, radius=10.0)
        self.assertAlmostEqual(cfg.cell_size, 10.0 / 2 ** 0.5)
        self.assertEqual(cfg.grid_cols, 15)
        self.assertEqual(cfg.grid_rows, 8)
        self.assertEqual(cfg.attempts, 64)

    def test_invalid_values_rejected_at_construction(self):
        for kwargs in (
            dict(width=0, height=10, radius=1.0),
            dict(width=10, height=-1, radius=1.0),
            dict(width=10, height=10, radius=0.0),
            dict(width=10, height=10, radius=float("nan")),
            dict(width=10, height=10, radius=1.0, attempts=-1),
            dict(width=10, height=10, radius=1.0, candidate_placement="disc"),
            dict(width=10, height=10, radius=1.0, accept_policy="best"),
            dict(width=10, height=10, radius=1.0, max_candidates=0),
            dict(width=float("inf"), height=10, radius=1.0),
            dict(width=10, height=float("inf"), radius=1.0),
            dict(width=10, height=10, radius=1.0, attempts=float("nan")),
            dict(width=10, height=10, radius=1.0, attempts=2.0),
        ):
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValidationError):
                    SamplerConfig(**kwargs)

    def test_to_dict_roundtrips_through_loader(self):
        cfg = SamplerConfig(width=30, height=20, radius=2.5, attempts=10, seamless=True)
        self.assertEqual(load_sampler_config(cfg.to_dict()), cfg)


class TestConfigLoader(unittest.TestCase):

    def test_defaults(self):
        cfg = load_sampler_config()
        self.assertEqual(cfg.width, float(DEFAULT_SAMPLER_CONFIG["width"]))
        self.assertEqual(cfg.radius, DEFAULT_SAMPLER_CONFIG["radius"])
        self.assertIsNone(cfg.max_candidates)

    def test_overrides_are_last_layer(self):
        cfg = load_sampler_config({"radius": 4.0, "attempts": 8}, overrides={"attempts": 16})
        self.assertEqual(cfg.radius, 4.0)
        self.assertEqual(cfg.attempts, 16)

    def test_json_file(self):
        with tempfile.NamedTemporaryFile("w", delete=False, suffix=".json", encoding="utf-8") as f:
            json.dump({"width": 64, "height": 32, "radius": 3, "accept_policy": "all"}, f)
            path = f.name
        try:
            cfg = load_sampler_config(path)
            self.assertEqual((cfg.width, cfg.height, cfg.radius), (64.0, 32.0, 3.0))
            self.assertEqual(cfg.accept_policy, "all")
        finally:
            if os.path.exists(path):
                os.remove(path)

    def test_missing_file(self):
        with self.assertRaises(NotFoundError):
            load_sampler_config("/nonexistent/sampler.json")

    def test_validation_errors(self):
        for bad in (
            {"radius": -1},
            {"width": "wide"},
            {"attempts": 2.5},
            {"attempts": True},
            {"seamless": "yes"},
            {"max_candidates": -5},
            {"candidate_placement": "grid"},
            {"width": float("inf")},
            {"radius": float("nan")},
        ):
            with self.subTest(bad=bad):
                with self.assertRaises(ValidationError):
                    load_sampler_config(bad)

    def test_bad_source_type(self):
        with self.assertRaises(TypeError):
            load_sampler_config(42)

    def test_deep_merge(self):
        base = {"a": {"b": 1, "c": [1, 2]}, "d": 1}
        out = deep_merge(base, {"a": {"c": [3]}, "e": 2})
        self.assertEqual(out, {"a": {"b": 1, "c": [3]}, "d": 1, "e": 2})
        self.assertEqual(base["a"]["c"], [1, 2])


if __name__ == '__main__':
    unittest.main()
