# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import unittest
from unittest import mock

from healthdash.config import DEFAULT_FOOD_CATALOG_URL, Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        keys = [k for k in os.environ if k.startswith("HEALTHDASH_")]
        with mock.patch.dict("os.environ", {}, clear=False):
            for k in keys:
                os.environ.pop(k, None)
            s = Settings()
        self.assertEqual(s.food_catalog_url, DEFAULT_FOOD_CATALOG_URL)
        self.assertEqual(s.search_limit, 20)
        self.assertEqual(s.trend_days, 7)
        self.assertEqual(s.weight_window, 30)
        self.assertEqual(s.fetch_timeout, 30.0)
        self.assertEqual(s.affirmation_interval, 5.0)
        self.assertEqual(s.log_level, "WARNING")

    def test_environment_overrides(self) -> None:
        env = {
            "HEALTHDASH_FOOD_CATALOG_URL": "http://localhost/foods.csv",
            "HEALTHDASH_SEARCH_LIMIT": "50",
            "HEALTHDASH_FETCH_TIMEOUT": "2.5",
            "HEALTHDASH_LOG_LEVEL": "debug",
        }
        with mock.patch.dict("os.environ", env):
            s = Settings()
        self.assertEqual(s.food_catalog_url, "http://localhost/foods.csv")
        self.assertEqual(s.search_limit, 50)
        self.assertEqual(s.fetch_timeout, 2.5)
        self.assertEqual(s.log_level, "DEBUG")


if __name__ == "__main__":
    unittest.main()
