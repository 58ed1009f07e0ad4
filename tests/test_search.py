# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from healthdash.catalog.models import ExerciseCatalogItem, FoodCatalogItem
from healthdash.catalog.search import entries_for_date, search
from healthdash.tracking.models import WaterEntry


def _foods(names):
    return [FoodCatalogItem(id=f"food-{i}", name=n) for i, n in enumerate(names)]


class TestSearch(unittest.TestCase):
    def test_blank_query_returns_head_in_order(self) -> None:
        catalog = _foods([f"Food {i}" for i in range(30)])
        self.assertEqual(search(catalog, ""), catalog[:20])
        self.assertEqual(search(catalog, "   "), catalog[:20])

    def test_blank_query_on_small_catalog(self) -> None:
        catalog = _foods(["Apple", "Banana"])
        self.assertEqual(search(catalog, ""), catalog)

    def test_case_insensitive_substring_keeps_order(self) -> None:
        catalog = _foods(["Apple Pie", "banana", "Pineapple", "Grape", "APPLESAUCE"])
        result = search(catalog, "aPPle")
        self.assertEqual([i.name for i in result], ["Apple Pie", "Pineapple", "APPLESAUCE"])

    def test_results_capped_at_limit(self) -> None:
        catalog = _foods([f"Rice {i}" for i in range(50)])
        self.assertEqual(len(search(catalog, "rice")), 20)
        self.assertEqual(len(search(catalog, "rice", limit=5)), 5)
        self.assertEqual(search(catalog, "rice", limit=5), catalog[:5])

    def test_no_match(self) -> None:
        self.assertEqual(search(_foods(["Apple"]), "zucchini"), [])

    def test_empty_catalog(self) -> None:
        self.assertEqual(search([], ""), [])
        self.assertEqual(search([], "apple"), [])

    def test_exercise_catalog_searches_exercise_name(self) -> None:
        catalog = [
            ExerciseCatalogItem(id="exercise-0", category="Chest", name="Bench Press"),
            ExerciseCatalogItem(id="exercise-1", category="Press", name="Squat"),
        ]
        self.assertEqual([e.name for e in search(catalog, "press")], ["Bench Press"])

    def test_does_not_mutate_catalog(self) -> None:
        catalog = _foods(["b", "a"])
        search(catalog, "a")
        self.assertEqual([i.name for i in catalog], ["b", "a"])


class TestEntriesForDate(unittest.TestCase):
    def test_selects_matching_date_in_order(self) -> None:
        entries = [
            WaterEntry(id="1", amount=1, date="2024-01-01", time="08:00:00"),
            WaterEntry(id="2", amount=2, date="2024-01-02", time="09:00:00"),
            WaterEntry(id="3", amount=3, date="2024-01-01", time="10:00:00"),
        ]
        self.assertEqual([e.id for e in entries_for_date(entries, "2024-01-01")], ["1", "3"])
        self.assertEqual(entries_for_date(entries, "2024-02-01"), [])


if __name__ == "__main__":
    unittest.main()
