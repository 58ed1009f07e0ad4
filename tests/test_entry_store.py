# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date

from healthdash.catalog.models import ExerciseCatalogItem, FoodCatalogItem
from healthdash.tracking.store import EntryStore

APPLE = FoodCatalogItem(id="food-0", name="Apple", calories=95, protein_g=0.5, carbs_g=25, fat_g=0.3)
SQUAT = ExerciseCatalogItem(id="exercise-0", category="Legs", name="Squat", progress_metric="weight")


class TestEntryStore(unittest.TestCase):
    def setUp(self) -> None:
        self.store = EntryStore(selected_date="2024-01-01")
        self.events = []
        self.store.subscribe(self.events.append)

    def test_default_selected_date_is_today(self) -> None:
        self.assertEqual(EntryStore().selected_date, date.today().isoformat())

    def test_add_food_uses_selected_date_and_shares_catalog_item(self) -> None:
        entry = self.store.add_food(APPLE, quantity=2, meal_type="breakfast")
        self.assertEqual(entry.date, "2024-01-01")
        self.assertEqual(entry.quantity, 2)
        self.assertEqual(entry.meal_type, "breakfast")
        self.assertIs(entry.food, APPLE)
        self.assertEqual(self.events, ["food"])

    def test_add_food_defaults(self) -> None:
        entry = self.store.add_food(APPLE)
        self.assertEqual(entry.quantity, 1)
        self.assertEqual(entry.meal_type, "meal")

    def test_ids_are_unique(self) -> None:
        ids = {self.store.add_food(APPLE).id for _ in range(25)}
        ids.add(self.store.add_water(8).id)
        self.assertEqual(len(ids), 26)

    def test_duplicate_dates_append(self) -> None:
        self.store.add_food(APPLE)
        self.store.add_food(APPLE)
        self.store.add_water(8)
        self.store.add_water(8)
        self.store.add_workout(SQUAT, 30, 200)
        self.store.add_workout(SQUAT, 30, 200)
        self.store.add_weight(150, "lbs")
        self.store.add_weight(150, "lbs")
        self.assertEqual(len(self.store.food_entries), 2)
        self.assertEqual(len(self.store.water_entries), 2)
        self.assertEqual(len(self.store.workout_entries), 2)
        self.assertEqual(len(self.store.weight_entries), 2)

    def test_increment_has_no_upper_bound(self) -> None:
        entry = self.store.add_food(APPLE)
        for _ in range(100):
            self.store.increment_food(entry.id)
        self.assertEqual(self.store.get_food(entry.id).quantity, 101)

    def test_decrement_to_zero_removes_entry(self) -> None:
        entry = self.store.add_food(APPLE, quantity=2)
        updated = self.store.decrement_food(entry.id)
        self.assertIsNotNone(updated)
        self.assertEqual(updated.quantity, 1)
        self.assertIsNone(self.store.decrement_food(entry.id))
        self.assertEqual(self.store.food_entries, ())
        self.assertIsNone(self.store.get_food(entry.id))

    def test_decrement_below_zero_removes_entry(self) -> None:
        entry = self.store.add_food(APPLE, quantity=0.5)
        self.assertIsNone(self.store.decrement_food(entry.id))
        self.assertEqual(self.store.food_entries, ())

    def test_unknown_entry_is_a_no_op(self) -> None:
        self.assertIsNone(self.store.increment_food("missing"))
        self.assertFalse(self.store.remove_food("missing"))
        self.assertEqual(self.events, [])

    def test_remove_food(self) -> None:
        keep = self.store.add_food(APPLE)
        drop = self.store.add_food(APPLE)
        self.assertTrue(self.store.remove_food(drop.id))
        self.assertEqual([e.id for e in self.store.food_entries], [keep.id])

    def test_add_water_records_time(self) -> None:
        entry = self.store.add_water(8)
        self.assertEqual(entry.amount, 8)
        self.assertEqual(entry.date, "2024-01-01")
        self.assertRegex(entry.time, r"^\d{2}:\d{2}:\d{2}$")

    def test_add_workout_optional_fields(self) -> None:
        plain = self.store.add_workout(SQUAT, 30, 200)
        self.assertIsNone(plain.sets)
        self.assertIsNone(plain.reps)
        self.assertIsNone(plain.weight)
        detailed = self.store.add_workout(SQUAT, 45, 320, sets=3, reps=10, weight=50)
        self.assertEqual((detailed.sets, detailed.reps, detailed.weight), (3, 10, 50))
        self.assertEqual(detailed.calories_burned, 320)
        self.assertIs(detailed.exercise, SQUAT)

    def test_second_sleep_log_overwrites_in_place(self) -> None:
        first = self.store.add_sleep(7, 8)
        second = self.store.add_sleep(6, 9)
        self.assertEqual(len(self.store.sleep_entries), 1)
        self.assertEqual(first.id, second.id)
        only = self.store.sleep_entries[0]
        self.assertEqual((only.hours, only.quality), (6, 9))

    def test_sleep_on_other_date_appends(self) -> None:
        self.store.add_sleep(7, 8)
        self.store.select_date("2024-01-02")
        self.store.add_sleep(6, 9)
        self.assertEqual([e.date for e in self.store.sleep_entries], ["2024-01-01", "2024-01-02"])

    def test_weight_unit(self) -> None:
        self.assertEqual(self.store.add_weight(70, "kg").unit, "kg")
        self.assertEqual(self.store.add_weight(150).unit, "lbs")

    def test_select_date_accepts_date_and_notifies_once(self) -> None:
        self.store.select_date(date(2024, 3, 5))
        self.store.select_date("2024-03-05")
        self.assertEqual(self.store.selected_date, "2024-03-05")
        self.assertEqual(self.events, ["date"])
        self.assertEqual(self.store.revision("date"), 1)

    def test_revisions_track_each_collection(self) -> None:
        entry = self.store.add_food(APPLE)
        self.store.increment_food(entry.id)
        self.store.add_water(4)
        self.assertEqual(self.store.revision("food"), 2)
        self.assertEqual(self.store.revision("water"), 1)
        self.assertEqual(self.store.revision("sleep"), 0)

    def test_listener_sees_applied_mutation(self) -> None:
        seen = []
        self.store.subscribe(lambda _: seen.append(len(self.store.sleep_entries)))
        self.store.add_sleep(8, 7)
        self.store.add_sleep(5, 3)
        self.assertEqual(seen, [1, 1])
        self.assertEqual(self.store.sleep_entries[0].hours, 5)

    def test_unsubscribe(self) -> None:
        seen = []
        unsubscribe = self.store.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        self.store.add_water(1)
        self.assertEqual(seen, [])

    def test_clear_drops_everything(self) -> None:
        self.store.add_food(APPLE)
        self.store.add_sleep(8, 8)
        self.events.clear()
        self.store.clear()
        self.assertEqual(self.store.food_entries, ())
        self.assertEqual(self.store.sleep_entries, ())
        self.assertEqual(sorted(self.events), ["food", "sleep"])

    def test_collections_are_read_only_snapshots(self) -> None:
        self.store.add_water(1)
        snapshot = self.store.water_entries
        self.store.add_water(2)
        self.assertEqual(len(snapshot), 1)
        self.assertEqual(len(self.store.water_entries), 2)


if __name__ == "__main__":
    unittest.main()
