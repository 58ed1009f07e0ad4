# -*- coding: utf-8 -*-
"""Tracking - in-memory entry store for one session.

Entries are never persisted. Every mutation bumps the revision of the
collection it touched and then notifies subscribers, so derived values can
be recomputed from a consistent snapshot.
"""

from __future__ import annotations

import logging
from datetime import date as date_type
from datetime import datetime
from typing import Callable, Dict, List, Optional, Tuple
from uuid import uuid4

from ..catalog.models import ExerciseCatalogItem, FoodCatalogItem
from .models import FoodEntry, SleepEntry, WaterEntry, WeightEntry, WorkoutEntry

logger = logging.getLogger(__name__)

FOOD = "food"
WATER = "water"
WORKOUT = "workout"
SLEEP = "sleep"
WEIGHT = "weight"
DATE = "date"

COLLECTIONS: Tuple[str, ...] = (FOOD, WATER, WORKOUT, SLEEP, WEIGHT)

Listener = Callable[[str], None]


def today_iso() -> str:
    return date_type.today().isoformat()


def _new_id() -> str:
    return str(uuid4())


class EntryStore:
    """Owns all entry collections and the selected calendar date."""

    def __init__(self, selected_date: Optional[str] = None) -> None:
        self.selected_date: str = selected_date or today_iso()
        self._food: List[FoodEntry] = []
        self._water: List[WaterEntry] = []
        self._workouts: List[WorkoutEntry] = []
        self._sleep: List[SleepEntry] = []
        self._weight: List[WeightEntry] = []
        self._revisions: Dict[str, int] = {name: 0 for name in COLLECTIONS + (DATE,)}
        self._listeners: List[Listener] = []

    # ---- read access ----

    @property
    def food_entries(self) -> Tuple[FoodEntry, ...]:
        return tuple(self._food)

    @property
    def water_entries(self) -> Tuple[WaterEntry, ...]:
        return tuple(self._water)

    @property
    def workout_entries(self) -> Tuple[WorkoutEntry, ...]:
        return tuple(self._workouts)

    @property
    def sleep_entries(self) -> Tuple[SleepEntry, ...]:
        return tuple(self._sleep)

    @property
    def weight_entries(self) -> Tuple[WeightEntry, ...]:
        return tuple(self._weight)

    def revision(self, collection: str) -> int:
        return self._revisions[collection]

    def get_food(self, entry_id: str) -> Optional[FoodEntry]:
        for entry in self._food:
            if entry.id == entry_id:
                return entry
        return None

    # ---- change notification ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _changed(self, collection: str) -> None:
        self._revisions[collection] += 1
        for listener in list(self._listeners):
            listener(collection)

    # ---- mutators ----

    def select_date(self, value: str | date_type) -> None:
        iso = value.isoformat()[:10] if isinstance(value, date_type) else str(value)
        if iso == self.selected_date:
            return
        self.selected_date = iso
        self._changed(DATE)

    def add_food(self, item: FoodCatalogItem, quantity: float = 1, meal_type: str = "meal") -> FoodEntry:
        entry = FoodEntry(
            id=_new_id(),
            food=item,
            quantity=quantity,
            meal_type=meal_type,
            date=self.selected_date,
        )
        self._food.append(entry)
        self._changed(FOOD)
        return entry

    def adjust_food_quantity(self, entry_id: str, delta: float) -> Optional[FoodEntry]:
        """Change a food entry's servings by ``delta``.

        Returns the updated entry, or ``None`` when the new quantity is <= 0
        (the entry is removed) or the id is unknown.
        """
        entry = self.get_food(entry_id)
        if entry is None:
            logger.debug("adjust_food_quantity: unknown food entry %s", entry_id)
            return None
        new_quantity = entry.quantity + delta
        if new_quantity <= 0:
            self._food.remove(entry)
            self._changed(FOOD)
            return None
        entry.quantity = new_quantity
        self._changed(FOOD)
        return entry

    def increment_food(self, entry_id: str, step: float = 1) -> Optional[FoodEntry]:
        return self.adjust_food_quantity(entry_id, step)

    def decrement_food(self, entry_id: str, step: float = 1) -> Optional[FoodEntry]:
        return self.adjust_food_quantity(entry_id, -step)

    def remove_food(self, entry_id: str) -> bool:
        entry = self.get_food(entry_id)
        if entry is None:
            logger.debug("remove_food: unknown food entry %s", entry_id)
            return False
        self._food.remove(entry)
        self._changed(FOOD)
        return True

    def add_water(self, amount: float) -> WaterEntry:
        entry = WaterEntry(
            id=_new_id(),
            amount=amount,
            date=self.selected_date,
            time=datetime.now().strftime("%H:%M:%S"),
        )
        self._water.append(entry)
        self._changed(WATER)
        return entry

    def add_workout(
        self,
        exercise: ExerciseCatalogItem,
        duration: float,
        calories: float,
        sets: Optional[float] = None,
        reps: Optional[float] = None,
        weight: Optional[float] = None,
    ) -> WorkoutEntry:
        entry = WorkoutEntry(
            id=_new_id(),
            exercise=exercise,
            duration=duration,
            calories_burned=calories,
            sets=sets,
            reps=reps,
            weight=weight,
            date=self.selected_date,
        )
        self._workouts.append(entry)
        self._changed(WORKOUT)
        return entry

    def add_sleep(self, hours: float, quality: float) -> SleepEntry:
        """Log sleep for the selected date, overwriting an existing log in place."""
        for entry in self._sleep:
            if entry.date == self.selected_date:
                entry.hours = hours
                entry.quality = quality
                self._changed(SLEEP)
                return entry

        entry = SleepEntry(id=_new_id(), hours=hours, quality=quality, date=self.selected_date)
        self._sleep.append(entry)
        self._changed(SLEEP)
        return entry

    def add_weight(self, weight: float, unit: str = "lbs") -> WeightEntry:
        entry = WeightEntry(id=_new_id(), weight=weight, unit=unit, date=self.selected_date)
        self._weight.append(entry)
        self._changed(WEIGHT)
        return entry

    def clear(self) -> None:
        """Drop every entry (logout)."""
        for collection, items in (
            (FOOD, self._food),
            (WATER, self._water),
            (WORKOUT, self._workouts),
            (SLEEP, self._sleep),
            (WEIGHT, self._weight),
        ):
            if items:
                items.clear()
                self._changed(collection)
