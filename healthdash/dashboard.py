# -*- coding: utf-8 -*-
"""Dashboard facade used by the presentation layer.

Wires the catalogs, the entry store and the local session together and
memoizes derived values. A cached value is dropped as soon as the store
reports a change to one of the collections it was computed from.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx

from .catalog.loader import RowParser, load_catalog, parse_exercise_row, parse_food_row
from .catalog.models import ExerciseCatalogItem, FoodCatalogItem
from .catalog.search import search
from .config import Settings, settings as default_settings
from .errors import CatalogLoadError
from .session import Session
from .summary import aggregate
from .summary.models import DailyTotals, DaySummary
from .tracking.models import Goals, WeightEntry
from .tracking.store import COLLECTIONS, DATE, FOOD, SLEEP, WATER, WEIGHT, WORKOUT, EntryStore, today_iso
from .trends.models import WeightPoint, WorkoutPoint
from .trends.series import weight_series, workout_series

logger = logging.getLogger(__name__)

FOODS = "foods"
EXERCISES = "exercises"

# Store collections each memoized value reads.
_DEPENDS: Dict[str, Tuple[str, ...]] = {
    "totals": (FOOD, DATE),
    "water": (WATER, DATE),
    "sleep_hours": (SLEEP, DATE),
    "latest_weight": (WEIGHT,),
    "calories_burned": (WORKOUT, DATE),
    "day_summary": COLLECTIONS + (DATE,),
    "workout_chart": (WORKOUT,),
    "weight_chart": (WEIGHT,),
}


class Dashboard:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[Session] = None,
        store: Optional[EntryStore] = None,
    ) -> None:
        if session is not None and store is not None and session.store is not store:
            raise ValueError("store must be the session's store when both are given")
        self.settings = settings or default_settings
        self.session = session or Session(store)
        self.store = self.session.store
        self.foods: List[FoodCatalogItem] = []
        self.exercises: List[ExerciseCatalogItem] = []
        self.load_errors: Dict[str, str] = {}
        self.food_catalog_loading = False
        self._cache: Dict[str, Tuple[Any, Any]] = {}
        self._unsubscribe = self.store.subscribe(self._invalidate)

    @property
    def goals(self) -> Goals:
        return self.session.goals

    # ---- catalogs ----

    async def _fetch(
        self,
        name: str,
        url: str,
        parser: RowParser,
        client: Optional[httpx.AsyncClient],
    ) -> List[Any]:
        try:
            items = await load_catalog(url, parser, client=client, timeout=self.settings.fetch_timeout)
        except CatalogLoadError as exc:
            logger.warning("Error loading %s catalog: %s", name, exc)
            self.load_errors[name] = str(exc)
            return []
        self.load_errors.pop(name, None)
        return items

    async def _load_foods(self, client: Optional[httpx.AsyncClient]) -> None:
        self.food_catalog_loading = True
        try:
            self.foods = await self._fetch(FOODS, self.settings.food_catalog_url, parse_food_row, client)
        finally:
            self.food_catalog_loading = False

    async def _load_exercises(self, client: Optional[httpx.AsyncClient]) -> None:
        self.exercises = await self._fetch(
            EXERCISES, self.settings.exercise_catalog_url, parse_exercise_row, client
        )

    async def load_catalogs(self, client: Optional[httpx.AsyncClient] = None) -> Dict[str, str]:
        """Fetch both catalogs concurrently.

        A failed catalog is left empty and its error kept in ``load_errors``;
        calling again retries. Returns a copy of ``load_errors``.
        """
        await asyncio.gather(self._load_foods(client), self._load_exercises(client))
        return dict(self.load_errors)

    def search_foods(self, query: str) -> List[FoodCatalogItem]:
        return search(self.foods, query, limit=self.settings.search_limit)

    def search_exercises(self, query: str) -> List[ExerciseCatalogItem]:
        return search(self.exercises, query, limit=self.settings.search_limit)

    # ---- memoization ----

    def _invalidate(self, collection: str) -> None:
        for name, depends in _DEPENDS.items():
            if collection in depends:
                self._cache.pop(name, None)

    def _memo(self, name: str, key: Any, compute: Callable[[], Any]) -> Any:
        cached = self._cache.get(name)
        if cached is not None and cached[0] == key:
            return cached[1]
        value = compute()
        self._cache[name] = (key, value)
        return value

    # ---- derived values ----

    def totals(self) -> DailyTotals:
        return self._memo(
            "totals", None,
            lambda: aggregate.daily_totals(self.store.food_entries, self.store.selected_date),
        )

    def water(self) -> float:
        return self._memo(
            "water", None,
            lambda: aggregate.total_water(self.store.water_entries, self.store.selected_date),
        )

    def sleep_hours(self) -> float:
        return self._memo(
            "sleep_hours", None,
            lambda: aggregate.sleep_for_date(self.store.sleep_entries, self.store.selected_date),
        )

    def latest_weight(self) -> Optional[WeightEntry]:
        entry = self._memo("latest_weight", None, lambda: aggregate.latest_weight(self.store.weight_entries))
        return entry.model_copy() if entry is not None else None

    def calories_burned(self) -> float:
        return self._memo(
            "calories_burned", None,
            lambda: aggregate.calories_burned(self.store.workout_entries, self.store.selected_date),
        )

    def day_summary(self) -> DaySummary:
        goals = self.goals
        summary = self._memo(
            "day_summary", goals,
            lambda: aggregate.summarize_day(self.store, self.store.selected_date, goals),
        )
        # The nested weight entry is the only mutable part of a summary.
        return summary.model_copy(deep=True)

    def workout_chart(self, today: Optional[str] = None) -> Tuple[WorkoutPoint, ...]:
        day = today or today_iso()
        days = self.settings.trend_days
        return self._memo(
            "workout_chart", (day, days),
            lambda: tuple(workout_series(self.store.workout_entries, day, days=days)),
        )

    def weight_chart(self) -> Tuple[WeightPoint, ...]:
        target = self.goals.weight_target
        limit = self.settings.weight_window
        return self._memo(
            "weight_chart", (target, limit),
            lambda: tuple(weight_series(self.store.weight_entries, target, limit=limit)),
        )

    def close(self) -> None:
        self._unsubscribe()
        self._cache.clear()
