from __future__ import annotations

import os


DEFAULT_FOOD_CATALOG_URL = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
    "nutrition_facts-WuHMtwNPhC6V24rBM4IpHTkTzmT6Oh.csv"
)
DEFAULT_EXERCISE_CATALOG_URL = (
    "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
    "exercises_progress_with_categories-qNUlDL96k5VmJXE0LB6YikfqJnbjLs.csv"
)


class Settings:
    """Centralized configuration for the tracking engine."""

    def __init__(self) -> None:
        self.food_catalog_url: str = (
            os.environ.get("HEALTHDASH_FOOD_CATALOG_URL") or DEFAULT_FOOD_CATALOG_URL
        )
        self.exercise_catalog_url: str = (
            os.environ.get("HEALTHDASH_EXERCISE_CATALOG_URL") or DEFAULT_EXERCISE_CATALOG_URL
        )
        self.fetch_timeout: float = float(
            os.environ.get("HEALTHDASH_FETCH_TIMEOUT") or "30"
        )
        self.search_limit: int = int(os.environ.get("HEALTHDASH_SEARCH_LIMIT") or "20")
        self.trend_days: int = int(os.environ.get("HEALTHDASH_TREND_DAYS") or "7")
        self.weight_window: int = int(os.environ.get("HEALTHDASH_WEIGHT_WINDOW") or "30")
        self.affirmation_interval: float = float(
            os.environ.get("HEALTHDASH_AFFIRMATION_INTERVAL") or "5"
        )
        self.log_level: str = (
            os.environ.get("HEALTHDASH_LOG_LEVEL") or "WARNING"
        ).strip().upper()


settings = Settings()
