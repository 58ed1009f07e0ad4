# -*- coding: utf-8 -*-
"""Catalog loading over HTTP.

Both reference datasets are plain comma-delimited text with a header row.
Columns are read by fixed position; the parsers never raise on a bad row.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, List, Optional, Sequence, TypeVar

import httpx

from ..config import settings
from ..errors import CatalogLoadError
from .models import ExerciseCatalogItem, FoodCatalogItem

logger = logging.getLogger(__name__)

T = TypeVar("T")

RowParser = Callable[[int, Sequence[str]], T]
NameOf = Callable[[Any], str]

DELIMITER = ","

_NUM_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _column(values: Sequence[str], index: int) -> str:
    if index < len(values):
        return values[index] or ""
    return ""


def record_name(item: Any) -> str:
    """Default name lookup: the record's ``name`` attribute."""
    return getattr(item, "name", "") or ""


def _coerce_float(value: Any) -> float:
    """Parse the leading number of a cell, 0.0 when there is none."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).strip()
    if not s:
        return 0.0
    m = _NUM_RE.match(s)
    if not m:
        return 0.0
    try:
        return float(m.group(0))
    except ValueError:
        return 0.0


def parse_food_row(index: int, values: Sequence[str]) -> FoodCatalogItem:
    return FoodCatalogItem(
        id=f"food-{index}",
        name=_column(values, 0),
        serving_size=_column(values, 3),
        calories=_coerce_float(_column(values, 4)),
        protein_g=_coerce_float(_column(values, 13)),
        carbs_g=_coerce_float(_column(values, 10)),
        fat_g=_coerce_float(_column(values, 6)),
        sodium_mg=_coerce_float(_column(values, 9)),
        sugars_g=_coerce_float(_column(values, 12)),
    )


def parse_exercise_row(index: int, values: Sequence[str]) -> ExerciseCatalogItem:
    return ExerciseCatalogItem(
        id=f"exercise-{index}",
        category=_column(values, 0),
        name=_column(values, 1),
        progress_metric=_column(values, 2),
    )


def parse_catalog_text(text: str, row_parser: RowParser, name_of: NameOf = record_name) -> List[T]:
    """Turn raw delimited text into catalog records.

    The first line is a header and is skipped. Row identities come from the
    line position after the header, so reloading the same text yields the
    same ids. Records for which ``name_of`` returns a blank string are
    dropped; the default reads a ``name`` attribute, so parsers returning
    other shapes (dicts, tuples) must pass their own ``name_of``.
    """
    lines = text.splitlines()
    items: List[T] = []
    dropped = 0
    for index, line in enumerate(lines[1:]):
        item = row_parser(index, line.split(DELIMITER))
        if not (name_of(item) or "").strip():
            dropped += 1
            continue
        items.append(item)
    if dropped:
        logger.debug("Dropped %d catalog rows without a name", dropped)
    return items


async def load_catalog(
    source_url: str,
    row_parser: RowParser,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[float] = None,
    name_of: NameOf = record_name,
) -> List[T]:
    """Fetch ``source_url`` and parse it with ``row_parser``.

    Raises :class:`CatalogLoadError` on any transport-level failure. A
    caller-supplied ``client`` is used as-is and left open.
    """
    try:
        if client is not None:
            resp = await client.get(source_url)
            resp.raise_for_status()
            text = resp.text
        else:
            async with httpx.AsyncClient(
                timeout=timeout if timeout is not None else settings.fetch_timeout,
                follow_redirects=True,
            ) as owned:
                resp = await owned.get(source_url)
                resp.raise_for_status()
                text = resp.text
    except httpx.HTTPStatusError as exc:
        raise CatalogLoadError(source_url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise CatalogLoadError(source_url, str(exc) or exc.__class__.__name__) from exc
    except httpx.InvalidURL as exc:
        raise CatalogLoadError(source_url, f"invalid URL: {exc}") from exc

    items = parse_catalog_text(text, row_parser, name_of)
    logger.info("Loaded %d catalog rows from %s", len(items), source_url)
    return items


async def load_food_catalog(*, client: Optional[httpx.AsyncClient] = None) -> List[FoodCatalogItem]:
    return await load_catalog(settings.food_catalog_url, parse_food_row, client=client)


async def load_exercise_catalog(*, client: Optional[httpx.AsyncClient] = None) -> List[ExerciseCatalogItem]:
    return await load_catalog(settings.exercise_catalog_url, parse_exercise_row, client=client)
