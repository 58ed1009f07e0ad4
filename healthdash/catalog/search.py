# -*- coding: utf-8 -*-
"""Name search over catalogs and date-scoped selection over entries."""

from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 20


def search(catalog: Sequence[T], query: str, limit: int = DEFAULT_LIMIT) -> List[T]:
    """Return up to ``limit`` catalog items whose name contains ``query``.

    A blank query returns the head of the catalog in load order. Matching is
    a case-insensitive substring test and keeps catalog order.
    """
    if limit <= 0 or not catalog:
        return []
    if not (query or "").strip():
        return list(catalog[:limit])

    needle = query.lower()
    out: List[T] = []
    for item in catalog:
        if needle in (getattr(item, "name", "") or "").lower():
            out.append(item)
            if len(out) >= limit:
                break
    return out


def entries_for_date(entries: Iterable[T], date: str) -> List[T]:
    return [e for e in entries if getattr(e, "date", None) == date]
