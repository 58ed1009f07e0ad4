# -*- coding: utf-8 -*-
"""Exceptions raised by the tracking engine."""

from __future__ import annotations


class HealthDashError(Exception):
    """Base class for all engine errors."""


class CatalogLoadError(HealthDashError):
    """A reference catalog could not be fetched."""

    def __init__(self, source_url: str, reason: str) -> None:
        super().__init__(f"Failed to load catalog from {source_url}: {reason}")
        self.source_url = source_url
        self.reason = reason


class AuthenticationError(HealthDashError, ValueError):
    """Login or registration was attempted with missing credentials."""
