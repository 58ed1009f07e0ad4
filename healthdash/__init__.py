# -*- coding: utf-8 -*-
"""
Health dashboard tracking engine.

Catalog loading and search, the session entry store, daily aggregation and
trend series for the dashboard views.
"""

from .dashboard import Dashboard
from .errors import AuthenticationError, CatalogLoadError, HealthDashError
from .session import AppUser, Session
from .tracking import EntryStore, Goals

__all__ = [
    'AppUser',
    'AuthenticationError',
    'CatalogLoadError',
    'Dashboard',
    'EntryStore',
    'Goals',
    'HealthDashError',
    'Session',
]
