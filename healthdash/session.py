# -*- coding: utf-8 -*-
"""Local session: fabricated user record and goals.

There is no credential check. Any non-empty username/password logs in.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field

from .errors import AuthenticationError
from .tracking.models import Goals
from .tracking.store import EntryStore

logger = logging.getLogger(__name__)

LOCAL_USER_ID = "1"


class AppUser(BaseModel):
    id: str
    username: str = Field(..., min_length=1)
    email: str = ""
    goals: Goals = Field(default_factory=Goals)


def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


class Session:
    def __init__(self, store: Optional[EntryStore] = None) -> None:
        self.store = store or EntryStore()
        self.user: Optional[AppUser] = None

    @property
    def is_logged_in(self) -> bool:
        return self.user is not None

    @property
    def goals(self) -> Goals:
        return self.user.goals if self.user else Goals()

    def login(self, username: str, password: str) -> AppUser:
        if _blank(username) or _blank(password):
            raise AuthenticationError("Username and password are required")
        self.user = AppUser(id=LOCAL_USER_ID, username=username, email=f"{username}@example.com")
        logger.info("Local login for %s", username)
        return self.user

    def register(self, username: str, email: str, password: str) -> AppUser:
        if _blank(username) or _blank(email) or _blank(password):
            raise AuthenticationError("Username, email and password are required")
        self.user = AppUser(id=LOCAL_USER_ID, username=username, email=email)
        logger.info("Local registration for %s", username)
        return self.user

    def logout(self) -> None:
        self.user = None
        self.store.clear()

    def update_goals(self, goals: Goals) -> Optional[AppUser]:
        if self.user is None:
            logger.debug("update_goals ignored: no user logged in")
            return None
        self.user = self.user.model_copy(update={"goals": goals})
        return self.user
