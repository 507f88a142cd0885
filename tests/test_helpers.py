# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from volunteer_hub.db import models
from volunteer_hub.utils.security import get_password_hash

_PASSWORD_HASH = None


class MockBackgroundTasks:
    def __init__(self):
        self.tasks = []

    def add_task(self, func, *args, **kwargs):
        # Record only; tests decide whether to run them
        self.tasks.append((func, args, kwargs))

    def run_tasks(self):
        for func, args, kwargs in self.tasks:
            func(*args, **kwargs)
        self.tasks.clear()


def _password_hash() -> str:
    global _PASSWORD_HASH
    if _PASSWORD_HASH is None:
        _PASSWORD_HASH = get_password_hash("testpassword")
    return _PASSWORD_HASH


def create_volunteer(
    db_session: Session,
    email: str,
    full_name: Optional[str] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    skills: Iterable[str] = (),
    availability_start: Optional[date] = None,
    availability_end: Optional[date] = None,
    is_email_verified: bool = True,
    is_admin: bool = False,
) -> models.User:
    """
    Inserts a user with a filled-in profile. The password is always "testpassword".
    """
    user = models.User(
        email=email,
        password=_password_hash(),
        is_email_verified=1 if is_email_verified else 0,
        is_admin=1 if is_admin else 0,
        profile=models.UserProfile(
            full_name=full_name,
            city=city,
            state=state,
            availability_start=availability_start,
            availability_end=availability_end,
            skills=[models.UserSkill(skill=s) for s in skills],
        ),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_event(
    db_session: Session,
    name: str = "Food Drive",
    location: Optional[str] = "Austin, TX",
    event_date: Optional[str] = "2025-07-02",
    skills: Iterable[str] = (),
    urgency: str = "high",
    is_deleted: bool = False,
) -> models.Event:
    event = models.Event(
        name=name,
        description=f"{name} description",
        location=location,
        date=event_date,
        urgency=urgency,
        is_deleted=1 if is_deleted else 0,
        skills=[models.EventSkill(skill=s) for s in skills],
    )
    db_session.add(event)
    db_session.commit()
    db_session.refresh(event)
    return event
