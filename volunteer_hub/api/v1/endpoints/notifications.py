"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Wed Oct 15 2025
# SPDX-License-Identifier: MIT
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_assignment, crud_notification
from volunteer_hub.db.database import get_db
from volunteer_hub.db.models import User
from volunteer_hub.dependencies import get_current_user
from volunteer_hub.exceptions import NotFoundError
from volunteer_hub.schemas import schemas

router = APIRouter(
    tags=["Notifications"],
    responses={404: {"description": "Not found"}},
)


@router.get("/notifications", response_model=List[schemas.Notification])
def read_notifications(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    skip: int = 0,
    limit: int = 100,
):
    """
    Retrieves the current user's notifications, newest first.
    """
    return crud_notification.get_notifications_for_user(db, current_user.id, skip=skip, limit=limit)


@router.post("/notifications/{notification_id}/read", response_model=schemas.Notification)
def mark_notification_read(
    notification_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    db_notification = crud_notification.mark_as_read(db, notification_id, current_user.id)
    if db_notification is None:
        raise NotFoundError("notification_not_found", f"Notification {notification_id} not found")
    return db_notification


@router.get("/history", response_model=List[schemas.HistoryEntry])
def read_history(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Retrieves the current user's volunteering history.
    """
    entries = crud_assignment.get_history_for_volunteer(db, current_user.id)
    return [
        schemas.HistoryEntry(
            id=entry.id,
            event_id=entry.event_id,
            event_name=entry.event.name if entry.event else None,
            status=entry.status,
            assigned_at=entry.assigned_at,
        )
        for entry in entries
    ]
