"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

from datetime import datetime, timezone

from sqlalchemy.orm import Session

from volunteer_hub.db import models


def create_notification(db: Session, user_id: str, header: str, description: str):
    """
    Stores an unread notification for a user.
    """
    db_notification = models.Notification(
        user_id=user_id,
        header=header,
        description=description,
        created_at=datetime.now(timezone.utc),
        is_unread=1,
    )
    db.add(db_notification)
    db.commit()
    db.refresh(db_notification)
    return db_notification


def get_notifications_for_user(db: Session, user_id: str, skip: int = 0, limit: int = 100):
    return (
        db.query(models.Notification)
        .filter(models.Notification.user_id == user_id)
        .order_by(models.Notification.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def mark_as_read(db: Session, notification_id: str, user_id: str):
    db_notification = (
        db.query(models.Notification)
        .filter(models.Notification.id == notification_id, models.Notification.user_id == user_id)
        .first()
    )
    if db_notification is None:
        return None
    db_notification.is_unread = 0
    db.commit()
    db.refresh(db_notification)
    return db_notification
