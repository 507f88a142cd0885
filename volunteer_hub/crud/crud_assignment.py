"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Jul 15 2025
# SPDX-License-Identifier: MIT
"""

from datetime import datetime

from sqlalchemy.orm import Session

from volunteer_hub.db import models


def get_assignment(db: Session, event_id: str, volunteer_id: str):
    return (
        db.query(models.EventAssignment)
        .filter(
            models.EventAssignment.event_id == event_id,
            models.EventAssignment.user_id == volunteer_id,
        )
        .first()
    )


def get_assigned_volunteer_ids(db: Session, event_id: str):
    """
    Returns a set of volunteer IDs that are already assigned to the event.
    """
    rows = db.query(models.EventAssignment.user_id).filter(models.EventAssignment.event_id == event_id).all()
    return {row.user_id for row in rows}


def get_assigned_events(db: Session, volunteer_id: str):
    """
    Retrieves the non-deleted events a volunteer is assigned to.
    """
    return (
        db.query(models.Event)
        .join(models.EventAssignment, models.EventAssignment.event_id == models.Event.id)
        .filter(models.EventAssignment.user_id == volunteer_id, models.Event.is_deleted == 0)
        .all()
    )


def add_assignment(db: Session, event_id: str, volunteer_id: str):
    """
    Stages an assignment row. The caller owns the transaction.
    """
    db_assignment = models.EventAssignment(event_id=event_id, user_id=volunteer_id)
    db.add(db_assignment)
    db.flush()
    return db_assignment


def add_history_entry(db: Session, event_id: str, volunteer_id: str, status: str, assigned_at: datetime):
    """
    Stages a history row. The caller owns the transaction.
    """
    db_entry = models.VolunteerHistory(
        event_id=event_id, user_id=volunteer_id, status=status, assigned_at=assigned_at
    )
    db.add(db_entry)
    db.flush()
    return db_entry


def get_history_for_volunteer(db: Session, volunteer_id: str):
    return (
        db.query(models.VolunteerHistory)
        .filter(models.VolunteerHistory.user_id == volunteer_id)
        .order_by(models.VolunteerHistory.assigned_at.desc())
        .all()
    )
