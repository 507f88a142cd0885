# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_assignment, crud_directory
from volunteer_hub.db import models
from volunteer_hub.exceptions import EventNotFound, ValidationFailure
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.dates import parse_iso_date

logger = logging.getLogger(__name__)


def get_event(db: Session, event_id: str, include_deleted: bool = False):
    query = db.query(models.Event).filter(models.Event.id == event_id)
    if not include_deleted:
        query = query.filter(models.Event.is_deleted == 0)
    return query.first()


def get_events(db: Session, skip: int = 0, limit: int = 100):
    return (
        db.query(models.Event)
        .filter(models.Event.is_deleted == 0)
        .order_by(models.Event.date)
        .offset(skip)
        .limit(limit)
        .all()
    )


def _validate_event(db: Session, event: schemas.EventCreate):
    if parse_iso_date(event.date) is None:
        raise ValidationFailure("invalid_date", f"Invalid event date: {event.date}")
    unknown = crud_directory.get_unknown_skills(db, event.skills)
    if unknown:
        raise ValidationFailure("invalid_skill", f"Unknown skills: {', '.join(sorted(unknown))}")


def create_event(db: Session, event: schemas.EventCreate, created_by: str):
    _validate_event(db, event)
    db_event = models.Event(
        name=event.name,
        description=event.description,
        location=event.location,
        urgency=event.urgency,
        date=event.date,
        created_by=created_by,
        skills=[models.EventSkill(skill=label) for label in set(event.skills)],
    )
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    return db_event


def update_event(db: Session, event_id: str, event: schemas.EventCreate, notification_service):
    """
    Replaces every field of the event, required skills included, and notifies
    the volunteers currently assigned to it.
    """
    db_event = get_event(db, event_id)
    if db_event is None:
        raise EventNotFound(event_id)
    _validate_event(db, event)

    for key, value in event.model_dump(exclude={"skills"}).items():
        setattr(db_event, key, value)
    db_event.skills = [models.EventSkill(skill=label) for label in set(event.skills)]
    db.commit()
    db.refresh(db_event)

    assigned_ids = crud_assignment.get_assigned_volunteer_ids(db, db_event.id)
    body = f"{db_event.name} has been updated. It now takes place on {db_event.date} at {db_event.location}."
    for volunteer_id in assigned_ids:
        try:
            notification_service.notify(volunteer_id, "Event Updated", body)
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Could not notify volunteer %s about update of event %s", volunteer_id, event_id)
    logger.info("Event %s updated, %d assigned volunteers notified", db_event.id, len(assigned_ids))
    return db_event


def delete_event(db: Session, event_id: str):
    db_event = get_event(db, event_id)
    if db_event is None:
        return False
    db_event.is_deleted = 1
    db.commit()
    return True
