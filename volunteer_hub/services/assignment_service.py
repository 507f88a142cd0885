"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_assignment, crud_event, crud_user
from volunteer_hub.db import models
from volunteer_hub.exceptions import (
    AlreadyAssigned,
    EventNotFound,
    TransactionFailed,
    ValidationFailure,
    VolunteerNotFound,
)
from volunteer_hub.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

ASSIGNED_STATUS = "Assigned"


class AssignmentService:
    def __init__(self, db: Session, notification_service: NotificationService):
        self.db = db
        self.notification_service = notification_service

    def assign(self, event_id: str, volunteer_id: str) -> models.EventAssignment:
        """
        Assigns a volunteer to an event and records the history entry in a
        single transaction, then notifies the volunteer.
        """
        if not event_id or not event_id.strip():
            raise ValidationFailure("missing_event", "An event id is required")
        if not volunteer_id or not volunteer_id.strip():
            raise ValidationFailure("missing_volunteer", "A volunteer id is required")

        # Only existence is checked here; soft-deleted events can still be assigned.
        event = crud_event.get_event(self.db, event_id, include_deleted=True)
        if event is None:
            raise EventNotFound(event_id)

        volunteer = crud_user.get_user(self.db, volunteer_id)
        if volunteer is None or volunteer.is_admin:
            raise VolunteerNotFound(volunteer_id)

        if crud_assignment.get_assignment(self.db, event_id, volunteer_id) is not None:
            raise AlreadyAssigned(event_id, volunteer_id)

        assignment = self._commit_assignment(event_id, volunteer_id)

        self._notify_assigned(event, volunteer_id)
        return assignment

    def _commit_assignment(self, event_id: str, volunteer_id: str) -> models.EventAssignment:
        try:
            assignment = crud_assignment.add_assignment(self.db, event_id, volunteer_id)
            crud_assignment.add_history_entry(
                self.db, event_id, volunteer_id, ASSIGNED_STATUS, datetime.now(timezone.utc)
            )
            self.db.commit()
        except IntegrityError:
            # A concurrent request committed the same pair first.
            self.db.rollback()
            logger.info("Duplicate assignment of volunteer %s to event %s rejected", volunteer_id, event_id)
            raise AlreadyAssigned(event_id, volunteer_id)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Assignment of volunteer %s to event %s failed", volunteer_id, event_id)
            raise TransactionFailed()

        logger.info("Volunteer %s assigned to event %s", volunteer_id, event_id)
        return assignment

    def _notify_assigned(self, event: models.Event, volunteer_id: str) -> None:
        try:
            self.notification_service.notify(
                volunteer_id,
                "New Event Assignment",
                f"You have been assigned to {event.name} on {event.date}.",
            )
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Could not notify volunteer %s about event %s", volunteer_id, event.id)
