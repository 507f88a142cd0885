# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_event
from volunteer_hub.db.database import get_db
from volunteer_hub.db.models import User
from volunteer_hub.dependencies import get_current_admin, get_current_user, get_notification_service
from volunteer_hub.exceptions import EventNotFound
from volunteer_hub.schemas import schemas
from volunteer_hub.services.assignment_service import ASSIGNED_STATUS, AssignmentService
from volunteer_hub.services.matching_service import MatchingService
from volunteer_hub.services.notification_service import NotificationService

router = APIRouter(
    prefix="/events",
    tags=["Events"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=schemas.Event, status_code=status.HTTP_201_CREATED)
def create_event(
    event: schemas.EventCreate,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """
    Creates a new event. (Admin access required)
    """
    return crud_event.create_event(db, event, created_by=current_admin.id)


@router.get("/", response_model=List[schemas.Event])
def read_events(
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
    skip: int = 0,
    limit: int = 100,
):
    """
    Retrieves all events that have not been deleted. (Admin access required)
    """
    return crud_event.get_events(db, skip=skip, limit=limit)


@router.get("/{event_id}", response_model=schemas.Event)
def read_event(
    event_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Retrieves a single event by ID.
    """
    db_event = crud_event.get_event(db, event_id)
    if db_event is None:
        raise EventNotFound(event_id)
    return db_event


@router.put("/{event_id}", response_model=schemas.Event)
def update_event(
    event_id: str,
    event: schemas.EventCreate,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Replaces an event and notifies its assigned volunteers. (Admin access required)
    """
    return crud_event.update_event(db, event_id, event, notification_service)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: str,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """
    Marks an event as deleted. (Admin access required)
    """
    if not crud_event.delete_event(db, event_id):
        raise EventNotFound(event_id)


@router.get("/{event_id}/matches", response_model=List[schemas.EligibleVolunteer])
def check_matches(
    event_id: str,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """
    Lists the volunteers eligible for the event. (Admin access required)
    """
    return MatchingService(db).find_eligible_volunteers(event_id)


@router.post("/{event_id}/assign", response_model=schemas.AssignmentResult)
def assign_volunteer(
    event_id: str,
    assignment: schemas.AssignmentRequest,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Assigns a volunteer to the event. (Admin access required)
    """
    service = AssignmentService(db, notification_service)
    service.assign(event_id, assignment.volunteer_id)
    return schemas.AssignmentResult(
        event_id=event_id, volunteer_id=assignment.volunteer_id, status=ASSIGNED_STATUS
    )
