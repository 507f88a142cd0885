# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_assignment, crud_profile
from volunteer_hub.db.database import get_db
from volunteer_hub.db.models import User
from volunteer_hub.dependencies import get_current_user
from volunteer_hub.exceptions import NotFoundError
from volunteer_hub.schemas import schemas

router = APIRouter(
    prefix="/profile",
    tags=["Profile"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=schemas.Profile)
def read_profile(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Retrieves the current user's volunteer profile.
    """
    db_profile = crud_profile.get_profile(db, current_user.id)
    if db_profile is None:
        raise NotFoundError("user_not_found", "Profile not found")
    return db_profile


@router.put("/", response_model=schemas.Profile)
def update_profile(
    profile: schemas.ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Updates the current user's profile. A provided skill list replaces the stored one.
    """
    return crud_profile.update_profile(db, current_user.id, profile)


@router.get("/events", response_model=List[schemas.Event])
def read_assigned_events(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Lists the events the current user is assigned to.
    """
    return crud_assignment.get_assigned_events(db, current_user.id)
