# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from sqlalchemy.orm import Session, joinedload

from volunteer_hub.crud import crud_directory
from volunteer_hub.db import models
from volunteer_hub.exceptions import NotFoundError, ValidationFailure
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.dates import parse_iso_date


def get_profile(db: Session, user_id: str):
    return db.query(models.UserProfile).filter(models.UserProfile.user_id == user_id).first()


def get_volunteer_profiles(db: Session):
    """
    Retrieves the profiles of every non-admin account.
    """
    return (
        db.query(models.UserProfile)
        .join(models.User, models.User.id == models.UserProfile.user_id)
        .options(joinedload(models.UserProfile.user))
        .filter(models.User.is_admin == 0)
        .all()
    )


def _parse_availability(value):
    if value is None or value == "":
        return None
    parsed = parse_iso_date(value)
    if parsed is None:
        raise ValidationFailure("invalid_date", f"Invalid date: {value}")
    return parsed


def update_profile(db: Session, user_id: str, profile: schemas.ProfileUpdate):
    """
    Applies a partial profile update. A provided skill list replaces the
    stored one entirely.
    """
    db_profile = get_profile(db, user_id)
    if db_profile is None:
        raise NotFoundError("user_not_found", f"Profile for user {user_id} not found")

    update_data = profile.model_dump(exclude_unset=True)

    if "availability_start" in update_data:
        update_data["availability_start"] = _parse_availability(update_data["availability_start"])
    if "availability_end" in update_data:
        update_data["availability_end"] = _parse_availability(update_data["availability_end"])
    start = update_data.get("availability_start", db_profile.availability_start)
    end = update_data.get("availability_end", db_profile.availability_end)
    if start is not None and end is not None and end < start:
        raise ValidationFailure("invalid_range", "Availability end date is before the start date")

    state = update_data.get("state")
    if state and crud_directory.get_state(db, state) is None:
        raise ValidationFailure("invalid_state", f"Unknown state: {state}")

    skills = update_data.pop("skills", None)
    if skills is not None:
        unknown = crud_directory.get_unknown_skills(db, skills)
        if unknown:
            raise ValidationFailure("invalid_skill", f"Unknown skills: {', '.join(sorted(unknown))}")
        db_profile.skills = [models.UserSkill(skill=label) for label in set(skills)]

    for key, value in update_data.items():
        setattr(db_profile, key, value)

    db.commit()
    db.refresh(db_profile)
    return db_profile
