"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Wed Jul 09 2025
# SPDX-License-Identifier: MIT
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, Set

from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_assignment, crud_event, crud_profile
from volunteer_hub.db import models
from volunteer_hub.exceptions import EventNotFound
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.dates import parse_iso_date

logger = logging.getLogger(__name__)


@dataclass
class VolunteerCandidate:
    volunteer_id: str
    name: str
    skills: Set[str] = field(default_factory=set)
    city: Optional[str] = None
    state: Optional[str] = None
    availability_start: Optional[date] = None
    availability_end: Optional[date] = None

    @classmethod
    def from_profile(cls, profile: models.UserProfile) -> "VolunteerCandidate":
        return cls(
            volunteer_id=profile.user_id,
            name=profile.full_name or (profile.user.email if profile.user else profile.user_id),
            skills={s.skill for s in profile.skills},
            city=profile.city,
            state=profile.state,
            availability_start=profile.availability_start,
            availability_end=profile.availability_end,
        )

    @property
    def location(self) -> str:
        return ", ".join(part for part in (self.city, self.state) if part)


def has_required_skills(required_skills: Set[str], candidate: VolunteerCandidate) -> bool:
    return required_skills.issubset(candidate.skills)


def is_available_on(event_date, candidate: VolunteerCandidate) -> bool:
    if candidate.availability_start is None or candidate.availability_end is None:
        return True
    parsed = parse_iso_date(event_date)
    if parsed is None:
        return False
    return candidate.availability_start <= parsed <= candidate.availability_end


def is_near(event_location: Optional[str], candidate: VolunteerCandidate) -> bool:
    # Substring containment, not geocoding: "Austin" and "TX" inside "Austin, TX".
    if not candidate.city or not candidate.state or not event_location:
        return False
    return candidate.city in event_location and candidate.state in event_location


def filter_eligible(
    event: models.Event,
    required_skills: Set[str],
    assigned_ids: Set[str],
    candidates: Iterable[VolunteerCandidate],
) -> List[VolunteerCandidate]:
    """
    Applies the skill, availability and location predicates to every candidate
    that is not already assigned to the event.
    """
    eligible = []
    for candidate in candidates:
        if candidate.volunteer_id in assigned_ids:
            continue
        if not has_required_skills(required_skills, candidate):
            continue
        if not is_available_on(event.date, candidate):
            continue
        if not is_near(event.location, candidate):
            continue
        eligible.append(candidate)
    return eligible


class MatchingService:
    def __init__(self, db: Session):
        self.db = db

    def find_eligible_volunteers(self, event_id: str) -> List[schemas.EligibleVolunteer]:
        """
        Returns the volunteers that can be assigned to the event. Raises
        EventNotFound for missing or soft-deleted events.
        """
        event = crud_event.get_event(self.db, event_id)
        if event is None:
            raise EventNotFound(event_id)

        required_skills = {s.skill for s in event.skills}
        assigned_ids = crud_assignment.get_assigned_volunteer_ids(self.db, event.id)
        candidates = [VolunteerCandidate.from_profile(p) for p in crud_profile.get_volunteer_profiles(self.db)]

        eligible = filter_eligible(event, required_skills, assigned_ids, candidates)
        logger.info(
            "Event %s: %d of %d volunteers eligible (%d already assigned)",
            event.id, len(eligible), len(candidates), len(assigned_ids),
        )
        return [
            schemas.EligibleVolunteer(
                volunteer_id=c.volunteer_id,
                name=c.name,
                skills=sorted(c.skills),
                location=c.location,
            )
            for c in eligible
        ]
