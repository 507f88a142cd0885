# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from volunteer_hub.db import models

DEFAULT_SKILLS = ["first_aid", "cooking", "cleaning", "transport"]

US_STATES = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas", "CA": "California",
    "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware", "FL": "Florida", "GA": "Georgia",
    "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois", "IN": "Indiana", "IA": "Iowa",
    "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi", "MO": "Missouri",
    "MT": "Montana", "NE": "Nebraska", "NV": "Nevada", "NH": "New Hampshire", "NJ": "New Jersey",
    "NM": "New Mexico", "NY": "New York", "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio",
    "OK": "Oklahoma", "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina",
    "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas", "UT": "Utah", "VT": "Vermont",
    "VA": "Virginia", "WA": "Washington", "WV": "West Virginia", "WI": "Wisconsin", "WY": "Wyoming",
}


def get_skills(db: Session):
    return db.query(models.Skill).order_by(models.Skill.label).all()


def get_unknown_skills(db: Session, labels: Iterable[str]):
    """
    Returns the labels that are not part of the skill directory.
    """
    wanted = set(labels)
    if not wanted:
        return set()
    known = db.query(models.Skill.label).filter(models.Skill.label.in_(wanted)).all()
    return wanted - {row.label for row in known}


def create_skill(db: Session, label: str):
    db_skill = models.Skill(label=label)
    try:
        db.add(db_skill)
        db.commit()
        db.refresh(db_skill)
        return db_skill
    except IntegrityError:
        db.rollback()
        return None


def get_states(db: Session):
    return db.query(models.State).order_by(models.State.code).all()


def get_state(db: Session, code: str):
    return db.query(models.State).filter(models.State.code == code).first()


def seed_directories(db: Session):
    """
    Inserts the default skills and the US states that are not stored yet.
    """
    existing_skills = {row.label for row in db.query(models.Skill.label).all()}
    for label in DEFAULT_SKILLS:
        if label not in existing_skills:
            db.add(models.Skill(label=label))

    existing_states = {row.code for row in db.query(models.State.code).all()}
    for code, name in US_STATES.items():
        if code not in existing_states:
            db.add(models.State(code=code, name=name))
    db.commit()
