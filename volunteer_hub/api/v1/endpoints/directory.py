# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_directory
from volunteer_hub.db.database import get_db
from volunteer_hub.db.models import User
from volunteer_hub.dependencies import get_current_admin
from volunteer_hub.schemas import schemas

router = APIRouter(
    tags=["Directory"],
    responses={404: {"description": "Not found"}},
)


@router.get("/skills", response_model=List[schemas.Skill])
def read_skills(db: Session = Depends(get_db)):
    return crud_directory.get_skills(db)


@router.post("/skills", response_model=schemas.Skill, status_code=status.HTTP_201_CREATED)
def create_skill(
    skill: schemas.Skill,
    current_admin: User = Depends(get_current_admin),
    db: Session = Depends(get_db),
):
    """
    Adds a label to the skill directory. (Admin access required)
    """
    db_skill = crud_directory.create_skill(db, skill.label.strip())
    if db_skill is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Skill already exists")
    return db_skill


@router.get("/states", response_model=List[schemas.State])
def read_states(db: Session = Depends(get_db)):
    return crud_directory.get_states(db)
