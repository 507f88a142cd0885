# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from volunteer_hub.db import models
from volunteer_hub.exceptions import ConflictError, ValidationFailure
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.security import MIN_PASSWORD_LENGTH, get_password_hash

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: str):
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str):
    return db.query(models.User).filter(models.User.email == email).first()


def get_admin(db: Session):
    return db.query(models.User).filter(models.User.is_admin == 1).first()


def create_user(db: Session, user: schemas.UserRegister, is_admin: bool = False, is_email_verified: bool = False):
    """
    Creates an account together with its empty volunteer profile.
    """
    email = (user.email or "").strip().lower()
    if not email or not user.password:
        raise ValidationFailure("missing_params", "Email and password are required")
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationFailure("invalid_email", "Please enter a valid email address")
    if len(user.password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailure(
            "weak_password", f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if get_user_by_email(db, email) is not None:
        raise ConflictError("email_in_use", "Email already registered")

    db_user = models.User(
        email=email,
        password=get_password_hash(user.password),
        is_admin=1 if is_admin else 0,
        is_email_verified=1 if is_email_verified else 0,
        profile=models.UserProfile(),
    )
    try:
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
    except IntegrityError:
        db.rollback()
        raise ConflictError("email_in_use", "Email already registered")
    return db_user


def ensure_admin(db: Session, email: str, password: str):
    """
    Creates the bootstrap administrator when the database has none.
    """
    admin = get_admin(db)
    if admin is not None:
        return admin
    admin = create_user(
        db, schemas.UserRegister(email=email, password=password), is_admin=True, is_email_verified=True
    )
    logger.info("Created bootstrap administrator %s", admin.email)
    return admin
