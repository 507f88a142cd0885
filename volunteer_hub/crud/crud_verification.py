"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Wed Oct 15 2025
# SPDX-License-Identifier: MIT
"""

from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_user
from volunteer_hub.db import models
from volunteer_hub.exceptions import NotFoundError, ValidationFailure
from volunteer_hub.schemas import schemas
from volunteer_hub.utils.security import generate_verification_code


def create_code(db: Session, email: str) -> str:
    code = generate_verification_code()
    db.add(models.EmailVerificationCode(code=code, email=email))
    db.commit()
    return code


def get_code(db: Session, code: str):
    return db.query(models.EmailVerificationCode).filter(models.EmailVerificationCode.code == code).first()


def verify_email(db: Session, request: schemas.VerifyEmailRequest):
    """
    Marks the user's email as verified and consumes the code.
    """
    if not request.user_id or not request.email or not request.code:
        raise ValidationFailure("missing_params", "user_id, email and code are required")

    db_code = get_code(db, request.code)
    if db_code is None:
        raise ValidationFailure("invalid_code", "Verification code not found")
    if db_code.email != request.email.strip().lower():
        raise ValidationFailure("code_email_mismatch", "Verification code does not belong to this email")

    user = crud_user.get_user(db, request.user_id)
    if user is None or user.email != db_code.email:
        raise NotFoundError("user_not_found", "User not found")

    user.is_email_verified = 1
    db.delete(db_code)
    db.commit()
    db.refresh(user)
    return user
