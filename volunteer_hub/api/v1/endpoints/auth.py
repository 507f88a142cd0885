"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Jul 08 2025
# SPDX-License-Identifier: MIT
"""

from datetime import timedelta

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from volunteer_hub.config import settings
from volunteer_hub.crud import crud_user, crud_verification
from volunteer_hub.db import models
from volunteer_hub.db.database import get_db
from volunteer_hub.dependencies import (
    create_access_token,
    get_current_user,
    get_email_service,
    get_notification_service,
)
from volunteer_hub.schemas import schemas
from volunteer_hub.services.email_service import EmailService
from volunteer_hub.services.notification_service import NotificationService
from volunteer_hub.utils.security import verify_password

router = APIRouter(
    tags=["Authentication"],
    responses={404: {"description": "Not found"}},
)


@router.post("/register", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def register_user(
    user: schemas.UserRegister,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Registers a new volunteer account and emails the verification code.
    """
    db_user = crud_user.create_user(db, user)
    code = crud_verification.create_code(db, db_user.email)
    background_tasks.add_task(email_service.send_verification_email, db_user.email, db_user.id, code)
    notification_service.notify(
        db_user.id,
        "Welcome to VolunteerHub",
        "Thanks for signing up! Complete your profile so we can match you with events near you.",
    )
    return db_user


@router.post("/verify-email", response_model=schemas.User)
def verify_email(request: schemas.VerifyEmailRequest, db: Session = Depends(get_db)):
    """
    Confirms the account's email address with the code sent at registration.
    """
    return crud_verification.verify_email(db, request)


@router.post("/login", response_model=schemas.Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)
):
    """
    Authenticates a user and returns an access token.
    """
    user = crud_user.get_user_by_email(db, email=form_data.username.strip().lower())
    if not user or not verify_password(form_data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_email_verified:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="email_not_verified")

    access_token_expires = timedelta(minutes=settings.access_token_expire_minutes)
    access_token = create_access_token(data={"sub": user.email}, expires_delta=access_token_expires)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=schemas.User)
def read_users_me(current_user: models.User = Depends(get_current_user)):
    """
    Retrieves the current authenticated account.
    """
    return current_user
