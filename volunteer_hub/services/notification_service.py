"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

import logging

from fastapi import BackgroundTasks
from sqlalchemy.orm import Session

from volunteer_hub.crud import crud_notification, crud_user
from volunteer_hub.db import models
from volunteer_hub.services.email_service import EmailService

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Persists in-app notifications and relays them by email.

    The notification row is always written. The email is only queued when the
    recipient has verified their address, and it runs as a background task so
    that a delivery failure never reaches the request that triggered it.
    """

    def __init__(self, db: Session, background_tasks: BackgroundTasks, email_service: EmailService):
        self.db = db
        self.background_tasks = background_tasks
        self.email_service = email_service

    def notify(self, user_id: str, header: str, body: str) -> models.Notification:
        notification = crud_notification.create_notification(self.db, user_id, header, body)

        user = crud_user.get_user(self.db, user_id)
        if user is None:
            logger.warning("Notification %s stored for unknown user %s", notification.id, user_id)
        elif user.is_email_verified:
            self.background_tasks.add_task(
                self.email_service.send_notification_email, user.email, header, body
            )
        else:
            logger.debug("Skipping email for unverified user %s", user_id)

        return notification
