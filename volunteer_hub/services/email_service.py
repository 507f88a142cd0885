'''
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Thu Aug 07 2025
# SPDX-License-Identifier: MIT
'''

import html
import logging

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from volunteer_hub.config import settings

logger = logging.getLogger(__name__)


class EmailService:
    def __init__(self):
        self.sg = SendGridAPIClient(settings.sendgrid_api_key)
        self.sender_email = settings.mail_sender_email
        self.sender_name = settings.mail_sender_name

    def send_notification_email(self, to_email: str, header: str, body: str) -> bool:
        """
        Relays an in-app notification to the user's inbox.
        """
        safe_header, safe_body = html.escape(header), html.escape(body)
        html_content = f"""
        <html>
        <body>
            <h3>{safe_header}</h3>
            <p>{safe_body}</p>
            <p>You can find all of your notifications in your VolunteerHub account.</p>
            <p>Best regards,</p>
            <p>{self.sender_name}</p>
        </body>
        </html>
        """
        return self._send_email(to_email, header, html_content)

    def send_verification_email(self, to_email: str, user_id: str, code: str) -> bool:
        """
        Sends the email verification code issued at registration.
        """
        subject = "Verify your VolunteerHub email address"
        html_content = f"""
        <html>
        <body>
            <p>Welcome to VolunteerHub!</p>
            <p>Please confirm your email address to start volunteering.</p>
            <p><strong>User ID:</strong> {user_id}</p>
            <p><strong>Verification code:</strong> {code}</p>
            <p>Best regards,</p>
            <p>{self.sender_name}</p>
        </body>
        </html>
        """
        return self._send_email(to_email, subject, html_content)

    def _send_email(self, to_email: str, subject: str, html_content: str) -> bool:
        """
        Internal helper to send an email using SendGrid. Delivery is best-effort:
        failures are logged and reported through the return value only.
        """
        message = Mail(
            from_email=(self.sender_email, self.sender_name),
            to_emails=to_email,
            subject=subject,
            html_content=html_content
        )
        try:
            response = self.sg.send(message)
            logger.info("Email sent to %s. Status Code: %s", to_email, response.status_code)
            return True
        except Exception:
            logger.exception("Error sending email to %s", to_email)
            return False
