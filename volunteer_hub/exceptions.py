"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Mon Oct 13 2025
# SPDX-License-Identifier: MIT
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse


class ServiceError(Exception):
    """
    Base class for errors raised by the service layer. Every error carries a
    stable machine-readable code that is returned to API clients unchanged.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class ValidationFailure(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class StorageFailure(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class EventNotFound(NotFoundError):
    def __init__(self, event_id: str):
        super().__init__("event_not_found", f"Event {event_id} not found")


class VolunteerNotFound(NotFoundError):
    def __init__(self, volunteer_id: str):
        super().__init__("volunteer_not_found", f"Volunteer {volunteer_id} not found")


class AlreadyAssigned(ConflictError):
    def __init__(self, event_id: str, volunteer_id: str):
        super().__init__(
            "already_assigned", f"Volunteer {volunteer_id} is already assigned to event {event_id}"
        )


class TransactionFailed(StorageFailure):
    def __init__(self):
        super().__init__("transaction_failed", "The operation could not be completed")


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "code": exc.code, "detail": exc.message},
    )
