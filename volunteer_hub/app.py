# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

from volunteer_hub.api.v1.endpoints import auth, directory, events, notifications, profile
from volunteer_hub.config import settings
from volunteer_hub.crud import crud_directory, crud_user
from volunteer_hub.db.database import SessionLocal
from volunteer_hub.exceptions import ServiceError, service_error_handler

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def bootstrap(db: Session):
    """
    Seeds the skill and state directories and makes sure an administrator exists.
    """
    crud_directory.seed_directories(db)
    crud_user.ensure_admin(db, settings.admin_email, settings.admin_password)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("VolunteerHub starting up. Database migrations are managed by Alembic.")
    db = SessionLocal()
    try:
        bootstrap(db)
    finally:
        db.close()
    yield
    logger.info("VolunteerHub shutting down.")


app = FastAPI(
    title="VolunteerHub Backend API",
    description="API for matching volunteers with events and managing their assignments.",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
allowed_origins = settings.allowed_origins.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.add_exception_handler(ServiceError, service_error_handler)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(profile.router, prefix="/api/v1")
app.include_router(events.router, prefix="/api/v1")
app.include_router(directory.router, prefix="/api/v1")
app.include_router(notifications.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}
