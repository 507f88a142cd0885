# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import asyncio
import logging
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from volunteer_hub.app import app, bootstrap, lifespan
from volunteer_hub.config import settings
from volunteer_hub.crud import crud_user
from volunteer_hub.db import models


def test_lifespan_bootstraps_database(mocker, caplog):
    """Startup seeds the directories through a fresh session and closes it"""
    mock_session = MagicMock()
    mocker.patch("volunteer_hub.app.SessionLocal", return_value=mock_session)
    mock_bootstrap = mocker.patch("volunteer_hub.app.bootstrap")

    async def run_lifespan():
        async with lifespan(app):
            pass

    with caplog.at_level(logging.INFO, logger="volunteer_hub.app"):
        asyncio.run(run_lifespan())

    mock_bootstrap.assert_called_once_with(mock_session)
    mock_session.close.assert_called_once()
    assert "Database migrations are managed by Alembic" in caplog.text


def test_bootstrap_is_idempotent(db_session: Session):
    bootstrap(db_session)
    bootstrap(db_session)

    assert db_session.query(models.User).filter(models.User.is_admin == 1).count() == 1
    assert db_session.query(models.State).count() == 50
    assert crud_user.get_admin(db_session).email == settings.admin_email


def test_health_check(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
