# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = "sqlite:///./volunteer_hub.db"
    secret_key: str = "change-me"
    log_level: str = "INFO"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    allowed_origins: str = "http://localhost:3000"
    sendgrid_api_key: str = ""
    mail_sender_email: str = "no-reply@example.com"
    mail_sender_name: str = "VolunteerHub Team"
    admin_email: str = "admin@example.com"
    admin_password: str = "adminpassword"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Create an instance of Settings to be imported across the application
settings = Settings()
