# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from datetime import date, datetime
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


def _labels(value):
    # ORM skill rows expose the label as ``.skill``
    if value is None:
        return []
    return [getattr(item, "skill", item) for item in value]


SkillLabels = Annotated[List[str], BeforeValidator(_labels)]


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    email: Optional[str] = None


class UserRegister(BaseModel):
    email: str = ""
    password: str = ""


class User(BaseModel):
    id: str
    email: str
    is_email_verified: bool
    is_admin: bool

    model_config = ConfigDict(from_attributes=True)


class VerifyEmailRequest(BaseModel):
    user_id: Optional[str] = None
    email: Optional[str] = None
    code: Optional[str] = None


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(default=None, max_length=50)
    address_1: Optional[str] = Field(default=None, max_length=100)
    address_2: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=2)
    zip_code: Optional[str] = Field(default=None, max_length=9)
    preferences: Optional[str] = None
    skills: Optional[List[str]] = None
    # Kept as text so malformed dates surface as ``invalid_date`` instead of a 422
    availability_start: Optional[str] = None
    availability_end: Optional[str] = None


class Profile(BaseModel):
    user_id: str
    full_name: Optional[str] = None
    address_1: Optional[str] = None
    address_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    preferences: Optional[str] = None
    availability_start: Optional[date] = None
    availability_end: Optional[date] = None
    skills: SkillLabels = []

    model_config = ConfigDict(from_attributes=True)


class EventBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    location: str
    skills: SkillLabels = []
    urgency: Literal["low", "medium", "high"]
    date: str

    @field_validator("urgency", mode="before")
    @classmethod
    def normalize_urgency(cls, value):
        return value.lower() if isinstance(value, str) else value


class EventCreate(EventBase):
    pass


class Event(EventBase):
    id: str
    description: Optional[str] = None
    location: Optional[str] = None
    date: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EligibleVolunteer(BaseModel):
    volunteer_id: str
    name: str
    skills: List[str]
    location: str


class AssignmentRequest(BaseModel):
    volunteer_id: Optional[str] = None


class AssignmentResult(BaseModel):
    success: bool = True
    event_id: str
    volunteer_id: str
    status: str


class HistoryEntry(BaseModel):
    id: int
    event_id: str
    event_name: Optional[str] = None
    status: str
    assigned_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Notification(BaseModel):
    id: str
    header: str
    description: Optional[str] = None
    created_at: datetime
    is_unread: bool

    model_config = ConfigDict(from_attributes=True)


class Skill(BaseModel):
    label: str = Field(min_length=1, max_length=100)

    model_config = ConfigDict(from_attributes=True)


class State(BaseModel):
    code: str
    name: str

    model_config = ConfigDict(from_attributes=True)
