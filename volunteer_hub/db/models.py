# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from volunteer_hub.db.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    is_email_verified = Column(Integer, nullable=False, default=0)
    is_admin = Column(Integer, nullable=False, default=0)
    profile = relationship("UserProfile", back_populates="user", uselist=False, cascade="all, delete-orphan")


class UserProfile(Base):
    __tablename__ = "user_profiles"

    user_id = Column(String(36), ForeignKey("users.id"), primary_key=True)
    full_name = Column(String(255), nullable=True)
    address_1 = Column(String(255), nullable=True)
    address_2 = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(2), nullable=True)
    zip_code = Column(String(9), nullable=True)
    preferences = Column(Text, nullable=True)
    availability_start = Column(Date, nullable=True)
    availability_end = Column(Date, nullable=True)
    user = relationship("User", back_populates="profile")
    skills = relationship("UserSkill", cascade="all, delete-orphan", lazy="selectin")


class UserSkill(Base):
    __tablename__ = "user_skills"

    user_id = Column(String(36), ForeignKey("user_profiles.user_id"), primary_key=True)
    skill = Column(String(100), primary_key=True)


class Skill(Base):
    __tablename__ = "skills"

    label = Column(String(100), primary_key=True)


class State(Base):
    __tablename__ = "states"

    code = Column(String(2), primary_key=True)
    name = Column(String(100), nullable=False)


class Event(Base):
    __tablename__ = "events"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(Text, nullable=True)
    urgency = Column(Enum("low", "medium", "high", name="event_urgency"), nullable=False, default="low")
    date = Column(String(32), nullable=True)
    created_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    is_deleted = Column(Integer, nullable=False, default=0)
    skills = relationship("EventSkill", cascade="all, delete-orphan", lazy="selectin")


class EventSkill(Base):
    __tablename__ = "event_skills"

    event_id = Column(String(36), ForeignKey("events.id"), primary_key=True)
    skill = Column(String(100), primary_key=True)


class EventAssignment(Base):
    __tablename__ = "event_assignments"

    # The composite key is what rejects a second assignment of the same pair.
    event_id = Column(String(36), ForeignKey("events.id"), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), primary_key=True)
    event = relationship("Event")


class VolunteerHistory(Base):
    __tablename__ = "volunteer_history"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    event_id = Column(String(36), ForeignKey("events.id"), nullable=False)
    status = Column(String(50), nullable=False, default="Assigned")
    assigned_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    event = relationship("Event")


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    header = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    is_unread = Column(Integer, nullable=False, default=1)


class EmailVerificationCode(Base):
    __tablename__ = "email_verification_codes"

    code = Column(String(64), primary_key=True)
    email = Column(String(255), nullable=False, index=True)
