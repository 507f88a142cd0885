"""
# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# Created Date: Tue Oct 14 2025
# SPDX-License-Identifier: MIT
"""

from datetime import date, datetime
from typing import Optional


def parse_iso_date(value) -> Optional[date]:
    """
    Parses a date given as ISO text ("2025-07-02" or "2025-07-02T00:00:00.000Z").
    Returns None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
    except ValueError:
        return None
