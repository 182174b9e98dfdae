"""
Account Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserState(str, Enum):
    """Account activity status"""

    not_verified = "not_verified"
    active = "active"
