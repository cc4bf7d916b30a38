"""
Enum definitions for the Users resource
"""

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class UserStatus(str, Enum):
    """
    Account status accepted by the Users API.
    Only two values are allowed: active and inactive.
    """
    ACTIVE = "active"
    INACTIVE = "inactive"
