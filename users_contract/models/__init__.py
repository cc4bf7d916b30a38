from users_contract.models.enums import Gender, UserStatus
from users_contract.models.user import (
    DecodeResult,
    ErrorEntry,
    PartialUpdateRequest,
    UserCreateRequest,
    UserResponse,
    USER_FIELDS,
)

__all__ = [
    "Gender",
    "UserStatus",
    "DecodeResult",
    "ErrorEntry",
    "PartialUpdateRequest",
    "UserCreateRequest",
    "UserResponse",
    "USER_FIELDS",
]
