from .profile_schemas import (
    UserProfile,
    UserProfileResponse,
    UserProfileUpdateRequest,
    ChangePasswordRequest,
    MessageResponse,
)

__all__ = [
    "UserProfile",
    "UserProfileResponse",
    "UserProfileUpdateRequest",
    "ChangePasswordRequest",
    "MessageResponse",
]
