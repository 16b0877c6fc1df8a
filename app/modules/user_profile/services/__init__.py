from .profile_service import (
    ProfileService,
    PasswordHasher,
    ProfileError,
    EmailAlreadyInUse,
    InvalidCurrentPassword,
    PasswordNotSet,
)

__all__ = [
    "ProfileService",
    "PasswordHasher",
    "ProfileError",
    "EmailAlreadyInUse",
    "InvalidCurrentPassword",
    "PasswordNotSet",
]
