"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .get_user_state import (
    GetUserStateRequest,
    GetUserStateResponse,
    GetUserStateUseCase,
)
from .start_session import (
    StartSessionRequest,
    StartSessionResponse,
    StartSessionUseCase,
)
from .upgrade_skill import (
    UpgradeSkillRequest,
    UpgradeSkillResponse,
    UpgradeSkillUseCase,
)

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "GetUserStateRequest",
    "GetUserStateResponse",
    "GetUserStateUseCase",
    "StartSessionRequest",
    "StartSessionResponse",
    "StartSessionUseCase",
    "UpgradeSkillRequest",
    "UpgradeSkillResponse",
    "UpgradeSkillUseCase",
]
